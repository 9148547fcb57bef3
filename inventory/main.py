# inventory/main.py
import logging
from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler
from typing import Optional
from uuid import UUID

from fastapi import FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import Settings, get_settings
from .errors import ProductNotFoundError
from .models import (
    MessageEnvelope,
    ProductCreate,
    ProductEnvelope,
    ProductListEnvelope,
    ProductQuery,
    ProductUpdate,
    SortField,
    SortOrder,
)
from .repository import ProductRepository
from .service import ProductService
from .storage import ProductFileStore

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_logging_configured = False


def configure_logging(settings: Settings) -> None:
    global _logging_configured
    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level.upper())
    if _logging_configured:
        return

    log_formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(log_formatter)
    root_logger.addHandler(console_handler)

    if settings.log_file:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            settings.log_file, maxBytes=5 * 1024 * 1024, backupCount=5, encoding="utf-8"
        )
        file_handler.setFormatter(log_formatter)
        root_logger.addHandler(file_handler)

    _logging_configured = True


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    service = ProductService(ProductRepository(), ProductFileStore(settings.data_file))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        service.initialize()
        try:
            yield
        finally:
            service.shutdown()

    app = FastAPI(
        title=settings.app_name,
        description=settings.description,
        version=settings.version,
        debug=settings.debug,
        docs_url=settings.docs_url,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.product_service = service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ProductNotFoundError)
    async def product_not_found_handler(request: Request, exc: ProductNotFoundError):
        return JSONResponse(status_code=404, content={"detail": exc.message})

    # ---------------------------
    # Product endpoints
    # ---------------------------
    @app.get("/product", response_model=ProductListEnvelope, tags=["Products"])
    async def list_products(
        search: Optional[str] = None,
        page: Optional[str] = None,
        limit: Optional[str] = None,
        sort_by: Optional[SortField] = Query(default=None, alias="sortBy"),
        order: Optional[SortOrder] = None,
    ):
        query = ProductQuery(search=search, page=page, limit=limit, sort_by=sort_by, order=order)
        return service.list(query)

    @app.get("/product/{product_id}", response_model=ProductEnvelope, tags=["Products"])
    async def get_product(product_id: UUID):
        return service.get(str(product_id))

    @app.post("/product", response_model=ProductEnvelope, status_code=201, tags=["Products"])
    async def create_product(payload: ProductCreate):
        return service.create(payload.model_dump())

    @app.patch("/product/{product_id}", response_model=ProductEnvelope, tags=["Products"])
    async def update_product(product_id: UUID, payload: ProductUpdate):
        return service.update(str(product_id), payload.changes())

    @app.delete("/product/{product_id}", response_model=MessageEnvelope, tags=["Products"])
    async def delete_product(product_id: UUID):
        return service.delete(str(product_id))

    return app


app = create_app()


def run() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "inventory.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
