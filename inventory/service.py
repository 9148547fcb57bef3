# inventory/service.py
import json
import logging
import uuid
from typing import Any, Dict, List

from pydantic import TypeAdapter, ValidationError

from .errors import ProductNotFoundError
from .models import (
    Message,
    MessageEnvelope,
    Product,
    ProductEnvelope,
    ProductListEnvelope,
    ProductQuery,
)
from .query import run_query
from .repository import ProductRepository
from .storage import ProductFileStore

logger = logging.getLogger(__name__)

DELETE_SUCCESS_MESSAGE = "Product Deleted Successfully"

_product_list = TypeAdapter(List[Product])


class ProductService:
    """Product operations over an injected repository and file store.

    ``initialize`` and ``shutdown`` are the process lifecycle hooks: the first
    fills the repository from the file, the second writes it back.
    """

    def __init__(self, repository: ProductRepository, store: ProductFileStore):
        self.repository = repository
        self.store = store

    # ---------------------------
    # Lifecycle
    # ---------------------------
    def initialize(self) -> None:
        try:
            products = _product_list.validate_python(self.store.read())
        except (json.JSONDecodeError, UnicodeDecodeError, ValidationError):
            logger.exception(
                "Failed to load products from %s; starting empty, the file will be replaced on shutdown",
                self.store.file_path,
            )
            self.repository.load([])
            return
        self.repository.load(products)
        logger.info("Loaded %d products from %s", len(self.repository), self.store.file_path)

    def shutdown(self) -> None:
        self.store.write(self.repository.dump_all())
        logger.info("Saved %d products to %s", len(self.repository), self.store.file_path)

    # ---------------------------
    # Operations
    # ---------------------------
    def list(self, query: ProductQuery) -> ProductListEnvelope:
        page = run_query(self.repository.snapshot_all(), query)
        return ProductListEnvelope(data=page.items, page=page.page, limit=page.limit, total=page.total)

    def get(self, product_id: str) -> ProductEnvelope:
        product = self.repository.get(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return ProductEnvelope(data=product)

    def create(self, fields: Dict[str, Any]) -> ProductEnvelope:
        product_id = str(uuid.uuid4())
        # fields arrive validated by the request schema
        product = Product.model_construct(**{**fields, "id": product_id})
        self.repository.put(product_id, product)
        logger.info("Created product %s", product_id)
        return ProductEnvelope(data=product)

    def update(self, product_id: str, changes: Dict[str, Any]) -> ProductEnvelope:
        changes = {k: v for k, v in changes.items() if k != "id"}
        with self.repository.lock:
            existing = self.get(product_id).data
            updated = existing.model_copy(update=changes)
            self.repository.put(product_id, updated)
        logger.debug("Updated product %s fields=%s", product_id, sorted(changes))
        return ProductEnvelope(data=updated)

    def delete(self, product_id: str) -> MessageEnvelope:
        with self.repository.lock:
            self.get(product_id)
            self.repository.remove(product_id)
        logger.info("Deleted product %s", product_id)
        return MessageEnvelope(data=Message(message=DELETE_SUCCESS_MESSAGE))
