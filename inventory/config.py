from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # API Configuration
    app_name: str = "Inventory Management"
    description: str = "API Doc For Inventory Management"
    version: str = "1.0.0"
    debug: bool = False
    docs_url: str = "/api"

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 3000

    # CORS Configuration
    cors_origins: list = ["*"]

    # Persistence: JSON array of products, read on startup and written on shutdown.
    # Relative paths resolve against the working directory.
    data_file: Path = Path("data") / "product.json"

    # Logging
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    class Config:
        env_prefix = "INVENTORY_"
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
