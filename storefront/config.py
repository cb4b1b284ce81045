from pydantic import Field
from pydantic_settings import BaseSettings
from functools import lru_cache
from pathlib import Path
from typing import List


class Settings(BaseSettings):
    environment: str = Field(default="local")
    catalog_path: Path | None = None
    page_size: int = Field(default=12, ge=1)
    max_page_size: int = Field(default=100, ge=1)
    export_prefix: str = Field(default="delta-electric-products")
    log_level: str = Field(default="INFO")
    cors_origins: List[str] = Field(default_factory=lambda: ["http://localhost:3000"])

    class Config:
        env_file = ".env"
        env_prefix = "STOREFRONT_"


@lru_cache
def get_settings() -> Settings:
    return Settings()
