from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional, Tuple

import pandas as pd

from storefront.config import get_settings
from storefront.data.seed import DEFAULT_PRODUCTS
from storefront.errors import ProductNotFoundError, ProductValidationError
from storefront.models.product import Product

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "brand", "price", "category", "description")


@dataclass(frozen=True)
class CatalogSnapshot:
    """Immutable view of the catalog at one version."""

    version: int
    products: Tuple[Product, ...] = ()

    def __len__(self) -> int:
        return len(self.products)


class CatalogRepository:
    """Owns the product catalog.

    Readers call ``snapshot()`` and work against the returned tuple. Writers
    serialize on a lock and publish a fresh snapshot with the next version, so
    an evaluation already running never sees the catalog change under it.
    Product ids are allocated monotonically and never handed out twice.
    """

    def __init__(self) -> None:
        self._settings = get_settings()
        self._lock = threading.Lock()
        self._snapshot: Optional[CatalogSnapshot] = None
        self._next_id = 1

    def load(self, records: Optional[List[Mapping[str, Any]]] = None) -> CatalogSnapshot:
        with self._lock:
            if self._snapshot is None:
                if records is None:
                    records = self._read_records()
                products = tuple(Product.from_dict(record) for record in records)
                ids = [product.id for product in products]
                if len(set(ids)) != len(ids):
                    raise ProductValidationError("Catalog contains duplicate product ids")
                self._next_id = max(ids, default=0) + 1
                self._snapshot = CatalogSnapshot(version=1, products=products)
                logger.info("Loaded %d products into the catalog", len(products))
            return self._snapshot

    def snapshot(self) -> CatalogSnapshot:
        snapshot = self._snapshot
        if snapshot is None:
            return self.load()
        return snapshot

    def get_product(self, product_id: int) -> Product:
        for product in self.snapshot().products:
            if product.id == product_id:
                return product
        raise ProductNotFoundError(product_id)

    def add_product(self, data: Mapping[str, Any]) -> Product:
        fields = _validate_new_product(data)
        self.snapshot()
        with self._lock:
            current = self._snapshot
            product = Product(
                id=self._next_id,
                created_at=datetime.now(timezone.utc).isoformat(),
                **fields,
            )
            self._next_id += 1
            published = CatalogSnapshot(version=current.version + 1, products=current.products + (product,))
            self._snapshot = published
        logger.info("Added product %d (%s), catalog version %d", product.id, product.name, published.version)
        return product

    def remove_product(self, product_id: int) -> None:
        self.snapshot()
        with self._lock:
            current = self._snapshot
            remaining = tuple(product for product in current.products if product.id != product_id)
            if len(remaining) == len(current.products):
                raise ProductNotFoundError(product_id)
            published = CatalogSnapshot(version=current.version + 1, products=remaining)
            self._snapshot = published
        logger.info("Removed product %d, catalog version %d", product_id, published.version)

    def _read_records(self) -> List[Dict[str, Any]]:
        path = self._settings.catalog_path
        if path is None:
            logger.info("No catalog file configured, using the starter catalog")
            return [dict(record) for record in DEFAULT_PRODUCTS]
        try:
            frame = pd.read_json(path, orient="records", dtype=False, convert_dates=False)
        except FileNotFoundError:
            logger.warning("Catalog file %s not found, using the starter catalog", path)
            return [dict(record) for record in DEFAULT_PRODUCTS]
        return [_drop_missing(record) for record in frame.to_dict(orient="records")]


def _drop_missing(record: Dict[str, Any]) -> Dict[str, Any]:
    # Columns absent from some rows come back as NaN.
    return {key: value for key, value in record.items() if isinstance(value, (dict, list)) or not pd.isna(value)}


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _validate_new_product(data: Mapping[str, Any]) -> Dict[str, Any]:
    if any(_is_blank(data.get(name)) for name in REQUIRED_FIELDS):
        raise ProductValidationError("All product fields are required")
    try:
        price = int(data["price"])
    except (TypeError, ValueError):
        raise ProductValidationError(f"Price must be a whole number, got {data['price']!r}") from None
    if price < 0:
        raise ProductValidationError("Price must be non-negative")
    return {
        "name": str(data["name"]).strip(),
        "brand": str(data["brand"]).strip().lower(),
        "category": str(data["category"]).strip(),
        "price": price,
        "description": str(data["description"]).strip(),
        "in_stock": True,
        "featured": False,
        "specifications": {},
    }


def get_data_repository() -> CatalogRepository:
    return CatalogRepository()
