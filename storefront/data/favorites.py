from __future__ import annotations

import logging
import threading
from typing import Dict, List, Tuple

from storefront.data.loader import CatalogRepository, CatalogSnapshot
from storefront.models.product import Product

logger = logging.getLogger(__name__)


class FavoritesStore:
    """Per-customer favorite product ids, kept in the order they were added.

    Only ids are stored. Listing resolves them against a catalog snapshot, so a
    product removed from the catalog drops out of every list without touching
    the store.
    """

    def __init__(self, repository: CatalogRepository) -> None:
        self._repository = repository
        self._lock = threading.Lock()
        self._favorites: Dict[int, List[int]] = {}

    def product_ids(self, customer_id: int) -> List[int]:
        with self._lock:
            return list(self._favorites.get(customer_id, []))

    def add(self, customer_id: int, product_id: int) -> List[int]:
        self._repository.get_product(product_id)
        with self._lock:
            favorites = self._favorites.setdefault(customer_id, [])
            if product_id not in favorites:
                favorites.append(product_id)
                logger.info("Customer %d added product %d to favorites", customer_id, product_id)
            return list(favorites)

    def remove(self, customer_id: int, product_id: int) -> List[int]:
        with self._lock:
            favorites = self._favorites.get(customer_id, [])
            if product_id in favorites:
                favorites.remove(product_id)
                logger.info("Customer %d removed product %d from favorites", customer_id, product_id)
            return list(favorites)

    def toggle(self, customer_id: int, product_id: int) -> Tuple[bool, List[int]]:
        """Flip one product's favorite state. Returns (now favorited, ids)."""
        with self._lock:
            favorites = self._favorites.setdefault(customer_id, [])
            if product_id in favorites:
                favorites.remove(product_id)
                favorited = False
            else:
                self._repository.get_product(product_id)
                favorites.append(product_id)
                favorited = True
            ids = list(favorites)
        logger.info("Customer %d toggled product %d, favorited=%s", customer_id, product_id, favorited)
        return favorited, ids

    def products(self, customer_id: int, snapshot: CatalogSnapshot) -> List[Product]:
        by_id = {product.id: product for product in snapshot.products}
        return [by_id[product_id] for product_id in self.product_ids(customer_id) if product_id in by_id]
