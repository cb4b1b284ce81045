from __future__ import annotations

from typing import Optional

from storefront.data.favorites import FavoritesStore
from storefront.data.loader import CatalogRepository, CatalogSnapshot, get_data_repository

_repository: Optional[CatalogRepository] = None
_favorites: Optional[FavoritesStore] = None


def get_repository() -> CatalogRepository:
    global _repository
    if _repository is None:
        _repository = get_data_repository()
    return _repository


def get_favorites() -> FavoritesStore:
    global _favorites
    if _favorites is None:
        _favorites = FavoritesStore(get_repository())
    return _favorites


def get_catalog() -> CatalogSnapshot:
    return get_repository().snapshot()


def init_catalog() -> None:
    """Load the catalog during startup so the first request does not pay for it."""
    get_repository().load()


def reset_repository() -> None:
    global _repository, _favorites
    _repository = None
    _favorites = None
