from __future__ import annotations

from typing import List
from pydantic import BaseModel, Field

from storefront.schemas.products import ProductOut


class FavoritesOut(BaseModel):
    customer_id: int
    product_ids: List[int] = Field(default_factory=list)
    products: List[ProductOut] = Field(default_factory=list)


class FavoriteToggle(BaseModel):
    customer_id: int
    product_id: int
    favorited: bool
    product_ids: List[int]
