from __future__ import annotations

from typing import List
from pydantic import BaseModel


class FacetCount(BaseModel):
    code: str
    label: str
    count: int


class CatalogStats(BaseModel):
    total_products: int
    in_stock: int
    featured: int
    min_price: int
    max_price: int
    categories: List[FacetCount]
    brands: List[FacetCount]
    version: int
