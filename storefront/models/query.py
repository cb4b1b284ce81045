"""Query types for the catalog query engine.

Each filter dimension is a small tagged variant instead of a string field
compared against an ``"all"`` sentinel:

- category / brand: ``Unfiltered`` or ``Equals(code)``
- price: ``Unfiltered`` or ``PriceRange(minimum, maximum)``
- stock: ``Unfiltered``, ``InStockOnly`` or ``FeaturedOnly``
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from storefront.models.product import Product


@dataclass(frozen=True)
class Unfiltered:
    pass


@dataclass(frozen=True)
class Equals:
    code: str


@dataclass(frozen=True)
class PriceRange:
    minimum: int = 0
    maximum: Optional[int] = None  # None: no upper limit

    def contains(self, price: int) -> bool:
        if price < self.minimum:
            return False
        return self.maximum is None or price <= self.maximum


@dataclass(frozen=True)
class InStockOnly:
    pass


@dataclass(frozen=True)
class FeaturedOnly:
    pass


UNFILTERED = Unfiltered()

CodeFilter = Union[Unfiltered, Equals]
PriceFilter = Union[Unfiltered, PriceRange]
StockFilter = Union[Unfiltered, InStockOnly, FeaturedOnly]


class SortKey(str, Enum):
    NAME = "name"
    PRICE = "price"
    BRAND = "brand"
    CATEGORY = "category"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class CatalogQuery:
    search: str = ""
    category: CodeFilter = UNFILTERED
    brand: CodeFilter = UNFILTERED
    price: PriceFilter = UNFILTERED
    stock: StockFilter = UNFILTERED
    sort_key: SortKey = SortKey.NAME
    direction: SortDirection = SortDirection.ASC
    page: int = 1
    page_size: int = 12


@dataclass(frozen=True)
class QueryResult:
    products: Tuple[Product, ...]
    total: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        return -(-self.total // self.page_size)

    @property
    def has_more(self) -> bool:
        return self.page * self.page_size < self.total

    @property
    def first_item(self) -> int:
        return (self.page - 1) * self.page_size + 1

    @property
    def last_item(self) -> int:
        return min(self.page * self.page_size, self.total)

