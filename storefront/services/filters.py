"""Parsing of the catalog page's filter controls into query variants.

The product page posts every filter as a string: ``"all"`` for no filter, a
code such as ``"siemens"``, a price band such as ``"100-500"`` or ``"5000-"``,
a stock choice of ``"instock"``/``"featured"`` and a sort option such as
``"price-desc"``.
"""

from __future__ import annotations

from typing import Optional, Tuple

from storefront.errors import InvalidQueryError
from storefront.models.query import (
    UNFILTERED,
    CatalogQuery,
    CodeFilter,
    Equals,
    FeaturedOnly,
    InStockOnly,
    PriceFilter,
    PriceRange,
    SortDirection,
    SortKey,
    StockFilter,
)

ALL = "all"


def _is_all(value: Optional[str]) -> bool:
    return value is None or value.strip() == "" or value.strip().lower() == ALL


def parse_code_filter(value: Optional[str]) -> CodeFilter:
    if _is_all(value):
        return UNFILTERED
    return Equals(value.strip())


def _parse_bound(raw: str, label: str) -> int:
    try:
        bound = int(raw)
    except ValueError:
        raise InvalidQueryError(f"Price {label} must be a whole number, got {raw!r}") from None
    if bound < 0:
        raise InvalidQueryError(f"Price {label} must be non-negative, got {bound}")
    return bound


def parse_price_filter(value: Optional[str]) -> PriceFilter:
    if _is_all(value):
        return UNFILTERED
    text = value.strip()
    if text.endswith("+"):
        return PriceRange(minimum=_parse_bound(text[:-1].strip(), "minimum"))
    if "-" not in text:
        raise InvalidQueryError(f"Price range must look like 'min-max', got {value!r}")
    low, high = (part.strip() for part in text.split("-", 1))
    minimum = _parse_bound(low, "minimum") if low else 0
    maximum = _parse_bound(high, "maximum") if high else None
    if maximum is not None and minimum > maximum:
        raise InvalidQueryError(f"Price range minimum {minimum} exceeds maximum {maximum}")
    return PriceRange(minimum=minimum, maximum=maximum)


def parse_stock_filter(value: Optional[str]) -> StockFilter:
    if _is_all(value):
        return UNFILTERED
    choice = value.strip().lower()
    if choice == "instock":
        return InStockOnly()
    if choice == "featured":
        return FeaturedOnly()
    raise InvalidQueryError(f"Unknown stock filter {value!r}")


def parse_sort(value: Optional[str]) -> Tuple[SortKey, SortDirection]:
    if value is None or not value.strip():
        return SortKey.NAME, SortDirection.ASC
    key, _, direction = value.strip().lower().partition("-")
    try:
        return SortKey(key), SortDirection(direction or SortDirection.ASC.value)
    except ValueError:
        raise InvalidQueryError(f"Unknown sort option {value!r}") from None


def build_query(
    search: Optional[str] = None,
    category: Optional[str] = None,
    brand: Optional[str] = None,
    price: Optional[str] = None,
    stock: Optional[str] = None,
    sort: Optional[str] = None,
    page: int = 1,
    page_size: int = 12,
) -> CatalogQuery:
    sort_key, direction = parse_sort(sort)
    return CatalogQuery(
        search=(search or "").strip(),
        category=parse_code_filter(category),
        brand=parse_code_filter(brand),
        price=parse_price_filter(price),
        stock=parse_stock_filter(stock),
        sort_key=sort_key,
        direction=direction,
        page=page,
        page_size=page_size,
    )
