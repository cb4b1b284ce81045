from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Sequence

from storefront.errors import InvalidQueryError
from storefront.models.product import Product
from storefront.models.query import (
    CatalogQuery,
    CodeFilter,
    Equals,
    FeaturedOnly,
    InStockOnly,
    PriceFilter,
    PriceRange,
    QueryResult,
    SortDirection,
    SortKey,
    StockFilter,
    Unfiltered,
)

logger = logging.getLogger(__name__)

SortValue = Callable[[Product], object]

SORT_VALUES: dict[SortKey, SortValue] = {
    SortKey.NAME: lambda product: product.name.lower(),
    SortKey.PRICE: lambda product: product.price,
    SortKey.BRAND: lambda product: product.brand.lower(),
    SortKey.CATEGORY: lambda product: product.category.lower(),
}


def validate_query(query: CatalogQuery) -> None:
    if query.page < 1:
        raise InvalidQueryError(f"Page must be a positive integer, got {query.page}")
    if query.page_size < 1:
        raise InvalidQueryError(f"Page size must be a positive integer, got {query.page_size}")
    price = query.price
    if isinstance(price, PriceRange):
        if price.maximum is not None and price.minimum > price.maximum:
            raise InvalidQueryError(
                f"Price range minimum {price.minimum} exceeds maximum {price.maximum}"
            )


def matches_search(product: Product, term: str) -> bool:
    if not term:
        return True
    needle = term.lower()
    return any(
        needle in field.lower()
        for field in (product.name, product.description, product.brand, product.category)
    )


def matches_code(value: str, code_filter: CodeFilter) -> bool:
    if isinstance(code_filter, Unfiltered):
        return True
    if isinstance(code_filter, Equals):
        return value == code_filter.code
    raise TypeError(f"Unsupported code filter: {code_filter!r}")


def matches_price(price: int, price_filter: PriceFilter) -> bool:
    if isinstance(price_filter, Unfiltered):
        return True
    if isinstance(price_filter, PriceRange):
        return price_filter.contains(price)
    raise TypeError(f"Unsupported price filter: {price_filter!r}")


def matches_stock(product: Product, stock_filter: StockFilter) -> bool:
    if isinstance(stock_filter, Unfiltered):
        return True
    if isinstance(stock_filter, InStockOnly):
        return product.in_stock
    if isinstance(stock_filter, FeaturedOnly):
        return product.featured
    raise TypeError(f"Unsupported stock filter: {stock_filter!r}")


def matches_filters(product: Product, query: CatalogQuery) -> bool:
    return (
        matches_code(product.category, query.category)
        and matches_code(product.brand, query.brand)
        and matches_price(product.price, query.price)
        and matches_stock(product, query.stock)
    )


def select_candidates(products: Iterable[Product], query: CatalogQuery) -> List[Product]:
    """Search and filter stages. Input order is preserved."""
    return [
        product
        for product in products
        if matches_search(product, query.search) and matches_filters(product, query)
    ]


def sort_candidates(candidates: Sequence[Product], key: SortKey, direction: SortDirection) -> List[Product]:
    # sorted() is stable and reverse=True flips the comparison rather than the
    # output, so equal keys keep input order in both directions.
    return sorted(candidates, key=SORT_VALUES[key], reverse=direction is SortDirection.DESC)


def paginate(candidates: Sequence[Product], page: int, page_size: int) -> List[Product]:
    start = min((page - 1) * page_size, len(candidates))
    end = min(page * page_size, len(candidates))
    return list(candidates[start:end])


def filter_and_sort(products: Sequence[Product], query: CatalogQuery) -> List[Product]:
    """Every match for ``query`` in display order, without pagination."""
    validate_query(query)
    candidates = select_candidates(products, query)
    return sort_candidates(candidates, query.sort_key, query.direction)


def evaluate(products: Sequence[Product], query: CatalogQuery) -> QueryResult:
    """Run the search, filter, sort and paginate stages over ``products``.

    Raises InvalidQueryError for a non-positive page or page size and for a
    price range whose minimum exceeds its maximum. An empty catalog or a query
    that matches nothing is not an error.
    """
    ordered = filter_and_sort(products, query)
    page = paginate(ordered, query.page, query.page_size)
    logger.debug(
        "Evaluated catalog query: %d of %d products matched, page %d returned %d",
        len(ordered),
        len(products),
        query.page,
        len(page),
    )
    return QueryResult(products=tuple(page), total=len(ordered), page=query.page, page_size=query.page_size)
