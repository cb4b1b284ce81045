from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from storefront.config import get_settings
from storefront.errors import InvalidQueryError
from storefront.models.query import CatalogQuery
from storefront.schemas.products import CatalogPage, ProductOut
from storefront.services.export import export_csv, export_filename
from storefront.services.filters import build_query
from storefront.services.query import evaluate, filter_and_sort
from storefront.state import get_catalog
from storefront.utils.text import results_summary, search_message


@dataclass
class SearchParams:
    """Raw filter values as the product page sends them."""

    search: Optional[str] = None
    category: Optional[str] = None
    brand: Optional[str] = None
    price: Optional[str] = None
    stock: Optional[str] = None
    sort: Optional[str] = None
    page: int = 1
    page_size: Optional[int] = None

    def to_query(self) -> CatalogQuery:
        settings = get_settings()
        page_size = self.page_size if self.page_size is not None else settings.page_size
        if page_size > settings.max_page_size:
            raise InvalidQueryError(f"Page size may not exceed {settings.max_page_size}")
        return build_query(
            search=self.search,
            category=self.category,
            brand=self.brand,
            price=self.price,
            stock=self.stock,
            sort=self.sort,
            page=self.page,
            page_size=page_size,
        )


def search_catalog(params: SearchParams) -> CatalogPage:
    query = params.to_query()
    snapshot = get_catalog()
    result = evaluate(snapshot.products, query)
    return CatalogPage(
        products=[ProductOut.from_product(product) for product in result.products],
        total=result.total,
        page=result.page,
        page_size=result.page_size,
        total_pages=result.total_pages,
        has_more=result.has_more,
        summary=results_summary(result),
        message=search_message(query.search, result.total),
        version=snapshot.version,
    )


def export_catalog(params: SearchParams) -> tuple[str, str]:
    """Every match for the current filters as (filename, csv text); pagination is ignored."""
    query = params.to_query()
    matches = filter_and_sort(get_catalog().products, query)
    return export_filename(), export_csv(matches)
