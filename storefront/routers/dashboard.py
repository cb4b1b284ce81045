import pandas as pd
from fastapi import APIRouter

from storefront.schemas.dashboard import CatalogStats, FacetCount
from storefront.state import get_catalog
from storefront.utils.text import format_brand, format_category

router = APIRouter(prefix="/catalog", tags=["catalog"])


def facet_counts(frame: pd.DataFrame, column: str, formatter) -> list[FacetCount]:
    if frame.empty:
        return []
    counts = frame.groupby(column).size().sort_index()
    return [
        FacetCount(code=str(code), label=formatter(str(code)), count=int(count))
        for code, count in counts.items()
    ]


@router.get("/stats", response_model=CatalogStats)
def catalog_stats() -> CatalogStats:
    snapshot = get_catalog()
    frame = pd.DataFrame(
        [
            {
                'category': product.category,
                'brand': product.brand,
                'price': product.price,
                'in_stock': product.in_stock,
                'featured': product.featured,
            }
            for product in snapshot.products
        ],
        columns=['category', 'brand', 'price', 'in_stock', 'featured'],
    )

    total_products = len(frame)
    return CatalogStats(
        total_products=total_products,
        in_stock=int(frame['in_stock'].sum()) if total_products else 0,
        featured=int(frame['featured'].sum()) if total_products else 0,
        min_price=int(frame['price'].min()) if total_products else 0,
        max_price=int(frame['price'].max()) if total_products else 0,
        categories=facet_counts(frame, 'category', format_category),
        brands=facet_counts(frame, 'brand', format_brand),
        version=snapshot.version,
    )
