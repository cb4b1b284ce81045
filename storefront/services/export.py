from __future__ import annotations

import csv
import logging
from datetime import date
from typing import Optional, Sequence

import pandas as pd

from storefront.config import get_settings
from storefront.models.product import Product
from storefront.utils.text import format_brand, format_category, neutralize_delimiters

logger = logging.getLogger(__name__)

EXPORT_COLUMNS = ["Name", "Brand", "Category", "Price", "Description", "In Stock"]


def products_frame(products: Sequence[Product]) -> pd.DataFrame:
    rows = [
        {
            "Name": product.name,
            "Brand": format_brand(product.brand),
            "Category": format_category(product.category),
            "Price": f"${product.price}",
            "Description": neutralize_delimiters(product.description),
            "In Stock": "Yes" if product.in_stock else "No",
        }
        for product in products
    ]
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def export_csv(products: Sequence[Product]) -> str:
    """Render products as the catalog's CSV download: a bare header row, then every field quoted."""
    frame = products_frame(products)
    body = frame.to_csv(index=False, header=False, quoting=csv.QUOTE_ALL, lineterminator="\n")
    logger.info("Exported %d products to CSV", len(frame))
    return ",".join(EXPORT_COLUMNS) + "\n" + body


def export_filename(on: Optional[date] = None) -> str:
    settings = get_settings()
    day = on or date.today()
    return f"{settings.export_prefix}-{day.isoformat()}.csv"
