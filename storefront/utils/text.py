from __future__ import annotations

import re
from typing import Optional

from storefront.models.query import QueryResult

BRAND_NAMES = {
    "siemens": "Siemens",
    "rockwell": "Rockwell Automation",
    "schneider": "Schneider Electric",
    "abb": "ABB",
    "ge": "General Electric",
    "eaton": "Eaton",
}


def capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def format_brand(code: str) -> str:
    return BRAND_NAMES.get(code) or capitalize_first(code)


def format_category(code: str) -> str:
    return capitalize_first(code)


def format_spec_key(key: str) -> str:
    # camelCase -> "Camel Case"
    return capitalize_first(re.sub(r"(?<!^)([A-Z])", r" \1", key))


def format_price(price: int) -> str:
    return f"${price:,}"


def neutralize_delimiters(text: str) -> str:
    """Keep free text from breaking a comma-delimited row."""
    return text.replace(",", ";").replace("\r\n", " ").replace("\n", " ")


def results_summary(result: QueryResult) -> str:
    if result.total == 0:
        return "No products found matching your criteria"
    # A page past the end still reports a sensible window.
    first = min(result.first_item, result.last_item)
    return f"Showing {first}-{result.last_item} of {result.total} products"


def search_message(term: str, total: int) -> Optional[str]:
    if not term:
        return None
    return f'Found {total} products matching "{term}"'
