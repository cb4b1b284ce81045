from datetime import date

import pytest
from conftest import make_product

from storefront.models.query import QueryResult
from storefront.services.export import export_csv, export_filename
from storefront.utils.text import (
    format_brand,
    format_category,
    format_price,
    format_spec_key,
    neutralize_delimiters,
    results_summary,
    search_message,
)


class TestFormatting:
    @pytest.mark.parametrize(
        "code, label",
        [
            ("siemens", "Siemens"),
            ("rockwell", "Rockwell Automation"),
            ("ge", "General Electric"),
            ("abb", "ABB"),
            ("legrand", "Legrand"),
        ],
    )
    def test_format_brand(self, code, label):
        assert format_brand(code) == label

    def test_format_category(self):
        assert format_category("automation") == "Automation"

    def test_format_spec_key_splits_camel_case(self):
        assert format_spec_key("interruptingRating") == "Interrupting Rating"
        assert format_spec_key("io") == "Io"

    def test_format_price(self):
        assert format_price(8750) == "$8,750"

    def test_neutralize_delimiters(self):
        assert neutralize_delimiters("fast, safe\nreliable") == "fast; safe reliable"


class TestSummaries:
    def test_empty_result(self):
        result = QueryResult(products=(), total=0, page=1, page_size=12)

        assert results_summary(result) == "No products found matching your criteria"

    def test_window_summary(self):
        result = QueryResult(products=(), total=30, page=3, page_size=12)

        assert results_summary(result) == "Showing 25-30 of 30 products"

    def test_page_past_the_end_clamps_the_window(self):
        result = QueryResult(products=(), total=7, page=5, page_size=3)

        assert results_summary(result) == "Showing 7-7 of 7 products"

    def test_search_message(self):
        assert search_message("breaker", 2) == 'Found 2 products matching "breaker"'
        assert search_message("", 5) is None


class TestCsvExport:
    def test_rows_are_quoted_and_formatted(self):
        products = [
            make_product(1, "Breaker A", brand="siemens", category="electrical", price=100,
                         description="Compact, reliable\nbreaker"),
            make_product(2, "Drive", brand="abb", category="industrial", price=2150, in_stock=False,
                         description="Low harmonic"),
        ]

        lines = export_csv(products).splitlines()

        assert lines == [
            "Name,Brand,Category,Price,Description,In Stock",
            '"Breaker A","Siemens","Electrical","$100","Compact; reliable breaker","Yes"',
            '"Drive","ABB","Industrial","$2150","Low harmonic","No"',
        ]

    def test_empty_export_is_header_only(self):
        assert export_csv([]) == "Name,Brand,Category,Price,Description,In Stock\n"

    def test_filename_uses_prefix_and_date(self):
        assert export_filename(date(2025, 3, 9)) == "delta-electric-products-2025-03-09.csv"
