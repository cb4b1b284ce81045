import pytest

from storefront import state
from storefront.config import get_settings
from storefront.models.product import Product


def make_product(product_id, name, brand="siemens", category="electrical", price=100,
                 in_stock=True, featured=False, description=""):
    return Product(
        id=product_id,
        name=name,
        brand=brand,
        category=category,
        price=price,
        description=description or f"{name} description",
        in_stock=in_stock,
        featured=featured,
    )


@pytest.fixture
def breakers():
    """The two-breaker catalog used by the query scenarios."""
    return [
        make_product(1, "Breaker A", brand="siemens", price=100, in_stock=True),
        make_product(2, "Breaker B", brand="abb", price=50, in_stock=False),
    ]


@pytest.fixture
def mixed_catalog():
    return [
        make_product(1, "Industrial Circuit Breaker", brand="siemens", category="electrical", price=459, featured=True),
        make_product(2, "CompactLogix PLC", brand="rockwell", category="automation", price=3299, featured=True),
        make_product(3, "MasterPact Panel", brand="schneider", category="power", price=8750),
        make_product(4, "ACS880 Drive", brand="abb", category="industrial", price=2150, featured=True),
        make_product(5, "Emergency Safety System", brand="eaton", category="safety", price=875, in_stock=False),
        make_product(6, "LED Lighting System", brand="ge", category="electrical", price=320),
        make_product(7, "Contactor Kit", brand="siemens", category="electrical", price=875),
    ]


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Fresh settings and catalog repository for every test."""
    for name in ("STOREFRONT_CATALOG_PATH", "STOREFRONT_PAGE_SIZE", "STOREFRONT_MAX_PAGE_SIZE"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    state.reset_repository()
    yield
    get_settings.cache_clear()
    state.reset_repository()
