"""Tests for CatalogRepository snapshots, loading and admin mutations."""

import json
import logging

import pytest

from storefront.config import get_settings
from storefront.data.loader import CatalogRepository
from storefront.errors import ProductNotFoundError, ProductValidationError
from storefront.models.query import CatalogQuery, Equals
from storefront.services.query import evaluate

NEW_PRODUCT = {
    "name": "Surge Protector",
    "brand": "  Eaton ",
    "category": "electrical",
    "price": "640",
    "description": "Type 2 surge protection device.",
}


@pytest.fixture
def repository():
    repo = CatalogRepository()
    repo.load()
    return repo


class TestLoading:
    def test_starter_catalog_when_no_file_configured(self, repository):
        snapshot = repository.snapshot()

        assert snapshot.version == 1
        assert len(snapshot) == 6
        assert snapshot.products[0].name == "Industrial Circuit Breaker Series"
        assert snapshot.products[0].specifications["interrupting"] == "65kA"

    def test_loads_catalog_file(self, tmp_path, monkeypatch):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps([
            {"id": 10, "name": "Relay", "brand": "abb", "category": "automation", "price": 90,
             "description": "Safety relay", "inStock": False, "featured": True,
             "specifications": {"contacts": "3NO"}},
            {"id": 11, "name": "Fuse", "brand": "eaton", "category": "electrical", "price": 5,
             "description": "Cartridge fuse", "inStock": True, "featured": False},
        ]))
        monkeypatch.setenv("STOREFRONT_CATALOG_PATH", str(path))
        get_settings.cache_clear()

        snapshot = CatalogRepository().load()

        assert [p.id for p in snapshot.products] == [10, 11]
        relay, fuse = snapshot.products
        assert relay.in_stock is False and relay.featured is True
        assert dict(relay.specifications) == {"contacts": "3NO"}
        assert dict(fuse.specifications) == {}

    def test_missing_catalog_file_falls_back_to_starter(self, tmp_path, monkeypatch):
        monkeypatch.setenv("STOREFRONT_CATALOG_PATH", str(tmp_path / "missing.json"))
        get_settings.cache_clear()

        assert len(CatalogRepository().load()) == 6

    def test_duplicate_ids_are_rejected(self):
        records = [
            {"id": 1, "name": "A", "brand": "abb", "category": "power", "price": 1, "description": ""},
            {"id": 1, "name": "B", "brand": "abb", "category": "power", "price": 2, "description": ""},
        ]

        with pytest.raises(ProductValidationError):
            CatalogRepository().load(records)

    def test_text_flags_in_catalog_file(self, tmp_path, monkeypatch):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps([
            {"id": 1, "name": "Relay", "brand": "abb", "category": "automation", "price": 90,
             "description": "", "inStock": "false", "featured": "true"},
            {"id": 2, "name": "Fuse", "brand": "eaton", "category": "electrical", "price": 5,
             "description": "", "inStock": True, "featured": False},
        ]))
        monkeypatch.setenv("STOREFRONT_CATALOG_PATH", str(path))
        get_settings.cache_clear()

        relay, fuse = CatalogRepository().load().products

        assert (relay.in_stock, relay.featured) == (False, True)
        assert (fuse.in_stock, fuse.featured) == (True, False)

    def test_unreadable_flag_is_rejected(self):
        records = [
            {"id": 1, "name": "A", "brand": "abb", "category": "power", "price": 1,
             "description": "", "inStock": "sometimes"},
        ]

        with pytest.raises(ProductValidationError, match="inStock"):
            CatalogRepository().load(records)

    def test_load_is_idempotent(self, repository):
        first = repository.snapshot()

        assert repository.load() is first


class TestMutations:
    def test_add_product_normalizes_fields(self, repository):
        product = repository.add_product(NEW_PRODUCT)

        assert product.id == 7
        assert product.brand == "eaton"
        assert product.price == 640
        assert product.in_stock is True
        assert product.featured is False
        assert dict(product.specifications) == {}
        assert product.created_at is not None
        assert repository.get_product(7) == product

    def test_mutation_publishes_new_snapshot(self, repository):
        before = repository.snapshot()

        repository.add_product(NEW_PRODUCT)
        after = repository.snapshot()

        assert after.version == before.version + 1
        assert len(before) == 6
        assert len(after) == 7

    def test_evaluation_against_old_snapshot_is_unaffected(self, repository):
        before = repository.snapshot()
        repository.remove_product(1)

        result = evaluate(before.products, CatalogQuery(category=Equals("electrical")))

        assert [p.id for p in result.products] == [1, 6]

    def test_ids_are_never_reused(self, repository):
        added = repository.add_product(NEW_PRODUCT)
        repository.remove_product(added.id)

        again = repository.add_product(NEW_PRODUCT)

        assert again.id == added.id + 1

    @pytest.mark.parametrize("missing", ["name", "brand", "category", "description", "price"])
    def test_required_fields(self, repository, missing):
        data = dict(NEW_PRODUCT)
        data[missing] = "  " if missing != "price" else None

        with pytest.raises(ProductValidationError, match="All product fields are required"):
            repository.add_product(data)

    @pytest.mark.parametrize("price", ["twelve", "-5"])
    def test_bad_prices(self, repository, price):
        with pytest.raises(ProductValidationError):
            repository.add_product(dict(NEW_PRODUCT, price=price))

    def test_mutation_logs_published_version(self, repository, caplog):
        with caplog.at_level(logging.INFO, logger="storefront.data.loader"):
            added = repository.add_product(NEW_PRODUCT)
            repository.remove_product(added.id)

        assert f"Added product {added.id} (Surge Protector), catalog version 2" in caplog.text
        assert f"Removed product {added.id}, catalog version 3" in caplog.text

    def test_remove_unknown_product(self, repository):
        with pytest.raises(ProductNotFoundError):
            repository.remove_product(999)

        assert repository.snapshot().version == 1

    def test_get_unknown_product(self, repository):
        with pytest.raises(ProductNotFoundError, match="999"):
            repository.get_product(999)
