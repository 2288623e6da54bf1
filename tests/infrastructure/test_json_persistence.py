"""Tests for the JSON-file adapters, against a temporary directory."""

import json

import pytest

from basket.domain.exceptions import EntityNotFoundError
from basket.domain.model.basket_line import BasketLine
from basket.domain.model.product import Product
from basket.domain.model.value_objects import Money
from basket.domain.service.basket import Basket
from basket.infrastructure.persistence.json_basket_storage import JsonBasketStorage
from basket.infrastructure.persistence.json_product_catalog import JsonProductCatalog


@pytest.fixture
def catalog(tmp_path):
    catalog = JsonProductCatalog(tmp_path / "products.json")
    catalog.save(Product(id=1, name="Widget", price=Money.of("10.00"), stock=5))
    catalog.save(Product(id=2, name="Gadget", price=Money.of("20.00"), stock=0))
    catalog.save(Product(id=3, name="Gizmo", price=Money.of("5.00"), stock=10))
    return catalog


class TestJsonProductCatalog:

    def test_creates_missing_file(self, tmp_path):
        path = tmp_path / "nested" / "products.json"
        JsonProductCatalog(path)
        assert json.loads(path.read_text()) == []

    def test_find_round_trips_fields(self, catalog):
        widget = catalog.find(1)
        assert widget.name == "Widget"
        assert widget.price == Money.of("10.00")
        assert widget.stock == 5

    def test_find_unknown_raises(self, catalog):
        with pytest.raises(EntityNotFoundError, match="not found"):
            catalog.find(42)

    def test_find_many_drops_unknown_and_keeps_catalog_order(self, catalog):
        products = catalog.find_many([3, 42, 1])
        assert [p.id for p in products] == [1, 3]

    def test_find_by_name_is_case_insensitive(self, catalog):
        assert catalog.find_by_name("gizmo").id == 3
        assert catalog.find_by_name("nope") is None

    def test_save_updates_existing(self, catalog):
        widget = catalog.find(1)
        widget.set_stock(1)
        catalog.save(widget)
        assert catalog.find(1).stock == 1
        assert len(catalog.list_all()) == 3


class TestJsonBasketStorage:

    def test_set_get_exists(self, tmp_path):
        storage = JsonBasketStorage(tmp_path / "baskets.json", "alice")
        storage.set(1, BasketLine(product_id=1, quantity=2))
        assert storage.exists(1)
        assert storage.get(1) == BasketLine(product_id=1, quantity=2)
        assert storage.get(2) is None

    def test_file_layout(self, tmp_path):
        path = tmp_path / "baskets.json"
        JsonBasketStorage(path, "alice").set(1, BasketLine(product_id=1, quantity=2))
        assert json.loads(path.read_text()) == {
            "alice": {"1": {"product_id": 1, "quantity": 2}},
        }

    def test_baskets_are_isolated(self, tmp_path):
        path = tmp_path / "baskets.json"
        alice = JsonBasketStorage(path, "alice")
        bob = JsonBasketStorage(path, "bob")
        alice.set(1, BasketLine(product_id=1, quantity=2))
        bob.set(3, BasketLine(product_id=3, quantity=1))

        alice.clear()
        assert alice.all() == []
        assert bob.all() == [BasketLine(product_id=3, quantity=1)]

    def test_remove_absent_is_noop(self, tmp_path):
        storage = JsonBasketStorage(tmp_path / "baskets.json", "alice")
        storage.remove(1)
        storage.clear()
        assert storage.all() == []


class TestBasketOverJsonAdapters:

    def test_stock_drift_scenario(self, tmp_path, catalog):
        basket = Basket(JsonBasketStorage(tmp_path / "baskets.json", "alice"), catalog)
        basket.add(catalog.find(1), 3)
        basket.add(catalog.find(3), 2)
        assert basket.sub_total() == Money.of("40")

        widget = catalog.find(1)
        widget.set_stock(1)
        catalog.save(widget)

        basket.refresh()
        assert basket.get(widget).quantity == 1
        assert basket.sub_total() == Money.of("20")
