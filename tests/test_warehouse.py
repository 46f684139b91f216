"""Depo ve depo kayıt defteri unit testleri."""

import uuid
from datetime import date, timedelta
from decimal import Decimal

import pytest

from warehouse_analytics.errors import (
    InvalidArgumentError,
    ProductNotFoundError,
    WarehouseNotFoundError,
)
from warehouse_analytics.models.product import CategoryFactory, ElectronicsProduct, FoodProduct
from warehouse_analytics.models.warehouse import Warehouse, WarehouseRegistry

REF_DATE = date(2025, 6, 15)


def _create_warehouse() -> Warehouse:
    factory = CategoryFactory()
    warehouse = Warehouse("WH001")
    warehouse.add_product(FoodProduct("Milk", factory.of("dairy"), "12.50", REF_DATE, weight="1"))
    warehouse.add_product(ElectronicsProduct("Laptop", factory.of("electronics"), "1500", 24, "2.2"))
    warehouse.add_product(
        FoodProduct("Cheese", factory.of("dairy"), "45", REF_DATE - timedelta(days=1), weight="0.5")
    )
    return warehouse


class TestProductManagement:
    def test_add_and_get_products_in_order(self):
        warehouse = _create_warehouse()
        assert [p.name for p in warehouse.get_products()] == ["Milk", "Laptop", "Cheese"]
        assert len(warehouse) == 3

    def test_add_none_raises(self):
        with pytest.raises(InvalidArgumentError):
            Warehouse("WH001").add_product(None)

    def test_duplicate_id_raises(self):
        warehouse = _create_warehouse()
        milk = warehouse.get_products()[0]
        with pytest.raises(InvalidArgumentError):
            warehouse.add_product(milk)

    def test_get_products_returns_copy(self):
        warehouse = _create_warehouse()
        products = warehouse.get_products()
        products.clear()
        assert len(warehouse.get_products()) == 3

    def test_remove_product(self):
        warehouse = _create_warehouse()
        laptop = warehouse.get_products()[1]
        assert warehouse.remove(laptop.id) is True
        assert warehouse.remove(laptop.id) is False
        assert warehouse.get_product_by_id(laptop.id) is None

    def test_clear_products(self):
        warehouse = _create_warehouse()
        warehouse.clear_products()
        assert warehouse.is_empty()

    def test_blank_name_raises(self):
        with pytest.raises(InvalidArgumentError):
            Warehouse("")


class TestProductQueries:
    def test_shippable_and_perishable_products(self):
        warehouse = _create_warehouse()
        assert [p.name for p in warehouse.shippable_products()] == ["Milk", "Laptop", "Cheese"]
        assert [p.name for p in warehouse.perishable_products()] == ["Milk", "Cheese"]

    def test_expired_products(self):
        warehouse = _create_warehouse()
        assert [p.name for p in warehouse.expired_products(REF_DATE)] == ["Cheese"]

    def test_require_missing_product_raises(self):
        with pytest.raises(ProductNotFoundError):
            _create_warehouse().require_product(uuid.uuid4())

    def test_grouped_by_categories(self):
        groups = _create_warehouse().get_products_grouped_by_categories()
        assert [c.name for c in groups] == ["Dairy", "Electronics"]
        assert [p.name for p in next(iter(groups.values()))] == ["Milk", "Cheese"]


class TestPriceUpdates:
    def test_update_price_records_change(self):
        warehouse = _create_warehouse()
        milk = warehouse.get_products()[0]
        change = warehouse.update_product_price(milk.id, Decimal("10.00"))
        assert milk.price == Decimal("10.00")
        assert change.price_before == Decimal("12.50")
        assert change.change_amount == Decimal("-2.50")
        assert warehouse.get_changed_products() == [milk]

    def test_update_missing_product_raises(self):
        with pytest.raises(ProductNotFoundError):
            _create_warehouse().update_product_price(uuid.uuid4(), Decimal("1"))

    def test_update_negative_price_raises(self):
        warehouse = _create_warehouse()
        milk = warehouse.get_products()[0]
        with pytest.raises(InvalidArgumentError):
            warehouse.update_product_price(milk.id, Decimal("-1"))
        assert warehouse.get_price_history() == []

    def test_filter_price_history(self):
        warehouse = _create_warehouse()
        milk, laptop, _ = warehouse.get_products()
        warehouse.update_product_price(milk.id, Decimal("11"))
        warehouse.update_product_price(laptop.id, Decimal("1400"))
        warehouse.update_product_price(milk.id, Decimal("10"))

        assert len(warehouse.get_price_history()) == 3
        assert len(warehouse.get_price_history(milk.id)) == 2
        assert warehouse.get_changed_products() == [milk, laptop]


class TestWarehouseRegistry:
    def test_get_or_create_returns_same_instance(self):
        registry = WarehouseRegistry()
        assert registry.get_or_create("WH001") is registry.get_or_create("WH001")
        assert len(registry) == 1
        assert "WH001" in registry

    def test_get_unknown_raises(self):
        with pytest.raises(WarehouseNotFoundError):
            WarehouseRegistry().get("WH404")

    def test_registries_are_independent(self):
        assert WarehouseRegistry().get_or_create("WH001") is not WarehouseRegistry().get_or_create("WH001")

    def test_remove_and_names(self):
        registry = WarehouseRegistry()
        registry.get_or_create("WH001")
        registry.get_or_create("WH002")
        assert registry.remove("WH001") is True
        assert registry.names() == ["WH002"]
