"""Ürün ve kategori modeli unit testleri."""

from datetime import date, timedelta
from decimal import Decimal

import pytest

from warehouse_analytics.errors import InvalidArgumentError
from warehouse_analytics.models.product import (
    CategoryFactory,
    ElectronicsProduct,
    FoodProduct,
    Perishable,
    Shippable,
)

REF_DATE = date(2025, 6, 15)


class TestCategoryFactory:
    def test_same_normalized_name_returns_same_instance(self):
        factory = CategoryFactory()
        assert factory.of("dairy") is factory.of("  DAIRY ")
        assert factory.of("dairy").name == "Dairy"

    def test_different_names_are_different_categories(self):
        factory = CategoryFactory()
        assert factory.of("dairy") is not factory.of("bakery")
        assert len(factory) == 2

    def test_equality_is_identity(self):
        """Farklı fabrikalardan gelen aynı adlı kategoriler eşit değildir."""
        assert CategoryFactory().of("dairy") != CategoryFactory().of("dairy")

    def test_blank_name_raises(self):
        factory = CategoryFactory()
        with pytest.raises(InvalidArgumentError):
            factory.of("   ")

    def test_known_categories_in_creation_order(self):
        factory = CategoryFactory()
        factory.of("b")
        factory.of("a")
        factory.of("B")
        assert [c.name for c in factory.known_categories()] == ["B", "A"]


class TestProductValidation:
    def test_negative_price_raises(self):
        with pytest.raises(InvalidArgumentError):
            FoodProduct("Milk", CategoryFactory().of("dairy"), "-1", REF_DATE)

    def test_price_setter_rejects_negative(self):
        milk = FoodProduct("Milk", CategoryFactory().of("dairy"), "10", REF_DATE)
        with pytest.raises(InvalidArgumentError):
            milk.price = Decimal("-0.01")
        assert milk.price == Decimal("10")

    def test_price_accepts_float_without_binary_noise(self):
        milk = FoodProduct("Milk", CategoryFactory().of("dairy"), 0.1, REF_DATE)
        assert milk.price == Decimal("0.1")

    def test_negative_weight_raises(self):
        with pytest.raises(InvalidArgumentError):
            ElectronicsProduct("Laptop", CategoryFactory().of("electronics"), "999", 12, "-2")

    def test_negative_warranty_raises(self):
        with pytest.raises(InvalidArgumentError):
            ElectronicsProduct("Laptop", CategoryFactory().of("electronics"), "999", -1, "2")

    def test_blank_name_raises(self):
        with pytest.raises(InvalidArgumentError):
            FoodProduct(" ", CategoryFactory().of("dairy"), "10", REF_DATE)

    def test_products_get_unique_ids(self):
        dairy = CategoryFactory().of("dairy")
        assert FoodProduct("A", dairy, "1", REF_DATE).id != FoodProduct("B", dairy, "1", REF_DATE).id


class TestCapabilities:
    def test_food_is_perishable_and_shippable(self):
        milk = FoodProduct("Milk", CategoryFactory().of("dairy"), "10", REF_DATE, weight="1")
        assert isinstance(milk, Perishable)
        assert isinstance(milk, Shippable)

    def test_electronics_is_only_shippable(self):
        laptop = ElectronicsProduct("Laptop", CategoryFactory().of("electronics"), "999", 12, "2")
        assert isinstance(laptop, Shippable)
        assert not isinstance(laptop, Perishable)

    def test_is_expired_strictly_before_reference(self):
        dairy = CategoryFactory().of("dairy")
        assert FoodProduct("Old", dairy, "1", REF_DATE - timedelta(days=1)).is_expired(REF_DATE)
        assert not FoodProduct("Today", dairy, "1", REF_DATE).is_expired(REF_DATE)

    def test_food_shipping_cost_is_flat(self):
        milk = FoodProduct("Milk", CategoryFactory().of("dairy"), "10", REF_DATE, weight="20")
        assert milk.calculate_shipping_cost() == Decimal("10")

    def test_electronics_shipping_cost_by_weight(self):
        electronics = CategoryFactory().of("electronics")
        assert ElectronicsProduct("Phone", electronics, "500", 12, "5.0").calculate_shipping_cost() == Decimal("79")
        assert ElectronicsProduct("TV", electronics, "900", 12, "5.01").calculate_shipping_cost() == Decimal("128")

    def test_product_details(self):
        factory = CategoryFactory()
        milk = FoodProduct("Milk", factory.of("dairy"), "10", REF_DATE, weight="1.5")
        laptop = ElectronicsProduct("Laptop", factory.of("electronics"), "999", 24, "2")
        assert milk.product_details() == "Food: Milk, Expires: 2025-06-15, Weight: 1.5"
        assert laptop.product_details() == "Electronics: Laptop, Warranty: 24 months"
