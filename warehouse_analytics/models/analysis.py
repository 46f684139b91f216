"""Analiz sonuç tipleri."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from warehouse_analytics.models.product import Product, Shippable


@dataclass(frozen=True)
class ShippingGroup:
    items: tuple[Shippable, ...]

    @property
    def total_weight(self) -> Decimal:
        return sum((item.weight for item in self.items), Decimal("0"))

    @property
    def total_shipping_cost(self) -> Decimal:
        return sum((item.calculate_shipping_cost() for item in self.items), Decimal("0"))

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class InventoryValidation:
    high_value_percentage: float
    category_diversity: int
    high_value_warning: bool
    minimum_diversity: bool

    @classmethod
    def from_metrics(
        cls,
        high_value_percentage: float,
        category_diversity: int,
        warning_percentage: float = 70.0,
        minimum_category_diversity: int = 2,
    ) -> InventoryValidation:
        return cls(
            high_value_percentage=high_value_percentage,
            category_diversity=category_diversity,
            high_value_warning=high_value_percentage > warning_percentage,
            minimum_diversity=category_diversity >= minimum_category_diversity,
        )


@dataclass(frozen=True)
class InventoryStatistics:
    total_products: int
    total_value: Decimal
    average_price: Decimal
    expired_count: int
    category_count: int
    most_expensive_product: Optional[Product] = None
    cheapest_product: Optional[Product] = None
