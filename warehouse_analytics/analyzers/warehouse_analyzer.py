"""Warehouse Analyzer - Depo envanteri üzerinde sorgu ve analizler.

- Fiyat aralığı, fiyat eşiği ve ad araması ile filtreleme
- Son kullanma tarihi yaklaşan ürünlerin tespiti ve indirim hesabı
- Kategori bazlı ağırlıklı ortalama fiyat
- IQR ile aykırı fiyat tespiti
- Kargo gruplama (first-fit decreasing)
- Envanter kuralları ve istatistikleri

Analizör durum tutmaz: her çağrı deponun o anki ürün listesinin
kopyası üzerinde çalışır ve depoyu değiştirmez.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from decimal import Decimal
from typing import Any, Optional

from warehouse_analytics.analyzers.shipping import first_fit_decreasing
from warehouse_analytics.analyzers.statistics import outlier_bounds, round_half_up
from warehouse_analytics.config import AnalyzerConfig
from warehouse_analytics.errors import InvalidArgumentError
from warehouse_analytics.models.analysis import (
    InventoryStatistics,
    InventoryValidation,
    ShippingGroup,
)
from warehouse_analytics.models.product import Category, Perishable, Product, Shippable
from warehouse_analytics.models.warehouse import Warehouse

logger = logging.getLogger(__name__)

# Son kullanma tarihine kalan gün -> fiyat çarpanı
EXPIRATION_DISCOUNT_RATES: dict[int, Decimal] = {
    0: Decimal("0.50"),
    1: Decimal("0.70"),
    2: Decimal("0.85"),
    3: Decimal("0.85"),
}


def _as_decimal(value: Any, name: str) -> Decimal:
    if value is None:
        raise InvalidArgumentError(f"{name} boş olamaz")
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except ArithmeticError as e:
        raise InvalidArgumentError(f"{name} sayı olmalı: {value!r}") from e


class WarehouseAnalyzer:
    """Tek bir depo üzerinde çalışan analiz motoru."""

    def __init__(self, warehouse: Warehouse, config: Optional[AnalyzerConfig] = None):
        if warehouse is None:
            raise InvalidArgumentError("Depo boş olamaz")
        self.warehouse = warehouse
        self.config = config or AnalyzerConfig()

    # --- Arama ve filtreleme ---

    def find_products_in_price_range(self, min_price: Any, max_price: Any) -> list[Product]:
        """min_price <= fiyat <= max_price olan ürünleri depo sırasıyla döndürür."""
        low = _as_decimal(min_price, "Alt fiyat sınırı")
        high = _as_decimal(max_price, "Üst fiyat sınırı")
        if low > high:
            raise InvalidArgumentError(f"Alt sınır üst sınırdan büyük olamaz: {low} > {high}")
        return [p for p in self.warehouse.get_products() if low <= p.price <= high]

    def find_products_expiring_within_days(
        self, days: int, reference_date: Optional[date] = None
    ) -> list[Perishable]:
        """Bugün ile bugün+days arasında (iki uç dahil) son kullanma tarihi olan ürünler.

        Süresi geçmiş ve bozulmayan ürünler dahil edilmez.
        """
        if days is None or days < 0:
            raise InvalidArgumentError(f"Gün sayısı negatif olamaz: {days}")
        today = reference_date or date.today()
        end = today + timedelta(days=days)
        return [
            p
            for p in self.warehouse.get_products()
            if isinstance(p, Perishable) and today <= p.expiration_date <= end
        ]

    def search_products_by_name(self, term: str) -> list[Product]:
        """Büyük/küçük harf duyarsız kısmi ad araması. Boş terim her şeyi eşler."""
        if term is None:
            raise InvalidArgumentError("Arama terimi boş olamaz")
        needle = term.casefold()
        return [p for p in self.warehouse.get_products() if needle in p.name.casefold()]

    def find_products_above_price(self, threshold: Any) -> list[Product]:
        limit = _as_decimal(threshold, "Fiyat eşiği")
        return [p for p in self.warehouse.get_products() if p.price > limit]

    # --- Analizler ---

    def calculate_weighted_average_price_by_category(self) -> dict[Category, Decimal]:
        """Kategori bazlı ağırlıklı ortalama fiyat.

        Ağırlığı sıfırdan büyük kargolanabilir ürünler için
        sum(fiyat * ağırlık) / sum(ağırlık) kullanılır. Grupta böyle ürün
        yoksa tüm fiyatların aritmetik ortalamasına düşülür.
        """
        result: dict[Category, Decimal] = {}
        for category, items in self.warehouse.get_products_grouped_by_categories().items():
            weighted_sum = Decimal("0")
            weight_sum = Decimal("0")
            for product in items:
                if isinstance(product, Shippable) and product.weight > 0:
                    weighted_sum += product.price * product.weight
                    weight_sum += product.weight

            if weight_sum > 0:
                average = weighted_sum / weight_sum
            else:
                average = sum((p.price for p in items), Decimal("0")) / len(items)
            result[category] = round_half_up(average)
        return result

    def find_price_outliers(self, threshold: Optional[float] = None) -> list[Product]:
        """Fiyatı [Q1 - t*IQR, Q3 + t*IQR] aralığı dışında kalan ürünler."""
        if threshold is None:
            threshold = self.config.outlier_threshold
        try:
            threshold = float(threshold)
        except (TypeError, ValueError) as e:
            raise InvalidArgumentError(f"Aykırı değer çarpanı sayı olmalı: {threshold!r}") from e
        if threshold < 0:
            raise InvalidArgumentError(f"Aykırı değer çarpanı negatif olamaz: {threshold}")

        products = self.warehouse.get_products()
        if not products:
            return []

        lower, upper = outlier_bounds((float(p.price) for p in products), threshold)
        outliers = [p for p in products if float(p.price) < lower or float(p.price) > upper]
        if outliers:
            logger.info(
                "%d aykırı fiyat bulundu [%s] (aralık: %.2f - %.2f)",
                len(outliers), self.warehouse.name, lower, upper,
            )
        return outliers

    def optimize_shipping_groups(self, max_weight: Any) -> list[ShippingGroup]:
        """Kargolanabilir ürünleri toplam ağırlığı max_weight'i aşmayan gruplara böler."""
        cap = _as_decimal(max_weight, "Maksimum grup ağırlığı")
        return first_fit_decreasing(self.warehouse.shippable_products(), cap)

    # --- İş kuralları ---

    def calculate_expiration_based_discounts(
        self, reference_date: Optional[date] = None
    ) -> dict[Product, Decimal]:
        """Son kullanma tarihine kalan güne göre indirimli fiyatlar.

        Bugün: %50, yarın: %30, 2-3 gün: %15 indirim. Diğer durumlarda
        (süresi geçmiş dahil) fiyat değişmez. Bozulmayan ürünler
        yuvarlanmadan olduğu gibi döner.
        """
        today = reference_date or date.today()
        result: dict[Product, Decimal] = {}
        for product in self.warehouse.get_products():
            if isinstance(product, Perishable):
                days_left = (product.expiration_date - today).days
                rate = EXPIRATION_DISCOUNT_RATES.get(days_left)
                discounted = product.price * rate if rate is not None else product.price
                result[product] = round_half_up(discounted)
            else:
                result[product] = product.price
        return result

    def validate_inventory_constraints(self) -> InventoryValidation:
        """Yüksek değerli ürün oranını ve kategori çeşitliliğini değerlendirir."""
        products = self.warehouse.get_products()
        if not products:
            percentage, diversity = 0.0, 0
        else:
            high_value_count = sum(
                1 for p in products if p.price >= self.config.high_value_threshold
            )
            percentage = high_value_count * 100.0 / len(products)
            diversity = len({p.category for p in products})

        validation = InventoryValidation.from_metrics(
            percentage,
            diversity,
            warning_percentage=self.config.high_value_warning_percentage,
            minimum_category_diversity=self.config.minimum_category_diversity,
        )
        if validation.high_value_warning:
            logger.warning(
                "Yüksek değerli ürün oranı %.1f%% [%s]", percentage, self.warehouse.name
            )
        if products and not validation.minimum_diversity:
            logger.warning(
                "Kategori çeşitliliği yetersiz: %d [%s]", diversity, self.warehouse.name
            )
        return validation

    def get_inventory_statistics(self, reference_date: Optional[date] = None) -> InventoryStatistics:
        """Envanter özet istatistikleri.

        En pahalı / en ucuz ürün eşitlik durumunda depo sırasındaki ilk üründür.
        """
        today = reference_date or date.today()
        products = self.warehouse.get_products()
        total_products = len(products)
        total_value = sum((p.price for p in products), Decimal("0"))
        average_price = (
            round_half_up(total_value / total_products) if total_products else Decimal("0")
        )
        expired_count = sum(
            1 for p in products if isinstance(p, Perishable) and p.expiration_date < today
        )

        return InventoryStatistics(
            total_products=total_products,
            total_value=total_value,
            average_price=average_price,
            expired_count=expired_count,
            category_count=len({p.category for p in products}),
            # max/min eşitlikte ilk elemanı döndürür
            most_expensive_product=max(products, key=lambda p: p.price, default=None),
            cheapest_product=min(products, key=lambda p: p.price, default=None),
        )

    # --- Rapor ---

    def build_inventory_report(
        self,
        reference_date: Optional[date] = None,
        expiring_within_days: int = 3,
        max_shipping_weight: Optional[Any] = None,
    ) -> dict:
        """Günlük envanter raporu oluşturur."""
        today = reference_date or date.today()
        stats = self.get_inventory_statistics(today)
        validation = self.validate_inventory_constraints()
        outliers = self.find_price_outliers()
        expiring = self.find_products_expiring_within_days(expiring_within_days, today)

        report = {
            "warehouse": self.warehouse.name,
            "report_date": today.isoformat(),
            "statistics": {
                "total_products": stats.total_products,
                "total_value": str(stats.total_value),
                "average_price": str(stats.average_price),
                "expired_count": stats.expired_count,
                "category_count": stats.category_count,
                "most_expensive": stats.most_expensive_product.name if stats.most_expensive_product else None,
                "cheapest": stats.cheapest_product.name if stats.cheapest_product else None,
            },
            "validation": {
                "high_value_percentage": round(validation.high_value_percentage, 2),
                "category_diversity": validation.category_diversity,
                "high_value_warning": validation.high_value_warning,
                "minimum_diversity": validation.minimum_diversity,
            },
            "price_outliers": [p.name for p in outliers],
            "expiring_soon": [p.name for p in expiring],
        }

        if max_shipping_weight is not None:
            groups = self.optimize_shipping_groups(max_shipping_weight)
            report["shipping_groups"] = [
                {
                    "items": [item.name for item in group.items],
                    "total_weight": str(group.total_weight),
                    "total_shipping_cost": str(group.total_shipping_cost),
                }
                for group in groups
            ]

        return report
