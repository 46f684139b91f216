"""
Depo Analitiği Demo Script'i.

Örnek bir depo oluşturur, tüm analizleri çalıştırır ve sonuçları yazdırır.

Kullanım:
    export WAREHOUSE_OUTLIER_THRESHOLD="1.5"   # opsiyonel
    python demo.py
"""

import json
import logging
from datetime import date, timedelta
from decimal import Decimal

from warehouse_analytics.analyzers import WarehouseAnalyzer
from warehouse_analytics.config import AnalyzerConfig
from warehouse_analytics.errors import WarehouseAnalyticsError
from warehouse_analytics.models.product import CategoryFactory, ElectronicsProduct, FoodProduct
from warehouse_analytics.models.warehouse import Warehouse, WarehouseRegistry

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(name)s] %(levelname)s: %(message)s")
logger = logging.getLogger("demo")


def build_sample_warehouse(registry: WarehouseRegistry, categories: CategoryFactory, today: date) -> Warehouse:
    """Gıda ve elektronik ürünlerden oluşan örnek depo."""
    warehouse = registry.get_or_create("Merkez")
    dairy = categories.of("dairy")
    bakery = categories.of("bakery")
    electronics = categories.of("electronics")

    warehouse.add_product(FoodProduct("Milk", dairy, "12.50", today, weight="1.0"))
    warehouse.add_product(FoodProduct("Organic Milk", dairy, "15.00", today + timedelta(days=1), weight="1.0"))
    warehouse.add_product(FoodProduct("Yogurt", dairy, "8.00", today + timedelta(days=3), weight="0.5"))
    warehouse.add_product(FoodProduct("Cheese", dairy, "45.00", today - timedelta(days=2), weight="0.8"))
    warehouse.add_product(FoodProduct("Bread", bakery, "4.50", today + timedelta(days=2), weight="0.4"))
    warehouse.add_product(ElectronicsProduct("Laptop", electronics, "1499.00", 24, "2.2"))
    warehouse.add_product(ElectronicsProduct("Monitor", electronics, "329.00", 12, "6.5"))
    warehouse.add_product(ElectronicsProduct("Speaker", electronics, "89.90", 6, "3.1"))
    return warehouse


def show_filters(analyzer: WarehouseAnalyzer, today: date):
    print("\n🔍 Adım 1: Arama ve Filtreleme")
    in_range = analyzer.find_products_in_price_range(Decimal("5"), Decimal("50"))
    print(f"   5-50 arası fiyatlı: {[p.name for p in in_range]}")
    above = analyzer.find_products_above_price(Decimal("100"))
    print(f"   100 üzeri: {[p.name for p in above]}")
    milk = analyzer.search_products_by_name("milk")
    print(f"   'milk' araması: {[p.name for p in milk]}")
    expiring = analyzer.find_products_expiring_within_days(3, today)
    print(f"   3 gün içinde bozulacak: {[p.name for p in expiring]}")


def show_analytics(analyzer: WarehouseAnalyzer, today: date):
    print("\n📈 Adım 2: Analizler")
    for category, average in analyzer.calculate_weighted_average_price_by_category().items():
        print(f"   {category.name}: ağırlıklı ortalama {average}")

    outliers = analyzer.find_price_outliers()
    print(f"   Aykırı fiyatlar: {[p.name for p in outliers]}")

    print("\n🚚 Adım 3: Kargo Gruplama (sınır: 10)")
    for index, group in enumerate(analyzer.optimize_shipping_groups(Decimal("10")), start=1):
        names = [item.name for item in group.items]
        print(f"   Grup {index}: {names} ağırlık={group.total_weight} ücret={group.total_shipping_cost}")

    print("\n🏷️  Adım 4: Son Kullanma İndirimleri")
    for product, price in analyzer.calculate_expiration_based_discounts(today).items():
        if price != product.price:
            print(f"   {product.name}: {product.price} -> {price}")


def show_rules(analyzer: WarehouseAnalyzer, today: date):
    print("\n✅ Adım 5: Envanter Kuralları ve İstatistikler")
    validation = analyzer.validate_inventory_constraints()
    print(f"   Yüksek değerli oran: %{validation.high_value_percentage:.1f}"
          f" {'⚠️' if validation.high_value_warning else '✅'}")
    print(f"   Kategori çeşitliliği: {validation.category_diversity}"
          f" {'✅' if validation.minimum_diversity else '⚠️'}")

    stats = analyzer.get_inventory_statistics(today)
    print(f"   Ürün sayısı: {stats.total_products}, toplam değer: {stats.total_value},"
          f" ortalama: {stats.average_price}")
    print(f"   Süresi geçmiş: {stats.expired_count}, kategori sayısı: {stats.category_count}")
    if stats.most_expensive_product and stats.cheapest_product:
        print(f"   En pahalı: {stats.most_expensive_product.name}, en ucuz: {stats.cheapest_product.name}")


def show_price_update(warehouse: Warehouse):
    print("\n💱 Adım 6: Fiyat Güncelleme")
    laptop = next(p for p in warehouse.get_products() if p.name == "Laptop")
    change = warehouse.update_product_price(laptop.id, Decimal("1399.00"))
    print(f"   {laptop.name}: {change.price_before} -> {change.price_after} (fark: {change.change_amount})")
    print(f"   Değişen ürünler: {[p.name for p in warehouse.get_changed_products()]}")


if __name__ == "__main__":
    print("🏭 Warehouse Analytics - Demo")
    print("=" * 60)

    today = date.today()
    registry = WarehouseRegistry()
    categories = CategoryFactory()

    try:
        config = AnalyzerConfig.from_env()
        warehouse = build_sample_warehouse(registry, categories, today)
        analyzer = WarehouseAnalyzer(warehouse, config)

        show_filters(analyzer, today)
        show_analytics(analyzer, today)
        show_rules(analyzer, today)
        show_price_update(warehouse)

        print("\n📋 Günlük Rapor:")
        report = analyzer.build_inventory_report(today, max_shipping_weight=Decimal("10"))
        print(json.dumps(report, ensure_ascii=False, indent=2))
    except WarehouseAnalyticsError as e:
        logger.error("Demo hatası: %s", e)
        raise SystemExit(1)

    print("\n" + "=" * 60)
    print("🎉 Demo tamamlandı!")
