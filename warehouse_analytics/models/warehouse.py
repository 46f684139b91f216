"""Depo ve depo kayıt defteri veri modelleri."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Iterator, Optional

from warehouse_analytics.errors import (
    InvalidArgumentError,
    ProductNotFoundError,
    WarehouseNotFoundError,
)
from warehouse_analytics.models.product import Category, Perishable, Product, Shippable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PriceChange:
    entry_id: str
    product_id: uuid.UUID
    price_before: Decimal
    price_after: Decimal
    timestamp: str = field(default_factory=lambda: datetime.utcnow().isoformat())

    @property
    def change_amount(self) -> Decimal:
        return self.price_after - self.price_before


class Warehouse:
    """Ürünlerin kimliğe göre tekil tutulduğu sıralı koleksiyon."""

    def __init__(self, name: str) -> None:
        if not name or not name.strip():
            raise InvalidArgumentError("Depo adı boş olamaz")
        self._name = name
        self._products: list[Product] = []
        # Fiyat değişikliği geçmişi: eklenme sırasına göre
        self._price_history: list[PriceChange] = []

    @property
    def name(self) -> str:
        return self._name

    # --- Ürün ekleme / çıkarma ---

    def add_product(self, product: Product) -> None:
        """Ürünü depoya ekler. Aynı kimlikli ikinci ürün kabul edilmez."""
        if product is None:
            raise InvalidArgumentError("Ürün boş olamaz")
        if self.get_product_by_id(product.id) is not None:
            raise InvalidArgumentError(f"Bu kimlikle ürün zaten var: {product.id}")
        self._products.append(product)
        logger.debug("Ürün eklendi [%s]: %s", self._name, product.name)

    def remove(self, product_id: uuid.UUID) -> bool:
        """Ürünü kaldırır; kaldırılan bir ürün varsa True döner."""
        before = len(self._products)
        self._products = [p for p in self._products if p.id != product_id]
        return len(self._products) < before

    def clear_products(self) -> None:
        self._products.clear()
        self._price_history.clear()

    def is_empty(self) -> bool:
        return not self._products

    # --- Okuma ---

    def get_products(self) -> list[Product]:
        """Ürün listesinin kopyasını döndürür."""
        return list(self._products)

    def shippable_products(self) -> list[Shippable]:
        return [p for p in self._products if isinstance(p, Shippable)]

    def perishable_products(self) -> list[Perishable]:
        return [p for p in self._products if isinstance(p, Perishable)]

    def expired_products(self, reference_date: Optional[date] = None) -> list[Perishable]:
        return [p for p in self.perishable_products() if p.is_expired(reference_date)]

    def get_product_by_id(self, product_id: uuid.UUID) -> Optional[Product]:
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def require_product(self, product_id: uuid.UUID) -> Product:
        product = self.get_product_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(f"Ürün bulunamadı: {product_id}")
        return product

    def get_products_grouped_by_categories(self) -> dict[Category, list[Product]]:
        groups: dict[Category, list[Product]] = {}
        for product in self._products:
            groups.setdefault(product.category, []).append(product)
        return groups

    # --- Fiyat güncelleme ve geçmişi ---

    def update_product_price(self, product_id: uuid.UUID, new_price: Decimal) -> PriceChange:
        """Ürün fiyatını günceller ve değişikliği geçmişe kaydeder."""
        product = self.require_product(product_id)
        price_before = product.price
        product.price = new_price
        entry = PriceChange(
            entry_id=str(uuid.uuid4()),
            product_id=product_id,
            price_before=price_before,
            price_after=product.price,
        )
        self._price_history.append(entry)
        logger.info(
            "Fiyat güncellendi [%s]: %s %s -> %s",
            self._name, product.name, price_before, product.price,
        )
        return entry

    def get_changed_products(self) -> list[Product]:
        """Fiyatı en az bir kez güncellenmiş ürünleri depo sırasıyla döndürür."""
        changed_ids = {entry.product_id for entry in self._price_history}
        return [p for p in self._products if p.id in changed_ids]

    def get_price_history(self, product_id: Optional[uuid.UUID] = None) -> list[PriceChange]:
        entries = self._price_history
        if product_id:
            entries = [e for e in entries if e.product_id == product_id]
        return list(entries)

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self.get_products())

    def __repr__(self) -> str:
        return f"Warehouse(name={self._name!r}, products={len(self._products)})"


class WarehouseRegistry:
    """Ada göre depo kayıt defteri.

    Uygulamanın giriş noktası tarafından oluşturulur ve analizörlere
    açıkça aktarılır; modül düzeyinde paylaşılan bir örnek yoktur.
    """

    def __init__(self) -> None:
        self._warehouses: dict[str, Warehouse] = {}

    def get_or_create(self, name: str) -> Warehouse:
        warehouse = self._warehouses.get(name)
        if warehouse is None:
            warehouse = Warehouse(name)
            self._warehouses[name] = warehouse
            logger.info("Depo oluşturuldu: %s", name)
        return warehouse

    def get(self, name: str) -> Warehouse:
        warehouse = self._warehouses.get(name)
        if warehouse is None:
            raise WarehouseNotFoundError(f"Depo bulunamadı: {name}")
        return warehouse

    def remove(self, name: str) -> bool:
        return self._warehouses.pop(name, None) is not None

    def names(self) -> list[str]:
        return list(self._warehouses)

    def __contains__(self, name: object) -> bool:
        return name in self._warehouses

    def __len__(self) -> int:
        return len(self._warehouses)
