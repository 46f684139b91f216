"""Ürün ve kategori veri modelleri.

- Product: kimliği, adı ve kategorisi sabit; fiyatı güncellenebilir
- Perishable / Shippable: ürün tiplerine eklenebilen yetenekler
- Category: normalize edilmiş ada göre tekil (interned) kategori nesnesi
"""

from __future__ import annotations

import logging
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from warehouse_analytics.errors import InvalidArgumentError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Category:
    """Kategori değer nesnesi.

    Eşitlik kimlik üzerinden çalışır: aynı normalize ada sahip kategoriler
    CategoryFactory tarafından her zaman aynı örnek olarak döndürülür.
    Kategoriler yalnızca CategoryFactory.of ile oluşturulmalıdır; doğrudan
    Category("x") çağrısı fabrikayı atlar ve tekillik garantisi kalmaz.
    """

    name: str

    def __repr__(self) -> str:
        return f"Category({self.name!r})"


class CategoryFactory:
    """Normalize edilmiş kategori adı -> tekil Category eşlemesini tutar."""

    def __init__(self) -> None:
        self._categories: dict[str, Category] = {}

    @staticmethod
    def normalize(name: str) -> str:
        if name is None or not name.strip():
            raise InvalidArgumentError("Kategori adı boş olamaz")
        return name.strip().capitalize()

    def of(self, name: str) -> Category:
        """Verilen ad için tekil kategori örneğini döndürür, yoksa oluşturur."""
        key = self.normalize(name)
        category = self._categories.get(key)
        if category is None:
            category = Category(key)
            self._categories[key] = category
            logger.debug("Yeni kategori oluşturuldu: %s", key)
        return category

    def known_categories(self) -> list[Category]:
        return list(self._categories.values())

    def __len__(self) -> int:
        return len(self._categories)


def _to_decimal(value: Decimal | int | float | str, field_name: str) -> Decimal:
    if value is None:
        raise InvalidArgumentError(f"{field_name} boş olamaz")
    if isinstance(value, Decimal):
        return value
    # float değerler ikili gösterim artığı taşımasın diye str üzerinden çevrilir
    try:
        return Decimal(str(value))
    except ArithmeticError as e:
        raise InvalidArgumentError(f"{field_name} sayı olmalı: {value!r}") from e


def _require_non_negative(value: Decimal, field_name: str) -> Decimal:
    if value < 0:
        raise InvalidArgumentError(f"{field_name} negatif olamaz: {value}")
    return value


class Product(ABC):
    """Tüm ürün tipleri için temel sınıf."""

    def __init__(
        self,
        name: str,
        category: Category,
        price: Decimal | int | float | str,
        product_id: Optional[uuid.UUID] = None,
    ):
        if not name or not name.strip():
            raise InvalidArgumentError("Ürün adı boş olamaz")
        if category is None:
            raise InvalidArgumentError("Ürün kategorisi boş olamaz")
        self._id = product_id or uuid.uuid4()
        self._name = name
        self._category = category
        self._price = _require_non_negative(_to_decimal(price, "Fiyat"), "Fiyat")

    @property
    def id(self) -> uuid.UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def category(self) -> Category:
        return self._category

    @property
    def price(self) -> Decimal:
        return self._price

    @price.setter
    def price(self, value: Decimal | int | float | str) -> None:
        self._price = _require_non_negative(_to_decimal(value, "Fiyat"), "Fiyat")

    @abstractmethod
    def product_details(self) -> str:
        """Ürünün okunabilir özetini döndürür."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, price={self._price})"


class Perishable(ABC):
    """Son kullanma tarihi olan ürünler."""

    @property
    @abstractmethod
    def expiration_date(self) -> date:
        ...

    def is_expired(self, reference_date: Optional[date] = None) -> bool:
        today = reference_date or date.today()
        return self.expiration_date < today


class Shippable(ABC):
    """Ağırlığı ve kargo ücreti olan ürünler."""

    @property
    @abstractmethod
    def weight(self) -> Decimal:
        ...

    @abstractmethod
    def calculate_shipping_cost(self) -> Decimal:
        ...


class FoodProduct(Product, Perishable, Shippable):
    """Gıda ürünü: bozulabilir ve kargolanabilir."""

    SHIPPING_COST = Decimal("10")

    def __init__(
        self,
        name: str,
        category: Category,
        price: Decimal | int | float | str,
        expiration_date: date,
        weight: Decimal | int | float | str = Decimal("0"),
        product_id: Optional[uuid.UUID] = None,
    ):
        super().__init__(name, category, price, product_id)
        if expiration_date is None:
            raise InvalidArgumentError("Son kullanma tarihi boş olamaz")
        self._expiration_date = expiration_date
        self._weight = _require_non_negative(_to_decimal(weight, "Ağırlık"), "Ağırlık")

    @property
    def expiration_date(self) -> date:
        return self._expiration_date

    @property
    def weight(self) -> Decimal:
        return self._weight

    def calculate_shipping_cost(self) -> Decimal:
        return self.SHIPPING_COST

    def product_details(self) -> str:
        return f"Food: {self.name}, Expires: {self._expiration_date.isoformat()}, Weight: {self._weight}"


class ElectronicsProduct(Product, Shippable):
    """Elektronik ürün: garantili ve kargolanabilir.

    Kargo ücreti 79; 5 birimden ağır ürünlere 49 ek ücret uygulanır.
    """

    BASE_SHIPPING_COST = Decimal("79")
    HEAVY_SURCHARGE = Decimal("49")
    HEAVY_WEIGHT_LIMIT = Decimal("5.0")

    def __init__(
        self,
        name: str,
        category: Category,
        price: Decimal | int | float | str,
        warranty_months: int,
        weight: Decimal | int | float | str,
        product_id: Optional[uuid.UUID] = None,
    ):
        super().__init__(name, category, price, product_id)
        if warranty_months is None or warranty_months < 0:
            raise InvalidArgumentError("Garanti süresi negatif olamaz")
        self._warranty_months = warranty_months
        self._weight = _require_non_negative(_to_decimal(weight, "Ağırlık"), "Ağırlık")

    @property
    def warranty_months(self) -> int:
        return self._warranty_months

    @property
    def weight(self) -> Decimal:
        return self._weight

    def calculate_shipping_cost(self) -> Decimal:
        if self._weight > self.HEAVY_WEIGHT_LIMIT:
            return self.BASE_SHIPPING_COST + self.HEAVY_SURCHARGE
        return self.BASE_SHIPPING_COST

    def product_details(self) -> str:
        return f"Electronics: {self.name}, Warranty: {self._warranty_months} months"
