"""Analiz eşikleri ve ortam değişkenlerinden yükleme."""

from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Callable, Mapping, Optional, TypeVar

from warehouse_analytics import env_loader  # noqa: F401  (.env yüklemesi)
from warehouse_analytics.errors import InvalidArgumentError

T = TypeVar("T")

ENV_HIGH_VALUE_THRESHOLD = "WAREHOUSE_HIGH_VALUE_THRESHOLD"
ENV_HIGH_VALUE_WARNING_PERCENTAGE = "WAREHOUSE_HIGH_VALUE_WARNING_PERCENTAGE"
ENV_MIN_CATEGORY_DIVERSITY = "WAREHOUSE_MIN_CATEGORY_DIVERSITY"
ENV_OUTLIER_THRESHOLD = "WAREHOUSE_OUTLIER_THRESHOLD"


def _read(env: Mapping[str, str], key: str, parse: Callable[[str], T], default: T) -> T:
    raw = env.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        return parse(raw.strip())
    except (ValueError, InvalidOperation) as e:
        raise InvalidArgumentError(f"Geçersiz ayar değeri {key}={raw!r}") from e


@dataclass
class AnalyzerConfig:
    # Bu fiyat ve üzerindeki ürünler yüksek değerli sayılır
    high_value_threshold: Decimal = Decimal("1000")
    high_value_warning_percentage: float = 70.0
    minimum_category_diversity: int = 2
    # IQR çarpanı
    outlier_threshold: float = 1.5

    def __post_init__(self) -> None:
        if self.high_value_threshold < 0:
            raise InvalidArgumentError("Yüksek değer eşiği negatif olamaz")
        if not 0 <= self.high_value_warning_percentage <= 100:
            raise InvalidArgumentError("Uyarı yüzdesi 0-100 aralığında olmalı")
        if self.minimum_category_diversity < 0:
            raise InvalidArgumentError("Minimum kategori çeşitliliği negatif olamaz")
        if self.outlier_threshold < 0:
            raise InvalidArgumentError("Aykırı değer çarpanı negatif olamaz")

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> AnalyzerConfig:
        """Ayarları ortam değişkenlerinden okur; eksik olanlar varsayılanda kalır."""
        env = os.environ if env is None else env
        defaults = cls()
        return cls(
            high_value_threshold=_read(
                env, ENV_HIGH_VALUE_THRESHOLD, Decimal, defaults.high_value_threshold
            ),
            high_value_warning_percentage=_read(
                env, ENV_HIGH_VALUE_WARNING_PERCENTAGE, float, defaults.high_value_warning_percentage
            ),
            minimum_category_diversity=_read(
                env, ENV_MIN_CATEGORY_DIVERSITY, int, defaults.minimum_category_diversity
            ),
            outlier_threshold=_read(
                env, ENV_OUTLIER_THRESHOLD, float, defaults.outlier_threshold
            ),
        )
