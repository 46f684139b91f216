"""Yuvarlama, yüzdelik ve çeyrekler arası açıklık (IQR) hesapları."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Sequence

TWO_PLACES = Decimal("0.01")


def round_half_up(value: Decimal, places: Decimal = TWO_PLACES) -> Decimal:
    """Decimal değeri yarım yukarı kuralıyla (varsayılan 2 hane) yuvarlar."""
    return value.quantize(places, rounding=ROUND_HALF_UP)


def percentile(sorted_values: Sequence[float], p: float) -> float:
    """Sıralı değerler üzerinde doğrusal enterpolasyonlu yüzdelik.

    index = (p / 100) * (n - 1); tam sayı değilse alt ve üst eleman
    arasında kesirli kısım kadar enterpolasyon yapılır.
    """
    if not sorted_values:
        raise ValueError("Boş liste için yüzdelik hesaplanamaz")
    if not 0 <= p <= 100:
        raise ValueError(f"Yüzdelik 0-100 aralığında olmalı: {p}")

    index = (p / 100.0) * (len(sorted_values) - 1)
    lower = math.floor(index)
    upper = math.ceil(index)
    if lower == upper:
        return sorted_values[lower]
    fraction = index - lower
    return sorted_values[lower] + (sorted_values[upper] - sorted_values[lower]) * fraction


def quartiles(values: Iterable[float]) -> tuple[float, float, float]:
    """(Q1, Q3, IQR) döndürür."""
    ordered = sorted(values)
    q1 = percentile(ordered, 25)
    q3 = percentile(ordered, 75)
    return q1, q3, q3 - q1


def outlier_bounds(values: Iterable[float], threshold: float) -> tuple[float, float]:
    """[Q1 - t*IQR, Q3 + t*IQR] aralığının sınırlarını döndürür."""
    q1, q3, iqr = quartiles(values)
    return q1 - threshold * iqr, q3 + threshold * iqr
