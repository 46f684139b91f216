"""Kargo gruplama - First-fit decreasing kutu yerleştirme.

Ürünler ağırlığa göre azalan sırada dizilir (eşit ağırlıklılar depo
sırasını korur) ve her biri sığdığı ilk gruba yerleştirilir; sığmazsa
yeni grup açılır. Gruplar sonradan yeniden dengelenmez, sonuç optimal
olmak zorunda değildir.

Sığma kontrolü 2 haneye yarım yukarı yuvarlanmış grup ağırlığı, ürün
ağırlığı ve sınır üzerinden yapılır. Bu yüzden bir grubun yuvarlanmamış
toplam ağırlığı sınırı yuvarlama payı kadar aşabilir (ör. 3 x 3.334 ile
sınır 10 -> 10.002). Tek başına sınırdan ağır bir ürün kendi grubuna
yerleştirilir.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Sequence

from warehouse_analytics.analyzers.statistics import round_half_up
from warehouse_analytics.errors import InvalidArgumentError
from warehouse_analytics.models.analysis import ShippingGroup
from warehouse_analytics.models.product import Shippable

logger = logging.getLogger(__name__)


def first_fit_decreasing(items: Sequence[Shippable], max_weight: Decimal) -> list[ShippingGroup]:
    if max_weight is None:
        raise InvalidArgumentError("Maksimum grup ağırlığı boş olamaz")
    if not isinstance(max_weight, Decimal):
        max_weight = Decimal(str(max_weight))
    if max_weight < 0:
        raise InvalidArgumentError(f"Maksimum grup ağırlığı negatif olamaz: {max_weight}")

    capacity = round_half_up(max_weight)

    # sorted() kararlıdır: eşit ağırlıklar giriş sırasını korur
    ordered = sorted(items, key=lambda item: item.weight, reverse=True)

    bins: list[list[Shippable]] = []
    bin_weights: list[Decimal] = []
    for item in ordered:
        item_weight = round_half_up(item.weight)
        for index, current in enumerate(bin_weights):
            if round_half_up(current) + item_weight <= capacity:
                bins[index].append(item)
                bin_weights[index] = current + item.weight
                break
        else:
            if item_weight > capacity:
                logger.warning(
                    "Ürün tek başına grup sınırını aşıyor, ayrı gruba alındı: %s (%s > %s)",
                    getattr(item, "name", item), item_weight, capacity,
                )
            bins.append([item])
            bin_weights.append(item.weight)

    groups = [ShippingGroup(items=tuple(b)) for b in bins]
    logger.info(
        "%d ürün %d kargo grubuna yerleştirildi (sınır: %s)",
        len(ordered), len(groups), capacity,
    )
    return groups
