"""Depo analitiği hata tipleri."""

from __future__ import annotations


class WarehouseAnalyticsError(Exception):
    """Paketteki tüm hataların temel sınıfı."""


class InvalidArgumentError(WarehouseAnalyticsError, ValueError):
    """Sorgu veya model parametresi geçersiz."""


class NotFoundError(WarehouseAnalyticsError, LookupError):
    """Kimlik veya ad ile yapılan arama sonuçsuz kaldı."""


class ProductNotFoundError(NotFoundError):
    pass


class WarehouseNotFoundError(NotFoundError):
    pass
