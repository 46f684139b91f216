from warehouse_analytics.analyzers.shipping import first_fit_decreasing
from warehouse_analytics.analyzers.statistics import percentile, quartiles, round_half_up
from warehouse_analytics.analyzers.warehouse_analyzer import WarehouseAnalyzer

__all__ = [
    "WarehouseAnalyzer",
    "first_fit_decreasing",
    "percentile",
    "quartiles",
    "round_half_up",
]
