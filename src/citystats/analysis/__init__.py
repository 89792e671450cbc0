"""Подпакет агрегирования записей и построения отчёта."""

from .aggregator import CityStatistics
from .report import Report

__all__ = [
    "CityStatistics",
    "Report",
]
