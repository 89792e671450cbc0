"""Отчёт по итогам агрегации."""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from .aggregator import FLOOR_COUNT, MIN_FLOOR, CityStatistics

DUPLICATES_TITLE = "Duplicate records:"
CITIES_TITLE = "City statistics:"

FLOOR_COLUMNS = [f"floor{MIN_FLOOR + i}" for i in range(FLOOR_COUNT)]


@dataclass(frozen=True)
class Report:
    """Готовый отчёт: дубликаты и статистика по городам.

    Оба списка уже отсортированы (по ключу и по названию города), так что
    отчёт для одного и того же набора записей всегда одинаков.
    """

    duplicates: tuple[tuple[str, int], ...]
    cities: tuple[tuple[str, tuple[int, ...]], ...]
    record_count: int = 0

    @classmethod
    def from_statistics(cls, stats: CityStatistics) -> "Report":
        return cls(
            duplicates=tuple(sorted(stats.duplicates().items())),
            cities=tuple(sorted(stats.cities().items())),
            record_count=stats.record_count,
        )

    def render(self) -> str:
        """Текстовое представление отчёта."""

        lines = [DUPLICATES_TITLE]
        lines.extend(f"{key} - {count} times" for key, count in self.duplicates)
        lines.append("")
        lines.append(CITIES_TITLE)
        for city, floors in self.cities:
            counters = ", ".join(f"{name}={count}" for name, count in zip(FLOOR_COLUMNS, floors))
            lines.append(f"{city}: {counters}")
        return "\n".join(lines)

    def to_frames(self) -> tuple[pd.DataFrame, pd.DataFrame]:
        """Возвращает отчёт в виде двух таблиц: дубликаты и статистика по городам."""

        duplicates = pd.DataFrame(list(self.duplicates), columns=["record", "count"])
        cities = pd.DataFrame(
            [floors for _, floors in self.cities],
            index=pd.Index([city for city, _ in self.cities], name="city"),
            columns=FLOOR_COLUMNS,
            dtype="int64",
        )
        return duplicates, cities

    def __str__(self) -> str:
        return self.render()
