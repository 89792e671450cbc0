"""Агрегирование записей справочника.

:class:`CityStatistics` сворачивает поток записей в два словаря:

1. число вхождений каждого составного ключа (для поиска дубликатов);
2. гистограмму этажей по городам (пять счётчиков, этажи 1-5).

Результат не зависит от порядка записей, поэтому поток можно разбить на
части, посчитать их независимо и объединить через :meth:`CityStatistics.merge`.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from ..data.records import Record
from ..errors import FloorOutOfRangeError

MIN_FLOOR = 1
MAX_FLOOR = 5
FLOOR_COUNT = MAX_FLOOR - MIN_FLOOR + 1


class CityStatistics:
    """Состояние агрегации одного файла-справочника."""

    def __init__(self) -> None:
        self._key_counts: Counter[str] = Counter()
        self._city_floors: dict[str, list[int]] = {}

    @classmethod
    def from_records(cls, records: Iterable[Record]) -> "CityStatistics":
        """Создаёт состояние и сворачивает в него все записи."""

        stats = cls()
        for record in records:
            stats.add_record(record)
        return stats

    def add_record(self, record: Record) -> None:
        """Учитывает одну запись.

        Исключения
        ----------
        FloorOutOfRangeError
            Если этаж вне диапазона 1-5; состояние при этом не меняется.
        """

        if not MIN_FLOOR <= record.floor <= MAX_FLOOR:
            raise FloorOutOfRangeError(record, MIN_FLOOR, MAX_FLOOR)

        self._key_counts[record.composite_key] += 1
        floors = self._city_floors.setdefault(record.city, [0] * FLOOR_COUNT)
        floors[record.floor - MIN_FLOOR] += 1

    def merge(self, other: "CityStatistics") -> "CityStatistics":
        """Добавляет к текущему состоянию другое (сумма по ключам и ячейкам)."""

        self._key_counts.update(other._key_counts)
        for city, other_floors in other._city_floors.items():
            floors = self._city_floors.setdefault(city, [0] * FLOOR_COUNT)
            for i, count in enumerate(other_floors):
                floors[i] += count
        return self

    @property
    def record_count(self) -> int:
        return sum(self._key_counts.values())

    def key_counts(self) -> dict[str, int]:
        return dict(self._key_counts)

    def duplicates(self) -> dict[str, int]:
        """Составные ключи, встретившиеся больше одного раза."""

        return {key: count for key, count in self._key_counts.items() if count > 1}

    def cities(self) -> dict[str, tuple[int, ...]]:
        """Гистограммы этажей по городам (индекс 0 соответствует 1-му этажу)."""

        return {city: tuple(floors) for city, floors in self._city_floors.items()}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CityStatistics):
            return NotImplemented
        return self._key_counts == other._key_counts and self._city_floors == other._city_floors

    def __repr__(self) -> str:
        return (
            f"CityStatistics(records={self.record_count}, "
            f"keys={len(self._key_counts)}, cities={len(self._city_floors)})"
        )
