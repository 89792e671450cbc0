"""Исключения CityStats.

Все ошибки уровня файла наследуются от :class:`CityStatsError`, чтобы
вызывающая сторона (например, CLI) могла обработать их одним ``except``.
Отброшенные строки CSV и неполные элементы XML ошибками не считаются.
"""

from __future__ import annotations

from typing import Any


class CityStatsError(Exception):
    """Базовая ошибка обработки файла-справочника."""


class UnsupportedFormatError(CityStatsError):
    """Расширение файла не соответствует ни одному поддерживаемому формату."""

    def __init__(self, extension: str) -> None:
        self.extension = extension
        super().__init__("Unsupported file format. Only XML and CSV are supported.")


class MalformedRecordError(CityStatsError, ValueError):
    """Из набора полей нельзя построить запись."""


class MalformedDocumentError(CityStatsError):
    """Документ целиком не удалось разобрать (например, битая XML-разметка)."""

    def __init__(self, path: Any, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot parse document {path}: {reason}")


class FloorOutOfRangeError(CityStatsError, ValueError):
    """Этаж записи вне поддерживаемого диапазона гистограммы."""

    def __init__(self, record: Any, low: int, high: int) -> None:
        self.record = record
        super().__init__(
            f"Floor {record.floor} is outside the supported range {low}-{high} "
            f"(record {record.composite_key})"
        )
