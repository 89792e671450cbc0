"""CityStats: статистика по справочникам адресов.

Пакет читает файл-справочник (CSV или XML) с записями вида
«город, улица, дом, этаж», находит дублирующиеся записи и считает,
сколько записей каждого города приходится на этажи с 1 по 5.
"""

from .errors import (
    CityStatsError,
    FloorOutOfRangeError,
    MalformedDocumentError,
    MalformedRecordError,
    UnsupportedFormatError,
)
from .processor import FileFormat, detect_format, process

__all__ = [
    "data",
    "analysis",
    "utils",
    "CityStatsError",
    "FloorOutOfRangeError",
    "MalformedDocumentError",
    "MalformedRecordError",
    "UnsupportedFormatError",
    "FileFormat",
    "detect_format",
    "process",
]
