"""Подпакет для чтения файлов-справочников в поток записей."""

from .csv_parser import iter_csv_records
from .records import Record
from .xml_parser import iter_xml_records

__all__ = [
    "Record",
    "iter_csv_records",
    "iter_xml_records",
]
