"""Чтение справочника в формате CSV.

Формат: разделитель ``;``, первая строка (заголовок) пропускается,
колонки город, улица, дом, этаж; лишние колонки игнорируются.
Строки, в которых меньше четырёх полей, отбрасываются без ошибки.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, Union

from ..errors import MalformedDocumentError
from .records import FIELD_COUNT, Record

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

DELIMITER = ";"


def _split_line(line: str) -> list[str]:
    """Делит строку по ``;`` и отбрасывает пустые поля в конце (``A;B;1;`` -> 3 поля)."""

    parts = line.rstrip("\r\n").split(DELIMITER)
    while parts and parts[-1] == "":
        parts.pop()
    return parts


def iter_csv_records(path: PathLike, *, encoding: str = "utf-8") -> Iterator[Record]:
    """Лениво читает записи из CSV-файла.

    Файл читается построчно; генератор однопроходный, для повторного
    чтения нужно вызвать функцию заново.

    Исключения
    ----------
    MalformedRecordError
        Если строка содержит четыре поля, но этаж или другое поле некорректны.
    MalformedDocumentError
        Если файл не читается в указанной кодировке.
    """

    path = Path(path)
    dropped = 0
    with path.open("r", encoding=encoding, newline="") as f:
        try:
            next(f, None)
            for line in f:
                parts = _split_line(line)
                if len(parts) < FIELD_COUNT:
                    dropped += 1
                    continue
                yield Record.from_fields(*parts)
        except UnicodeDecodeError as e:
            raise MalformedDocumentError(path, str(e)) from e

    if dropped:
        logger.debug(f"{path}: отброшено строк с неполным набором полей: {dropped}")
