"""Чтение справочника в формате XML.

Записи задаются элементами ``<item city=".." street=".." house=".." floor=".."/>``;
порядок атрибутов не важен, текстовое содержимое не используется.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterator, Union

from ..errors import MalformedDocumentError
from .records import Record

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

ITEM_TAG = "item"
ITEM_ATTRIBUTES = ("city", "street", "house", "floor")


def _local_name(tag: str) -> str:
    # "{uri}item" -> "item"
    return tag.rpartition("}")[2]


def iter_xml_records(path: PathLike) -> Iterator[Record]:
    """Лениво читает записи из XML-файла.

    Элементы ``item`` без любого из четырёх атрибутов пропускаются.
    Разобранные элементы ``item`` удаляются из родителя, поэтому записи
    не накапливаются в дереве документа.

    Исключения
    ----------
    MalformedDocumentError
        Если разметку не удаётся разобрать.
    MalformedRecordError
        Если значение атрибута некорректно (например, этаж не число).
    """

    path = Path(path)
    skipped = 0
    parents: list[ET.Element] = []
    try:
        for event, elem in ET.iterparse(str(path), events=("start", "end")):
            if event == "start":
                parents.append(elem)
                continue
            parents.pop()
            if _local_name(elem.tag) != ITEM_TAG:
                continue
            values = [elem.get(name) for name in ITEM_ATTRIBUTES]
            if parents:
                parents[-1].remove(elem)
            if any(value is None for value in values):
                skipped += 1
                continue
            yield Record.from_fields(*values)
    except ET.ParseError as e:
        raise MalformedDocumentError(path, str(e)) from e

    if skipped:
        logger.debug(f"{path}: пропущено элементов item без обязательных атрибутов: {skipped}")
