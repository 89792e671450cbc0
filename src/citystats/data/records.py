"""Запись справочника адресов."""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..errors import MalformedRecordError

FIELD_COUNT = 4
KEY_DELIMITER = ","

_FLOOR_RE = re.compile(r"\d+")


class Record(BaseModel):
    """Одна запись справочника: город, улица, дом, этаж."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    city: str = Field(..., min_length=1, description="Город")
    street: str = Field(..., min_length=1, description="Улица")
    house: str = Field(..., min_length=1, description="Дом")
    floor: int = Field(..., gt=0, description="Этаж, начиная с 1")

    @classmethod
    def from_fields(cls, *fields: str) -> "Record":
        """Строит запись из сырых текстовых полей.

        Параметры
        ---------
        *fields:
            Поля в порядке город, улица, дом, этаж. Лишние поля игнорируются.

        Исключения
        ----------
        MalformedRecordError
            Если полей меньше четырёх, текстовое поле пустое или этаж
            не является положительным целым числом.
        """

        if len(fields) < FIELD_COUNT:
            raise MalformedRecordError(
                f"Expected {FIELD_COUNT} fields, got {len(fields)}: {fields!r}"
            )

        city, street, house, floor_raw = (str(value).strip() for value in fields[:FIELD_COUNT])
        if not _FLOOR_RE.fullmatch(floor_raw):
            raise MalformedRecordError(f"Floor is not a positive integer: {floor_raw!r}")

        try:
            return cls(city=city, street=street, house=house, floor=int(floor_raw))
        except ValidationError as e:
            raise MalformedRecordError(
                f"Invalid record {fields[:FIELD_COUNT]!r}: {e.error_count()} validation error(s)"
            ) from e

    @property
    def composite_key(self) -> str:
        """Ключ для поиска дубликатов: ``город,улица,дом,этаж``."""

        return KEY_DELIMITER.join((self.city, self.street, self.house, str(self.floor)))
