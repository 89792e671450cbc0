"""Обработка одного файла-справочника.

Единственная точка входа для вызывающего кода, :func:`process`:
по расширению выбирается парсер, записи сворачиваются в
:class:`~citystats.analysis.CityStatistics`, результат возвращается как
:class:`~citystats.analysis.Report`.
"""

from __future__ import annotations

import logging
from collections import deque
from concurrent.futures import Future, ThreadPoolExecutor
from enum import Enum
from itertools import islice
from pathlib import Path
from time import perf_counter
from typing import Callable, Iterable, Iterator, Optional, Union

from .analysis import CityStatistics, Report
from .data import Record, iter_csv_records, iter_xml_records
from .errors import UnsupportedFormatError
from .utils.config import settings

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class FileFormat(str, Enum):
    CSV = "csv"
    XML = "xml"


_PARSERS: dict[FileFormat, Callable[..., Iterator[Record]]] = {
    FileFormat.CSV: lambda path, encoding: iter_csv_records(path, encoding=encoding),
    FileFormat.XML: lambda path, encoding: iter_xml_records(path),
}


def file_extension(path: PathLike) -> str:
    """Часть имени файла после последней точки или пустая строка."""

    name = Path(path).name
    _, dot, extension = name.rpartition(".")
    return extension if dot else ""


def detect_format(path: PathLike) -> FileFormat:
    """Определяет формат файла по расширению (без учёта регистра).

    Исключения
    ----------
    UnsupportedFormatError
        Если расширение не ``csv`` и не ``xml``.
    """

    extension = file_extension(path)
    try:
        return FileFormat(extension.lower())
    except ValueError:
        raise UnsupportedFormatError(extension) from None


def iter_records(path: PathLike, *, encoding: Optional[str] = None) -> Iterator[Record]:
    """Возвращает ленивый поток записей файла подходящим парсером."""

    file_format = detect_format(path)
    return _PARSERS[file_format](path, encoding or settings.encoding)


def _batches(records: Iterable[Record], size: int) -> Iterator[list[Record]]:
    iterator = iter(records)
    while batch := list(islice(iterator, size)):
        yield batch


def _fold_parallel(records: Iterable[Record], workers: int, batch_size: int) -> CityStatistics:
    """Сворачивает записи пакетами в пуле потоков и объединяет частичные итоги.

    Частичные итоги объединяются в порядке отправки пакетов; в работе
    одновременно не больше ``2 * workers`` пакетов.
    """

    total = CityStatistics()
    pending: deque[Future[CityStatistics]] = deque()
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="citystats") as pool:
        for i, batch in enumerate(_batches(records, batch_size)):
            logger.debug(f"Пакет {i}: {len(batch)} записей")
            pending.append(pool.submit(CityStatistics.from_records, batch))
            if len(pending) >= 2 * workers:
                total.merge(pending.popleft().result())
        while pending:
            total.merge(pending.popleft().result())
    return total


def process(
    path: PathLike,
    *,
    workers: Optional[int] = None,
    batch_size: Optional[int] = None,
    encoding: Optional[str] = None,
) -> Report:
    """Обрабатывает файл-справочник и возвращает отчёт.

    Параметры
    ---------
    path:
        Путь до файла ``.csv`` или ``.xml``; существование файла проверяет
        вызывающая сторона.
    workers:
        Число потоков агрегации. При значении 1 записи сворачиваются
        последовательно. По умолчанию берётся из настроек.
    batch_size:
        Размер пакета записей при параллельной агрегации.
    encoding:
        Кодировка CSV-файла.

    Исключения
    ----------
    UnsupportedFormatError, MalformedRecordError, MalformedDocumentError, FloorOutOfRangeError
        Частичный отчёт в этих случаях не строится.
    """

    workers = settings.workers if workers is None else workers
    batch_size = settings.batch_size if batch_size is None else batch_size
    if workers < 1 or batch_size < 1:
        raise ValueError("workers and batch_size must be positive")

    file_format = detect_format(path)
    logger.info(f"Обработка файла {path} (формат {file_format.value}, потоков: {workers})")

    start_time = perf_counter()
    records = iter_records(path, encoding=encoding)
    if workers == 1:
        stats = CityStatistics.from_records(records)
    else:
        stats = _fold_parallel(records, workers, batch_size)
    elapsed_ms = (perf_counter() - start_time) * 1000

    logger.info(f"Файл {path}: {stats.record_count} записей за {elapsed_ms:.0f} мс")
    return Report.from_statistics(stats)
