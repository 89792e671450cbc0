"""Командная строка CityStats.

Запуск из корня проекта (при активированном .venv):

    citystats data/addresses.csv data/addresses.xml
    python -m citystats --workers 4 data/addresses.csv

Без аргументов запускается интерактивный режим: путь до файла вводится
построчно, ``exit`` завершает работу.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from time import perf_counter
from typing import Optional, Sequence

from .analysis import Report
from .analysis.report import CITIES_TITLE, DUPLICATES_TITLE
from .errors import CityStatsError
from .processor import process
from .utils.config import settings

logger = logging.getLogger(__name__)

PROMPT = "Enter a path to the reference file or 'exit' to quit:"
EXIT_COMMAND = "exit"


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"ожидается положительное число, получено {value}")
    return number


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="citystats",
        description=(
            "CityStats: поиск дублирующихся записей и статистика этажей "
            "по городам для справочников CSV и XML."
        ),
    )

    parser.add_argument(
        "paths",
        nargs="*",
        help="Пути к файлам-справочникам. Без путей запускается интерактивный режим.",
    )
    parser.add_argument("--workers", type=_positive_int, default=None, help="Число потоков агрегации.")
    parser.add_argument("--batch-size", type=_positive_int, default=None, help="Размер пакета записей.")
    parser.add_argument("--encoding", default=None, help="Кодировка CSV-файлов.")
    parser.add_argument(
        "--format",
        choices=("text", "table"),
        default="text",
        help="Вид отчёта: текст или таблицы pandas.",
    )
    parser.add_argument("--log-level", default=None, help="Уровень логирования (INFO, DEBUG, ...).")

    return parser.parse_args(argv)


def format_report(report: Report, output_format: str) -> str:
    if output_format == "text":
        return report.render()

    duplicates, cities = report.to_frames()
    return "\n".join(
        [
            DUPLICATES_TITLE,
            duplicates.to_string(index=False) if not duplicates.empty else "(none)",
            "",
            CITIES_TITLE,
            cities.to_string() if not cities.empty else "(none)",
        ]
    )


def handle_file(path: Path, args: argparse.Namespace) -> bool:
    """Обрабатывает один файл и печатает отчёт. Возвращает ``True`` при успехе."""

    if not path.is_file():
        print(f"File not found: {path}")
        return False

    start_time = perf_counter()
    try:
        report = process(
            path,
            workers=args.workers,
            batch_size=args.batch_size,
            encoding=args.encoding,
        )
    except CityStatsError as e:
        print(e)
        return False
    except OSError as e:
        logger.error(f"Ошибка при обработке файла {path}: {e}", exc_info=True)
        print(f"An error occurred while processing the file: {e}")
        return False

    print(format_report(report, args.format))
    print()
    logger.info(f"Время обработки файла {path}: {(perf_counter() - start_time) * 1000:.0f} мс")
    return True


def run_interactive(args: argparse.Namespace) -> None:
    while True:
        print(PROMPT)
        try:
            line = input().strip()
        except (EOFError, KeyboardInterrupt):
            break

        if line.lower() == EXIT_COMMAND:
            break
        if not line:
            continue

        handle_file(Path(line), args)

    print("Shutting down.")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=(args.log_level or settings.log_level).upper(),
    )

    if not args.paths:
        run_interactive(args)
        return 0

    results = [handle_file(Path(p), args) for p in args.paths]
    return 0 if all(results) else 1


if __name__ == "__main__":  # pragma: no cover - CLI-вход
    raise SystemExit(main())
