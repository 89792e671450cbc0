"""Настройки CityStats.

Значения читаются из переменных окружения с префиксом ``CITYSTATS_`` или
из файла ``.env``. Явные аргументы :func:`citystats.process` и флаги CLI
имеют приоритет над настройками.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Настройки обработки файлов-справочников."""

    workers: int = Field(default=1, ge=1, description="Число потоков агрегации")
    batch_size: int = Field(default=10_000, ge=1, description="Размер пакета записей для одного потока")
    encoding: str = Field(default="utf-8", description="Кодировка CSV-файлов")
    log_level: str = Field(default="INFO", description="Уровень логирования CLI")

    class Config:
        env_prefix = "CITYSTATS_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()
