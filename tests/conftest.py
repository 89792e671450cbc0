"""Общие фикстуры тестов CityStats."""

from pathlib import Path

import pytest


@pytest.fixture
def write_file(tmp_path: Path):
    """Записывает текст во временный файл и возвращает путь."""

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_csv(write_file) -> Path:
    return write_file(
        "addresses.csv",
        "city;street;house;floor\n"
        "Metropolis;Main St;12;3\n"
        "Metropolis;Main St;12;3\n"
        "Gotham;Park Ave;7;1\n"
        "Gotham;Park Ave;8;5\n"
        "Gotham;Park Ave;7;1\n"
        "Gotham;Park Ave;7;1\n",
    )


@pytest.fixture
def sample_xml(write_file) -> Path:
    return write_file(
        "addresses.xml",
        '<?xml version="1.0" encoding="utf-8"?>\n'
        "<root>\n"
        '  <item city="Metropolis" street="Main St" house="12" floor="3"/>\n'
        '  <item floor="3" house="12" street="Main St" city="Metropolis"/>\n'
        '  <item city="Gotham" street="Park Ave" house="7" floor="1"/>\n'
        '  <item city="Gotham" street="Park Ave" house="8" floor="5"/>\n'
        '  <item city="Gotham" street="Park Ave" house="7" floor="1"/>\n'
        '  <item city="Gotham" street="Park Ave" house="7" floor="1"/>\n'
        "</root>\n",
    )
