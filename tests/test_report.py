"""Тесты отчёта."""

from citystats.analysis import CityStatistics, Report
from citystats.data import Record


def build(*rows):
    return Report.from_statistics(CityStatistics.from_records(Record.from_fields(*row) for row in rows))


def test_render_example():
    report = build(("Metropolis", "Main St", "12", "3"), ("Metropolis", "Main St", "12", "3"))
    assert report.render() == (
        "Duplicate records:\n"
        "Metropolis,Main St,12,3 - 2 times\n"
        "\n"
        "City statistics:\n"
        "Metropolis: floor1=0, floor2=0, floor3=2, floor4=0, floor5=0"
    )
    assert str(report) == report.render()


def test_sorted_and_only_duplicates():
    report = build(
        ("B", "s", "1", "1"),
        ("B", "s", "1", "1"),
        ("A", "s", "1", "2"),
        ("A", "s", "1", "2"),
        ("A", "s", "9", "2"),
    )
    assert report.duplicates == (("A,s,1,2", 2), ("B,s,1,1", 2))
    assert [city for city, _ in report.cities] == ["A", "B"]
    assert report.record_count == 5


def test_empty_report():
    report = Report.from_statistics(CityStatistics())
    assert report.render() == "Duplicate records:\n\nCity statistics:"


def test_to_frames():
    report = build(("A", "s", "1", "2"), ("A", "s", "1", "2"), ("B", "s", "1", "5"))
    duplicates, cities = report.to_frames()
    assert duplicates.to_dict("records") == [{"record": "A,s,1,2", "count": 2}]
    assert list(cities.columns) == ["floor1", "floor2", "floor3", "floor4", "floor5"]
    assert cities.loc["A"].tolist() == [0, 2, 0, 0, 0]
    assert cities.loc["B", "floor5"] == 1


def test_to_frames_empty():
    duplicates, cities = Report.from_statistics(CityStatistics()).to_frames()
    assert duplicates.empty
    assert cities.empty
