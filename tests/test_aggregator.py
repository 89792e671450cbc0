"""Тесты агрегатора."""

import random

import pytest

from citystats.analysis import CityStatistics
from citystats.data import Record
from citystats.errors import FloorOutOfRangeError


def make(city="Metropolis", street="Main St", house="12", floor=3):
    return Record(city=city, street=street, house=house, floor=floor)


@pytest.fixture
def records():
    rng = random.Random(42)
    return [
        make(city=rng.choice(["A", "B", "C"]), house=str(rng.randint(1, 4)), floor=rng.randint(1, 5))
        for _ in range(300)
    ]


def test_first_occurrence_counts_as_one():
    stats = CityStatistics()
    stats.add_record(make())
    assert stats.key_counts() == {"Metropolis,Main St,12,3": 1}
    assert stats.duplicates() == {}


def test_duplicates_and_histogram():
    stats = CityStatistics.from_records([make(), make(), make(floor=1)])
    assert stats.duplicates() == {"Metropolis,Main St,12,3": 2}
    assert stats.cities() == {"Metropolis": (1, 0, 2, 0, 0)}
    assert stats.record_count == 3


@pytest.mark.parametrize("floor", [6, 9, 100])
def test_floor_out_of_range(floor):
    stats = CityStatistics()
    with pytest.raises(FloorOutOfRangeError) as exc_info:
        stats.add_record(make(floor=floor))
    assert exc_info.value.record.floor == floor
    assert stats.record_count == 0
    assert stats.cities() == {}


def test_histogram_total_equals_record_count(records):
    stats = CityStatistics.from_records(records)
    assert sum(sum(floors) for floors in stats.cities().values()) == len(records)


def test_duplicate_counts_match_tuples(records):
    stats = CityStatistics.from_records(records)
    for key, count in stats.duplicates().items():
        assert count > 1
        assert count == sum(1 for r in records if r.composite_key == key)


def test_order_independent(records):
    shuffled = records[:]
    random.Random(7).shuffle(shuffled)
    assert CityStatistics.from_records(records) == CityStatistics.from_records(shuffled)


def test_merge_equals_single_fold(records):
    left = CityStatistics.from_records(records[:120])
    right = CityStatistics.from_records(records[120:])
    assert right.merge(left) == CityStatistics.from_records(records)
