import pytest
from datetime import datetime, timezone, timedelta
from collision_insights.common.utils import parse_timestamp, shift_months, start_of_day, to_local

def test_parse_timestamp_variants():
    assert parse_timestamp("2024-03-10T08:15:00") == datetime(2024, 3, 10, 8, 15)
    assert parse_timestamp("2024-03-10T08:15:00Z").tzinfo is not None
    assert parse_timestamp(datetime(2024, 1, 1)) == datetime(2024, 1, 1)
    assert parse_timestamp("  ") is None
    assert parse_timestamp("garbage") is None
    assert parse_timestamp(None) is None

def test_to_local_strips_tzinfo():
    aware = datetime(2024, 3, 10, 8, 0, tzinfo=timezone(timedelta(hours=3)))
    local = to_local(aware)
    assert local.tzinfo is None
    assert local == aware.astimezone().replace(tzinfo=None)
    naive = datetime(2024, 3, 10, 8, 0)
    assert to_local(naive) is naive

def test_start_of_day():
    assert start_of_day(datetime(2024, 3, 10, 23, 59, 59, 999)) == datetime(2024, 3, 10)

@pytest.mark.parametrize("value, months, expected", [
    (datetime(2024, 5, 31, 6), -1, datetime(2024, 4, 30, 6)),
    (datetime(2024, 1, 15), -1, datetime(2023, 12, 15)),
    (datetime(2024, 2, 29), -12, datetime(2023, 2, 28)),
    (datetime(2023, 11, 30), 3, datetime(2024, 2, 29)),
])
def test_shift_months(value, months, expected):
    assert shift_months(value, months) == expected
