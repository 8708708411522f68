from datetime import datetime, timedelta, timezone

import pytest

from pgvalues.timefmt import append_time, parse_time


def test_parse_timestamptz_hour_offset():
    got = parse_time(b"2001-02-03 04:05:06+07")
    assert got == datetime(2001, 2, 3, 4, 5, 6, tzinfo=timezone(timedelta(hours=7)))
    assert got.utcoffset() == timedelta(hours=7)


def test_parse_timestamptz_minute_offset():
    got = parse_time("2001-02-03 04:05:06.5-05:30")
    assert got.utcoffset() == -timedelta(hours=5, minutes=30)
    assert got.microsecond == 500000


def test_parse_timestamptz_second_offset():
    got = parse_time("2001-02-03 04:05:06.123456789+01:02:03")
    assert got.utcoffset() == timedelta(hours=1, minutes=2, seconds=3)
    assert got.microsecond == 123456


def test_parse_date():
    assert parse_time("2001-02-03") == datetime(2001, 2, 3, tzinfo=timezone.utc)


def test_parse_time_of_day():
    got = parse_time("04:05:06.25")
    assert (got.hour, got.minute, got.second, got.microsecond) == (4, 5, 6, 250000)
    assert got.tzinfo == timezone.utc


def test_parse_timestamp_without_zone_is_local():
    got = parse_time("2001-02-03 04:05:06")
    assert got.tzinfo is not None
    assert got.replace(tzinfo=None) == datetime(2001, 2, 3, 4, 5, 6)


@pytest.mark.parametrize("text", ["", "garbage", "2001-13-03", "2001-02-03 25:00:00+07"])
def test_parse_invalid(text):
    with pytest.raises(ValueError):
        parse_time(text)


def test_append_time_utc():
    tm = datetime(2001, 2, 3, 4, 5, 6, tzinfo=timezone.utc)
    assert append_time(tm, 0) == "2001-02-03 04:05:06+00:00:00"
    assert append_time(tm, 1) == "'2001-02-03 04:05:06+00:00:00'"


def test_append_time_fraction_and_negative_offset():
    tm = datetime(2001, 2, 3, 4, 5, 6, 120000, tzinfo=timezone(-timedelta(hours=7)))
    assert append_time(tm, 0) == "2001-02-03 04:05:06.12-07:00:00"


@pytest.mark.parametrize(
    "tm",
    [
        datetime(2001, 2, 3, 4, 5, 6, tzinfo=timezone.utc),
        datetime(1999, 12, 31, 23, 59, 59, 999999, tzinfo=timezone(timedelta(hours=3))),
        datetime(2020, 6, 1, 0, 0, 0, 1, tzinfo=timezone(-timedelta(hours=9, minutes=30))),
    ],
)
def test_round_trip(tm):
    assert parse_time(append_time(tm, 0)) == tm