"""Parsing and formatting of PostgreSQL date and time literals."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

DATE_FORMAT = "2006-01-02"
TIME_FORMAT = "15:04:05.999999999"

_DATE = r"(\d{4})-(\d{2})-(\d{2})"
_CLOCK = r"(\d{2}):(\d{2}):(\d{2})(?:\.(\d{1,9}))?"

_DATE_RE = re.compile(_DATE, re.ASCII)
_CLOCK_RE = re.compile(_CLOCK, re.ASCII)
_TIMESTAMP_RE = re.compile(_DATE + " " + _CLOCK, re.ASCII)
_OFFSET_HMS_RE = re.compile(r"([+-])(\d{2}):(\d{2}):(\d{2})", re.ASCII)
_OFFSET_HM_RE = re.compile(r"([+-])(\d{2}):(\d{2})", re.ASCII)
_OFFSET_H_RE = re.compile(r"([+-])(\d{2})", re.ASCII)


def _text(b: str | bytes | bytearray) -> str:
    if isinstance(b, (bytes, bytearray, memoryview)):
        return bytes(b).decode("ascii")
    return b


def _match(pattern: re.Pattern[str], s: str) -> re.Match[str]:
    m = pattern.fullmatch(s)
    if m is None:
        raise ValueError(f"cannot parse {s!r} as time")
    return m


def _microseconds(fraction: str | None) -> int:
    if not fraction:
        return 0
    return int(fraction.ljust(6, "0")[:6])


def _offset(s: str) -> timezone:
    for pattern in (_OFFSET_HMS_RE, _OFFSET_HM_RE, _OFFSET_H_RE):
        m = pattern.fullmatch(s)
        if m is None:
            continue
        parts = [int(p) for p in m.groups()[1:]]
        hours, minutes, seconds = (parts + [0, 0])[:3]
        delta = timedelta(hours=hours, minutes=minutes, seconds=seconds)
        if m.group(1) == "-":
            delta = -delta
        return timezone(delta)
    raise ValueError(f"cannot parse {s!r} as time zone offset")


def _timestamp(s: str, tzinfo: timezone | None) -> datetime:
    m = _match(_TIMESTAMP_RE, s)
    year, month, day, hour, minute, second = (int(g) for g in m.groups()[:6])
    return datetime(
        year, month, day, hour, minute, second, _microseconds(m.group(7)), tzinfo=tzinfo
    )


def parse_time(b: str | bytes) -> datetime:
    """Parse a date, time-of-day, timestamp or timestamptz literal.

    Dates and times of day are returned in UTC; a time of day is placed on
    0001-01-01. Timestamps without an offset are taken as local time.
    Raises ValueError when the text is not a valid time.
    """
    s = _text(b)
    n = len(s)
    if n <= len(DATE_FORMAT):
        m = _match(_DATE_RE, s)
        year, month, day = (int(g) for g in m.groups())
        return datetime(year, month, day, tzinfo=timezone.utc)
    if n <= len(TIME_FORMAT):
        m = _match(_CLOCK_RE, s)
        hour, minute, second = (int(g) for g in m.groups()[:3])
        return datetime(
            1, 1, 1, hour, minute, second, _microseconds(m.group(4)), tzinfo=timezone.utc
        )
    for width in (9, 6, 3):
        if s[-width] in "+-":
            return _timestamp(s[:-width], _offset(s[-width:]))
    return _timestamp(s, None).astimezone()


def append_time(tm: datetime, quote: int) -> str:
    """Format a datetime as a timestamptz literal, quoted when quote is 1."""
    if tm.tzinfo is None or tm.utcoffset() is None:
        tm = tm.astimezone()
    total = int(tm.utcoffset().total_seconds())  # type: ignore[union-attr]
    sign = "-" if total < 0 else "+"
    hours, rest = divmod(abs(total), 3600)
    minutes, seconds = divmod(rest, 60)
    fraction = f".{tm.microsecond:06d}".rstrip("0") if tm.microsecond else ""
    text = (
        f"{tm.year:04d}-{tm.month:02d}-{tm.day:02d} "
        f"{tm.hour:02d}:{tm.minute:02d}:{tm.second:02d}{fraction}"
        f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}"
    )
    if quote == 1:
        return f"'{text}'"
    return text