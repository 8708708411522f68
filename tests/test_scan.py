from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import pytest

from pgvalues.append import append_bytes
from pgvalues.scan import ScanError, is_sql_scanner, scan, scan_bytes
from pgvalues.timefmt import append_time


class CustomStrSlice:
    def __init__(self):
        self.items = None

    def scan(self, src):
        if src is None:
            self.items = None
            return
        self.items = src.decode().split("\n") if src else []


@dataclass
class Struct:
    foo: str


def test_scan_nil_type():
    with pytest.raises(ScanError, match=r"pg: Scan\(nil\)"):
        scan(None, b"1")


def test_scan_unsupported_type():
    with pytest.raises(ScanError, match=r"pg: Scan\(unsupported complex\)"):
        scan(complex, b"1")


def test_scan_int():
    assert scan(int, b"42") == 42
    assert scan(int, None) == 0
    assert scan(int, b"9223372036854775807") == 9223372036854775807
    assert scan(int, b"-9223372036854775808") == -9223372036854775808


def test_scan_int_errors():
    with pytest.raises(ScanError):
        scan(int, b"abc")
    with pytest.raises(ScanError):
        scan(int, b"9223372036854775808")


def test_scan_bool():
    assert scan(bool, b"t") is True
    assert scan(bool, b"1") is True
    assert scan(bool, b"f") is False
    assert scan(bool, None) is False


def test_scan_float():
    assert scan(float, b"1.5") == 1.5
    assert scan(float, None) == 0.0
    with pytest.raises(ScanError):
        scan(float, b"x1")


def test_scan_string():
    assert scan(str, b"hello world") == "hello world"
    assert scan(str, None) == ""


def test_scan_bytes_round_trip():
    data = b"hello world\x00"
    assert scan(bytes, append_bytes(data, 0).encode()) == data
    assert scan(bytes, None) is None


def test_scan_bytes_too_short():
    with pytest.raises(ScanError, match="pg: can't parse bytes"):
        scan_bytes(b"x")


def test_scan_bytes_bad_hex():
    with pytest.raises(ScanError):
        scan_bytes(b"\\xzz")


def test_scan_optional():
    assert scan(Optional[int], None) is None
    assert scan(Optional[int], b"5") == 5
    assert scan(Optional[str], b"hi") == "hi"


def test_scan_time_round_trip():
    tm = datetime(2001, 2, 3, 4, 5, 6, 7000, tzinfo=timezone(timedelta(hours=7)))
    assert scan(datetime, append_time(tm, 0)) == tm


def test_scan_time_null_is_zero_time():
    assert scan(datetime, None) == datetime(1, 1, 1, tzinfo=timezone.utc)


def test_scan_json_containers():
    assert scan(list, b"[1, 2, 3]") == [1, 2, 3]
    assert scan(dict, b'{"foo": "bar"}') == {"foo": "bar"}
    assert scan(list, None) is None
    with pytest.raises(ScanError):
        scan(list, b'{"foo": "bar"}')


def test_scan_any_is_json():
    assert scan(Any, b'{"foo": "bar"}') == {"foo": "bar"}


def test_scan_struct():
    assert scan(Struct, b'{"foo": "bar"}') == Struct(foo="bar")
    assert scan(Struct, b'{"Foo": "bar"}') == Struct(foo="bar")
    assert scan(Struct, None) == Struct(foo="")


def test_scan_struct_bad_json():
    with pytest.raises(ScanError):
        scan(Struct, b"{not json")


def test_sql_scanner_type():
    assert is_sql_scanner(CustomStrSlice) is True
    assert is_sql_scanner(int) is False
    assert scan(CustomStrSlice, b"one\ntwo").items == ["one", "two"]
    assert scan(CustomStrSlice, b"").items == []
    assert scan(CustomStrSlice, None).items is None