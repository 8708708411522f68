"""Conversion of PostgreSQL text-format column values into Python values."""

from __future__ import annotations

import binascii
import dataclasses
import json
import re
import types
import typing
from datetime import datetime, timezone
from typing import Any, Union

from pgvalues.timefmt import parse_time

ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

_INT_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.ASCII | re.IGNORECASE,
)
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1

_NAMED_TYPES: dict[str, Any] = {
    "int": int,
    "float": float,
    "str": str,
    "bool": bool,
    "bytes": bytes,
    "bytearray": bytearray,
    "datetime": datetime,
    "datetime.datetime": datetime,
}


class ScanError(ValueError):
    """Raised when a column value cannot be converted to the requested type."""


def is_sql_scanner(typ: Any) -> bool:
    """Tell whether a class scans raw column values itself via a ``scan`` method."""
    return isinstance(typ, type) and callable(getattr(typ, "scan", None))


def scan_bytes(b: bytes) -> bytes:
    """Decode a hex-format bytea value such as ``\\x6869``."""
    if len(b) < 2:
        raise ScanError(f"pg: can't parse bytes: {bytes(b)!r}")
    try:
        return binascii.unhexlify(bytes(b[2:]))
    except (binascii.Error, ValueError) as err:
        raise ScanError(f"pg: can't parse bytes: {bytes(b)!r}") from err


def _type_name(typ: Any) -> str:
    return getattr(typ, "__name__", repr(typ))


def _optional_inner(typ: Any) -> Any:
    if typing.get_origin(typ) not in (Union, types.UnionType):
        return None
    args = typing.get_args(typ)
    rest = [a for a in args if a is not type(None)]
    if len(rest) == 1 and len(rest) != len(args):
        return rest[0]
    return None


def _ascii(b: bytes) -> str:
    try:
        return b.decode("ascii")
    except UnicodeDecodeError as err:
        raise ScanError(f"pg: invalid number: {b!r}") from err


def _parse_int(b: bytes) -> int:
    s = _ascii(b)
    if not _INT_RE.fullmatch(s):
        raise ScanError(f"strconv.ParseInt: parsing {s!r}: invalid syntax")
    n = int(s)
    if not _INT64_MIN <= n <= _INT64_MAX:
        raise ScanError(f"strconv.ParseInt: parsing {s!r}: value out of range")
    return n


def _parse_float(b: bytes) -> float:
    s = _ascii(b)
    if not _FLOAT_RE.fullmatch(s):
        raise ScanError(f"strconv.ParseFloat: parsing {s!r}: invalid syntax")
    return float(s)


def _parse_datetime(b: bytes) -> datetime:
    try:
        return parse_time(b)
    except (ValueError, UnicodeDecodeError) as err:
        raise ScanError(str(err)) from err


def _load_json(b: bytes) -> Any:
    try:
        return json.loads(b)
    except (ValueError, UnicodeDecodeError) as err:
        raise ScanError(f"json: {err}") from err


def _resolve_hint(hint: Any) -> Any:
    if isinstance(hint, str):
        return _NAMED_TYPES.get(hint.strip(), hint)
    return hint


def _field_hints(typ: type) -> dict[str, Any]:
    return {f.name: _resolve_hint(f.type) for f in dataclasses.fields(typ)}


def _zero(typ: Any) -> Any:
    if typ is datetime:
        return ZERO_TIME
    if typ is bool:
        return False
    if typ is int:
        return 0
    if typ is float:
        return 0.0
    if typ is str:
        return ""
    if dataclasses.is_dataclass(typ) and isinstance(typ, type):
        return _build_struct(typ, {})
    return None


def _convert(hint: Any, value: Any) -> Any:
    if dataclasses.is_dataclass(hint) and isinstance(hint, type) and isinstance(value, dict):
        return _build_struct(hint, value)
    return value


def _build_struct(typ: type, obj: dict[str, Any]) -> Any:
    hints = _field_hints(typ)
    folded = {k.lower(): v for k, v in obj.items()}
    kwargs: dict[str, Any] = {}
    for f in dataclasses.fields(typ):
        if not f.init:
            continue
        hint = hints.get(f.name, f.type)
        if f.name in obj:
            kwargs[f.name] = _convert(hint, obj[f.name])
        elif f.name.lower() in folded:
            kwargs[f.name] = _convert(hint, folded[f.name.lower()])
        elif f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING:
            kwargs[f.name] = _zero(hint)
    return typ(**kwargs)


def _scan_json(typ: Any, b: bytes | None) -> Any:
    if b is None:
        return None
    value = _load_json(b)
    origin = typing.get_origin(typ) or typ
    if origin in (list, dict) and value is not None and not isinstance(value, origin):
        raise ScanError(
            f"json: cannot unmarshal {type(value).__name__} into {_type_name(origin)}"
        )
    return value


def _scan(typ: Any, b: bytes | None) -> Any:
    if typ is datetime:
        return ZERO_TIME if b is None else _parse_datetime(b)
    if is_sql_scanner(typ):
        obj = typ()
        obj.scan(b)
        return obj
    inner = _optional_inner(typ)
    if inner is not None:
        return None if b is None else _scan(inner, b)
    if typ in (bytes, bytearray):
        return None if b is None else typ(scan_bytes(b))
    if typ is bool:
        return False if b is None else b in (b"t", b"1")
    if typ is int:
        return 0 if b is None else _parse_int(b)
    if typ is float:
        return 0.0 if b is None else _parse_float(b)
    if typ is str:
        return "" if b is None else b.decode("utf-8", errors="replace")
    if dataclasses.is_dataclass(typ) and isinstance(typ, type):
        if b is None:
            return _zero(typ)
        value = _load_json(b)
        if value is None:
            return _zero(typ)
        if not isinstance(value, dict):
            raise ScanError(
                f"json: cannot unmarshal {type(value).__name__} into {_type_name(typ)}"
            )
        return _build_struct(typ, value)
    if typ is Any or typ is object or (typing.get_origin(typ) or typ) in (list, dict):
        return _scan_json(typ, b)
    raise ScanError(f"pg: Scan(unsupported {_type_name(typ)})")


def scan(typ: Any, b: bytes | str | None) -> Any:
    """Convert a text-format column value to a value of ``typ``.

    ``b`` is None for SQL NULL, which gives the zero value of ``typ``
    (None for optional, bytes, list and dict types). Classes with a ``scan``
    method are instantiated and handed the raw value. Raises ScanError when
    the value cannot be converted or the type is not supported.
    """
    if typ is None:
        raise ScanError("pg: Scan(nil)")
    if isinstance(b, str):
        b = b.encode("utf-8")
    elif b is not None:
        b = bytes(b)
    return _scan(typ, b)