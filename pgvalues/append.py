"""Rendering of Python values as PostgreSQL literals.

The quote argument selects the context: 0 for raw text, 1 for a quoted SQL
literal and 2 for an element inside an array or hstore literal.
"""

from __future__ import annotations

import abc
import dataclasses
import json
import math
from collections.abc import Mapping
from datetime import datetime
from decimal import Decimal
from typing import Any

from pgvalues.jsonb import append_jsonb
from pgvalues.timefmt import append_time

_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}

_NULL_BY_QUOTE = {1: "NULL"}


class ValueAppender(abc.ABC):
    """A value that renders itself as a SQL literal."""

    @abc.abstractmethod
    def append_value(self, quote: int) -> str:
        """Return the literal text of this value."""

    @classmethod
    def __subclasshook__(cls, other: type) -> Any:
        if cls is ValueAppender:
            if any("append_value" in klass.__dict__ for klass in other.__mro__):
                return True
        return NotImplemented


def append_null(quote: int) -> str:
    """Return NULL in a quoted context and nothing otherwise."""
    return _NULL_BY_QUOTE.get(quote, "")


def append_error(err: BaseException) -> str:
    """Render an error in place of a value."""
    return f"?!({err})"


def _float(v: float) -> str:
    if math.isnan(v):
        return "NaN"
    if math.isinf(v):
        return "+Inf" if v > 0 else "-Inf"
    return format(Decimal(repr(v)).normalize(), "f")


def append_string(s: str, quote: int) -> str:
    """Quote and escape a string; NUL characters are dropped."""
    out: list[str] = []
    if quote == 2:
        out.append('"')
    elif quote == 1:
        out.append("'")

    for c in s:
        if c == "\x00":
            continue
        if quote >= 1 and c == "'":
            out.append("''")
            continue
        if quote == 2:
            if c == '"':
                out.append('\\"')
                continue
            if c == "\\":
                out.append("\\\\")
                continue
        out.append(c)

    if quote >= 2:
        out.append('"')
    elif quote == 1:
        out.append("'")
    return "".join(out)


def append_bytes(data: bytes | bytearray | memoryview | None, quote: int) -> str:
    """Render bytes as a hex-format bytea literal."""
    if data is None:
        return append_null(quote)
    text = "\\x" + bytes(data).hex()
    if quote == 1:
        return f"'{text}'"
    return text


def _json_default(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    raise TypeError(f"json: unsupported type: {type(value).__name__}")


def append_json(value: Any, quote: int) -> str:
    """Render a value as JSON text suitable for a json/jsonb column."""
    try:
        text = json.dumps(
            value,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
            default=_json_default,
        )
    except (TypeError, ValueError) as err:
        return append_error(err)
    for char, escape in _HTML_ESCAPES.items():
        text = text.replace(char, escape)
    return append_jsonb(text, quote)


def _array_elem(value: Any) -> str:
    if value is None:
        return "NULL"
    if isinstance(value, (list, tuple)):
        return _array_literal(value)
    return append(value, 2)


def _array_literal(values: Any) -> str:
    return "{" + ",".join(_array_elem(v) for v in values) + "}"


def append_array(values: Any, quote: int) -> str:
    """Render a sequence as a PostgreSQL array literal; nested sequences nest."""
    if values is None:
        return append_null(quote)
    if isinstance(values, (str, bytes, bytearray, memoryview, Mapping)):
        raise TypeError(f"pg.Array(unsupported {type(values).__name__})")
    text = _array_literal(values)
    if quote == 1:
        return f"'{text}'"
    return text


def append_hstore(mapping: Mapping[str, str] | None, quote: int) -> str:
    """Render a mapping of strings to strings as an hstore literal."""
    if mapping is None:
        return append_null(quote)
    if not isinstance(mapping, Mapping) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in mapping.items()
    ):
        return append_error(TypeError(f"pg.Hstore(unsupported {type(mapping).__name__})"))
    text = ",".join(
        f"{append_string(k, 2)}=>{append_string(v, 2)}" for k, v in mapping.items()
    )
    if quote == 1:
        return f"'{text}'"
    return text


def append(value: Any, quote: int) -> str:
    """Render any supported value as a literal.

    Values that cannot be rendered directly are encoded as JSON; failures
    are rendered with append_error.
    """
    if value is None:
        return append_null(quote)
    if isinstance(value, ValueAppender):
        try:
            return value.append_value(quote)
        except Exception as err:  # noqa: BLE001 - rendered in place of the value
            return append_error(err)
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _float(value)
    if isinstance(value, str):
        return append_string(value, quote)
    if isinstance(value, datetime):
        return append_time(value, quote)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return append_bytes(value, quote)
    return append_json(value, quote)