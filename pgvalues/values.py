"""Wrapper values that render themselves as SQL literals."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from pgvalues.append import ValueAppender, append, append_array, append_hstore
from pgvalues.field import append_field

_NOT_SEQUENCES = (str, bytes, bytearray, memoryview)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, _NOT_SEQUENCES)


class Q(str, ValueAppender):
    """A piece of SQL inserted into a query as is, without quoting."""

    __slots__ = ()

    def append_value(self, quote: int) -> str:
        return str(self)


class F(str, ValueAppender):
    """A SQL identifier such as a table or column name."""

    __slots__ = ()

    def append_value(self, quote: int) -> str:
        return append_field(str(self), quote)


@dataclass(frozen=True)
class Array(ValueAppender):
    """A sequence rendered as a PostgreSQL array literal; None renders NULL."""

    value: Sequence[Any] | None

    def __post_init__(self) -> None:
        if self.value is not None and not _is_sequence(self.value):
            raise TypeError(f"pg.Array(unsupported {type(self.value).__name__})")

    def append_value(self, quote: int) -> str:
        return append_array(self.value, quote)


@dataclass(frozen=True)
class Hstore(ValueAppender):
    """A mapping rendered as a PostgreSQL hstore literal; None renders NULL."""

    value: Mapping[Any, Any] | None

    def __post_init__(self) -> None:
        if self.value is not None and not isinstance(self.value, Mapping):
            raise TypeError(f"pg.Hstore(unsupported {type(self.value).__name__})")

    def append_value(self, quote: int) -> str:
        return append_hstore(self.value, quote)


@dataclass(frozen=True)
class InOp(ValueAppender):
    """A list of values rendered comma separated, for use in ``IN (?)``."""

    values: tuple[Any, ...]

    def append_value(self, quote: int) -> str:
        return ",".join(append(v, quote) for v in self.values)


def in_(values: Sequence[Any]) -> InOp:
    """Wrap a sequence of values for an ``IN`` list."""
    if values is None:
        raise TypeError("pg.In(nil)")
    if not _is_sequence(values):
        raise TypeError(f"pg.In(unsupported {type(values).__name__})")
    return InOp(tuple(values))