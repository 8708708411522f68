"""Summary of an executed SQL command."""

from __future__ import annotations

import re
from dataclasses import dataclass

_INT_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Result:
    """Rows affected (-1 when not applicable) and rows returned by a command."""

    rows_affected: int = -1
    rows_returned: int = 0


def parse_result(tag: str | bytes, returned: int) -> Result:
    """Build a Result from a null-terminated command tag such as ``INSERT 0 1``."""
    if isinstance(tag, (bytes, bytearray, memoryview)):
        tag = bytes(tag).decode("utf-8", errors="replace")
    ind = tag.rfind(" ")
    if ind == -1:
        return Result(-1, returned)
    count = tag[ind + 1 : len(tag) - 1]
    if _INT_RE.fullmatch(count):
        return Result(int(count), returned)
    return Result(-1, returned)