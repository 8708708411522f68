"""Escaping of JSON text for use as a jsonb literal."""

from __future__ import annotations

_NUL_ESCAPE = "u0000"


def append_jsonb(jsonb: str | bytes, quote: int) -> str:
    """Escape JSON text: drop NUL characters, double ``\\u0000`` escapes and quote.

    Single quotes are doubled and the result wrapped in them when quote is 1.
    """
    if isinstance(jsonb, (bytes, bytearray, memoryview)):
        jsonb = bytes(jsonb).decode("utf-8")
    out: list[str] = []
    if quote == 1:
        out.append("'")

    n = len(jsonb)
    i = 0
    while i < n:
        c = jsonb[i]
        i += 1
        if c == "'":
            out.append("''" if quote == 1 else "'")
        elif c == "\x00":
            continue
        elif c == "\\":
            if jsonb.startswith(_NUL_ESCAPE, i):
                i += len(_NUL_ESCAPE)
                out.append("\\\\u0000")
            else:
                out.append("\\")
                if i < n:
                    out.append(jsonb[i])
                    i += 1
        else:
            out.append(c)

    if quote == 1:
        out.append("'")
    return "".join(out)