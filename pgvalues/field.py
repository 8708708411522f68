"""Quoting of SQL identifiers such as table and column names."""

from __future__ import annotations


def append_field(field: str, quote: int) -> str:
    """Quote each dot-separated part of an identifier when quote is 1.

    A bare ``*`` part is kept as is, and double quotes are doubled.
    """
    out: list[str] = []
    quoted = False
    n = len(field)
    i = 0
    while i < n:
        c = field[i]
        i += 1

        if c == "*" and not quoted:
            out.append("*")
            continue

        if c == ".":
            if quoted and quote == 1:
                out.append('"')
                quoted = False
            out.append(".")
            if i < n and field[i] == "*":
                i += 1
                out.append("*")
            elif quote == 1:
                out.append('"')
                quoted = True
            continue

        if not quoted and quote == 1:
            out.append('"')
            quoted = True
        out.append('""' if c == '"' else c)

    if quote == 1 and quoted:
        out.append('"')
    return "".join(out)