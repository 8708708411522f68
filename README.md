# pgvalues

This package turns Python values into PostgreSQL literals. It also turns
PostgreSQL text-format column values back into Python values.

## Installing

    pip install pgvalues

To run the test suite:

    pip install "pgvalues[test]"
    pytest

## Encoding values

`pgvalues.append.append(value, quote)` renders a value as SQL text. The
`quote` argument sets the quoting style:

- `0`: raw, with no surrounding quotes
- `1`: an SQL literal in single quotes
- `2`: an element inside an array or hstore literal, in double quotes

```python
from pgvalues.append import append

append("it's", 1)        # "'it''s'"
append(None, 1)          # "NULL"
append(None, 0)          # ""
append(True, 1)          # "TRUE"
append(1.5, 1)           # "1.5"
append(b"\x01\xff", 1)   # "'\\x01ff'"
```

NUL characters are dropped from strings. A `datetime` is rendered as a
timestamptz literal. Any other value, such as a list, dict or dataclass, is
encoded as JSON, with `\u0000` escaped the way `jsonb` expects. A value that
cannot be encoded is rendered as `?!(<error>)` in its place.

The module also provides the individual renderers: `append_null`,
`append_string`, `append_bytes`, `append_json`, `append_array`,
`append_hstore` and `append_error`. A class that defines
`append_value(self, quote)` counts as a `ValueAppender`, and `append` calls
that method to render the value.

### Arrays, hstore, IN lists, raw SQL and identifiers

```python
from pgvalues.append import append
from pgvalues.values import Array, Hstore, in_, Q, F

append(Array(["one", "two"]), 1)   # '{"one","two"}'
append(Array([[1, 2], [3, 4]]), 0) # {{1,2},{3,4}}
append(Array(None), 1)             # NULL
append(Hstore({"foo": "bar"}), 1)  # '"foo"=>"bar"'
append(in_([1, 2, 3]), 1)          # 1,2,3
append(Q("now()"), 1)              # now()   (trusted SQL, not escaped)
append(F("table.id"), 1)           # "table"."id"
```

`Array` only accepts a sequence, `Hstore` only a mapping, and `in_` only a
sequence. Anything else raises `TypeError`.

### Identifiers and JSON text

```python
from pgvalues.field import append_field
from pgvalues.jsonb import append_jsonb

append_field("table.*", 1)         # '"table".*'
append_jsonb(r"foo \u0000 bar", 0) # r"foo \\u0000 bar"
```

### Times

```python
from pgvalues.timefmt import parse_time, append_time

tm = parse_time(b"2001-02-03 04:05:06+07")
append_time(tm, 1)                 # "'2001-02-03 04:05:06+07:00:00'"
```

`parse_time` accepts dates, times of day, timestamps and timestamps with an
offset. A date or a time of day comes back in UTC, and a time of day is
placed on 0001-01-01. A timestamp without an offset is read as local time.
Invalid text raises `ValueError`.

## Decoding values

`pgvalues.scan.scan(typ, b)` converts a text-format value to `typ`. Pass
`None` for SQL NULL to get the zero value of `typ`.

```python
from pgvalues.scan import scan, scan_bytes, ScanError

scan(int, b"42")                   # 42
scan(bool, b"t")                   # True
scan(bytes, b"\\x6869")            # b"hi"
scan(int, None)                    # 0
scan(int | None, None)             # None
scan(list, b"[1, 2]")              # [1, 2]
```

The supported types are:

- `int`, `float`, `str`, `bool`, `bytes` and `datetime`
- optional forms of these types
- `list`, `dict` and `Any`, which are read as JSON
- dataclasses, which are built from a JSON object
- classes with a `scan` method, which are instantiated and given the raw
  value

`is_sql_scanner(typ)` reports whether a class has a `scan` method.
`scan_bytes` decodes a hex-format bytea value directly. Text that cannot be
read as the requested type raises `ScanError`, and so does an unsupported
type.

## Command results

```python
from pgvalues.result import parse_result

res = parse_result(b"INSERT 0 1\x00", 0)
res.rows_affected                  # 1
res.rows_returned                  # 0
```

`rows_affected` is -1 when the command tag has no row count, as with
`CREATE`.

## What this package does not do

This package does not connect to a database server. It does not run queries
or manage transactions, prepared statements or connection pools. It has no
ORM layer. It only produces and reads the text of values. Sending that text
to PostgreSQL is left to whatever client you use.