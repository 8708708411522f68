import pytest

from pgvalues.field import append_field


@pytest.mark.parametrize(
    "field,wanted",
    [
        ("", ""),
        ("id", '"id"'),
        ("table.id", '"table"."id"'),
        ("*", "*"),
        ("table.*", '"table".*'),
        ("id AS pk", '"id AS pk"'),
        ("table.id AS table__id", '"table"."id AS table__id"'),
        ("?shard", '"?shard"'),
        ("?shard.id", '"?shard"."id"'),
        ('"', '""""'),
        ("'", "\"'\""),
    ],
)
def test_append_field(field, wanted):
    assert append_field(field, 1) == wanted


def test_unquoted_mode():
    assert append_field("table.id", 0) == "table.id"
    assert append_field("table.*", 0) == "table.*"