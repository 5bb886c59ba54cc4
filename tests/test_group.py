from decimal import Decimal
from typing import NamedTuple

import pytest

from word_muse.group import group_sort_key, groupby, make_key_function

TEAMS = [
    {"name": "Steve", "team": "blue"},
    {"name": "Jack", "team": "red"},
    {"name": "Carol", "team": "blue"},
]


class Player(NamedTuple):
    name: str
    team: str


def test_groupby_with_field_name():
    groups = groupby(TEAMS, "team")
    assert groups == {"blue": [TEAMS[0], TEAMS[2]], "red": [TEAMS[1]]}


def test_groupby_with_key_function():
    groups = groupby(TEAMS, lambda record: record["team"])
    assert list(groups) == ["blue", "red"]
    assert [record["name"] for record in groups["blue"]] == ["Steve", "Carol"]
    assert [record["name"] for record in groups["red"]] == ["Jack"]


def test_groupby_reads_attributes_of_objects():
    players = [Player("Steve", "blue"), Player("Jack", "red"), Player("Carol", "blue")]
    groups = groupby(players, "team")
    assert groups == {"blue": [players[0], players[2]], "red": [players[1]]}


def test_groupby_sorts_keys_instead_of_insertion_order():
    records = [{"t": "b"}, {"t": "a"}, {"t": "b"}]
    groups = groupby(records, "t")
    assert list(groups) == ["a", "b"]
    assert groups["b"] == [records[0], records[2]]


def test_groupby_sorts_numeric_keys_numerically():
    records = [{"n": 10}, {"n": 2}, {"n": 1}, {"n": 2.5}]
    assert list(groupby(records, "n")) == [1, 2, 2.5, 10]


def test_groupby_of_empty_input_is_empty():
    assert groupby([], "x") == {}


def test_groupby_consumes_any_iterable():
    records = iter([{"a": 2}, {"a": 1}])
    assert list(groupby(records, "a")) == [1, 2]


def test_groupby_missing_field_is_grouped_under_none():
    records = [{"a": 1}, {}]
    groups = groupby(records, "a")
    assert groups == {1: [{"a": 1}], None: [{}]}


def test_groupby_missing_key_is_sorted_last():
    records = [{}, {"a": "z"}, {"a": 3}]
    assert list(groupby(records, "a")) == [3, "z", None]


def test_groupby_mixed_key_types_have_a_total_order():
    records = [{"k": "b"}, {"k": (1, 2)}, {"k": 7}, {"k": None}, {"k": "a"}, {"k": 0}]
    assert list(groupby(records, "k")) == [0, 7, "a", "b", (1, 2), None]


def test_groupby_keeps_every_record_exactly_once():
    records = [{"n": index % 3, "i": index} for index in range(20)]
    groups = groupby(records, "n")
    assert sum(len(group) for group in groups.values()) == len(records)
    restored = sorted(
        (record for group in groups.values() for record in group),
        key=lambda record: record["i"],
    )
    assert restored == records


def test_groupby_preserves_relative_order_within_groups():
    records = [{"n": index % 3, "i": index} for index in range(20)]
    for group in groupby(records, "n").values():
        indices = [record["i"] for record in group]
        assert indices == sorted(indices)


def test_groupby_is_deterministic():
    records = [{"t": "b", "i": 1}, {"t": "a", "i": 2}, {"t": "b", "i": 3}]
    first = groupby(records, "t")
    second = groupby(records, "t")
    assert first == second
    assert list(first) == list(second)


def test_groupby_does_not_mutate_records():
    records = [{"t": "b"}, {"t": "a"}]
    groupby(records, "t")
    assert records == [{"t": "b"}, {"t": "a"}]


def test_groupby_calls_key_function_once_per_record():
    calls = []

    def key(record):
        calls.append(record)
        return record["t"]

    records = [{"t": "b"}, {"t": "a"}, {"t": "b"}]
    groupby(records, key)
    assert calls == records


def test_groupby_propagates_key_function_errors():
    def key(record):
        if record["t"] == "bad":
            raise RuntimeError("bad record")
        return record["t"]

    with pytest.raises(RuntimeError, match="bad record"):
        groupby([{"t": "ok"}, {"t": "bad"}], key)


def test_make_key_function_rejects_other_selectors():
    with pytest.raises(TypeError):
        make_key_function(42)


def test_group_sort_key_orders_numbers_before_strings():
    assert group_sort_key(100) < group_sort_key("1")
    assert group_sort_key("1") < group_sort_key(None)


def test_groupby_sorts_decimal_keys_numerically():
    groups = groupby([{"n": Decimal("10")}, {"n": Decimal("2")}], "n")
    assert list(groups) == [Decimal("2"), Decimal("10")]


def test_groupby_mixes_decimal_and_int_keys():
    groups = groupby([{"n": Decimal("2.5")}, {"n": 10}, {"n": 1}], "n")
    assert list(groups) == [1, Decimal("2.5"), 10]


def test_groupby_puts_none_valued_fields_with_missing_fields():
    items = [{"a": None}, {}, {"a": 1}]
    groups = groupby(items, "a")
    assert groups == {1: [{"a": 1}], None: [{"a": None}, {}]}
