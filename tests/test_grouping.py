from collections import namedtuple

import pytest

from rhyme_finder.core.grouping import group_by, pluralize


def test_group_by_field_name_matches_documented_example():
    people = [
        {"name": "Steve", "team": "blue"},
        {"name": "Jack", "team": "red"},
        {"name": "Carol", "team": "blue"},
    ]

    result = group_by(people, "team")

    assert result == {
        "blue": [{"name": "Steve", "team": "blue"}, {"name": "Carol", "team": "blue"}],
        "red": [{"name": "Jack", "team": "red"}],
    }


def test_group_by_orders_keys_ascending_regardless_of_input_order():
    result = group_by([{"team": "red"}, {"team": "blue"}], "team")

    assert list(result) == ["blue", "red"]


def test_group_by_callable_selector_sorts_numeric_keys():
    result = group_by([{"n": 1}, {"n": 2}, {"n": 3}], lambda obj: obj["n"] % 2)

    assert result == {0: [{"n": 2}], 1: [{"n": 1}, {"n": 3}]}
    assert list(result) == [0, 1]


def test_group_by_numeric_keys_sort_numerically_not_lexically():
    records = [{"numSyllables": 10}, {"numSyllables": 2}, {"numSyllables": 1}]

    assert list(group_by(records, "numSyllables")) == [1, 2, 10]


def test_group_by_empty_input_returns_empty_mapping():
    assert group_by([], "team") == {}
    assert group_by(iter(()), lambda obj: obj) == {}


def test_group_by_keeps_every_record_once_in_input_order():
    records = [{"id": index, "parity": index % 3} for index in range(10)]

    result = group_by(records, "parity")

    flattened = [record for bucket in result.values() for record in bucket]
    assert sorted(flattened, key=lambda record: record["id"]) == records
    for bucket in result.values():
        ids = [record["id"] for record in bucket]
        assert ids == sorted(ids)


def test_group_by_uses_value_equality_for_keys():
    first = {"team": "".join(["bl", "ue"])}
    second = {"team": "blue"}

    result = group_by([first, second], "team")

    assert result == {"blue": [first, second]}


def test_group_by_collects_missing_fields_under_none_last():
    records = [{"word": "a"}, {"word": "b", "numSyllables": 2}, {"word": "c"}]

    result = group_by(records, "numSyllables")

    assert list(result) == [2, None]
    assert result[None] == [{"word": "a"}, {"word": "c"}]


def test_group_by_reads_attributes_from_objects():
    Word = namedtuple("Word", "word syllables")
    records = [Word("time", 1), Word("sometime", 2), Word("climb", 1)]

    result = group_by(records, "syllables")

    assert result == {1: [records[0], records[2]], 2: [records[1]]}


def test_group_by_rejects_incomparable_key_types():
    with pytest.raises(TypeError):
        group_by([{"k": 1}, {"k": "one"}], "k")


def test_group_by_rejects_unhashable_group_names():
    with pytest.raises(TypeError, match="not hashable"):
        group_by([{"tags": ["syn"]}, {"tags": ["syn"]}], "tags")


@pytest.mark.parametrize(
    ("count", "suffix"),
    [(1, ""), (0, "s"), (2, "s"), (17, "s")],
)
def test_pluralize(count, suffix):
    assert pluralize(count) == suffix
