from __future__ import annotations

import pytest

from filter_normalizer import Filter, expand_filters, expand_time_filter

START = "2024-03-05T00:00:00.000Z"
END = "2024-03-05T23:59:59.999Z"


def test_equality_expands_to_day_range(make_time_filter) -> None:
    flt = make_time_filter("=", key="k")
    result = expand_time_filter(flt)
    assert isinstance(result, list)
    assert [(f.operator, f.value) for f in result] == [(">", START), ("<", END)]
    for f in result:
        assert (f.id, f.field, f.type, f.key) == ("t1", "created_at", "time", "k")


@pytest.mark.parametrize("operator", [">", "<="])
def test_end_of_day_operators(make_time_filter, operator: str) -> None:
    result = expand_time_filter(make_time_filter(operator))
    assert isinstance(result, list)
    assert len(result) == 1
    assert result[0].operator == operator
    assert result[0].value == END


@pytest.mark.parametrize("operator", ["<", ">="])
def test_start_of_day_operators(make_time_filter, operator: str) -> None:
    result = expand_time_filter(make_time_filter(operator))
    assert isinstance(result, list)
    assert len(result) == 1
    assert result[0].operator == operator
    assert result[0].value == START


def test_other_operator_returns_filter_unchanged(make_time_filter) -> None:
    flt = make_time_filter("!=")
    assert expand_time_filter(flt) is flt


def test_expansion_does_not_mutate_input(make_time_filter) -> None:
    flt = make_time_filter("=")
    expand_time_filter(flt)
    assert flt.operator == "="
    assert flt.value == "2024-03-05"


def test_empty_time_value_passes_through_empty(make_time_filter) -> None:
    result = expand_time_filter(make_time_filter("=", value=""))
    assert isinstance(result, list)
    assert [(f.operator, f.value) for f in result] == [(">", ""), ("<", "")]


def test_expand_filters_is_identity_for_non_time(string_filter: Filter) -> None:
    dict_filter = Filter(
        id="2", field="metadata", type="dictionary", operator=">", key="k", value="1"
    )
    assert expand_filters([string_filter, dict_filter]) == [string_filter, dict_filter]


def test_expand_filters_flattens_in_order(make_time_filter, string_filter) -> None:
    filters = [
        string_filter,
        make_time_filter("=", id="t1"),
        make_time_filter("<", id="t2"),
    ]
    result = expand_filters(filters)
    assert [(f.id, f.operator, f.value) for f in result] == [
        ("1", "=", "bob"),
        ("t1", ">", START),
        ("t1", "<", END),
        ("t2", "<", START),
    ]


def test_expand_filters_empty() -> None:
    assert expand_filters([]) == []


@pytest.mark.parametrize("column_type", ["string", "dictionary", "geo"])
@pytest.mark.parametrize("operator", ["=", ">", "<"])
def test_non_time_filter_is_returned_unchanged(column_type: str, operator: str) -> None:
    flt = Filter(
        id="1", field="name", type=column_type, operator=operator, key="k", value="bob"
    )
    assert expand_time_filter(flt) is flt
    assert expand_filters([flt]) == [flt]
