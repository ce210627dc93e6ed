"""Shared fixtures for filter-normalizer tests."""

from __future__ import annotations

import itertools

import pytest

from filter_normalizer import Filter


class SequentialIdGenerator:
    """Deterministic ids: f1, f2, ..."""

    def __init__(self) -> None:
        self._counter = itertools.count(1)

    def next_id(self) -> str:
        return f"f{next(self._counter)}"


@pytest.fixture
def id_generator() -> SequentialIdGenerator:
    return SequentialIdGenerator()


@pytest.fixture
def string_filter() -> Filter:
    return Filter(id="1", field="name", type="string", operator="=", value="bob")


@pytest.fixture
def make_time_filter():
    """Factory for time filters on ``created_at``."""

    def _make(operator: str, value: str = "2024-03-05", **kwargs: str) -> Filter:
        return Filter(
            id=kwargs.get("id", "t1"),
            field=kwargs.get("field", "created_at"),
            type="time",
            operator=operator,
            key=kwargs.get("key", ""),
            value=value,
        )

    return _make
