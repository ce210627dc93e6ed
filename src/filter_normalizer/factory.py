"""Filter constructors used by the UI layer.

Filter ids only give the UI a stable handle on a row; the backend ignores
them. They come from an injected ``IIDGenerator`` so tests can pin them.
"""

from __future__ import annotations

import uuid
from typing import Protocol

from .models import ColumnType, Filter, FilterOperator


class IIDGenerator(Protocol):
    """Supplies ids for newly created filters."""

    def next_id(self) -> str: ...


class UUID4Generator:
    """Random UUIDv4 filter ids."""

    def next_id(self) -> str:
        return str(uuid.uuid4())


_default_generator = UUID4Generator()


def create_empty_filter(id_generator: IIDGenerator | None = None) -> Filter:
    """Return a blank placeholder filter with a fresh id."""
    gen = id_generator or _default_generator
    return Filter(id=gen.next_id(), field="", type="", operator="", key="", value="")


def search_by_id_filters(
    search: str | None = None, id_generator: IIDGenerator | None = None
) -> list[Filter] | None:
    """Return a one-element ``id = search`` filter list, or None without search text."""
    if not search:
        return None
    gen = id_generator or _default_generator
    return [
        Filter(
            id=gen.next_id(),
            field="id",
            type=ColumnType.STRING.value,
            operator=FilterOperator.EQ.value,
            key="",
            value=search,
        )
    ]
