"""Filter value object and the known column types and operators."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class ColumnType(str, Enum):
    """Column types known to the listing API.

    ``Filter.type`` is an open string, so values outside this set pass through.
    """

    STRING = "string"
    NUMBER = "number"
    LIST = "list"
    TIME = "time"
    DICTIONARY = "dictionary"
    NUMBER_DICTIONARY = "numberDictionary"
    FEEDBACK_SCORES_NUMBER = "feedback_scores_number"


class FilterOperator(str, Enum):
    """Operators known to the listing API."""

    EQ = "="
    NE = "!="
    GT = ">"
    GE = ">="
    LT = "<"
    LE = "<="
    CONTAINS = "contains"
    NOT_CONTAINS = "not_contains"
    STARTS_WITH = "starts_with"
    ENDS_WITH = "ends_with"


# Columns whose value is a map; a filter on them needs a ``key``.
DICTIONARY_TYPES = frozenset(
    {ColumnType.DICTIONARY.value, ColumnType.NUMBER_DICTIONARY.value}
)


class ValueObject(BaseModel):
    """Base class for Value Objects.

    Value objects are immutable and defined by their attributes.
    Equality is structural (all fields compared).
    """

    model_config = ConfigDict(frozen=True)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.model_dump() == other.model_dump()

    def __hash__(self) -> int:
        return hash(tuple(sorted(self.model_dump().items())))


class Filter(ValueObject):
    """A single comparison predicate authored in the UI.

    Field order is the wire order of the serialized ``filters`` parameter.
    """

    id: str
    field: str
    type: str
    operator: str
    key: str = ""
    value: str = ""

    @field_validator("type", "operator", mode="before")
    @classmethod
    def _unwrap_enum(cls, v: Any) -> Any:
        return v.value if isinstance(v, Enum) else v

    @property
    def is_time(self) -> bool:
        return self.type == ColumnType.TIME.value

    @property
    def is_dictionary(self) -> bool:
        return self.type in DICTIONARY_TYPES
