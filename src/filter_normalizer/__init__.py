"""Client-side filter normalization: validate, expand time filters, serialize."""

from __future__ import annotations

from .codec import parse_filters, serialize_filters
from .dates import end_of_day, start_of_day
from .exceptions import (
    FilterNormalizerError,
    FilterParseError,
    InvalidFilterValueError,
    ValidationError,
)
from .expansion import expand_filters, expand_time_filter
from .factory import (
    IIDGenerator,
    UUID4Generator,
    create_empty_filter,
    search_by_id_filters,
)
from .models import DICTIONARY_TYPES, ColumnType, Filter, FilterOperator
from .normalizer import FilterNormalizer, NormalizerConfig, build_query_parameter
from .query_string import QueryStringBuilder
from .validation import is_filter_valid

__all__ = [
    "DICTIONARY_TYPES",
    "ColumnType",
    "Filter",
    "FilterNormalizer",
    "FilterNormalizerError",
    "FilterOperator",
    "FilterParseError",
    "IIDGenerator",
    "InvalidFilterValueError",
    "NormalizerConfig",
    "QueryStringBuilder",
    "UUID4Generator",
    "ValidationError",
    "build_query_parameter",
    "create_empty_filter",
    "end_of_day",
    "expand_filters",
    "expand_time_filter",
    "is_filter_valid",
    "parse_filters",
    "search_by_id_filters",
    "serialize_filters",
    "start_of_day",
]
