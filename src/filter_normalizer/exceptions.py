"""Exceptions raised by filter-normalizer."""

from __future__ import annotations


class FilterNormalizerError(Exception):
    """Root exception for the filter-normalizer package."""


class ValidationError(FilterNormalizerError):
    """Raised when filter input cannot be accepted.

    Carries structured errors: ``{field: [messages]}``.
    """

    def __init__(self, errors: dict[str, list[str]] | str | None = None) -> None:
        if isinstance(errors, str):
            self.errors: dict[str, list[str]] = {"__root__": [errors]}
        elif errors is None:
            self.errors = {}
        else:
            self.errors = errors
        super().__init__(str(self.errors))


class FilterParseError(ValidationError):
    """Raised when a serialized ``filters`` parameter is malformed."""


class InvalidFilterValueError(ValidationError):
    """Raised when a time filter value is not an ISO date or date-time."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__({"value": [f"Not an ISO date or date-time: {value!r}"]})
