"""Time filter expansion.

A date picker yields a calendar day, so each time comparison is rewritten
against the day's boundary timestamps:

    =        ->  > start-of-day  AND  < end-of-day
    >, <=    ->  end-of-day
    <, >=    ->  start-of-day

Any other operator leaves the filter untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from datetime import timezone, tzinfo

from .dates import end_of_day, start_of_day
from .models import Filter, FilterOperator

logger = logging.getLogger("filter_normalizer.expansion")

_EQ = FilterOperator.EQ.value
_END_OF_DAY_OPS = frozenset({FilterOperator.GT.value, FilterOperator.LE.value})
_START_OF_DAY_OPS = frozenset({FilterOperator.LT.value, FilterOperator.GE.value})


def _boundary(
    flt: Filter, operator: str, to_boundary: Callable[[str, tzinfo], str], tz: tzinfo
) -> Filter:
    # An empty value is a caller contract violation; carry it through as-is.
    value = to_boundary(flt.value, tz) if flt.value else flt.value
    return flt.model_copy(update={"operator": operator, "value": value})


def expand_time_filter(
    flt: Filter, tz: tzinfo = timezone.utc
) -> Filter | list[Filter]:
    """Rewrite one time filter into its day-boundary filters.

    Filters on other column types are returned unchanged.
    """
    if not flt.is_time:
        return flt
    op = flt.operator
    if op == _EQ:
        return [
            _boundary(flt, FilterOperator.GT.value, start_of_day, tz),
            _boundary(flt, FilterOperator.LT.value, end_of_day, tz),
        ]
    if op in _END_OF_DAY_OPS:
        return [_boundary(flt, op, end_of_day, tz)]
    if op in _START_OF_DAY_OPS:
        return [_boundary(flt, op, start_of_day, tz)]
    return flt


def expand_filters(
    filters: Iterable[Filter], tz: tzinfo = timezone.utc
) -> list[Filter]:
    """Expand time filters, pass the rest through, and flatten in order."""
    out: list[Filter] = []
    for flt in filters:
        expanded = expand_time_filter(flt, tz)
        if isinstance(expanded, list):
            out.extend(expanded)
        else:
            out.append(expanded)
    logger.debug("Expanded filters to %d entries", len(out))
    return out
