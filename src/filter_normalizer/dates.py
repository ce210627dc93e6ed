"""Calendar-day boundaries for date-only time filters.

Date-only and naive values are placed in the caller's zone (UTC unless
configured); aware values keep their own offset. Boundaries are rendered
with millisecond precision, UTC as ``Z``.
"""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Annotated

from pydantic import Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .exceptions import InvalidFilterValueError

_DATE_ADAPTER: TypeAdapter[datetime | date] = TypeAdapter(
    Annotated[datetime | date, Field(union_mode="left_to_right")]
)

# Bare numbers are not timestamps here: only ISO basic YYYYMMDD and YYYY are read.
_NUMERIC = re.compile(r"[+-]?\d+(?:\.\d*)?")


def _expand_basic_date(value: str) -> str:
    if len(value) == 8 and value.isdigit():
        return f"{value[:4]}-{value[4:6]}-{value[6:]}"
    if len(value) == 4 and value.isdigit():
        return f"{value}-01-01"
    if _NUMERIC.fullmatch(value):
        raise InvalidFilterValueError(value)
    return value


def parse_date_value(value: str, tz: tzinfo = timezone.utc) -> datetime:
    """Parse an ISO date or date-time string into an aware datetime."""
    try:
        parsed = _DATE_ADAPTER.validate_python(_expand_basic_date(value.strip()))
    except PydanticValidationError as e:
        raise InvalidFilterValueError(value) from e
    if not isinstance(parsed, datetime):
        parsed = datetime(parsed.year, parsed.month, parsed.day)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=tz)
    return parsed


def format_timestamp(dt: datetime) -> str:
    """Render ``YYYY-MM-DDTHH:MM:SS.mmm`` plus ``Z`` or ``±HH:MM``."""
    text = dt.isoformat(timespec="milliseconds")
    if dt.utcoffset() == timedelta(0):
        return text[: -len("+00:00")] + "Z"
    return text


def start_of_day(value: str, tz: tzinfo = timezone.utc) -> str:
    dt = parse_date_value(value, tz)
    return format_timestamp(dt.replace(hour=0, minute=0, second=0, microsecond=0))


def end_of_day(value: str, tz: tzinfo = timezone.utc) -> str:
    dt = parse_date_value(value, tz)
    return format_timestamp(
        dt.replace(hour=23, minute=59, second=59, microsecond=999000)
    )
