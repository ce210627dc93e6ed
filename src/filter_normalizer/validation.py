"""Submission gate for UI-authored filters."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import Filter


def is_filter_valid(flt: Filter) -> bool:
    """Return True when the filter has a value and, for map columns, a key."""
    if flt.is_dictionary and flt.key == "":
        return False
    return flt.value != ""
