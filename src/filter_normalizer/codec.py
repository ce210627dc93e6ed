"""Wire codec for the ``filters`` query parameter.

The parameter is a compact JSON array of objects keyed
``id, field, type, operator, key, value``, every value a string.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .exceptions import FilterParseError
from .models import Filter

logger = logging.getLogger("filter_normalizer.codec")

_FILTER_LIST: TypeAdapter[list[Filter]] = TypeAdapter(list[Filter])


def serialize_filters(filters: Sequence[Filter]) -> str:
    """Encode filters as compact JSON array text."""
    return _FILTER_LIST.dump_json(list(filters)).decode()


def parse_filters(text: str | bytes) -> list[Filter]:
    """Decode a ``filters`` parameter back into Filter values."""
    try:
        return _FILTER_LIST.validate_json(text)
    except PydanticValidationError as exc:
        errors: dict[str, list[str]] = {}
        for error in exc.errors():
            loc = ".".join(str(p) for p in error.get("loc") or ("__root__",))
            msg = error.get("msg", "validation error")
            errors.setdefault(loc, []).append(msg)
        logger.warning("Rejected filters parameter: %s", errors)
        raise FilterParseError(errors) from exc
