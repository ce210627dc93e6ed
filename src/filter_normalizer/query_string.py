"""QueryStringBuilder: normalizer output + request params -> query string."""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import urlencode

if TYPE_CHECKING:
    from collections.abc import Mapping


class QueryStringBuilder:
    """Merge the filters parameter into an outgoing request's query string."""

    def build(
        self,
        parameter: Mapping[str, str],
        extra: Mapping[str, str | int] | None = None,
    ) -> str:
        """Produce the encoded query string.

        ``parameter`` is the result of ``build_query_parameter``; an empty
        mapping leaves the filters parameter out entirely.
        """
        params: dict[str, str | int] = {}
        if extra:
            params.update(extra)
        params.update(parameter)
        return urlencode(params) if params else ""
