"""FilterNormalizer: UI filter lists -> transport-ready query parameter."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import timezone, tzinfo
from typing import TYPE_CHECKING

from .codec import serialize_filters
from .expansion import expand_filters, expand_time_filter
from .factory import UUID4Generator, create_empty_filter, search_by_id_filters
from .validation import is_filter_valid

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .factory import IIDGenerator
    from .models import Filter

logger = logging.getLogger("filter_normalizer.normalizer")

UTC = timezone.utc


@dataclass(frozen=True, slots=True)
class NormalizerConfig:
    """Configuration for filter normalization.

    Attributes:
        drop_invalid: Discard filters failing ``is_filter_valid`` before
            expansion. Off by default: validity is the producer's job.
        timezone: Zone for date-only and naive time values.
        parameter_name: Key of the produced query parameter.
    """

    drop_invalid: bool = False
    timezone: tzinfo = UTC
    parameter_name: str = "filters"


class FilterNormalizer:
    """Turns UI filter lists into the transport query parameter.

    Example:
        normalizer = FilterNormalizer(NormalizerConfig(drop_invalid=True))
        params = normalizer.build_query_parameter(
            user_filters, normalizer.search_id_filter(search_text)
        )
    """

    def __init__(
        self,
        config: NormalizerConfig | None = None,
        id_generator: IIDGenerator | None = None,
    ) -> None:
        self.config = config or NormalizerConfig()
        self._id_generator = id_generator or UUID4Generator()

    def is_valid(self, flt: Filter) -> bool:
        return is_filter_valid(flt)

    def create_empty(self) -> Filter:
        return create_empty_filter(self._id_generator)

    def search_id_filter(self, search: str | None = None) -> list[Filter] | None:
        return search_by_id_filters(search, self._id_generator)

    def expand_time_filter(self, flt: Filter) -> Filter | list[Filter]:
        return expand_time_filter(flt, self.config.timezone)

    def expand_all(self, filters: Sequence[Filter]) -> list[Filter]:
        return expand_filters(filters, self.config.timezone)

    def build_query_parameter(
        self,
        filters: Sequence[Filter] | None = None,
        additional_filters: Sequence[Filter] | None = None,
    ) -> dict[str, str]:
        """Return ``{parameter_name: json}``, or ``{}`` when nothing remains.

        Primary filters precede additional filters in the output.
        """
        combined: list[Filter] = []
        for source in (filters, additional_filters):
            if not source:
                continue
            combined.extend(self.expand_all(self._admit(source)))

        if not combined:
            logger.debug("No filters to send; omitting %r", self.config.parameter_name)
            return {}
        return {self.config.parameter_name: serialize_filters(combined)}

    def _admit(self, filters: Sequence[Filter]) -> Sequence[Filter]:
        if not self.config.drop_invalid:
            return filters
        admitted = [f for f in filters if is_filter_valid(f)]
        dropped = len(filters) - len(admitted)
        if dropped:
            logger.debug("Dropped %d invalid filter(s)", dropped)
        return admitted


_default_normalizer = FilterNormalizer()


def build_query_parameter(
    filters: Sequence[Filter] | None = None,
    additional_filters: Sequence[Filter] | None = None,
    config: NormalizerConfig | None = None,
) -> dict[str, str]:
    """Module-level shortcut for ``FilterNormalizer.build_query_parameter``."""
    normalizer = FilterNormalizer(config) if config else _default_normalizer
    return normalizer.build_query_parameter(filters, additional_filters)
