"""
Numeric range filter.

Request value format: "<min><sep><max>" (default separator ";"). Either side
may be empty for an open bound, e.g. "10;" or ";50".
"""

from typing import Any

from facetforge.config import settings
from facetforge.engine.base import ResultSet, StatsResult
from facetforge.filters.base import Filter
from facetforge.models.filter_state import FilterState
from facetforge.models.view_data import RangeAwareViewData, ViewData
from facetforge.search.query import RangeClause, Search, StatsAggregation


class RangeFilter(Filter):
    def __init__(
        self,
        request_field: str,
        field: str,
        *,
        separator: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(request_field, **kwargs)
        self.field = field
        self.separator = settings.range_separator if separator is None else separator

    def parse_value(self, value: Any) -> tuple[float | None, float | None] | None:
        parts = str(value).split(self.separator)
        if len(parts) != 2:
            return None

        try:
            bounds = [float(part) if part.strip() else None for part in parts]
        except ValueError:
            return None

        gte, lte = bounds
        if gte is None and lte is None:
            return None
        if gte is not None and lte is not None and gte > lte:
            return None
        return gte, lte

    def create_view_data(self) -> RangeAwareViewData:
        return RangeAwareViewData()

    def modify_search(self, search: Search, state: FilterState, request: Any) -> None:  # noqa: ARG002
        if state.active:
            gte, lte = state.value
            search.add_post_filter(RangeClause(self.field, gte=gte, lte=lte))

    def pre_process_search(self, search: Search, related_search: Search, state: FilterState) -> None:
        # Bounds come from the related context so the current selection
        # never narrows its own slider.
        search.add_aggregation(
            state.name,
            StatsAggregation(field=self.field, filters=tuple(related_search.post_filters)),
        )

    def get_view_data(self, result: ResultSet, view_data: ViewData) -> ViewData:
        stats = result.get_aggregation(view_data.name)
        if isinstance(view_data, RangeAwareViewData) and isinstance(stats, StatsResult):
            view_data.min_bounds = stats.min
            view_data.max_bounds = stats.max
        return view_data
