"""
Single term choice filter.

Selecting a value restricts hits through a post filter. The options and their
counts come from a terms aggregation computed under the related search, so a
selected value does not hide its alternatives.
"""

from collections.abc import Callable, Mapping
from typing import Any

from facetforge.config import settings
from facetforge.engine.base import ResultSet, TermsResult
from facetforge.filters.base import Filter
from facetforge.models.filter_state import FilterState
from facetforge.models.view_data import Choice, ChoicesAwareViewData, ViewData
from facetforge.search.query import Search, TermClause, TermsAggregation


class ChoiceFilter(Filter):
    """
    Facet over the distinct values of one field.

    Args:
        request_field: Query-string key
        field: Document field to filter and aggregate on
        value_type: Converts the raw request value to the field's type
        labels: Optional display labels per value
        size: Maximum number of options
    """

    def __init__(
        self,
        request_field: str,
        field: str,
        *,
        value_type: Callable[[Any], Any] = str,
        labels: Mapping[Any, str] | None = None,
        size: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(request_field, **kwargs)
        self.field = field
        self.value_type = value_type
        self.labels = dict(labels or {})
        self.size = settings.terms_size if size is None else size

    def parse_value(self, value: Any) -> Any:
        try:
            return self.value_type(value)
        except (TypeError, ValueError):
            return None

    def create_view_data(self) -> ChoicesAwareViewData:
        return ChoicesAwareViewData()

    def modify_search(self, search: Search, state: FilterState, request: Any) -> None:  # noqa: ARG002
        if state.active:
            search.add_post_filter(TermClause(self.field, (state.value,)))

    def pre_process_search(self, search: Search, related_search: Search, state: FilterState) -> None:
        search.add_aggregation(
            state.name,
            TermsAggregation(
                field=self.field,
                filters=tuple(related_search.post_filters),
                size=self.size,
            ),
        )

    def get_view_data(self, result: ResultSet, view_data: ViewData) -> ViewData:
        aggregation = result.get_aggregation(view_data.name)
        if not isinstance(aggregation, TermsResult):
            return view_data
        if not isinstance(view_data, ChoicesAwareViewData):
            return view_data

        state = view_data.state
        selected = state.value if state is not None and state.active else None

        for bucket in aggregation.buckets:
            active = selected is not None and bucket.key == selected
            if active:
                # Clicking the selected option removes it
                parameters = dict(view_data.reset_url_parameters)
            else:
                parameters = {**view_data.url_parameters, self.request_field: bucket.key}

            view_data.add_choice(
                Choice(
                    label=self.labels.get(bucket.key, str(bucket.key)),
                    url_parameters=parameters,
                    count=bucket.count,
                    active=active,
                )
            )

        return view_data
