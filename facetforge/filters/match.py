from collections.abc import Iterable
from typing import Any

from facetforge.filters.base import Filter
from facetforge.models.filter_state import FilterState
from facetforge.search.query import MatchClause, Search


class MatchFilter(Filter):
    """Free-text search over one or more fields. Restricts hits and facets alike."""

    def __init__(self, request_field: str, fields: Iterable[str], **kwargs: Any) -> None:
        super().__init__(request_field, **kwargs)
        self.fields = tuple(fields)

    def parse_value(self, value: Any) -> str | None:
        text = str(value).strip()
        return text or None

    def modify_search(self, search: Search, state: FilterState, request: Any) -> None:  # noqa: ARG002
        if state.active:
            search.add_query(MatchClause(self.fields, state.value))
