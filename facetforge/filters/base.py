"""
Filter Contract.

A filter is a pluggable unit representing one facet of a search. The
orchestrator drives every registered filter through the same steps:

1. get_state(raw)                       parse the request value
2. modify_search(search, state, req)    contribute clauses to a Search
3. pre_process_search(search, related, state)
                                        add aggregations to the combined
                                        Search, using the related Search
                                        (built without this filter) for
                                        their context
4. get_view_data(result, view_data)     enrich the seeded view data

Filters that need a specialised ViewData also implement ViewDataFactory.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import Any, Protocol, runtime_checkable

from facetforge.engine.base import ResultSet
from facetforge.models.filter_state import FilterState
from facetforge.models.view_data import ViewData
from facetforge.relations.relation import Relation, everything
from facetforge.search.query import Search


@runtime_checkable
class ViewDataFactory(Protocol):
    """Capability: the filter seeds its own ViewData subclass."""

    def create_view_data(self) -> ViewData: ...


class Filter(ABC):
    """
    Base class for all filters.

    Attributes:
        request_field: Query-string key the filter reads and writes
        search_relation: Which other filters restrict this filter's
            aggregation context (the filter itself is always left out)
        reset_relation: Which filter states survive in this filter's links
        tags: Labels used to group filters in the output
    """

    def __init__(
        self,
        request_field: str,
        *,
        search_relation: Relation | None = None,
        reset_relation: Relation | None = None,
        tags: Iterable[str] = (),
    ) -> None:
        self.request_field = request_field
        self.search_relation = everything() if search_relation is None else search_relation
        self.reset_relation = everything() if reset_relation is None else reset_relation
        self.tags = frozenset(tags)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(request_field={self.request_field!r})"

    def get_state(self, raw: Mapping[str, Any]) -> FilterState:
        """
        Build the filter state from the raw request.

        Missing, empty or unparseable values yield an inactive state with no
        URL parameters.
        """
        state = FilterState()
        value = raw.get(self.request_field)
        if value is None or value == "":
            return state

        parsed = self.parse_value(value)
        if parsed is None:
            return state

        state.active = True
        state.value = parsed
        state.url_parameters = {self.request_field: value}
        return state

    def parse_value(self, value: Any) -> Any:
        """Parse a raw value. Return None to reject it."""
        return value

    @abstractmethod
    def modify_search(self, search: Search, state: FilterState, request: Any) -> None:
        """Add this filter's clauses to a search."""

    def pre_process_search(
        self,
        search: Search,
        related_search: Search,
        state: FilterState,
    ) -> None:
        """Add aggregations to the combined search. No-op by default."""

    def get_view_data(self, result: ResultSet, view_data: ViewData) -> ViewData:
        """Enrich the seeded view data. Returns it unchanged by default."""
        return view_data
