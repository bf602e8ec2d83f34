"""
Filters Container — The Filter Registry.

Single source of truth for which filters exist, in which order, and how they
relate to each other. Built once at startup and read-only afterwards, so one
container can serve concurrent requests.

INVARIANTS:
- Registration order is preserved by every derived view
- Every name referenced by a search or reset relation is registered
- Filter names are unique
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from facetforge.filters.base import Filter
from facetforge.models.failure import FilterNotFoundError, UnknownFilterReferenceError
from facetforge.relations.relation import Relation
from facetforge.search.query import Search
from facetforge.search.request import SearchRequest

logger = logging.getLogger(__name__)


class FiltersContainer:
    """Ordered, immutable registry of named filters."""

    def __init__(self, filters: Mapping[str, Filter] | None = None) -> None:
        self._filters: Mapping[str, Filter] = MappingProxyType(dict(filters or {}))
        self._validate_relations()

        logger.debug("filters_container_built", extra={"filters": list(self._filters)})

    def __contains__(self, name: object) -> bool:
        return name in self._filters

    def __len__(self) -> int:
        return len(self._filters)

    def _validate_relations(self) -> None:
        for name, filter_ in self._filters.items():
            referenced = (
                filter_.search_relation.referenced_names()
                | filter_.reset_relation.referenced_names()
            )
            unknown = [ref for ref in referenced if ref not in self._filters]
            if unknown:
                raise UnknownFilterReferenceError(name, unknown)

    def all(self) -> Mapping[str, Filter]:
        """All filters keyed by name, in registration order."""
        return self._filters

    def get(self, name: str) -> Filter:
        """
        Look up a filter by name.

        Raises:
            FilterNotFoundError: If the name is not registered
        """
        try:
            return self._filters[name]
        except KeyError:
            raise FilterNotFoundError(name) from None

    def filters_matching(self, relation: Relation) -> dict[str, Filter]:
        """Filters whose name satisfies the relation, in registration order."""
        return {name: filter_ for name, filter_ in self._filters.items() if relation.matches(name)}

    def build_search_request(self, raw: Mapping[str, Any]) -> SearchRequest:
        """Parse the raw request into one FilterState per registered filter."""
        states = {}
        for name, filter_ in self._filters.items():
            state = filter_.get_state(raw)
            state.name = name
            states[name] = state
        return SearchRequest(states, raw)

    def build_search(
        self,
        request: SearchRequest,
        filters: Mapping[str, Filter] | None = None,
    ) -> Search:
        """
        Build a Search from the given filters (all registered filters by default).

        Each filter contributes its own clauses through modify_search().
        """
        search = Search()
        for name, filter_ in (self._filters if filters is None else filters).items():
            filter_.modify_search(search, request.value_for(name), request)
        return search
