"""
Filters Manager — Entry Point for Faceted Search Execution.

For every request the manager:
1. Builds the combined Search from all registered filters
2. For each filter, builds a related Search from the filters it is related
   to, itself excluded, and lets the filter pre-process the combined Search
   with it (this is where facet aggregations get their context)
3. Executes the combined Search once
4. Assembles per-filter view data and the URL parameters for
   "apply", "reset" and "remove" links

INVARIANTS:
- A filter never restricts its own aggregation context
- View data keys equal the registry names, in registry order
- Engine and filter failures propagate unchanged (no partial responses)
"""

import logging
import time
from collections import deque
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from facetforge.config import MAX_METRICS_HISTORY, settings
from facetforge.engine.base import ResultSet, SearchEngine
from facetforge.filters.base import Filter, ViewDataFactory
from facetforge.models.failure import ParameterCollisionError
from facetforge.models.view_data import ViewData
from facetforge.relations.filter_iterator import FilterIterator
from facetforge.relations.relation import Relation, and_, exclude
from facetforge.search.container import FiltersContainer
from facetforge.search.request import SearchRequest
from facetforge.search.response import SearchResponse

logger = logging.getLogger(__name__)


@dataclass
class SearchMetrics:
    """Metrics recorded per faceted search."""

    filters: int = 0
    active_filters: int = 0
    related_searches: int = 0
    total_hits: int = 0
    elapsed_ms: float = 0.0


# Module-level metrics accumulator, keeps the most recent searches only
_metrics_history: deque[SearchMetrics] = deque(maxlen=MAX_METRICS_HISTORY)


def get_search_metrics() -> list[SearchMetrics]:
    """Get all recorded metrics."""
    return list(_metrics_history)


def reset_search_metrics() -> None:
    """Reset metrics history (for testing)."""
    _metrics_history.clear()


def related_relation(name: str, filter_: Filter) -> Relation:
    """Filters related to `filter_`, with the filter itself always left out."""
    return and_(filter_.search_relation, exclude(name))


class FiltersManager:
    """Coordinates filters, the registry and the search engine."""

    def __init__(
        self,
        container: FiltersContainer,
        engine: SearchEngine,
        *,
        strict_url_parameters: bool | None = None,
    ) -> None:
        self.container = container
        self.engine = engine
        if strict_url_parameters is None:
            strict_url_parameters = settings.strict_url_parameters
        self.strict_url_parameters = strict_url_parameters

    def execute(self, raw: Mapping[str, Any]) -> SearchResponse:
        """Parse a raw request and run the faceted search."""
        return self.search(self.container.build_search_request(raw))

    def search(self, request: SearchRequest) -> SearchResponse:
        """
        Run a faceted search.

        Raises:
            EngineExecutionError: If the engine cannot execute the search
            Any exception raised by a filter, unchanged
        """
        started = time.perf_counter()
        metrics = SearchMetrics(filters=len(self.container))

        search = self.container.build_search(request)

        for name, filter_ in self.container.all().items():
            related = self.container.filters_matching(related_relation(name, filter_))
            filter_.pre_process_search(
                search,
                self.container.build_search(request, related),
                request.value_for(name),
            )
            metrics.related_searches += 1

        result = self.engine.execute(search)

        response = SearchResponse(
            view_data=self.get_filters_view_data(result, request),
            result=result,
            url_parameters=self.compose_url_parameters(request),
        )

        metrics.active_filters = sum(1 for state in request.values() if state.active)
        metrics.total_hits = result.total
        metrics.elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
        _metrics_history.append(metrics)

        logger.info(
            "search_executed",
            extra={
                "filters": metrics.filters,
                "active_filters": metrics.active_filters,
                "total_hits": metrics.total_hits,
                "elapsed_ms": metrics.elapsed_ms,
            },
        )

        return response

    def simple_search(self, raw: Mapping[str, Any]) -> ResultSet:
        """Execute the default search without facet pre-processing."""
        request = self.container.build_search_request(raw)
        return self.engine.execute(self.container.build_search(request))

    def compose_url_parameters(
        self,
        request: SearchRequest,
        filter_: Filter | None = None,
        exclude_names: str | Iterable[str] = (),
    ) -> dict[str, Any]:
        """
        Merge the URL parameters of the filter states selected for a link.

        - No filter: every state ("keep everything")
        - With filter: states kept by the filter's reset relation
        - With filter and exclude_names: additionally drops those states (a
          single name may be passed as a plain string)

        Later states win on key collisions. Every collision is logged, or
        raised as ParameterCollisionError in strict mode.
        """
        conditions: list[Relation] = []
        if filter_ is not None:
            conditions.append(filter_.reset_relation)

        if isinstance(exclude_names, str):
            exclude_names = (exclude_names,)
        excluded = tuple(exclude_names)
        if excluded:
            conditions.append(exclude(*excluded))

        out: dict[str, Any] = {}
        owners: dict[str, str] = {}

        for state in FilterIterator(request, and_(*conditions)):
            for key, value in state.url_parameters.items():
                if key in out:
                    self._on_collision(key, owners[key], state.name, out[key], value)
                out[key] = value
                owners[key] = state.name

        return out

    def _on_collision(self, key: str, previous: str, current: str, old: Any, new: Any) -> None:
        if self.strict_url_parameters:
            raise ParameterCollisionError(key, old, new)
        logger.warning(
            "url_parameter_collision",
            extra={"key": key, "previous_filter": previous, "filter": current},
        )

    def get_filters_view_data(
        self,
        result: ResultSet,
        request: SearchRequest,
    ) -> dict[str, ViewData]:
        """Create view data for each filter, in registry order."""
        out: dict[str, ViewData] = {}

        for name, filter_ in self.container.all().items():
            if isinstance(filter_, ViewDataFactory):
                view_data = filter_.create_view_data()
            else:
                view_data = ViewData()

            view_data.name = name
            view_data.url_parameters = self.compose_url_parameters(request, filter_)
            view_data.state = request.value_for(name)
            view_data.tags = filter_.tags
            view_data.reset_url_parameters = self.compose_url_parameters(request, filter_, [name])

            out[name] = filter_.get_view_data(result, view_data)

        return out
