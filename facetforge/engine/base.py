"""
Search engine contract and result types.

The orchestrator only ever calls execute(search) once per faceted search.
Engines raise EngineExecutionError when the query cannot be run; the
orchestrator propagates it unchanged.
"""

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from facetforge.search.query import Search


@dataclass(frozen=True)
class Bucket:
    """One distinct value of a terms aggregation."""

    key: Any
    count: int


@dataclass(frozen=True)
class TermsResult:
    buckets: tuple[Bucket, ...] = ()


@dataclass(frozen=True)
class StatsResult:
    count: int = 0
    min: float | None = None
    max: float | None = None


AggregationResult = TermsResult | StatsResult


@dataclass
class ResultSet:
    """Hits and aggregation payload of one executed Search."""

    documents: list[dict[str, Any]] = field(default_factory=list)
    total: int = 0
    aggregations: dict[str, AggregationResult] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.documents)

    def __iter__(self):
        return iter(self.documents)

    def get_aggregation(self, name: str) -> AggregationResult | None:
        return self.aggregations.get(name)


@runtime_checkable
class SearchEngine(Protocol):
    """Anything that can execute a Search."""

    def execute(self, search: Search) -> ResultSet:
        """Run the search and return its results."""
        ...
