"""
In-memory search engine.

Evaluates a Search against a list of document dicts. Useful for tests,
fixtures and small catalogs that fit in memory.

INVARIANTS:
- Same documents + same Search → same ResultSet (deterministic)
- Hits keep source order unless the Search sorts them
- Terms buckets are ordered by count (desc), then key (asc)
- Documents missing a sort field come after all others
"""

import logging
from collections import Counter
from collections.abc import Iterable
from typing import Any

from facetforge.engine.base import Bucket, ResultSet, StatsResult, TermsResult
from facetforge.search.query import (
    Aggregation,
    Clause,
    Document,
    Search,
    StatsAggregation,
    TermsAggregation,
    field_values,
)

logger = logging.getLogger(__name__)


def _matches_all(document: Document, clauses: list[Clause]) -> bool:
    return all(clause.matches(document) for clause in clauses)


def _sort_key(value: Any) -> tuple[int, Any]:
    # Numbers first; mixed types compare by their string form
    if isinstance(value, int | float):
        return (0, value)
    return (1, str(value))


class InMemorySearchEngine:
    """SearchEngine over a fixed list of documents."""

    def __init__(self, documents: Iterable[Document]) -> None:
        self._documents = list(documents)

    def __len__(self) -> int:
        return len(self._documents)

    def execute(self, search: Search) -> ResultSet:
        hit_clauses = search.hit_clauses()
        hits = [doc for doc in self._documents if _matches_all(doc, hit_clauses)]

        # Stable sorts applied from the last key to the first
        for sort in reversed(search.sorts):
            hits.sort(key=lambda doc, f=sort.field: _sort_key(doc.get(f)), reverse=sort.descending)
            # Missing values go last in either direction
            hits.sort(key=lambda doc, f=sort.field: doc.get(f) is None)

        total = len(hits)
        end = None if search.limit is None else search.offset + search.limit
        page = hits[search.offset : end]

        aggregations = {
            name: self._aggregate(search, aggregation)
            for name, aggregation in search.aggregations.items()
        }

        logger.debug(
            "memory_search_executed",
            extra={"total": total, "returned": len(page), "aggregations": len(aggregations)},
        )

        return ResultSet(
            documents=[dict(doc) for doc in page],
            total=total,
            aggregations=aggregations,
        )

    def _aggregate(self, search: Search, aggregation: Aggregation) -> TermsResult | StatsResult:
        clauses = search.aggregation_clauses(aggregation)
        documents = [doc for doc in self._documents if _matches_all(doc, clauses)]

        if isinstance(aggregation, TermsAggregation):
            counts: Counter[Any] = Counter()
            for doc in documents:
                # A list-valued field counts the document once per distinct value
                for value in set(field_values(doc, aggregation.field)):
                    counts[value] += 1
            ordered = sorted(counts.items(), key=lambda item: (-item[1], _sort_key(item[0])))
            return TermsResult(
                buckets=tuple(
                    Bucket(key=key, count=count) for key, count in ordered[: aggregation.size]
                )
            )

        if isinstance(aggregation, StatsAggregation):
            numbers = [
                value
                for doc in documents
                for value in field_values(doc, aggregation.field)
                if isinstance(value, int | float)
            ]
            if not numbers:
                return StatsResult()
            return StatsResult(count=len(numbers), min=min(numbers), max=max(numbers))

        raise TypeError(f"Unsupported aggregation: {type(aggregation).__name__}")
