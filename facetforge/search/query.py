"""
Search — Engine-Neutral Query Builder.

A Search is accumulated by filters and then handed to a SearchEngine:

- queries: clauses that restrict both hits and aggregations
- post_filters: clauses that restrict hits only, so that aggregations can be
  computed under a different filter context
- aggregations: named facet computations, each with its own extra clauses
- sorts, offset, limit: hit ordering and paging

Clauses know how to evaluate themselves against a document dict so the
in-memory engine can run them directly; the SQL engine compiles them.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

Document = dict[str, Any]


def field_values(document: Document, field_name: str) -> list[Any]:
    """Values of a field as a list (list-valued fields are flattened)."""
    value = document.get(field_name)
    if value is None:
        return []
    if isinstance(value, list | tuple | set):
        return list(value)
    return [value]


# =============================================================================
# CLAUSES
# =============================================================================


class Clause(ABC):
    """A boolean condition over a document."""

    @abstractmethod
    def matches(self, document: Document) -> bool:
        """Check whether a document satisfies the clause."""


@dataclass(frozen=True)
class TermClause(Clause):
    """Field equals one of the given values."""

    field: str
    values: tuple[Any, ...]

    def matches(self, document: Document) -> bool:
        return any(value in self.values for value in field_values(document, self.field))


@dataclass(frozen=True)
class RangeClause(Clause):
    """Field lies within [gte, lte]; a missing bound is open."""

    field: str
    gte: float | None = None
    lte: float | None = None

    def matches(self, document: Document) -> bool:
        for value in field_values(document, self.field):
            if not isinstance(value, int | float):
                continue
            if self.gte is not None and value < self.gte:
                continue
            if self.lte is not None and value > self.lte:
                continue
            return True
        return False


@dataclass(frozen=True)
class MatchClause(Clause):
    """
    Free-text match.

    Every whitespace-separated term must occur (case-insensitive substring)
    in at least one of the fields.
    """

    fields: tuple[str, ...]
    text: str

    @property
    def terms(self) -> list[str]:
        return [term.lower() for term in self.text.split() if term]

    def matches(self, document: Document) -> bool:
        haystacks = [
            str(value).lower()
            for field_name in self.fields
            for value in field_values(document, field_name)
        ]
        return all(any(term in haystack for haystack in haystacks) for term in self.terms)


# =============================================================================
# AGGREGATIONS
# =============================================================================


@dataclass(frozen=True)
class TermsAggregation:
    """Document counts per distinct field value."""

    field: str
    filters: tuple[Clause, ...] = ()
    size: int = 50


@dataclass(frozen=True)
class StatsAggregation:
    """Count, min and max of a numeric field."""

    field: str
    filters: tuple[Clause, ...] = ()


Aggregation = TermsAggregation | StatsAggregation


@dataclass(frozen=True)
class SortSpec:
    field: str
    descending: bool = False


# =============================================================================
# SEARCH
# =============================================================================


@dataclass
class Search:
    """Mutable query builder owned by one search call."""

    queries: list[Clause] = field(default_factory=list)
    post_filters: list[Clause] = field(default_factory=list)
    aggregations: dict[str, Aggregation] = field(default_factory=dict)
    sorts: list[SortSpec] = field(default_factory=list)
    offset: int = 0
    limit: int | None = None

    def add_query(self, clause: Clause) -> "Search":
        self.queries.append(clause)
        return self

    def add_post_filter(self, clause: Clause) -> "Search":
        self.post_filters.append(clause)
        return self

    def add_aggregation(self, name: str, aggregation: Aggregation) -> "Search":
        """
        Register a named aggregation.

        Raises:
            ValueError: If the name is already taken
        """
        if name in self.aggregations:
            raise ValueError(f"Aggregation '{name}' is already defined")
        self.aggregations[name] = aggregation
        return self

    def add_sort(self, field_name: str, descending: bool = False) -> "Search":
        self.sorts.append(SortSpec(field=field_name, descending=descending))
        return self

    def set_pagination(self, offset: int, limit: int | None) -> "Search":
        self.offset = max(0, offset)
        self.limit = limit
        return self

    def hit_clauses(self) -> list[Clause]:
        """Every clause that restricts hits."""
        return [*self.queries, *self.post_filters]

    def aggregation_clauses(self, aggregation: Aggregation) -> list[Clause]:
        """Every clause that restricts the documents of an aggregation."""
        return [*self.queries, *aggregation.filters]
