"""
Relation Algebra — Predicates Over Filter Names.

A relation decides which filters influence another filter's search context
(search relation) or which filter states survive in a link (reset relation).

Relations are frozen values. They are built with the factory functions below
and combined with `&` / `|`:

    and_(exclude("price"), include("category", "brand"))
    exclude("page") & filter.search_relation

LAWS:
- and_() matches every name
- or_() matches no name
- exclude() matches every name
- and_ / or_ are commutative and associative under matches()
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass


class Relation(ABC):
    """Base class for all relations."""

    @abstractmethod
    def matches(self, name: str) -> bool:
        """Check whether a filter name satisfies this relation."""

    @abstractmethod
    def referenced_names(self) -> frozenset[str]:
        """All filter names literally mentioned by this relation."""

    def __and__(self, other: "Relation") -> "AndRelation":
        return AndRelation((self, other))

    def __or__(self, other: "Relation") -> "OrRelation":
        return OrRelation((self, other))


@dataclass(frozen=True)
class AllRelation(Relation):
    """Matches every name."""

    def matches(self, name: str) -> bool:  # noqa: ARG002
        return True

    def referenced_names(self) -> frozenset[str]:
        return frozenset()


@dataclass(frozen=True)
class ExcludeRelation(Relation):
    """Matches every name not listed."""

    names: frozenset[str] = frozenset()

    def matches(self, name: str) -> bool:
        return name not in self.names

    def referenced_names(self) -> frozenset[str]:
        return self.names


@dataclass(frozen=True)
class IncludeRelation(Relation):
    """Matches only the listed names."""

    names: frozenset[str] = frozenset()

    def matches(self, name: str) -> bool:
        return name in self.names

    def referenced_names(self) -> frozenset[str]:
        return self.names


@dataclass(frozen=True)
class AndRelation(Relation):
    """Matches when every sub-relation matches. Empty matches everything."""

    relations: tuple[Relation, ...] = ()

    def matches(self, name: str) -> bool:
        return all(relation.matches(name) for relation in self.relations)

    def referenced_names(self) -> frozenset[str]:
        return _union_names(self.relations)


@dataclass(frozen=True)
class OrRelation(Relation):
    """Matches when any sub-relation matches. Empty matches nothing."""

    relations: tuple[Relation, ...] = ()

    def matches(self, name: str) -> bool:
        return any(relation.matches(name) for relation in self.relations)

    def referenced_names(self) -> frozenset[str]:
        return _union_names(self.relations)


def _union_names(relations: Iterable[Relation]) -> frozenset[str]:
    names: set[str] = set()
    for relation in relations:
        names |= relation.referenced_names()
    return frozenset(names)


# =============================================================================
# FACTORIES
# =============================================================================


def everything() -> AllRelation:
    """Relation matching every filter name."""
    return AllRelation()


def exclude(*names: str) -> ExcludeRelation:
    """Relation matching every name except the given ones."""
    return ExcludeRelation(frozenset(names))


def include(*names: str) -> IncludeRelation:
    """Relation matching only the given names."""
    return IncludeRelation(frozenset(names))


def and_(*relations: Relation) -> AndRelation:
    """Conjunction of relations."""
    return AndRelation(tuple(relations))


def or_(*relations: Relation) -> OrRelation:
    """Disjunction of relations."""
    return OrRelation(tuple(relations))
