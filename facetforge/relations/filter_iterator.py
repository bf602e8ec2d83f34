"""
Filter State Iterator.

Lazily yields the filter states whose name satisfies a relation, in source
order. Every call to iter() walks the source again, so one iterator can be
consumed more than once as long as the source itself is re-iterable
(a SearchRequest, a dict, a list of pairs).
"""

from collections.abc import Iterable, Iterator, Mapping

from facetforge.models.filter_state import FilterState
from facetforge.relations.relation import Relation


class FilterIterator:
    """Relation-filtered view over (name, FilterState) pairs."""

    def __init__(
        self,
        source: Mapping[str, FilterState] | Iterable[tuple[str, FilterState]],
        relation: Relation,
    ) -> None:
        self._source = source
        self._relation = relation

    def __iter__(self) -> Iterator[FilterState]:
        pairs = self._source.items() if isinstance(self._source, Mapping) else self._source
        for name, state in pairs:
            if self._relation.matches(name):
                yield state

    def names(self) -> Iterator[str]:
        """Yield only the matching names."""
        for state in self:
            yield state.name
