"""Tests for the relation-filtered state iterator."""

from facetforge.models.filter_state import FilterState
from facetforge.relations import FilterIterator, everything, exclude, include
from facetforge.search.request import SearchRequest


def _states(*names: str) -> dict[str, FilterState]:
    return {name: FilterState(name=name, active=True, value=name) for name in names}


class TestFilterIterator:
    def test_yields_matching_states_in_source_order(self) -> None:
        states = _states("q", "category", "brand", "page")
        iterator = FilterIterator(states, exclude("brand"))
        assert [state.name for state in iterator] == ["q", "category", "page"]

    def test_accepts_pairs(self) -> None:
        pairs = list(_states("a", "b").items())
        assert list(FilterIterator(pairs, include("b")).names()) == ["b"]

    def test_restartable(self) -> None:
        iterator = FilterIterator(SearchRequest(_states("a", "b", "c")), everything())
        assert [s.name for s in iterator] == [s.name for s in iterator] == ["a", "b", "c"]

    def test_lazy(self) -> None:
        consumed: list[str] = []

        def source():
            for name in ["a", "b", "c"]:
                consumed.append(name)
                yield name, FilterState(name=name)

        iterator = iter(FilterIterator(source(), everything()))
        assert next(iterator).name == "a"
        assert consumed == ["a"]

    def test_empty_source(self) -> None:
        assert list(FilterIterator({}, everything())) == []
