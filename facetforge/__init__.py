"""
facetforge — faceted search orchestration.

A FiltersManager runs one combined search for a set of registered filters,
gives every filter an aggregation context that leaves out its own selection,
and derives the URL parameters for "apply", "reset" and "remove" links.
"""

from facetforge.engine import InMemorySearchEngine, ResultSet, SearchEngine, SqlSearchEngine
from facetforge.filters import (
    ChoiceFilter,
    Filter,
    MatchFilter,
    PagerFilter,
    RangeFilter,
    SortChoice,
    SortFilter,
    ViewDataFactory,
)
from facetforge.models import FilterState, ViewData
from facetforge.relations import and_, everything, exclude, include, or_
from facetforge.search.container import FiltersContainer
from facetforge.search.manager import FiltersManager
from facetforge.search.query import Search
from facetforge.search.request import SearchRequest
from facetforge.search.response import SearchResponse

__all__ = [
    "ChoiceFilter",
    "Filter",
    "FilterState",
    "FiltersContainer",
    "FiltersManager",
    "InMemorySearchEngine",
    "MatchFilter",
    "PagerFilter",
    "RangeFilter",
    "ResultSet",
    "Search",
    "SearchEngine",
    "SearchRequest",
    "SearchResponse",
    "SortChoice",
    "SortFilter",
    "SqlSearchEngine",
    "ViewData",
    "ViewDataFactory",
    "and_",
    "everything",
    "exclude",
    "include",
    "or_",
]
