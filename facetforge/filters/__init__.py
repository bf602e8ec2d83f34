"""
Filters for faceted search.

Every filter implements the Filter contract from `base`; the widgets below
cover the common facets.
"""

from facetforge.filters.base import Filter, ViewDataFactory
from facetforge.filters.choice import ChoiceFilter
from facetforge.filters.match import MatchFilter
from facetforge.filters.pager import PagerFilter
from facetforge.filters.range import RangeFilter
from facetforge.filters.sort import SortChoice, SortFilter

__all__ = [
    "ChoiceFilter",
    "Filter",
    "MatchFilter",
    "PagerFilter",
    "RangeFilter",
    "SortChoice",
    "SortFilter",
    "ViewDataFactory",
]
