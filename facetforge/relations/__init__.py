from facetforge.relations.filter_iterator import FilterIterator
from facetforge.relations.relation import (
    AllRelation,
    AndRelation,
    ExcludeRelation,
    IncludeRelation,
    OrRelation,
    Relation,
    and_,
    everything,
    exclude,
    include,
    or_,
)

__all__ = [
    "AllRelation",
    "AndRelation",
    "ExcludeRelation",
    "FilterIterator",
    "IncludeRelation",
    "OrRelation",
    "Relation",
    "and_",
    "everything",
    "exclude",
    "include",
    "or_",
]
