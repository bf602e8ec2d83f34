from facetforge.engine.base import (
    AggregationResult,
    Bucket,
    ResultSet,
    SearchEngine,
    StatsResult,
    TermsResult,
)
from facetforge.engine.memory import InMemorySearchEngine
from facetforge.engine.sql import SqlSearchEngine

__all__ = [
    "AggregationResult",
    "Bucket",
    "InMemorySearchEngine",
    "ResultSet",
    "SearchEngine",
    "SqlSearchEngine",
    "StatsResult",
    "TermsResult",
]
