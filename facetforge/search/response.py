from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from facetforge.engine.base import ResultSet
from facetforge.models.view_data import ViewData


@dataclass(frozen=True)
class SearchResponse:
    """
    Outcome of one faceted search.

    Attributes:
        view_data: One ViewData per registered filter, in registry order
        result: The engine's ResultSet for the combined search
        url_parameters: Parameters reproducing the full current state
    """

    view_data: Mapping[str, ViewData] = field(default_factory=dict)
    result: ResultSet = field(default_factory=ResultSet)
    url_parameters: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "view_data", MappingProxyType(dict(self.view_data)))
        object.__setattr__(self, "url_parameters", MappingProxyType(dict(self.url_parameters)))

    def serialize(self) -> dict[str, Any]:
        """Plain dict suitable for JSON rendering."""
        return {
            "filters": {name: data.serialize() for name, data in self.view_data.items()},
            "documents": list(self.result.documents),
            "total": self.result.total,
            "url_parameters": dict(self.url_parameters),
        }
