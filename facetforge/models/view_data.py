"""
View Data — Per-Filter Output of a Search.

One ViewData is produced per registered filter for every response. The
orchestrator fills the common part (name, state, links, tags) and each filter
adds its own payload through get_view_data().

Filters that need a richer payload seed the orchestrator with one of the
subclasses below through create_view_data().
"""

import math
from dataclasses import dataclass, field
from typing import Any

from facetforge.models.filter_state import FilterState


@dataclass
class ViewData:
    """Common view data shared by every filter."""

    name: str = ""
    state: FilterState | None = None
    url_parameters: dict[str, Any] = field(default_factory=dict)
    reset_url_parameters: dict[str, Any] = field(default_factory=dict)
    tags: frozenset[str] = frozenset()

    def serialize(self) -> dict[str, Any]:
        """Plain dict suitable for JSON rendering."""
        state = self.state or FilterState(name=self.name)
        return {
            "name": self.name,
            "state": {
                "active": state.active,
                "value": state.value,
                "url_parameters": dict(state.url_parameters),
            },
            "url_parameters": dict(self.url_parameters),
            "reset_url_parameters": dict(self.reset_url_parameters),
            "tags": sorted(self.tags),
        }


@dataclass
class Choice:
    """A single selectable option of a choice-like filter."""

    label: str
    url_parameters: dict[str, Any] = field(default_factory=dict)
    count: int = 0
    active: bool = False
    default: bool = False


@dataclass
class ChoicesAwareViewData(ViewData):
    """View data listing selectable options."""

    choices: list[Choice] = field(default_factory=list)

    def add_choice(self, choice: Choice) -> None:
        self.choices.append(choice)

    def serialize(self) -> dict[str, Any]:
        data = super().serialize()
        data["choices"] = [
            {
                "label": choice.label,
                "count": choice.count,
                "active": choice.active,
                "default": choice.default,
                "url_parameters": dict(choice.url_parameters),
            }
            for choice in self.choices
        ]
        return data


@dataclass
class RangeAwareViewData(ViewData):
    """View data carrying the bounds a range filter can select within."""

    min_bounds: float | None = None
    max_bounds: float | None = None

    def serialize(self) -> dict[str, Any]:
        data = super().serialize()
        data["min_bounds"] = self.min_bounds
        data["max_bounds"] = self.max_bounds
        return data


@dataclass
class PagerAwareViewData(ViewData):
    """
    View data for pagination.

    The page window is at most max_pages wide and is centered on the current
    page where the total allows it.
    """

    current_page: int = 1
    total_items: int = 0
    per_page: int = 10
    max_pages: int = 10
    request_field: str = "page"

    @property
    def num_pages(self) -> int:
        if self.per_page <= 0:
            return 1
        return max(1, math.ceil(self.total_items / self.per_page))

    def get_pages(self) -> list[int]:
        """Page numbers to render, in ascending order."""
        width = max(1, self.max_pages)
        start = max(1, self.current_page - width // 2)
        end = min(self.num_pages, start + width - 1)
        start = max(1, end - width + 1)
        return list(range(start, end + 1))

    def get_previous_page(self) -> int | None:
        return self.current_page - 1 if self.current_page > 1 else None

    def get_next_page(self) -> int | None:
        return self.current_page + 1 if self.current_page < self.num_pages else None

    def url_parameters_for(self, page: int) -> dict[str, Any]:
        """Link parameters for a page, keeping every other filter's state."""
        parameters = dict(self.url_parameters)
        if page <= 1:
            parameters.pop(self.request_field, None)
        else:
            parameters[self.request_field] = page
        return parameters

    def serialize(self) -> dict[str, Any]:
        data = super().serialize()
        data["current_page"] = self.current_page
        data["total_items"] = self.total_items
        data["num_pages"] = self.num_pages
        data["previous_page"] = self.get_previous_page()
        data["next_page"] = self.get_next_page()
        data["pages"] = [
            {"page": page, "url_parameters": self.url_parameters_for(page)}
            for page in self.get_pages()
        ]
        return data
