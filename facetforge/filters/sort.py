from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from facetforge.engine.base import ResultSet
from facetforge.filters.base import Filter
from facetforge.models.filter_state import FilterState
from facetforge.models.view_data import Choice, ChoicesAwareViewData, ViewData
from facetforge.search.query import Search


@dataclass(frozen=True)
class SortChoice:
    """One selectable ordering."""

    key: str
    field: str
    descending: bool = False
    label: str | None = None
    default: bool = False


class SortFilter(Filter):
    """
    Hit ordering chosen from a fixed list of options.

    Unknown keys in the request fall back to the default option (the first
    one flagged default, otherwise no ordering).
    """

    def __init__(self, request_field: str, choices: Iterable[SortChoice], **kwargs: Any) -> None:
        super().__init__(request_field, **kwargs)
        self.choices = {choice.key: choice for choice in choices}
        self.default = next((choice for choice in self.choices.values() if choice.default), None)

    def parse_value(self, value: Any) -> str | None:
        return value if value in self.choices else None

    def selected(self, state: FilterState | None) -> SortChoice | None:
        if state is not None and state.active:
            return self.choices[state.value]
        return self.default

    def create_view_data(self) -> ChoicesAwareViewData:
        return ChoicesAwareViewData()

    def modify_search(self, search: Search, state: FilterState, request: Any) -> None:  # noqa: ARG002
        choice = self.selected(state)
        if choice is not None:
            search.add_sort(choice.field, descending=choice.descending)

    def get_view_data(self, result: ResultSet, view_data: ViewData) -> ViewData:  # noqa: ARG002
        if not isinstance(view_data, ChoicesAwareViewData):
            return view_data

        selected = self.selected(view_data.state)
        for choice in self.choices.values():
            if choice.default:
                parameters = dict(view_data.reset_url_parameters)
            else:
                parameters = {**view_data.url_parameters, self.request_field: choice.key}

            view_data.add_choice(
                Choice(
                    label=choice.label or choice.key,
                    url_parameters=parameters,
                    active=choice is selected,
                    default=choice.default,
                )
            )

        return view_data
