from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from facetforge.models.failure import FilterNotFoundError
from facetforge.models.filter_state import FilterState


class SearchRequest(Mapping[str, FilterState]):
    """
    Parsed incoming request: one FilterState per registered filter.

    Iterates in registry order. Read-only once built.
    """

    def __init__(
        self,
        states: Mapping[str, FilterState] | None = None,
        raw: Mapping[str, Any] | None = None,
    ) -> None:
        self._states = MappingProxyType(dict(states or {}))
        self._raw = MappingProxyType(dict(raw or {}))

    def __getitem__(self, name: str) -> FilterState:
        return self._states[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._states)

    def __len__(self) -> int:
        return len(self._states)

    def __repr__(self) -> str:
        active = [name for name, state in self._states.items() if state.active]
        return f"SearchRequest(filters={len(self)}, active={active})"

    @property
    def raw(self) -> Mapping[str, Any]:
        """The inbound parameters the states were parsed from."""
        return self._raw

    def value_for(self, name: str) -> FilterState:
        """
        State of a registered filter.

        Raises:
            FilterNotFoundError: If no filter with that name was registered
        """
        try:
            return self._states[name]
        except KeyError:
            raise FilterNotFoundError(name) from None
