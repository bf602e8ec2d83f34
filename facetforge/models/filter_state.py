from dataclasses import dataclass, field
from typing import Any


@dataclass
class FilterState:
    """
    Per-request snapshot of one filter.

    Built fresh for every incoming request and never persisted.

    Attributes:
        name: Registry name of the filter
        active: Whether the request carries a usable value for the filter
        value: Parsed value (None when inactive)
        url_parameters: Query-string parameters that reproduce this state
    """

    name: str = ""
    active: bool = False
    value: Any = None
    url_parameters: dict[str, Any] = field(default_factory=dict)
