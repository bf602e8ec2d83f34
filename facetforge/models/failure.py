"""
Failure Classification — Typed Errors and the API Response Envelope.

Every failure the orchestrator can produce is a distinct KnownError subclass
carrying a FailureKind. Nothing is swallowed or retried internally: a search
either returns a full SearchResponse or raises one of these.

Error kinds:
- FilterNotFoundError: lookup of an unregistered filter name
- UnknownFilterReferenceError: a relation names a filter that is not registered
- ParameterCollisionError: two filter states write the same URL key (strict mode)
- EngineExecutionError: the search engine failed to execute the query

The HTTP layer converts KnownError into an ApiResponse envelope.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Lookup failures
    NOT_FOUND = "not_found"

    # Configuration failures
    INVALID_CONFIGURATION = "invalid_configuration"
    PARAMETER_COLLISION = "parameter_collision"

    # Engine failures
    ENGINE_FAILURE = "engine_failure"

    # Unknown
    UNKNOWN = "unknown"


class OutcomeType(str, Enum):
    """High-level outcome classification."""

    KNOWN_FAILURE = "known_failure"
    UNKNOWN_FAILURE = "unknown_failure"


class FailureDetail(BaseModel):
    """Detailed information about a failure."""

    kind: FailureKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="Explanation of what went wrong",
    )
    detail: str | None = Field(
        default=None,
        description="Additional technical detail (optional)",
    )


class ApiResponse(BaseModel):
    """Response envelope used by the HTTP layer for failures."""

    outcome: OutcomeType = Field(
        ...,
        description="High-level classification of the result",
    )
    failure: FailureDetail | None = Field(
        default=None,
        description="Failure details",
    )

    @classmethod
    def known_failure(
        cls,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
    ) -> "ApiResponse":
        """Create a known failure response."""
        return cls(
            outcome=OutcomeType.KNOWN_FAILURE,
            failure=FailureDetail(kind=kind, message=message, detail=detail),
        )

    @classmethod
    def unknown_failure(cls, detail: str | None = None) -> "ApiResponse":
        """
        Create an unknown failure response.

        The message is fixed; only the exception type goes into detail.
        """
        return cls(
            outcome=OutcomeType.UNKNOWN_FAILURE,
            failure=FailureDetail(
                kind=FailureKind.UNKNOWN,
                message="The search failed for an unknown reason.",
                detail=detail,
            ),
        )


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        status_code: int = 400,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.status_code = status_code
        super().__init__(message)

    def to_response(self) -> ApiResponse:
        """Convert to an ApiResponse."""
        return ApiResponse.known_failure(
            kind=self.kind,
            message=self.message,
            detail=self.detail,
        )


class FilterNotFoundError(KnownError):
    """Raised when a filter name is not present in the registry."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            kind=FailureKind.NOT_FOUND,
            message=f"Filter '{name}' is not registered.",
            status_code=404,
        )


class UnknownFilterReferenceError(KnownError):
    """
    Raised when a filter's relation references a name that is not registered.

    Relations are literal values, so a typo in configuration would otherwise
    silently match nothing (or everything).
    """

    def __init__(self, filter_name: str, unknown_names: list[str]):
        self.filter_name = filter_name
        self.unknown_names = unknown_names
        super().__init__(
            kind=FailureKind.INVALID_CONFIGURATION,
            message=(
                f"Filter '{filter_name}' references unknown filters: "
                f"{', '.join(sorted(unknown_names))}."
            ),
            status_code=500,
        )


class ParameterCollisionError(KnownError):
    """Raised in strict mode when two filter states write the same URL key."""

    def __init__(self, key: str, previous_value: Any, value: Any):
        self.key = key
        self.previous_value = previous_value
        self.value = value
        super().__init__(
            kind=FailureKind.PARAMETER_COLLISION,
            message=f"URL parameter '{key}' is written by more than one filter.",
            detail=f"{previous_value!r} overwritten by {value!r}",
            status_code=500,
        )


class EngineExecutionError(KnownError):
    """Raised by a search engine when the combined query cannot be executed."""

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(
            kind=FailureKind.ENGINE_FAILURE,
            message=message,
            detail=detail,
            status_code=502,
        )
