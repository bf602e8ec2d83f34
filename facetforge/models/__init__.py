from facetforge.models.failure import (
    ApiResponse,
    EngineExecutionError,
    FailureDetail,
    FailureKind,
    FilterNotFoundError,
    KnownError,
    OutcomeType,
    ParameterCollisionError,
    UnknownFilterReferenceError,
)
from facetforge.models.filter_state import FilterState
from facetforge.models.view_data import (
    Choice,
    ChoicesAwareViewData,
    PagerAwareViewData,
    RangeAwareViewData,
    ViewData,
)

__all__ = [
    "ApiResponse",
    "Choice",
    "ChoicesAwareViewData",
    "EngineExecutionError",
    "FailureDetail",
    "FailureKind",
    "FilterNotFoundError",
    "FilterState",
    "KnownError",
    "OutcomeType",
    "PagerAwareViewData",
    "ParameterCollisionError",
    "RangeAwareViewData",
    "UnknownFilterReferenceError",
    "ViewData",
]
