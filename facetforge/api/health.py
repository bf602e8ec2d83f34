"""
Health check endpoint.

Liveness probe; reports how many filters are registered.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from facetforge.api.dependencies import get_filters_manager
from facetforge.search.manager import FiltersManager

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    filters: int


@router.get("/health", response_model=HealthResponse)
async def health(
    manager: Annotated[FiltersManager, Depends(get_filters_manager)],
) -> HealthResponse:
    """
    Liveness probe.

    Returns healthy if the service is running. Does not touch the engine.
    """
    return HealthResponse(status="healthy", filters=len(manager.container))
