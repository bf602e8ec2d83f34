"""
Search API endpoints.

GET /search         full faceted search: documents, per-filter view data,
                    and the URL parameters of the current state
GET /search/simple  documents only, without facet computation

Query-string parameters are passed straight to the filters; each filter
reads its own request field.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, Field

from facetforge.api.dependencies import get_filters_manager
from facetforge.search.manager import FiltersManager

router = APIRouter(prefix="/search", tags=["search"])


class SearchResponseModel(BaseModel):
    """Response model for a faceted search."""

    filters: dict[str, dict[str, Any]] = Field(default_factory=dict)
    documents: list[dict[str, Any]] = Field(default_factory=list)
    total: int = 0
    url_parameters: dict[str, Any] = Field(default_factory=dict)


class SimpleSearchResponseModel(BaseModel):
    """Response model for a search without facets."""

    documents: list[dict[str, Any]] = Field(default_factory=list)
    total: int = 0


# Sync handlers: FastAPI runs them in its threadpool, so a blocking engine
# call does not stall the event loop.


@router.get("", response_model=SearchResponseModel)
def search(
    request: Request,
    manager: Annotated[FiltersManager, Depends(get_filters_manager)],
) -> SearchResponseModel:
    """Run the faceted search described by the query string."""
    response = manager.execute(request.query_params)
    return SearchResponseModel(**response.serialize())


@router.get("/simple", response_model=SimpleSearchResponseModel)
def simple_search(
    request: Request,
    manager: Annotated[FiltersManager, Depends(get_filters_manager)],
) -> SimpleSearchResponseModel:
    """Run the search without computing facets."""
    result = manager.simple_search(request.query_params)
    return SimpleSearchResponseModel(documents=result.documents, total=result.total)
