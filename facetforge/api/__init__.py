from facetforge.api.health import router as health_router
from facetforge.api.search import router as search_router

__all__ = [
    "health_router",
    "search_router",
]
