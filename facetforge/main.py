from importlib.metadata import version as pkg_version

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from facetforge.api import health_router, search_router
from facetforge.api.error_handlers import register_error_handlers
from facetforge.config import settings
from facetforge.search.manager import FiltersManager


def create_app(manager: FiltersManager) -> FastAPI:
    """
    Build the HTTP application around a configured FiltersManager.

    Filter configuration lives with the caller; the app only serves it.
    """
    app = FastAPI(
        title=settings.app_name,
        version=pkg_version("facetforge"),
        debug=settings.debug,
    )
    app.state.filters_manager = manager

    app.include_router(health_router)
    app.include_router(search_router)

    register_error_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Tighten in production
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    return app
