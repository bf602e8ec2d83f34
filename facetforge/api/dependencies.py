from fastapi import Request

from facetforge.search.manager import FiltersManager


def get_filters_manager(request: Request) -> FiltersManager:
    """
    Dependency that provides the application's FiltersManager.

    The manager is attached to app.state by create_app(); tests may override
    this dependency instead.
    """
    manager: FiltersManager = request.app.state.filters_manager
    return manager
