import pytest

from facetforge.engine.memory import InMemorySearchEngine
from facetforge.filters import (
    ChoiceFilter,
    MatchFilter,
    PagerFilter,
    RangeFilter,
    SortChoice,
    SortFilter,
)
from facetforge.relations import exclude
from facetforge.search import manager as manager_module
from facetforge.search.container import FiltersContainer
from facetforge.search.manager import FiltersManager


@pytest.fixture(autouse=True)
def reset_metrics() -> None:
    """Reset search metrics before each test."""
    manager_module.reset_search_metrics()


@pytest.fixture
def catalog() -> list[dict]:
    """Small product catalog used across tests."""
    return [
        {"id": 1, "title": "Trail Runner", "category": "shoes", "brand": "acme", "price": 40.0},
        {"id": 2, "title": "Road Runner", "category": "shoes", "brand": "zoom", "price": 90.0},
        {"id": 3, "title": "Canvas Sneaker", "category": "shoes", "brand": "acme", "price": 25.0},
        {"id": 4, "title": "Rain Jacket", "category": "jackets", "brand": "acme", "price": 120.0},
        {"id": 5, "title": "Down Jacket", "category": "jackets", "brand": "north", "price": 200.0},
        {"id": 6, "title": "Wool Socks", "category": "socks", "brand": "zoom", "price": 12.0},
    ]


@pytest.fixture
def container() -> FiltersContainer:
    """Registry with one filter of every kind. Choosing a facet resets the page."""
    return FiltersContainer(
        {
            "q": MatchFilter("q", ["title"], reset_relation=exclude("page")),
            "category": ChoiceFilter(
                "category", "category", reset_relation=exclude("page"), tags=["facet"]
            ),
            "brand": ChoiceFilter("brand", "brand", reset_relation=exclude("page"), tags=["facet"]),
            "price": RangeFilter("price", "price", reset_relation=exclude("page")),
            "sort": SortFilter(
                "sort",
                [
                    SortChoice("price_asc", "price", label="Cheapest first", default=True),
                    SortChoice("price_desc", "price", descending=True, label="Priciest first"),
                ],
                reset_relation=exclude("page"),
            ),
            "page": PagerFilter("page", per_page=2, max_pages=5),
        }
    )


@pytest.fixture
def manager(container: FiltersContainer, catalog: list[dict]) -> FiltersManager:
    return FiltersManager(container, InMemorySearchEngine(catalog), strict_url_parameters=False)
