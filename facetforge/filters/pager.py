from typing import Any

from facetforge.config import MAX_PER_PAGE, settings
from facetforge.engine.base import ResultSet
from facetforge.filters.base import Filter
from facetforge.models.filter_state import FilterState
from facetforge.models.view_data import PagerAwareViewData, ViewData
from facetforge.search.query import Search


class PagerFilter(Filter):
    """
    Pagination over the hits.

    The page number is 1-based; anything that is not a positive integer is
    treated as the first page.
    """

    def __init__(
        self,
        request_field: str = "page",
        *,
        per_page: int | None = None,
        max_pages: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(request_field, **kwargs)
        per_page = settings.default_per_page if per_page is None else per_page
        self.per_page = max(1, min(per_page, MAX_PER_PAGE))
        self.max_pages = settings.max_pages if max_pages is None else max_pages

    def parse_value(self, value: Any) -> int | None:
        try:
            page = int(value)
        except (TypeError, ValueError):
            return None
        return page if page >= 1 else None

    def current_page(self, state: FilterState | None) -> int:
        return state.value if state is not None and state.active else 1

    def create_view_data(self) -> PagerAwareViewData:
        return PagerAwareViewData(
            per_page=self.per_page,
            max_pages=self.max_pages,
            request_field=self.request_field,
        )

    def modify_search(self, search: Search, state: FilterState, request: Any) -> None:  # noqa: ARG002
        page = self.current_page(state)
        search.set_pagination((page - 1) * self.per_page, self.per_page)

    def get_view_data(self, result: ResultSet, view_data: ViewData) -> ViewData:
        if isinstance(view_data, PagerAwareViewData):
            view_data.current_page = self.current_page(view_data.state)
            view_data.total_items = result.total
        return view_data
