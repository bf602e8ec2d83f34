"""Tests for view data serialization and the pager window."""

import pytest

from facetforge.models.filter_state import FilterState
from facetforge.models.view_data import (
    Choice,
    ChoicesAwareViewData,
    PagerAwareViewData,
    RangeAwareViewData,
    ViewData,
)


class TestViewDataSerialization:
    def test_plain(self) -> None:
        view_data = ViewData(
            name="q",
            state=FilterState(name="q", active=True, value="boots", url_parameters={"q": "boots"}),
            url_parameters={"q": "boots", "brand": "acme"},
            reset_url_parameters={"brand": "acme"},
            tags=frozenset({"b", "a"}),
        )
        assert view_data.serialize() == {
            "name": "q",
            "state": {"active": True, "value": "boots", "url_parameters": {"q": "boots"}},
            "url_parameters": {"q": "boots", "brand": "acme"},
            "reset_url_parameters": {"brand": "acme"},
            "tags": ["a", "b"],
        }

    def test_missing_state_serializes_inactive(self) -> None:
        assert ViewData(name="q").serialize()["state"] == {
            "active": False,
            "value": None,
            "url_parameters": {},
        }

    def test_choices(self) -> None:
        view_data = ChoicesAwareViewData(name="brand")
        view_data.add_choice(Choice(label="acme", url_parameters={"brand": "acme"}, count=2))
        assert view_data.serialize()["choices"] == [
            {
                "label": "acme",
                "count": 2,
                "active": False,
                "default": False,
                "url_parameters": {"brand": "acme"},
            }
        ]

    def test_range(self) -> None:
        data = RangeAwareViewData(name="price", min_bounds=1.0, max_bounds=9.0).serialize()
        assert (data["min_bounds"], data["max_bounds"]) == (1.0, 9.0)


class TestPagerWindow:
    @pytest.mark.parametrize(
        ("current", "total", "expected"),
        [
            (1, 0, [1]),
            (1, 25, [1, 2, 3]),
            (1, 100, [1, 2, 3, 4, 5]),
            (5, 100, [3, 4, 5, 6, 7]),
            (10, 100, [6, 7, 8, 9, 10]),
        ],
    )
    def test_pages(self, current: int, total: int, expected: list[int]) -> None:
        pager = PagerAwareViewData(current_page=current, total_items=total, per_page=10, max_pages=5)
        assert pager.get_pages() == expected

    def test_previous_and_next(self) -> None:
        pager = PagerAwareViewData(current_page=1, total_items=30, per_page=10)
        assert (pager.get_previous_page(), pager.get_next_page()) == (None, 2)
        pager.current_page = 3
        assert (pager.get_previous_page(), pager.get_next_page()) == (2, None)

    def test_page_links_keep_other_parameters(self) -> None:
        pager = PagerAwareViewData(url_parameters={"brand": "acme", "page": "3"})
        assert pager.url_parameters_for(1) == {"brand": "acme"}
        assert pager.url_parameters_for(4) == {"brand": "acme", "page": 4}
