"""Tests for the bundled filter widgets."""

import pytest

from facetforge.engine.base import Bucket, ResultSet, StatsResult, TermsResult
from facetforge.filters import (
    ChoiceFilter,
    Filter,
    MatchFilter,
    PagerFilter,
    RangeFilter,
    SortChoice,
    SortFilter,
    ViewDataFactory,
)
from facetforge.models.filter_state import FilterState
from facetforge.models.view_data import (
    ChoicesAwareViewData,
    PagerAwareViewData,
    RangeAwareViewData,
)
from facetforge.relations import AllRelation, exclude
from facetforge.search.query import (
    MatchClause,
    RangeClause,
    Search,
    SortSpec,
    StatsAggregation,
    TermClause,
    TermsAggregation,
)


class TestFilterBase:
    def test_defaults(self) -> None:
        filter_ = MatchFilter("q", ["title"])
        assert filter_.search_relation == AllRelation()
        assert filter_.reset_relation == AllRelation()
        assert filter_.tags == frozenset()

    def test_cannot_instantiate_abstract_filter(self) -> None:
        with pytest.raises(TypeError):
            Filter("x")  # type: ignore[abstract]

    @pytest.mark.parametrize("raw", [{}, {"q": ""}, {"q": None}, {"q": "   "}])
    def test_missing_or_blank_value_is_inactive(self, raw: dict) -> None:
        state = MatchFilter("q", ["title"]).get_state(raw)
        assert state.active is False
        assert state.url_parameters == {}

    def test_active_state_keeps_raw_value_in_url(self) -> None:
        state = MatchFilter("q", ["title"]).get_state({"q": " trail "})
        assert state.active is True
        assert state.value == "trail"
        assert state.url_parameters == {"q": " trail "}

    def test_view_data_capability(self) -> None:
        assert isinstance(ChoiceFilter("c", "c"), ViewDataFactory)
        assert isinstance(PagerFilter(), ViewDataFactory)
        assert not isinstance(MatchFilter("q", ["title"]), ViewDataFactory)


class TestChoiceFilter:
    def test_modify_search_adds_post_filter(self) -> None:
        filter_ = ChoiceFilter("category", "category_id", value_type=int)
        search = Search()
        filter_.modify_search(search, filter_.get_state({"category": "7"}), None)
        assert search.post_filters == [TermClause("category_id", (7,))]

    def test_invalid_value_is_inactive(self) -> None:
        state = ChoiceFilter("category", "category_id", value_type=int).get_state({"category": "x"})
        assert state.active is False

    def test_pre_process_uses_related_context(self) -> None:
        filter_ = ChoiceFilter("brand", "brand", size=5)
        search = Search()
        related = Search(post_filters=[TermClause("category", ("shoes",))])

        filter_.pre_process_search(search, related, FilterState(name="brand"))

        assert search.aggregations == {
            "brand": TermsAggregation("brand", (TermClause("category", ("shoes",)),), 5)
        }

    def test_view_data_uses_labels(self) -> None:
        filter_ = ChoiceFilter("brand", "brand", labels={"acme": "ACME Corp."})
        view_data = ChoicesAwareViewData(name="brand", state=FilterState(name="brand"))
        result = ResultSet(aggregations={"brand": TermsResult((Bucket("acme", 3), Bucket("zoom", 1)))})

        filter_.get_view_data(result, view_data)

        assert [(c.label, c.count, c.url_parameters) for c in view_data.choices] == [
            ("ACME Corp.", 3, {"brand": "acme"}),
            ("zoom", 1, {"brand": "zoom"}),
        ]

    def test_view_data_without_aggregation(self) -> None:
        view_data = ChoicesAwareViewData(name="brand")
        ChoiceFilter("brand", "brand").get_view_data(ResultSet(), view_data)
        assert view_data.choices == []


class TestRangeFilter:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("10;50", (10.0, 50.0)),
            ("10;", (10.0, None)),
            (";50", (None, 50.0)),
            ("1.5;2.5", (1.5, 2.5)),
        ],
    )
    def test_parse_valid(self, raw: str, expected: tuple) -> None:
        assert RangeFilter("price", "price").parse_value(raw) == expected

    @pytest.mark.parametrize("raw", ["10", "a;b", ";", "50;10", "1;2;3"])
    def test_parse_invalid(self, raw: str) -> None:
        assert RangeFilter("price", "price").parse_value(raw) is None

    def test_custom_separator(self) -> None:
        assert RangeFilter("price", "price", separator="-").parse_value("10-50") == (10.0, 50.0)

    def test_modify_and_pre_process(self) -> None:
        filter_ = RangeFilter("price", "price")
        state = filter_.get_state({"price": "10;50"})
        state.name = "price"
        search = Search()

        filter_.modify_search(search, state, None)
        filter_.pre_process_search(search, Search(), state)

        assert search.post_filters == [RangeClause("price", gte=10.0, lte=50.0)]
        assert search.aggregations == {"price": StatsAggregation("price")}

    def test_view_data_bounds(self) -> None:
        view_data = RangeAwareViewData(name="price")
        result = ResultSet(aggregations={"price": StatsResult(count=3, min=5.0, max=80.0)})
        RangeFilter("price", "price").get_view_data(result, view_data)
        assert (view_data.min_bounds, view_data.max_bounds) == (5.0, 80.0)


class TestPagerFilter:
    @pytest.mark.parametrize(("raw", "page"), [("3", 3), ("0", 1), ("-2", 1), ("x", 1), (None, 1)])
    def test_pagination(self, raw: str | None, page: int) -> None:
        filter_ = PagerFilter(per_page=10)
        search = Search()
        filter_.modify_search(search, filter_.get_state({"page": raw}), None)
        assert (search.offset, search.limit) == ((page - 1) * 10, 10)

    def test_per_page_is_capped(self) -> None:
        assert PagerFilter(per_page=10_000).per_page == 200

    def test_view_data(self) -> None:
        filter_ = PagerFilter(per_page=10, max_pages=3)
        view_data = filter_.create_view_data()
        view_data.state = filter_.get_state({"page": "4"})

        filter_.get_view_data(ResultSet(total=95), view_data)

        assert isinstance(view_data, PagerAwareViewData)
        assert view_data.current_page == 4
        assert view_data.num_pages == 10
        assert view_data.get_pages() == [3, 4, 5]


class TestSortFilter:
    @pytest.fixture
    def sort_filter(self) -> SortFilter:
        return SortFilter(
            "sort",
            [
                SortChoice("newest", "created_at", descending=True, default=True),
                SortChoice("cheapest", "price"),
            ],
            reset_relation=exclude("page"),
        )

    def test_default_choice(self, sort_filter: SortFilter) -> None:
        search = Search()
        sort_filter.modify_search(search, sort_filter.get_state({}), None)
        assert search.sorts == [SortSpec("created_at", descending=True)]

    def test_selected_choice(self, sort_filter: SortFilter) -> None:
        search = Search()
        sort_filter.modify_search(search, sort_filter.get_state({"sort": "cheapest"}), None)
        assert search.sorts == [SortSpec("price")]

    def test_unknown_choice_falls_back(self, sort_filter: SortFilter) -> None:
        state = sort_filter.get_state({"sort": "random"})
        assert state.active is False

    def test_view_data_links(self, sort_filter: SortFilter) -> None:
        view_data = ChoicesAwareViewData(
            name="sort",
            state=sort_filter.get_state({"sort": "cheapest"}),
            url_parameters={"sort": "cheapest", "brand": "acme"},
            reset_url_parameters={"brand": "acme"},
        )

        sort_filter.get_view_data(ResultSet(), view_data)

        assert [(c.label, c.active, c.url_parameters) for c in view_data.choices] == [
            ("newest", False, {"brand": "acme"}),
            ("cheapest", True, {"sort": "cheapest", "brand": "acme"}),
        ]


class TestMatchFilter:
    def test_adds_query_clause(self) -> None:
        filter_ = MatchFilter("q", ["title", "brand"])
        search = Search()
        filter_.modify_search(search, filter_.get_state({"q": "rain jacket"}), None)
        assert search.queries == [MatchClause(("title", "brand"), "rain jacket")]
        assert search.post_filters == []
