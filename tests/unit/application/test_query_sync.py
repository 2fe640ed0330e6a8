"""Unit tests for QuerySync and the navigation state implementations."""
from __future__ import annotations

from locator_state.application.navigation import (
    QuerySync,
    UrlNavigationState,
    delete_param,
    replace_param,
)
from locator_state.testing.fakes import InMemoryNavigationState


class TestParamHelpers:
    def test_replace_keeps_position_of_first_occurrence(self) -> None:
        params = [("query", "a"), ("lang", "it"), ("query", "b")]
        assert replace_param(params, "query", "c") == [("query", "c"), ("lang", "it")]

    def test_replace_appends_absent_name(self) -> None:
        assert replace_param([("tag", "a")], "query", "x") == [("tag", "a"), ("query", "x")]

    def test_replace_leaves_other_repeated_names(self) -> None:
        params = [("tag", "a"), ("tag", "b")]
        assert replace_param(params, "query", "x") == [("tag", "a"), ("tag", "b"), ("query", "x")]

    def test_delete_removes_every_occurrence(self) -> None:
        assert delete_param([("type", "a"), ("tag", "t"), ("type", "b")], "type") == [("tag", "t")]

    def test_helpers_do_not_mutate_input(self) -> None:
        params = [("query", "a")]
        replace_param(params, "query", "b")
        delete_param(params, "query")
        assert params == [("query", "a")]


class TestUrlNavigationState:
    def test_reads_params(self) -> None:
        nav = UrlNavigationState("/locator?query=coffee&type=store")
        assert nav.get_param("query") == "coffee"
        assert nav.params() == [("query", "coffee"), ("type", "store")]

    def test_repeated_params_preserved(self) -> None:
        nav = UrlNavigationState("/locator?tag=a&tag=b")
        assert nav.params() == [("tag", "a"), ("tag", "b")]
        assert nav.get_param("tag") == "a"

    def test_push_appends_history(self) -> None:
        nav = UrlNavigationState("/locator")
        nav.push([("query", "tea")])
        assert nav.url == "/locator?query=tea"
        assert nav.history == ["/locator", "/locator?query=tea"]

    def test_push_empty_leaves_bare_question_mark(self) -> None:
        nav = UrlNavigationState("/locator?query=tea")
        nav.push([])
        assert nav.url == "/locator?"


class TestQuerySync:
    def test_initial_query_present(self) -> None:
        sync = QuerySync(UrlNavigationState("/?query=coffee"))
        assert sync.initial_query() == "coffee"

    def test_initial_query_absent_or_empty(self) -> None:
        assert QuerySync(UrlNavigationState("/")).initial_query() is None
        assert QuerySync(UrlNavigationState("/?query=")).initial_query() is None

    def test_record_search_sets_query_and_drops_type(self) -> None:
        nav = InMemoryNavigationState([("type", "store"), ("lang", "it")])
        QuerySync(nav).record_search("milano")
        assert nav.pushed == [[("lang", "it"), ("query", "milano")]]

    def test_record_search_keeps_repeated_params(self) -> None:
        nav = UrlNavigationState("/locator?tag=a&tag=b&type=x")
        QuerySync(nav).record_search("milano")
        assert nav.url == "/locator?tag=a&tag=b&query=milano"

    def test_record_search_replaces_existing_query_in_place(self) -> None:
        nav = UrlNavigationState("/locator?query=old&tag=a")
        QuerySync(nav).record_search("new")
        assert nav.url == "/locator?query=new&tag=a"

    def test_record_empty_search_removes_query(self) -> None:
        nav = InMemoryNavigationState([("query", "old")])
        QuerySync(nav).record_search("")
        assert nav.params() == []

    def test_record_none_removes_query(self) -> None:
        nav = InMemoryNavigationState([("query", "old")])
        QuerySync(nav).record_search(None)
        assert nav.get_param("query") is None

    def test_round_trip_leaves_url_unchanged(self) -> None:
        nav = UrlNavigationState("/locator?query=coffee+shop")
        sync = QuerySync(nav)
        query = sync.initial_query()
        assert query == "coffee shop"
        sync.record_search(query)
        assert nav.url == "/locator?query=coffee+shop"
