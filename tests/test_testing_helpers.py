"""Tests for perch.testing — menu assertion helpers."""

import pytest

from perch.items.link import Link
from perch.menu import Menu
from perch.testing import (
    active_urls,
    assert_active_urls,
    assert_menu_contains,
    assert_menu_not_contains,
)


def _menu() -> Menu:
    return (
        Menu.new()
        .link("/", "Home")
        .link("/about", "About")
        .add(Menu.new().link("/about/team", "Team").html("<hr>"))
        .set_active_from_url("/about/team")
    )


class TestActiveUrls:
    def test_depth_first_render_order(self) -> None:
        assert active_urls(_menu()) == ["/about", "/about/team"]

    def test_empty(self) -> None:
        assert active_urls(Menu.new()) == []

    def test_none_active(self) -> None:
        assert active_urls(Menu.new().link("/", "Home")) == []


class TestAssertActiveUrls:
    def test_passes(self) -> None:
        assert_active_urls(_menu(), ["/about", "/about/team"])

    def test_accepts_any_iterable(self) -> None:
        assert_active_urls(_menu(), (url for url in ["/about", "/about/team"]))

    def test_fails_with_both_lists(self) -> None:
        with pytest.raises(AssertionError, match=r"Expected active URLs \['/'\]"):
            assert_active_urls(_menu(), ["/"])


class TestAssertMenuContains:
    def test_passes(self) -> None:
        assert_menu_contains(_menu(), '<li class="active"><a href="/about">About</a></li>')

    def test_fails(self) -> None:
        with pytest.raises(AssertionError, match="does not contain"):
            assert_menu_contains(Menu.new(), "Home")

    def test_not_contains_passes(self) -> None:
        assert_menu_not_contains(_menu(), '<li class="active"><a href="/">')

    def test_not_contains_fails(self) -> None:
        menu = Menu.new().add(Link.to("/", "Home"))
        with pytest.raises(AssertionError, match="unexpectedly contains"):
            assert_menu_not_contains(menu, "Home")
