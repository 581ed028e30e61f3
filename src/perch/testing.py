"""Menu assertion helpers for tests.

Convenience functions to inspect active state and rendered output of
menu trees. Each assertion produces a clear error message on failure::

    from perch.testing import assert_active_urls

    menu.set_active_from_url("/about/team")
    assert_active_urls(menu, ["/about", "/about/team"])
"""

from collections.abc import Iterable

from perch.capabilities import ActivatableUrl, implements
from perch.menu import Menu


def active_urls(menu: Menu) -> list[str]:
    """Collect the URLs of active links, depth-first in render order."""
    found: list[str] = []
    for item in menu:
        if isinstance(item, Menu):
            found.extend(active_urls(item))
        elif implements(item, ActivatableUrl) and item.is_active():
            found.append(item.url())
    return found


def assert_active_urls(menu: Menu, expected: Iterable[str]) -> None:
    """Assert exactly *expected* links are active, in render order."""
    expected = list(expected)
    actual = active_urls(menu)
    assert actual == expected, (
        f"Expected active URLs {expected!r}, got {actual!r}"
    )


def assert_menu_contains(menu: Menu, text: str) -> None:
    """Assert the rendered menu contains the given text."""
    rendered = str(menu.render())
    assert text in rendered, (
        f"Menu does not contain {text!r}.\n"
        f"Rendered: {rendered[:500]}"
    )


def assert_menu_not_contains(menu: Menu, text: str) -> None:
    """Assert the rendered menu does **not** contain the given text."""
    rendered = str(menu.render())
    assert text not in rendered, (
        f"Menu unexpectedly contains {text!r}.\n"
        f"Rendered: {rendered[:500]}"
    )
