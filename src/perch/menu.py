"""The Menu composite.

A Menu is an ordered list of items that is itself an item, so menus
nest to any depth. Build it fluently, mark the current location active,
render it::

    menu = (
        Menu.new()
        .link("/", "Home")
        .link("/about", "About")
        .add(Menu.new().link("/about/team", "Team"))
        .set_active_from_url(request.path)
    )
    html = menu.render()

Active state flows upward: a menu reports ``is_active()`` whenever one
of its direct children does, computed on every call rather than stored.

Filters registered on a menu run against every item added afterward.
``apply_to_all`` additionally runs the callback over the existing items
right away, which is how ``prefix_links`` and the ``set_active_*``
methods keep applying to items added after they were called.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Self

from kida.template import Markup

from perch import urls
from perch.capabilities import (
    Activatable,
    ActivatableUrl,
    Filter,
    Item,
    Kind,
    implements,
    kind_of,
)
from perch.config import MenuConfig
from perch.errors import InvalidActiveTarget
from perch.items.html import Html
from perch.items.link import Link
from perch.markup.attributes import HtmlAttributes, ParentAttributes
from perch.markup.element import render_element

logger = logging.getLogger("perch.menu")


class Menu(HtmlAttributes, ParentAttributes):
    """An ordered, nestable collection of menu items."""

    def __init__(self, *items: Item, config: MenuConfig | None = None) -> None:
        for item in items:
            _check_item(item)
        self._config = config if config is not None else MenuConfig()
        self._items: list[Item] = list(items)
        self._filters: list[Filter] = []
        self._prepend = ""
        self._append = ""
        self._active_class = self._config.active_class
        self._init_html_attributes()
        self._init_parent_attributes()

    @classmethod
    def new(cls, items: Iterable[Item] = (), *, config: MenuConfig | None = None) -> Self:
        """Create a menu, optionally prefilled with *items* (order preserved)."""
        return cls(*items, config=config)

    @property
    def config(self) -> MenuConfig:
        return self._config

    # -- Adding items --

    def add(self, item: Item) -> Self:
        """Run every registered filter over *item*, then append it."""
        _check_item(item)
        for menu_filter in self._filters:
            menu_filter(item)
        self._items.append(item)
        return self

    def add_if(self, condition: object, item: Item) -> Self:
        if condition:
            self.add(item)
        return self

    def link(self, url: str, text: str) -> Self:
        return self.add(Link.to(url, text))

    def link_if(self, condition: object, url: str, text: str) -> Self:
        if condition:
            self.link(url, text)
        return self

    def html(self, html: str) -> Self:
        return self.add(Html.raw(html))

    def html_if(self, condition: object, html: str) -> Self:
        if condition:
            self.html(html)
        return self

    # -- Callbacks and filters --

    def each(self, callback: Callable[[Any], object], kind: Kind = None) -> Self:
        """Call *callback* once for every existing item implementing *kind*.

        *kind* falls back to the callback's ``@applies_to`` tag; without
        either, every item matches.
        """
        resolved = kind_of(callback, kind)
        for item in tuple(self._items):
            if implements(item, resolved):
                callback(item)
        return self

    def register_filter(self, callback: Callable[[Any], object], kind: Kind = None) -> Self:
        """Run *callback* on every item of *kind* added from now on."""
        self._filters.append(Filter.of(callback, kind))
        return self

    def apply_to_all(self, callback: Callable[[Any], object], kind: Kind = None) -> Self:
        """Run *callback* on existing items of *kind* and register it as a filter."""
        self.each(callback, kind)
        self.register_filter(callback, kind)
        return self

    def prefix_links(self, prefix: str) -> Self:
        """Prefix the URL of every direct ``Link``, including ones added later."""
        return self.apply_to_all(lambda link: link.prefix(prefix), kind=Link)

    # -- Surrounding markup --

    def prepend(self, html: str) -> Self:
        """Render *html* before the list. Not escaped."""
        self._prepend = html
        return self

    def prepend_if(self, condition: object, html: str) -> Self:
        if condition:
            return self.prepend(html)
        return self

    def append(self, html: str) -> Self:
        """Render *html* after the list. Not escaped."""
        self._append = html
        return self

    def append_if(self, condition: object, html: str) -> Self:
        if condition:
            return self.append(html)
        return self

    # -- Active state --

    def is_active(self) -> bool:
        """True if any direct child is active."""
        return any(item.is_active() for item in self._items)

    def set_active(
        self,
        target: str | Callable[[Any], object],
        root: str | None = None,
    ) -> Self:
        """Dispatch to ``set_active_from_url`` or ``set_active_from_callable``.

        Raises:
            InvalidActiveTarget: *target* is neither a string nor callable.
        """
        if isinstance(target, str):
            return self.set_active_from_url(target, root)
        if callable(target):
            return self.set_active_from_callable(target)
        raise InvalidActiveTarget(target)

    def set_active_from_url(self, url: str, root: str | None = None) -> Self:
        """Mark links matching the request *url* active, at every depth.

        ``/, /about, /contact``: a request to ``/about/team`` activates
        ``/about``, never ``/``.

        ``/en, /en/about`` with ``root="/en"``: a request to ``/en/about``
        activates ``/en/about`` only; ``/en`` matches exact requests only.

        Matching is a plain string prefix: ``/about`` also matches
        ``/about-us``. Links on another host never match.

        The url and root are captured as filters, so links added later
        are matched against them too.
        """
        if root is None:
            root = self._config.root
        logger.debug("Resolving active items from url %r (root %r)", url, root)

        self.apply_to_all(lambda menu: menu.set_active_from_url(url, root), kind=Menu)

        request = urls.parts(url)
        if request.host and not request.path:
            # An absolute URL without a path is the site root
            request = urls.UrlParts(request.host, "/")
        request_root = urls.strip_trailing_separators(root)

        def activate(item: ActivatableUrl) -> None:
            if _url_is_active(item.url(), request, request_root):
                item.set_active()

        return self.apply_to_all(activate, kind=ActivatableUrl)

    def set_active_from_callable(
        self,
        predicate: Callable[[Any], object],
        kind: Kind = None,
    ) -> Self:
        """Mark every activatable item for which *predicate* is truthy active.

        Recurses into nested menus. *kind* (or the predicate's
        ``@applies_to`` tag) narrows which activatable items are tested.
        """
        resolved = kind_of(predicate, kind)
        logger.debug("Resolving active items from %r", predicate)

        self.apply_to_all(
            lambda menu: menu.set_active_from_callable(predicate, resolved),
            kind=Menu,
        )

        def activate(item: Activatable) -> None:
            if implements(item, resolved) and predicate(item):
                item.set_active()

        return self.apply_to_all(activate, kind=Activatable)

    def set_active_class(self, name: str) -> Self:
        """Class added to the wrapper of active children. Rendering only."""
        self._active_class = name
        return self

    # -- Rendering --

    def render(self) -> Markup:
        item_tag = self._config.item_tag
        active_tag = f"{item_tag}.{self._active_class}" if self._active_class else item_tag
        contents = render_element(
            self._config.list_tag,
            self.attributes(),
            [
                render_element(
                    active_tag if item.is_active() else item_tag,
                    item.parent_attributes(),
                    item.render(),
                )
                for item in self._items
            ],
        )
        return Markup(f"{self._prepend}{contents}{self._append}")

    def __html__(self) -> str:
        return str(self.render())

    def __str__(self) -> str:
        return str(self.render())

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Menu({', '.join(repr(item) for item in self._items)})"


def _check_item(item: object) -> None:
    if item is None:
        msg = "Menu items must not be None"
        raise TypeError(msg)


def _url_is_active(item_url: str, request: urls.UrlParts, root: str) -> bool:
    url = urls.parts(item_url)

    # A link to another host can't be active
    if url.host and url.host != request.host:
        return False

    # On the root, only exact matches count
    if request.path == root or url.path == root:
        return url.path == request.path

    # An empty path off the root is a misconfigured link
    if not url.path:
        return False

    return request.path.startswith(url.path)
