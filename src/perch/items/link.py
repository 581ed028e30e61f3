"""Hyperlink menu item."""

from typing import Self

from kida.template import Markup

from perch.items.activatable import ActivatableMixin
from perch.markup.attributes import HtmlAttributes, ParentAttributes
from perch.markup.element import escape, render_element


class Link(ActivatableMixin, HtmlAttributes, ParentAttributes):
    """An ``<a>`` element. Implements ``Item``, ``Activatable`` and ``HasUrl``.

    Plain-string text is escaped on render; pass ``Markup`` to embed
    HTML (icons, badges)::

        Link.to("/inbox", Markup('Inbox <span class="badge">3</span>'))
    """

    def __init__(self, url: str, text: str) -> None:
        self._url = url
        self._text = text
        self._init_html_attributes()
        self._init_parent_attributes()

    @classmethod
    def to(cls, url: str, text: str) -> Self:
        return cls(url, text)

    def url(self) -> str:
        return self._url

    def text(self) -> str:
        return self._text

    def prefix(self, prefix: str) -> Self:
        """Prepend *prefix* to the URL, joining with exactly one ``/``.

        ``Link.to("/", "Home").prefix("/admin")`` points at ``/admin``,
        ``Link.to("users", "Users").prefix("/admin/")`` at ``/admin/users``.
        """
        head = prefix.rstrip("/")
        tail = self._url.lstrip("/")
        if not tail:
            self._url = head or "/"
        else:
            self._url = f"{head}/{tail}"
        return self

    def render(self) -> Markup:
        return render_element("a", {"href": self._url, **self.attributes()}, escape(self._text))

    def __repr__(self) -> str:
        return f"Link({self._url!r}, {self._text!r})"
