"""Raw HTML menu item."""

from typing import Self

from kida.template import Markup

from perch.markup.attributes import ParentAttributes


class Html(ParentAttributes):
    """A chunk of trusted HTML rendered verbatim. Never active.

    Useful for separators and headings between links::

        menu.add(Html.raw("<hr>").add_parent_class("divider"))
    """

    def __init__(self, html: str) -> None:
        self._html = html
        self._init_parent_attributes()

    @classmethod
    def raw(cls, html: str) -> Self:
        return cls(html)

    def is_active(self) -> bool:
        return False

    def render(self) -> Markup:
        return Markup(self._html)

    def __repr__(self) -> str:
        return f"Html({self._html!r})"
