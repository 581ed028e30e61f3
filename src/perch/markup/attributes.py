"""Attribute bags for menus and items.

Every menu and item owns two bags: its own ``attributes()`` (rendered on
its element, e.g. the ``<ul>`` or ``<a>``) and its
``parent_attributes()`` (rendered on the ``<li>`` a parent menu wraps it
in). Bags are per instance and never shared.
"""

from collections.abc import Mapping
from typing import Any, Self


class Attributes:
    """An ordered, mutable attribute bag with class-list merging.

    ``class`` is kept as a de-duplicated list so repeated ``add_class``
    calls accumulate instead of overwriting.
    """

    __slots__ = ("_attributes", "_classes")

    def __init__(self, attributes: Mapping[str, Any] | None = None) -> None:
        self._attributes: dict[str, Any] = {}
        self._classes: list[str] = []
        if attributes:
            self.update(attributes)

    def set(self, name: str, value: Any = "") -> None:
        if name == "class":
            self._classes = []
            if value is not None and value is not False:
                self.add_class(str(value))
            return
        self._attributes[name] = value

    def update(self, attributes: Mapping[str, Any]) -> None:
        for name, value in attributes.items():
            self.set(name, value)

    def add_class(self, *classes: str) -> None:
        """Add one or more classes; each argument may hold several, space-separated."""
        for value in classes:
            for cls in value.split():
                if cls not in self._classes:
                    self._classes.append(cls)

    def to_dict(self) -> dict[str, Any]:
        """Return a copy, with ``class`` joined and placed last."""
        result = dict(self._attributes)
        if self._classes:
            result["class"] = " ".join(self._classes)
        return result

    def __len__(self) -> int:
        return len(self._attributes) + (1 if self._classes else 0)

    def __repr__(self) -> str:
        return f"Attributes({self.to_dict()!r})"


class HtmlAttributes:
    """Mixin: fluent setters for an object's own element attributes."""

    _html_attributes: Attributes

    def _init_html_attributes(self) -> None:
        self._html_attributes = Attributes()

    def set_attribute(self, name: str, value: Any = "") -> Self:
        self._html_attributes.set(name, value)
        return self

    def set_attributes(self, attributes: Mapping[str, Any]) -> Self:
        self._html_attributes.update(attributes)
        return self

    def add_class(self, *classes: str) -> Self:
        self._html_attributes.add_class(*classes)
        return self

    def set_id(self, element_id: str) -> Self:
        return self.set_attribute("id", element_id)

    def attributes(self) -> dict[str, Any]:
        return self._html_attributes.to_dict()


class ParentAttributes:
    """Mixin: fluent setters for the wrapper element a parent menu renders.

    Usage::

        Link.to("/about", "About").add_parent_class("nav-item")
        # <li class="nav-item"><a href="/about">About</a></li>
    """

    _parent_attributes: Attributes

    def _init_parent_attributes(self) -> None:
        self._parent_attributes = Attributes()

    def set_parent_attribute(self, name: str, value: Any = "") -> Self:
        self._parent_attributes.set(name, value)
        return self

    def set_parent_attributes(self, attributes: Mapping[str, Any]) -> Self:
        self._parent_attributes.update(attributes)
        return self

    def add_parent_class(self, *classes: str) -> Self:
        self._parent_attributes.add_class(*classes)
        return self

    def parent_attributes(self) -> dict[str, Any]:
        return self._parent_attributes.to_dict()
