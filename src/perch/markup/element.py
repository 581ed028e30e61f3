"""Render single HTML elements.

``render_element`` is the only place perch assembles tags. Attribute
values are always escaped; element contents are trusted markup (already
rendered children, or raw HTML the caller vouched for).

Usage::

    render_element("li.active", {"data-id": 3}, '<a href="/">Home</a>')
    # <li class="active" data-id="3"><a href="/">Home</a></li>

    render_element("ul", {}, [first_li, second_li])
    # <ul>...first...second...</ul>
"""

import html
from collections.abc import Iterable, Mapping
from typing import Any

from kida.template import Markup

type Contents = str | Mapping[Any, str] | Iterable[str] | None


def escape(value: Any) -> str:
    """Escape *value* for HTML, leaving ``Markup`` (anything with ``__html__``) untouched."""
    if hasattr(value, "__html__"):
        return str(value.__html__())
    return html.escape(str(value), quote=True)


def render_attributes(attributes: Mapping[str, Any]) -> str:
    """Serialize *attributes* in insertion order, each with a leading space.

    ``None`` and ``False`` omit the attribute. ``True`` and ``""`` render
    the bare name (``disabled``).
    """
    rendered: list[str] = []
    for name, value in attributes.items():
        if value is None or value is False:
            continue
        if value is True or value == "":
            rendered.append(f" {name}")
            continue
        rendered.append(f' {name}="{html.escape(str(value), quote=True)}"')
    return "".join(rendered)


def _split_tag(tag: str) -> tuple[str, list[str]]:
    name, *classes = tag.split(".")
    return name, [cls for cls in classes if cls]


def _render_contents(contents: Contents) -> str:
    if contents is None:
        return ""
    if isinstance(contents, str) or hasattr(contents, "__html__"):
        return str(contents)
    if isinstance(contents, Mapping):
        # Keys are labels only; insertion order decides output order
        return "".join(str(child) for child in contents.values())
    return "".join(str(child) for child in contents)


def render_element(tag: str, attributes: Mapping[str, Any], contents: Contents = None) -> Markup:
    """Render ``<tag attributes>contents</tag>``.

    *tag* may carry class shorthand (``"li.active"``, ``"ul.nav.main"``).
    Shorthand classes come first in the ``class`` attribute, followed by
    any classes already in *attributes*; the ``class`` attribute is then
    rendered before the other attributes.
    """
    name, classes = _split_tag(tag)
    if classes:
        existing = attributes.get("class")
        if existing:
            classes.extend(cls for cls in str(existing).split() if cls not in classes)
        attributes = {
            "class": " ".join(classes),
            **{key: value for key, value in attributes.items() if key != "class"},
        }
    return Markup(f"<{name}{render_attributes(attributes)}>{_render_contents(contents)}</{name}>")
