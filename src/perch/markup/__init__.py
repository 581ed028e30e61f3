"""HTML element rendering and attribute bags used by menus and items."""

from perch.markup.attributes import Attributes, HtmlAttributes, ParentAttributes
from perch.markup.element import escape, render_attributes, render_element

__all__ = [
    "Attributes",
    "HtmlAttributes",
    "ParentAttributes",
    "escape",
    "render_attributes",
    "render_element",
]
