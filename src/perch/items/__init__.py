"""Leaf menu items: links and raw HTML."""

from perch.items.activatable import ActivatableMixin
from perch.items.html import Html
from perch.items.link import Link

__all__ = ["ActivatableMixin", "Html", "Link"]
