"""Item capabilities and capability-filtered dispatch.

A menu tree holds heterogeneous nodes: links, raw HTML chunks, nested
menus, or anything else that renders. Instead of branching on concrete
classes, callbacks declare the *kind* of item they handle and the menu
only hands them matching items::

    menu.each(lambda link: link.add_class("nav-link"), kind=Link)

    @applies_to(ActivatableUrl)
    def track(item):
        seen.append(item.url())

    menu.apply_to_all(track)

A kind is a class, a runtime-checkable Protocol (checked structurally,
no inheritance required), or a tuple of kinds that must *all* hold.
``None`` matches every item. No base class required. The menu checks
the shape, not the lineage.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

# A capability tag: a class/Protocol, an all-of tuple, or None for "any item"
type Kind = type | tuple[Kind, ...] | None

KIND_ATTRIBUTE = "__perch_kind__"


@runtime_checkable
class Item(Protocol):
    """Anything that can sit in a menu."""

    def render(self) -> str: ...
    def is_active(self) -> bool: ...
    def parent_attributes(self) -> dict[str, Any]: ...


@runtime_checkable
class Activatable(Protocol):
    """An item that can be marked active and inactive.

    Menus are not activatable: their state is derived from their items,
    and ``Menu.set_active`` resolves children rather than storing a flag.
    """

    def is_active(self) -> bool: ...
    def set_active(self, active: bool | Callable[[], bool] = True) -> Any: ...
    def set_inactive(self) -> Any: ...


@runtime_checkable
class HasUrl(Protocol):
    """An item that points somewhere."""

    def url(self) -> str: ...


@runtime_checkable
class ActivatableUrl(HasUrl, Activatable, Protocol):
    """An item with a URL that can be marked active.

    The items URL matching operates on.
    """


def applies_to[F: Callable[..., Any]](kind: Kind) -> Callable[[F], F]:
    """Tag a callback with the kind of item it handles.

    The tag is read whenever the callback is passed to ``each``,
    ``register_filter``, ``apply_to_all`` or ``set_active`` without an
    explicit ``kind=``::

        @applies_to(Menu)
        def collapse(submenu: Menu) -> None:
            submenu.add_parent_class("collapsed")
    """

    def decorate(callback: F) -> F:
        setattr(callback, KIND_ATTRIBUTE, kind)
        return callback

    return decorate


def kind_of(callback: Callable[..., Any], kind: Kind = None) -> Kind:
    """Resolve the kind for *callback*: explicit *kind* wins over the tag."""
    if kind is not None:
        return kind
    return getattr(callback, KIND_ATTRIBUTE, None)


def implements(item: object, kind: Kind) -> bool:
    """Return True if *item* satisfies *kind*.

    ``None`` matches everything. A tuple requires every member to match,
    unlike ``isinstance`` where a tuple means any of them.
    """
    if kind is None:
        return True
    if isinstance(kind, tuple):
        return all(implements(item, member) for member in kind)
    return isinstance(item, kind)


@dataclass(frozen=True, slots=True)
class Filter:
    """A callback bound to the kind of item it applies to.

    Calling a filter with an item that does not implement its kind is a
    no-op.
    """

    action: Callable[[Any], object]
    kind: Kind = None

    @classmethod
    def of(cls, callback: Callable[[Any], object], kind: Kind = None) -> Filter:
        """Build a filter, reading the kind from an ``@applies_to`` tag if not given."""
        return cls(callback, kind_of(callback, kind))

    def matches(self, item: object) -> bool:
        return implements(item, self.kind)

    def __call__(self, item: object) -> None:
        if self.matches(item):
            self.action(item)
