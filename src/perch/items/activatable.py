"""Stored active state for leaf items."""

from collections.abc import Callable
from typing import Self


class ActivatableMixin:
    """Mixin implementing the ``Activatable`` capability.

    The state is either a bool or a zero-argument callable evaluated on
    every ``is_active()`` call::

        link.set_active(lambda: request.path == "/admin")
    """

    _active: bool | Callable[[], bool] = False

    def set_active(self, active: bool | Callable[[], bool] = True) -> Self:
        self._active = active
        return self

    def set_inactive(self) -> Self:
        self._active = False
        return self

    def is_active(self) -> bool:
        if callable(self._active):
            return bool(self._active())
        return self._active
