"""perch exception hierarchy.

Shared across Menu, the leaf items, and configuration so every module
raises and catches the same types.

Only programmer errors raise. Capability mismatches, cross-host links
and empty link paths are silent no-ops during active-state resolution,
never exceptions.
"""


class MenuError(Exception):
    """Base for all perch-specific errors."""


class ConfigurationError(MenuError):
    """Raised when a ``MenuConfig`` value is invalid.

    Caught nowhere inside perch; surfaces where the config is built.
    """


class InvalidActiveTarget(MenuError, TypeError):
    """``Menu.set_active()`` received neither a URL string nor a callable."""

    def __init__(self, target: object) -> None:
        self.target = target
        super().__init__(
            f"`set_active` requires a URL string or a callable, got {type(target).__name__}"
        )
