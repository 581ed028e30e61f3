"""Menu configuration.

MenuConfig is a frozen dataclass: immutable after creation, shared
freely between menus, no string-key dict lookups.
"""

import re
from dataclasses import dataclass

from perch.errors import ConfigurationError

_TAG_NAME = re.compile(r"^[A-Za-z][A-Za-z0-9-]*$")


@dataclass(frozen=True, slots=True)
class MenuConfig:
    """Rendering and matching defaults for a menu. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = MenuConfig(list_tag="ol", active_class="is-current")
        menu = Menu.new(items, config=config)
    """

    # Markup
    list_tag: str = "ul"
    item_tag: str = "li"
    active_class: str = "active"  # Per-menu override via Menu.set_active_class()

    # Active matching: links whose path equals the root only match exactly
    root: str = "/"

    def __post_init__(self) -> None:
        for name in ("list_tag", "item_tag"):
            value = getattr(self, name)
            if not _TAG_NAME.match(value):
                msg = f"MenuConfig.{name} must be a plain tag name, got {value!r}"
                raise ConfigurationError(msg)
        if not self.root:
            msg = "MenuConfig.root must not be empty"
            raise ConfigurationError(msg)
