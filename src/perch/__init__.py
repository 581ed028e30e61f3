"""perch: fluent HTML menus with request-aware active state.

Builds nested ``<ul>`` menus, marks the links matching the current
request active, and renders markup safe to drop into any autoescaping
template.

Basic usage::

    from perch import Menu

    menu = (
        Menu.new()
        .link("/", "Home")
        .link("/about", "About")
        .add(Menu.new().link("/about/team", "Team"))
        .set_active_from_url("/about/team")
    )

    menu.render()
    # <ul><li><a href="/">Home</a></li><li class="active">...

Capability-filtered callbacks::

    from perch import Link, applies_to

    @applies_to(Link)
    def external(link):
        link.set_attribute("rel", "noopener")

    menu.apply_to_all(external)
"""

# Declare free-threading support (PEP 703)
_Py_mod_gil = 0

__version__ = "0.1.0.dev0"
__all__ = [
    "Activatable",
    "ActivatableUrl",
    "ConfigurationError",
    "Filter",
    "HasUrl",
    "Html",
    "InvalidActiveTarget",
    "Item",
    "Link",
    "Menu",
    "MenuConfig",
    "MenuError",
    "applies_to",
    "implements",
    "render_element",
]

# name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "Activatable": "perch.capabilities",
    "ActivatableUrl": "perch.capabilities",
    "Filter": "perch.capabilities",
    "HasUrl": "perch.capabilities",
    "Item": "perch.capabilities",
    "applies_to": "perch.capabilities",
    "implements": "perch.capabilities",
    "MenuConfig": "perch.config",
    "ConfigurationError": "perch.errors",
    "InvalidActiveTarget": "perch.errors",
    "MenuError": "perch.errors",
    "Html": "perch.items.html",
    "Link": "perch.items.link",
    "render_element": "perch.markup.element",
    "Menu": "perch.menu",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import perch`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    from importlib import import_module

    return getattr(import_module(module_name), name)
