"""Plugin discovery via Python entry points.

Platform providers register under the ``version_checker.providers`` group.
"""

from __future__ import annotations

from importlib.metadata import entry_points
from typing import Dict, Type, TypeVar

from version_checker.core.logging import get_logger

LOGGER = get_logger(__name__)

PROVIDER_ENTRY_POINT_GROUP = "version_checker.providers"

T = TypeVar("T")


def discover_plugins(group: str, base_class: Type[T] | None = None) -> Dict[str, Type[T]]:
    """Discover all installed plugins for a given entry point group.

    Plugins register themselves in their pyproject.toml:

        [project.entry-points."version_checker.providers"]
        linux = "version_checker.providers.linux:LinuxProvider"

    Args:
        group: Entry point group name (e.g., 'version_checker.providers').
        base_class: Optional base class to validate plugins against.

    Returns:
        Dictionary mapping plugin names to plugin classes.
    """
    plugins: Dict[str, Type[T]] = {}

    for ep in entry_points(group=group):
        try:
            plugin_class = ep.load()
        except Exception as e:
            LOGGER.warning(f"Failed to load plugin '{ep.name}': {e}")
            continue
        if base_class is not None and not (
            isinstance(plugin_class, type) and issubclass(plugin_class, base_class)
        ):
            LOGGER.warning(
                f"Plugin '{ep.name}' does not inherit from {base_class.__name__}, skipping"
            )
            continue
        plugins[ep.name] = plugin_class
        LOGGER.debug(f"Discovered plugin: {ep.name} (group: {group})")

    return plugins


def get_plugin(
    group: str,
    name: str,
    base_class: Type[T] | None = None,
    **kwargs,
) -> T | None:
    """Get an instantiated plugin by name.

    Args:
        group: Entry point group name.
        name: Plugin name (e.g., 'linux').
        base_class: Optional base class to validate against.
        **kwargs: Arguments passed to the plugin constructor
                  (e.g. metadata_source for providers).

    Returns:
        Instantiated plugin or None if not found.
    """
    plugins = discover_plugins(group, base_class)
    plugin_class = plugins.get(name)
    if plugin_class:
        return plugin_class(**kwargs)
    return None

