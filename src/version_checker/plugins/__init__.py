"""Plugin infrastructure for version-checker.

Platform providers (version_checker.providers) are discovered via Python
entry points.
"""

from version_checker.plugins.discovery import (
    discover_plugins,
    get_plugin,
    PROVIDER_ENTRY_POINT_GROUP,
)

__all__ = [
    "discover_plugins",
    "get_plugin",
    "PROVIDER_ENTRY_POINT_GROUP",
]
