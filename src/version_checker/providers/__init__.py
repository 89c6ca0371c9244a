"""Platform providers answering OS and application version queries.

Providers are discovered via Python entry points
(version_checker.providers group) and one is selected at startup.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Type

from version_checker.bootstrap.platform import detect_os
from version_checker.config.models import VersionCheckerConfig
from version_checker.core.logging import get_logger
from version_checker.metadata import create_metadata_source
from version_checker.metadata.base import AppMetadataSource
from version_checker.plugins import PROVIDER_ENTRY_POINT_GROUP
from version_checker.plugins.discovery import discover_plugins, get_plugin
from version_checker.providers.base import PlatformInfoProvider

LOGGER = get_logger(__name__)


class ProviderNotFoundError(Exception):
    """No provider is registered under the requested name."""

    pass


def discover_providers() -> Dict[str, Type[PlatformInfoProvider]]:
    """Discover all installed platform providers via entry points."""
    return discover_plugins(PROVIDER_ENTRY_POINT_GROUP, PlatformInfoProvider)


def get_provider(
    name: str,
    metadata_source: Optional[AppMetadataSource] = None,
) -> PlatformInfoProvider | None:
    """Get an instantiated provider by name.

    Args:
        name: Provider name (e.g., 'linux').
        metadata_source: Optional metadata source to inject.

    Returns:
        Instantiated provider or None if not found.
    """
    kwargs = {}
    if metadata_source is not None:
        kwargs["metadata_source"] = metadata_source
    return get_plugin(PROVIDER_ENTRY_POINT_GROUP, name, PlatformInfoProvider, **kwargs)


def resolve_provider_name(config: VersionCheckerConfig) -> str:
    """Return the configured provider name, or the detected OS.

    Raises:
        ValueError: If no provider is configured and the OS is unsupported.
    """
    if config.platform:
        return config.platform
    return detect_os()


def select_provider(
    config: VersionCheckerConfig,
    project_root: Optional[Path] = None,
) -> PlatformInfoProvider:
    """Build the provider for this process from configuration.

    Args:
        config: Loaded configuration.
        project_root: Base directory for relative metadata paths.

    Returns:
        Provider wired to the configured metadata source.

    Raises:
        ProviderNotFoundError: If the selected provider is not installed.
        ValueError: If the OS is unsupported or the metadata source unknown.
    """
    name = resolve_provider_name(config)
    source = create_metadata_source(config.app, name, project_root)
    provider = get_provider(name, metadata_source=source)
    if provider is None:
        available = ", ".join(sorted(discover_providers())) or "none"
        raise ProviderNotFoundError(f"Unknown platform provider: {name}. Available: {available}")
    LOGGER.info(f"Selected provider '{name}' with metadata source {source.describe()}")
    return provider


__all__ = [
    "PlatformInfoProvider",
    "ProviderNotFoundError",
    "discover_providers",
    "get_provider",
    "resolve_provider_name",
    "select_provider",
]
