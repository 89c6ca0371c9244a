"""Application metadata sources.

Each source models one platform metadata store:
- distribution - installed Python distribution (importlib.metadata)
- bundle       - Apple-style Info.plist
- manifest     - YAML manifest with Android-style versionName/versionCode
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Dict, Optional, Type

from version_checker.metadata.base import (
    AppMetadataSource,
    MetadataError,
    MetadataNotFoundError,
    MetadataParseError,
)
from version_checker.metadata.bundle import BundleMetadataSource
from version_checker.metadata.distribution import DistributionMetadataSource
from version_checker.metadata.manifest import ManifestMetadataSource

if TYPE_CHECKING:
    from version_checker.config.models import AppConfig

METADATA_SOURCES: Dict[str, Type[AppMetadataSource]] = {
    "distribution": DistributionMetadataSource,
    "bundle": BundleMetadataSource,
    "manifest": ManifestMetadataSource,
}

# Apple platforms keep version metadata in the bundle's Info.plist
_PLATFORM_DEFAULT_SOURCES = {
    "darwin": "bundle",
    "ios": "bundle",
}


def default_source_for(provider_name: str) -> str:
    """Return the metadata source used by a provider when none is configured."""
    return _PLATFORM_DEFAULT_SOURCES.get(provider_name, "distribution")


def create_metadata_source(
    app_config: "AppConfig",
    provider_name: str,
    project_root: Optional[Path] = None,
) -> AppMetadataSource:
    """Build the metadata source described by the app configuration.

    Args:
        app_config: The ``app`` section of the configuration.
        provider_name: Selected provider, used to pick the default source.
        project_root: Base directory for relative bundle/manifest paths.

    Returns:
        Configured metadata source.

    Raises:
        ValueError: If the configured source name is unknown.
    """
    source_name = app_config.source or default_source_for(provider_name)
    root = project_root or Path.cwd()

    if source_name == "distribution":
        return DistributionMetadataSource(app_config.distribution)
    if source_name == "bundle":
        return BundleMetadataSource(root / app_config.bundle_path)
    if source_name == "manifest":
        return ManifestMetadataSource(root / app_config.manifest_path)

    raise ValueError(
        f"Unknown metadata source: {source_name}. "
        f"Available: {', '.join(sorted(METADATA_SOURCES))}"
    )


__all__ = [
    "AppMetadataSource",
    "BundleMetadataSource",
    "DistributionMetadataSource",
    "ManifestMetadataSource",
    "MetadataError",
    "MetadataNotFoundError",
    "MetadataParseError",
    "METADATA_SOURCES",
    "create_metadata_source",
    "default_source_for",
]
