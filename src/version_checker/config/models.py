"""Typed configuration models for version-checker."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from version_checker.metadata.bundle import DEFAULT_BUNDLE_PATH
from version_checker.metadata.distribution import DEFAULT_DISTRIBUTION
from version_checker.metadata.manifest import DEFAULT_MANIFEST_PATH


@dataclass
class AppConfig:
    """Where the application's own version metadata is read from.

    Attributes:
        source: Metadata source name (distribution, bundle, manifest).
            None selects the platform default.
        distribution: Distribution name for the distribution source.
        bundle_path: Info.plist path for the bundle source.
        manifest_path: YAML manifest path for the manifest source.
    """

    source: Optional[str] = None
    distribution: str = DEFAULT_DISTRIBUTION
    bundle_path: str = str(DEFAULT_BUNDLE_PATH)
    manifest_path: str = str(DEFAULT_MANIFEST_PATH)


@dataclass
class VersionCheckerConfig:
    """Complete version-checker configuration.

    Attributes:
        platform: Provider name override; None uses the detected OS.
        app: Application metadata settings.
    """

    platform: Optional[str] = None
    app: AppConfig = field(default_factory=AppConfig)

    # Filled by the loader for diagnostics
    _config_sources: List[str] = field(default_factory=list, repr=False)

    @property
    def sources(self) -> List[str]:
        return list(self._config_sources)
