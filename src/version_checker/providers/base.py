from __future__ import annotations

import platform
from abc import ABC, abstractmethod
from typing import Optional

from version_checker.config.models import AppConfig
from version_checker.core.models import VersionInfo
from version_checker.metadata import create_metadata_source
from version_checker.metadata.base import AppMetadataSource


class PlatformInfoProvider(ABC):
    """Base class for all platform providers.

    A provider answers the two platform questions the service asks: the
    OS version string and the application's version metadata. The
    metadata source is injected so one provider works with any store.
    """

    def __init__(self, metadata_source: Optional[AppMetadataSource] = None):
        if metadata_source is None:
            metadata_source = create_metadata_source(AppConfig(), self.name)
        self.metadata_source = metadata_source

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider identifier (e.g., 'linux', 'darwin')."""

    @property
    @abstractmethod
    def platform_name(self) -> str:
        """Human-readable platform family name (e.g., 'Linux', 'macOS')."""

    @abstractmethod
    def os_version(self) -> str:
        """Return the raw OS release/version identifier."""

    def os_version_string(self) -> str:
        """Return the platform name followed by the OS version."""
        return f"{self.platform_name} {self.os_version()}"

    def app_version_info(self) -> VersionInfo:
        """Return the application's version metadata.

        Raises:
            MetadataError: If the metadata is missing or unreadable.
        """
        return self.metadata_source.read()


def release_or(value: Optional[str]) -> str:
    """Return value if non-empty, otherwise the kernel release."""
    return value or platform.release()
