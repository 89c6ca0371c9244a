from __future__ import annotations

from abc import ABC, abstractmethod

from version_checker.core.models import VersionInfo


class MetadataError(Exception):
    """Application metadata could not be read."""

    pass


class MetadataNotFoundError(MetadataError):
    """The metadata source does not exist."""

    pass


class MetadataParseError(MetadataError):
    """The metadata source exists but is unreadable or incomplete."""

    pass


class AppMetadataSource(ABC):
    """Base class for application metadata sources.

    A source performs a local, synchronous read of the metadata the
    platform keeps about the installed application.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Source identifier (e.g., 'distribution', 'bundle')."""

    @abstractmethod
    def read(self) -> VersionInfo:
        """Read the application's version and build number.

        Raises:
            MetadataError: If the metadata is missing or unreadable.
        """

    def describe(self) -> str:
        """Return a short human-readable description of the source."""
        return self.name
