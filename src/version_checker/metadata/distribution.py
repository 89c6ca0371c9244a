"""Application metadata from an installed Python distribution.

The version comes from the distribution's core metadata. The build number
comes from the wheel build tag (the ``Build`` header of the ``WHEEL``
file); distributions built without one report their version instead.
"""

from __future__ import annotations

from email.parser import HeaderParser
from importlib.metadata import PackageNotFoundError, distribution
from typing import Optional

from version_checker.core.logging import get_logger
from version_checker.core.models import VersionInfo
from version_checker.metadata.base import (
    AppMetadataSource,
    MetadataNotFoundError,
    MetadataParseError,
)

LOGGER = get_logger(__name__)

DEFAULT_DISTRIBUTION = "version-checker"


def parse_wheel_build_tag(wheel_text: Optional[str]) -> Optional[str]:
    """Extract the build tag from the contents of a WHEEL file.

    Args:
        wheel_text: Raw WHEEL file contents, or None if the file is absent.

    Returns:
        Build tag string, or None if the wheel carries no build tag.
    """
    if not wheel_text:
        return None
    headers = HeaderParser().parsestr(wheel_text)
    build = headers.get("Build")
    if build is None:
        return None
    build = build.strip()
    return build or None


class DistributionMetadataSource(AppMetadataSource):
    """Reads version metadata of an installed distribution."""

    def __init__(self, distribution_name: str = DEFAULT_DISTRIBUTION):
        self.distribution_name = distribution_name

    @property
    def name(self) -> str:
        return "distribution"

    def describe(self) -> str:
        return f"distribution:{self.distribution_name}"

    def read(self) -> VersionInfo:
        try:
            dist = distribution(self.distribution_name)
        except PackageNotFoundError as e:
            raise MetadataNotFoundError(
                f"Distribution not installed: {self.distribution_name}"
            ) from e

        version = dist.version
        if not version:
            raise MetadataParseError(
                f"Distribution {self.distribution_name} has no Version in its metadata"
            )

        build = parse_wheel_build_tag(dist.read_text("WHEEL"))
        if build is None:
            LOGGER.debug(
                f"No wheel build tag for {self.distribution_name}, using version as build number"
            )
            build = version

        return VersionInfo(version=version, build_number=build)
