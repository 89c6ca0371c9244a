"""Application metadata from an Apple-style Info.plist bundle file."""

from __future__ import annotations

import plistlib
from pathlib import Path
from typing import Any, Dict
from xml.parsers.expat import ExpatError

from version_checker.core.models import VersionInfo
from version_checker.metadata.base import (
    AppMetadataSource,
    MetadataNotFoundError,
    MetadataParseError,
)

SHORT_VERSION_KEY = "CFBundleShortVersionString"
BUNDLE_VERSION_KEY = "CFBundleVersion"

DEFAULT_BUNDLE_PATH = Path("Info.plist")


class BundleMetadataSource(AppMetadataSource):
    """Reads CFBundleShortVersionString and CFBundleVersion from a plist.

    Both XML and binary plists are accepted.
    """

    def __init__(self, path: Path = DEFAULT_BUNDLE_PATH):
        self.path = Path(path)

    @property
    def name(self) -> str:
        return "bundle"

    def describe(self) -> str:
        return f"bundle:{self.path}"

    def _load(self) -> Dict[str, Any]:
        try:
            with open(self.path, "rb") as f:
                data = plistlib.load(f)
        except FileNotFoundError as e:
            raise MetadataNotFoundError(f"Bundle info not found: {self.path}") from e
        except OSError as e:
            raise MetadataParseError(f"Cannot read bundle info {self.path}: {e}") from e
        except (plistlib.InvalidFileException, ExpatError, ValueError) as e:
            raise MetadataParseError(f"Invalid plist in {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise MetadataParseError(
                f"Bundle info must be a dictionary, got {type(data).__name__}"
            )
        return data

    def read(self) -> VersionInfo:
        data = self._load()

        version = data.get(SHORT_VERSION_KEY)
        if not isinstance(version, str):
            raise MetadataParseError(f"{SHORT_VERSION_KEY} missing or not a string in {self.path}")

        build = data.get(BUNDLE_VERSION_KEY)
        if build is None:
            raise MetadataParseError(f"{BUNDLE_VERSION_KEY} missing in {self.path}")

        try:
            return VersionInfo(version=version, build_number=build)
        except TypeError as e:
            raise MetadataParseError(f"Invalid {BUNDLE_VERSION_KEY} in {self.path}: {e}") from e
