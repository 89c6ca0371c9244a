"""Application metadata from a YAML version manifest.

The manifest mirrors the Android package fields::

    versionName: "1.2.3"
    versionCode: 45

``version`` / ``buildNumber`` are accepted as aliases. Integer codes of
any width are rendered as exact decimal text.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml

from version_checker.core.models import VersionInfo
from version_checker.metadata.base import (
    AppMetadataSource,
    MetadataNotFoundError,
    MetadataParseError,
)

DEFAULT_MANIFEST_PATH = Path("app-version.yml")

VERSION_KEYS = ("versionName", "version")
BUILD_KEYS = ("versionCode", "buildNumber")


def _first_present(data: Dict[str, Any], keys: tuple) -> Any:
    for key in keys:
        if data.get(key) is not None:
            return data[key]
    return None


class ManifestMetadataSource(AppMetadataSource):
    """Reads version name and code from a YAML manifest file."""

    def __init__(self, path: Path = DEFAULT_MANIFEST_PATH):
        self.path = Path(path)

    @property
    def name(self) -> str:
        return "manifest"

    def describe(self) -> str:
        return f"manifest:{self.path}"

    def read(self) -> VersionInfo:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except FileNotFoundError as e:
            raise MetadataNotFoundError(f"Version manifest not found: {self.path}") from e
        except OSError as e:
            raise MetadataParseError(f"Cannot read version manifest {self.path}: {e}") from e
        except (yaml.YAMLError, UnicodeDecodeError) as e:
            raise MetadataParseError(f"Invalid YAML in {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise MetadataParseError(
                f"Version manifest must be a YAML mapping, got {type(data).__name__}"
            )

        version = _first_present(data, VERSION_KEYS)
        build = _first_present(data, BUILD_KEYS)
        if version is None or build is None:
            raise MetadataParseError(
                f"Version manifest {self.path} needs one of {VERSION_KEYS} and one of {BUILD_KEYS}"
            )

        # YAML reads unquoted 1.2 as a float; only strings are valid versions
        if not isinstance(version, str):
            raise MetadataParseError(
                f"Version in {self.path} must be a string, got {type(version).__name__}"
            )

        try:
            return VersionInfo(version=version, build_number=build)
        except TypeError as e:
            raise MetadataParseError(f"Invalid build number in {self.path}: {e}") from e
