"""
Bootstrap helpers for version-checker.

This module handles:
- Platform detection (OS family → provider name)
- Home directory resolution (~/.version-checker/)
"""

from version_checker.bootstrap.platform import detect_os, normalize_os, SUPPORTED_OS
from version_checker.bootstrap.paths import get_version_checker_home, VersionCheckerPaths

__all__ = [
    "detect_os",
    "normalize_os",
    "SUPPORTED_OS",
    "get_version_checker_home",
    "VersionCheckerPaths",
]
