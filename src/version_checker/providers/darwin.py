"""macOS platform provider."""

from __future__ import annotations

import platform

from version_checker.providers.base import PlatformInfoProvider, release_or


class DarwinProvider(PlatformInfoProvider):
    """Reports the macOS product version (e.g. 14.4.1).

    platform.mac_ver() returns an empty version outside macOS, in which
    case the Darwin kernel release is reported instead.
    """

    @property
    def name(self) -> str:
        return "darwin"

    @property
    def platform_name(self) -> str:
        return "macOS"

    def os_version(self) -> str:
        return release_or(platform.mac_ver()[0])
