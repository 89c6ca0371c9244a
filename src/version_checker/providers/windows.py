"""Windows platform provider."""

from __future__ import annotations

import platform

from version_checker.providers.base import PlatformInfoProvider, release_or


class WindowsProvider(PlatformInfoProvider):
    """Reports the Windows version number (e.g. 10.0.22631)."""

    @property
    def name(self) -> str:
        return "windows"

    @property
    def platform_name(self) -> str:
        return "Windows"

    def os_version(self) -> str:
        return release_or(platform.version())
