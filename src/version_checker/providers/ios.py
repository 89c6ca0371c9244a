"""iOS platform provider."""

from __future__ import annotations

import platform

from version_checker.providers.base import PlatformInfoProvider, release_or


class IOSProvider(PlatformInfoProvider):
    """Reports the iOS system version (e.g. 17.4).

    platform.ios_ver() exists on Python 3.13+; older interpreters fall
    back to the kernel release.
    """

    @property
    def name(self) -> str:
        return "ios"

    @property
    def platform_name(self) -> str:
        return "iOS"

    def os_version(self) -> str:
        ios_ver = getattr(platform, "ios_ver", None)
        if ios_ver is None:
            return release_or(None)
        return release_or(ios_ver().release)
