"""Android platform provider."""

from __future__ import annotations

import platform

from version_checker.providers.base import PlatformInfoProvider, release_or


class AndroidProvider(PlatformInfoProvider):
    """Reports the Android release (Build.VERSION.RELEASE, e.g. 14).

    platform.android_ver() exists on Python 3.13+; older interpreters
    fall back to the kernel release.
    """

    @property
    def name(self) -> str:
        return "android"

    @property
    def platform_name(self) -> str:
        return "Android"

    def os_version(self) -> str:
        android_ver = getattr(platform, "android_ver", None)
        if android_ver is None:
            return release_or(None)
        return release_or(android_ver().release)
