"""Linux platform provider."""

from __future__ import annotations

import platform

from version_checker.providers.base import PlatformInfoProvider


class LinuxProvider(PlatformInfoProvider):
    """Reports the running kernel release."""

    @property
    def name(self) -> str:
        return "linux"

    @property
    def platform_name(self) -> str:
        return "Linux"

    def os_version(self) -> str:
        return platform.release()
