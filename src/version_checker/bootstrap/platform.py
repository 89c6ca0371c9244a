"""Platform detection for version-checker providers.

Detects the running OS family to decide which platform provider answers
version queries.
"""

from __future__ import annotations

import platform
from typing import Optional

# Supported operating systems (provider names)
SUPPORTED_OS = frozenset({"android", "darwin", "ios", "linux", "windows"})

# platform.system() values that map onto a provider name
_OS_MAP = {
    "android": "android",
    "darwin": "darwin",
    "ios": "ios",
    "ipados": "ios",
    "linux": "linux",
    "windows": "windows",
}


def normalize_os(system: str) -> Optional[str]:
    """Normalize an OS name to a provider name.

    Args:
        system: Raw OS name from platform.system()

    Returns:
        Provider name or None if unknown.
    """
    return _OS_MAP.get(system.lower())


def detect_os() -> str:
    """Detect the current operating system.

    Returns:
        Provider name (android, darwin, ios, linux, windows).

    Raises:
        ValueError: If the OS is not supported.
    """
    system = platform.system()
    normalized = normalize_os(system)
    if normalized is None:
        raise ValueError(
            f"Unsupported operating system: {system}. "
            f"Supported: {', '.join(sorted(SUPPORTED_OS))}"
        )
    return normalized
