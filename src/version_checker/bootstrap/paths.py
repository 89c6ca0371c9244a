"""Path management for the version-checker home directory.

The home directory only holds the global configuration file.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar

# Default directory name under user home
DEFAULT_HOME_DIR_NAME = ".version-checker"

# Environment variable to override home directory
VERSION_CHECKER_HOME_ENV = "VERSION_CHECKER_HOME"


def get_version_checker_home() -> Path:
    """Get the version-checker home directory path.

    Resolution order:
    1. VERSION_CHECKER_HOME environment variable (if set)
    2. ~/.version-checker (default)
    """
    env_home = os.environ.get(VERSION_CHECKER_HOME_ENV)
    if env_home:
        return Path(env_home)
    return Path.home() / DEFAULT_HOME_DIR_NAME


@dataclass
class VersionCheckerPaths:
    """Paths within the version-checker home directory.

    Directory structure:
        ~/.version-checker/
            config/
                config.yml  - Global configuration
    """

    home: Path

    _CONFIG_DIR: ClassVar[str] = "config"
    _GLOBAL_CONFIG_NAME: ClassVar[str] = "config.yml"

    @classmethod
    def default(cls) -> "VersionCheckerPaths":
        """Create paths from the default home."""
        return cls(get_version_checker_home())

    @property
    def config_dir(self) -> Path:
        """Directory for configuration files."""
        return self.home / self._CONFIG_DIR

    @property
    def global_config(self) -> Path:
        """Path to the global configuration file."""
        return self.config_dir / self._GLOBAL_CONFIG_NAME
