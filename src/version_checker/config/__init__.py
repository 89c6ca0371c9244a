"""Configuration loading for version-checker."""

from version_checker.config.models import AppConfig, VersionCheckerConfig
from version_checker.config.loader import ConfigError, find_project_config, load_config

__all__ = [
    "AppConfig",
    "VersionCheckerConfig",
    "ConfigError",
    "find_project_config",
    "load_config",
]
