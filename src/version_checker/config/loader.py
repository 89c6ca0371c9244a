"""Configuration file loading and merging.

Handles loading configuration from YAML files with:
- Project-level config (.version-checker.yml)
- Global config (~/.version-checker/config/config.yml)
- Environment variable expansion (${VAR})
- Config merging with proper precedence
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from version_checker.bootstrap.paths import VersionCheckerPaths
from version_checker.config.models import AppConfig, VersionCheckerConfig
from version_checker.config.validation import ValidationSeverity, validate_config
from version_checker.core.logging import get_logger

LOGGER = get_logger(__name__)

# Config file names
PROJECT_CONFIG_NAMES = [
    ".version-checker.yml",
    ".version-checker.yaml",
    "version-checker.yml",
    "version-checker.yaml",
]

# Environment variable pattern: ${VAR} or ${VAR:-default}
ENV_VAR_PATTERN = re.compile(r"\$\{([^}:]+)(?::-([^}]*))?\}")


class ConfigError(Exception):
    """Configuration loading or parsing error."""

    pass


def load_config(
    project_root: Path,
    cli_config_path: Optional[Path] = None,
    cli_overrides: Optional[Dict[str, Any]] = None,
) -> VersionCheckerConfig:
    """Load configuration with proper precedence.

    Precedence (highest to lowest):
    1. CLI flags (cli_overrides)
    2. Custom config file (cli_config_path) OR project config (.version-checker.yml)
    3. Global config (~/.version-checker/config/config.yml)
    4. Built-in defaults

    Args:
        project_root: Project root directory for finding .version-checker.yml.
        cli_config_path: Optional path to custom config file (--config flag).
        cli_overrides: Dict of CLI flag overrides.

    Returns:
        Merged VersionCheckerConfig instance.

    Raises:
        ConfigError: If a config file is missing, unparsable, or invalid.
    """
    sources: List[str] = []
    merged: Dict[str, Any] = {}

    # Layer 1: Global config (never fatal)
    global_path = find_global_config()
    if global_path is not None:
        try:
            global_dict = _load_validated(global_path)
            merged = merge_configs(merged, global_dict)
            sources.append(f"global:{global_path}")
            LOGGER.debug(f"Loaded global config from {global_path}")
        except (ConfigError, yaml.YAMLError, OSError, UnicodeDecodeError) as e:
            LOGGER.warning(f"Failed to load global config: {e}")

    # Layer 2: Project or custom config
    if cli_config_path:
        if not cli_config_path.exists():
            raise ConfigError(f"Config file not found: {cli_config_path}")
        merged = merge_configs(merged, _load_or_raise(cli_config_path))
        sources.append(f"custom:{cli_config_path}")
        LOGGER.debug(f"Loaded custom config from {cli_config_path}")
    else:
        project_path = find_project_config(project_root)
        if project_path is not None:
            merged = merge_configs(merged, _load_or_raise(project_path))
            sources.append(f"project:{project_path}")
            LOGGER.debug(f"Loaded project config from {project_path}")

    # Layer 3: CLI overrides
    if cli_overrides:
        merged = merge_configs(merged, cli_overrides)
        sources.append("cli")
        LOGGER.debug("Applied CLI overrides")

    config = dict_to_config(merged)
    config._config_sources = sources

    LOGGER.debug(f"Config loaded from sources: {sources}")
    return config


def _load_or_raise(path: Path) -> Dict[str, Any]:
    try:
        return _load_validated(path)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e


def _load_validated(path: Path) -> Dict[str, Any]:
    """Load a config file and reject it if validation reports errors."""
    data = load_yaml_file(path)
    issues = validate_config(data, source=str(path))
    errors = [i for i in issues if i.severity == ValidationSeverity.ERROR]
    for issue in issues:
        if issue.severity == ValidationSeverity.WARNING:
            LOGGER.warning(f"{path}: {issue.message}")
    if errors:
        raise ConfigError(f"Invalid config in {path}: {errors[0].message}")
    return data


def find_project_config(project_root: Path) -> Optional[Path]:
    """Find config file in project root.

    Args:
        project_root: Directory to search in.

    Returns:
        Path to config file if found, None otherwise.
    """
    for name in PROJECT_CONFIG_NAMES:
        config_path = project_root / name
        if config_path.exists():
            return config_path
    return None


def find_global_config() -> Optional[Path]:
    """Find global config at ~/.version-checker/config/config.yml.

    Returns:
        Path to global config if it exists, None otherwise.
    """
    config_path = VersionCheckerPaths.default().global_config
    if config_path.exists():
        return config_path
    return None


def load_yaml_file(path: Path) -> Dict[str, Any]:
    """Load and parse a YAML config file.

    Performs environment variable expansion on string values.

    Raises:
        yaml.YAMLError: If YAML parsing fails.
        OSError, UnicodeDecodeError: If the file cannot be read as UTF-8 text.
        ConfigError: If the document is not a mapping.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigError(f"Config file must be a YAML mapping, got {type(data).__name__}")

    return expand_env_vars(data)


def expand_env_vars(data: Any) -> Any:
    """Recursively expand ${VAR} and ${VAR:-default} in config values."""
    if isinstance(data, dict):
        return {k: expand_env_vars(v) for k, v in data.items()}
    elif isinstance(data, list):
        return [expand_env_vars(item) for item in data]
    elif isinstance(data, str):
        return ENV_VAR_PATTERN.sub(_env_var_replacer, data)
    else:
        return data


def _env_var_replacer(match: re.Match[str]) -> str:
    var_name = match.group(1)
    default_value = match.group(2)

    value = os.environ.get(var_name)
    if value is not None:
        return value
    if default_value is not None:
        return default_value

    LOGGER.warning(f"Environment variable ${var_name} is not set and has no default")
    return ""


def merge_configs(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """Deep merge two config dicts, with overlay taking precedence.

    Rules:
    - Scalar values: overlay replaces base
    - Lists: overlay replaces base (no merging)
    - Dicts: recursive merge
    """
    result = base.copy()

    for key, overlay_value in overlay.items():
        if key in result and isinstance(result[key], dict) and isinstance(overlay_value, dict):
            result[key] = merge_configs(result[key], overlay_value)
        else:
            result[key] = overlay_value

    return result


def dict_to_config(data: Dict[str, Any]) -> VersionCheckerConfig:
    """Convert a validated dict to a typed VersionCheckerConfig."""
    defaults = AppConfig()
    app_data = data.get("app") or {}

    app = AppConfig(
        source=app_data.get("source"),
        distribution=app_data.get("distribution", defaults.distribution),
        bundle_path=app_data.get("bundle_path", defaults.bundle_path),
        manifest_path=app_data.get("manifest_path", defaults.manifest_path),
    )

    return VersionCheckerConfig(platform=data.get("platform"), app=app)
