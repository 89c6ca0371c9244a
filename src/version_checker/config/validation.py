"""Configuration validation for version-checker.

Reports unknown keys (with suggestions) and invalid values without raising.
"""

from __future__ import annotations

from dataclasses import dataclass
from difflib import get_close_matches
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Set, Tuple

import yaml

from version_checker.bootstrap.platform import SUPPORTED_OS
from version_checker.core.logging import get_logger

LOGGER = get_logger(__name__)


class ValidationSeverity(Enum):
    """Severity level for validation issues."""

    ERROR = "error"  # Config will fail at runtime
    WARNING = "warning"  # Likely mistake but config usable


@dataclass
class ConfigValidationIssue:
    """A validation issue for configuration with severity."""

    message: str
    source: str
    severity: ValidationSeverity
    key: Optional[str] = None
    suggestion: Optional[str] = None


# Valid top-level keys
VALID_TOP_LEVEL_KEYS: Set[str] = {
    "platform",
    "app",
}

# Valid keys under app section
VALID_APP_KEYS: Set[str] = {
    "source",
    "distribution",
    "bundle_path",
    "manifest_path",
}

# Valid app.source values
VALID_SOURCES: Set[str] = {
    "distribution",
    "bundle",
    "manifest",
}


def _suggest_key(key: str, valid_keys: Iterable[str]) -> Optional[str]:
    """Suggest the closest valid key for a typo."""
    matches = get_close_matches(key, list(valid_keys), n=1, cutoff=0.6)
    return matches[0] if matches else None


def _check_keys(
    data: Dict[str, Any],
    valid_keys: Set[str],
    source: str,
    prefix: str = "",
) -> List[ConfigValidationIssue]:
    issues: List[ConfigValidationIssue] = []
    for key in data.keys():
        if key in valid_keys:
            continue
        full_key = f"{prefix}{key}"
        suggestion = _suggest_key(str(key), valid_keys)
        message = f"Unknown key '{full_key}'"
        if suggestion:
            message += f" (did you mean '{prefix}{suggestion}'?)"
        issues.append(ConfigValidationIssue(
            message=message,
            source=source,
            severity=ValidationSeverity.WARNING,
            key=full_key,
            suggestion=suggestion,
        ))
    return issues


def _check_choice(
    value: Any,
    choices: Set[str],
    key: str,
    source: str,
) -> Optional[ConfigValidationIssue]:
    if value is None:
        return None
    if not isinstance(value, str) or value not in choices:
        suggestion = _suggest_key(str(value), choices)
        message = f"Invalid value for '{key}': {value!r}. Valid: {', '.join(sorted(choices))}"
        if suggestion:
            message += f" (did you mean '{suggestion}'?)"
        return ConfigValidationIssue(
            message=message,
            source=source,
            severity=ValidationSeverity.ERROR,
            key=key,
            suggestion=suggestion,
        )
    return None


def validate_config(data: Any, source: str) -> List[ConfigValidationIssue]:
    """Validate a configuration dictionary.

    Args:
        data: Parsed configuration (expected to be a mapping).
        source: Source file path for messages.

    Returns:
        List of validation issues, empty if the config is clean.
    """
    issues: List[ConfigValidationIssue] = []

    if not isinstance(data, dict):
        issues.append(ConfigValidationIssue(
            message=f"Config must be a mapping, got {type(data).__name__}",
            source=source,
            severity=ValidationSeverity.ERROR,
        ))
        return issues

    issues.extend(_check_keys(data, VALID_TOP_LEVEL_KEYS, source))

    platform_issue = _check_choice(data.get("platform"), set(SUPPORTED_OS), "platform", source)
    if platform_issue:
        issues.append(platform_issue)

    app = data.get("app")
    if app is not None:
        if not isinstance(app, dict):
            issues.append(ConfigValidationIssue(
                message=f"'app' must be a mapping, got {type(app).__name__}",
                source=source,
                severity=ValidationSeverity.ERROR,
                key="app",
            ))
        else:
            issues.extend(_check_keys(app, VALID_APP_KEYS, source, prefix="app."))
            source_issue = _check_choice(app.get("source"), VALID_SOURCES, "app.source", source)
            if source_issue:
                issues.append(source_issue)
            for key in ("distribution", "bundle_path", "manifest_path"):
                value = app.get(key)
                if value is not None and not isinstance(value, str):
                    issues.append(ConfigValidationIssue(
                        message=f"'app.{key}' must be a string, got {type(value).__name__}",
                        source=source,
                        severity=ValidationSeverity.ERROR,
                        key=f"app.{key}",
                    ))

    LOGGER.debug(f"Validated {source}: {len(issues)} issue(s)")
    return issues


def validate_config_file(path: Path) -> Tuple[bool, List[ConfigValidationIssue]]:
    """Validate a configuration file on disk.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Tuple of (is_valid, issues). A config is valid when it has no errors.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        return False, [ConfigValidationIssue(
            message=f"Configuration file not found: {path}",
            source=str(path),
            severity=ValidationSeverity.ERROR,
        )]
    except yaml.YAMLError as e:
        return False, [ConfigValidationIssue(
            message=f"Invalid YAML: {e}",
            source=str(path),
            severity=ValidationSeverity.ERROR,
        )]
    except (OSError, UnicodeDecodeError) as e:
        return False, [ConfigValidationIssue(
            message=f"Cannot read configuration file: {e}",
            source=str(path),
            severity=ValidationSeverity.ERROR,
        )]

    if data is None:
        data = {}

    issues = validate_config(data, source=str(path))
    is_valid = not any(i.severity == ValidationSeverity.ERROR for i in issues)
    return is_valid, issues
