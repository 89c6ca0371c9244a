"""Tests for configuration validation."""

from __future__ import annotations

from pathlib import Path

from version_checker.config.validation import (
    ValidationSeverity,
    validate_config,
    validate_config_file,
)


def _severities(issues):
    return [i.severity for i in issues]


class TestValidateConfig:
    """Tests for validate_config."""

    def test_valid_config(self) -> None:
        data = {
            "platform": "darwin",
            "app": {"source": "bundle", "bundle_path": "Info.plist"},
        }
        assert validate_config(data, source="test") == []

    def test_empty_config(self) -> None:
        assert validate_config({}, source="test") == []

    def test_unknown_top_level_key_suggests(self) -> None:
        issues = validate_config({"platfrom": "linux"}, source="test")
        assert len(issues) == 1
        assert issues[0].severity == ValidationSeverity.WARNING
        assert issues[0].suggestion == "platform"
        assert "did you mean 'platform'" in issues[0].message

    def test_unknown_app_key(self) -> None:
        issues = validate_config({"app": {"manifest": "x.yml"}}, source="test")
        assert issues[0].key == "app.manifest"
        assert issues[0].suggestion == "manifest_path"

    def test_invalid_platform(self) -> None:
        issues = validate_config({"platform": "linx"}, source="test")
        assert _severities(issues) == [ValidationSeverity.ERROR]
        assert issues[0].suggestion == "linux"

    def test_invalid_source(self) -> None:
        issues = validate_config({"app": {"source": "plist"}}, source="test")
        assert _severities(issues) == [ValidationSeverity.ERROR]
        assert issues[0].key == "app.source"

    def test_app_must_be_mapping(self) -> None:
        issues = validate_config({"app": "bundle"}, source="test")
        assert _severities(issues) == [ValidationSeverity.ERROR]

    def test_path_must_be_string(self) -> None:
        issues = validate_config({"app": {"bundle_path": 5}}, source="test")
        assert issues[0].key == "app.bundle_path"

    def test_non_mapping(self) -> None:
        issues = validate_config(["platform"], source="test")
        assert _severities(issues) == [ValidationSeverity.ERROR]


class TestValidateConfigFile:
    """Tests for validate_config_file."""

    def test_valid_file(self, tmp_path: Path) -> None:
        path = tmp_path / ".version-checker.yml"
        path.write_text("platform: linux\n")
        assert validate_config_file(path) == (True, [])

    def test_warnings_only_is_valid(self, tmp_path: Path) -> None:
        path = tmp_path / ".version-checker.yml"
        path.write_text("extra: 1\n")
        is_valid, issues = validate_config_file(path)
        assert is_valid is True
        assert len(issues) == 1

    def test_missing_file(self, tmp_path: Path) -> None:
        is_valid, issues = validate_config_file(tmp_path / "missing.yml")
        assert is_valid is False
        assert "not found" in issues[0].message

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yml"
        path.write_text("platform: [x\n")
        is_valid, issues = validate_config_file(path)
        assert is_valid is False
        assert "Invalid YAML" in issues[0].message

    def test_directory_is_invalid(self, tmp_path: Path) -> None:
        is_valid, issues = validate_config_file(tmp_path)
        assert is_valid is False
        assert "Cannot read" in issues[0].message

    def test_non_utf8_file_is_invalid(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yml"
        path.write_bytes(b"platform: \xff\n")
        is_valid, issues = validate_config_file(path)
        assert is_valid is False
        assert issues[0].severity == ValidationSeverity.ERROR

    def test_empty_file_is_valid(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yml"
        path.write_text("")
        assert validate_config_file(path) == (True, [])
