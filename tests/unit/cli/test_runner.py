"""Tests for CLI runner."""

from __future__ import annotations

import json
from argparse import Namespace
from pathlib import Path
from unittest.mock import patch

import pytest

from version_checker.bootstrap.paths import VERSION_CHECKER_HOME_ENV
from version_checker.cli import main
from version_checker.cli.config_bridge import ConfigBridge
from version_checker.cli.exit_codes import (
    EXIT_INVALID_USAGE,
    EXIT_OPERATION_FAILED,
    EXIT_SUCCESS,
    EXIT_UNSUPPORTED,
)
from version_checker.cli.runner import CLIRunner, get_version


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch) -> Path:
    """Run each test from an empty project dir with an empty home."""
    monkeypatch.setenv(VERSION_CHECKER_HOME_ENV, str(tmp_path / "home"))
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.chdir(project)
    return project


def _write_manifest(project: Path, code="45") -> None:
    (project / "app-version.yml").write_text(f'versionName: "1.2.3"\nversionCode: {code}\n')


class TestGetVersion:
    """Tests for get_version function."""

    def test_get_version_from_metadata(self) -> None:
        with patch("version_checker.cli.runner.version", return_value="1.2.3"):
            assert get_version() == "1.2.3"

    def test_get_version_fallback(self) -> None:
        from importlib.metadata import PackageNotFoundError

        with patch(
            "version_checker.cli.runner.version",
            side_effect=PackageNotFoundError("not found"),
        ):
            from version_checker import __version__

            assert get_version() == __version__


class TestCLIRunner:
    """Tests for CLIRunner class."""

    def test_run_help(self, capsys) -> None:
        result = CLIRunner().run(["--help"])
        assert result == EXIT_SUCCESS
        assert "usage:" in capsys.readouterr().out.lower()

    def test_run_version(self, capsys) -> None:
        assert CLIRunner().run(["--version"]) == EXIT_SUCCESS
        assert capsys.readouterr().out.strip()

    def test_run_no_command_shows_help(self, capsys) -> None:
        assert CLIRunner().run([]) == EXIT_SUCCESS
        assert "usage:" in capsys.readouterr().out.lower()

    def test_invalid_platform_choice(self) -> None:
        assert CLIRunner().run(["call", "getPlatformVersion", "--platform", "beos"]) == EXIT_INVALID_USAGE

    def test_subcommand_help(self, capsys) -> None:
        assert CLIRunner().run(["call", "--help"]) == EXIT_SUCCESS
        assert "method" in capsys.readouterr().out


class TestCallCommands:
    """Tests for call, platform-version and app-version."""

    def test_platform_version(self, capsys) -> None:
        with patch("platform.release", return_value="6.8.0"):
            result = main(["platform-version", "--platform", "linux"])
        assert result == EXIT_SUCCESS
        assert json.loads(capsys.readouterr().out) == {"status": "success", "result": "Linux 6.8.0"}

    def test_app_version_from_manifest(self, capsys, isolated_env: Path) -> None:
        _write_manifest(isolated_env, code="2147483648")
        result = main(["app-version", "--platform", "android", "--source", "manifest"])
        assert result == EXIT_SUCCESS
        assert json.loads(capsys.readouterr().out)["result"] == {
            "version": "1.2.3",
            "buildNumber": "2147483648",
        }

    def test_app_version_failure(self, capsys) -> None:
        result = main(["call", "getAppVersion", "--platform", "linux", "--source", "manifest"])
        assert result == EXIT_OPERATION_FAILED
        assert json.loads(capsys.readouterr().out) == {
            "status": "error",
            "code": "VERSION_ERROR",
            "message": "Could not get app version",
            "details": None,
        }

    def test_unknown_method(self, capsys) -> None:
        result = main(["call", "foo", "--platform", "linux"])
        assert result == EXIT_UNSUPPORTED
        assert json.loads(capsys.readouterr().out) == {"status": "not_implemented", "method": "foo"}

    def test_empty_method(self, capsys) -> None:
        assert main(["call", "", "--platform", "linux"]) == EXIT_UNSUPPORTED

    def test_project_config_is_used(self, capsys, isolated_env: Path) -> None:
        _write_manifest(isolated_env)
        (isolated_env / ".version-checker.yml").write_text(
            "platform: ios\napp:\n  source: manifest\n"
        )
        assert main(["app-version"]) == EXIT_SUCCESS
        assert json.loads(capsys.readouterr().out)["result"]["buildNumber"] == "45"

    def test_config_error(self, isolated_env: Path) -> None:
        (isolated_env / ".version-checker.yml").write_text("app:\n  source: registry\n")
        assert main(["app-version"]) == EXIT_INVALID_USAGE

    def test_config_path_is_directory(self, isolated_env: Path) -> None:
        argv = ["app-version", "--platform", "linux", "--config", str(isolated_env)]
        assert main(argv) == EXIT_INVALID_USAGE

    def test_config_not_utf8(self, isolated_env: Path) -> None:
        path = isolated_env / "custom.yml"
        path.write_bytes(b"platform: \xff\n")
        assert main(["platform-version", "--config", str(path)]) == EXIT_INVALID_USAGE

    def test_unsupported_os(self) -> None:
        with patch("platform.system", return_value="Plan9"):
            assert main(["platform-version"]) == EXIT_INVALID_USAGE


class TestStatusAndValidate:
    """Tests for status and validate commands."""

    def test_status(self, capsys) -> None:
        assert main(["status", "--platform", "darwin"]) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert "Selected provider: darwin" in out
        assert "Metadata source: bundle:" in out
        assert "linux: LinuxProvider" in out

    def test_validate_valid(self, capsys, isolated_env: Path) -> None:
        (isolated_env / ".version-checker.yml").write_text("platform: linux\n")
        assert main(["validate"]) == EXIT_SUCCESS
        assert "is valid" in capsys.readouterr().out

    def test_validate_errors(self, capsys, isolated_env: Path) -> None:
        path = isolated_env / "custom.yml"
        path.write_text("platform: linx\n")
        assert main(["validate", "--config", str(path)]) == EXIT_OPERATION_FAILED
        assert "did you mean 'linux'" in capsys.readouterr().out

    def test_validate_no_config(self, capsys) -> None:
        assert main(["validate"]) == EXIT_INVALID_USAGE
        assert "No configuration file found" in capsys.readouterr().out


class TestConfigBridge:
    """Tests for CLI → config override conversion."""

    def test_only_set_flags_are_included(self) -> None:
        args = Namespace(platform=None, source="bundle", distribution=None,
                         bundle_path=Path("x/Info.plist"), manifest_path=None)
        assert ConfigBridge.args_to_overrides(args) == {
            "app": {"source": "bundle", "bundle_path": str(Path("x/Info.plist"))},
        }

    def test_platform_override(self) -> None:
        assert ConfigBridge.args_to_overrides(Namespace(platform="ios")) == {"platform": "ios"}

    def test_no_flags(self) -> None:
        assert ConfigBridge.args_to_overrides(Namespace()) == {}
