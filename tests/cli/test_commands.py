"""Tests for the vrs command line."""

from unittest.mock import patch

import pytest
from click.testing import CliRunner

from vrs.cli.main import cli
from vrs.versioning import BumpOptions, InitOptions, ReadCurrentOptions
from vrs.versioning.store import load_config

NO_GIT = ["--no-commit", "--no-push"]


@pytest.fixture
def runner():
    return CliRunner()


@pytest.mark.short
class TestInitCommand:
    def test_init(self, runner, tmp_path):
        result = runner.invoke(cli, ["init", "-C", str(tmp_path), *NO_GIT])

        assert result.exit_code == 0, result.output
        assert "0.0.0" in result.output
        assert load_config(tmp_path).version == "0.0.0"

    def test_options(self, runner, tmp_path):
        with patch("vrs.cli.init.init") as mock_init:
            mock_init.return_value.version = "0.0.0"
            result = runner.invoke(cli, ["init", "--basedir", str(tmp_path), "--commit", "--no-push"])

        assert result.exit_code == 0, result.output
        mock_init.assert_called_once_with(
            InitOptions(basedir=tmp_path, git_commit=True, git_push=False)
        )

    def test_basedir_must_exist(self, runner, tmp_path):
        result = runner.invoke(cli, ["init", "-C", str(tmp_path / "missing"), *NO_GIT])
        assert result.exit_code == 2


@pytest.mark.short
class TestBumpCommand:
    def test_bump(self, runner, tmp_path):
        (tmp_path / "vrs.yml").write_text(
            "version: 0.1.0\nsync:\n  files:\n  - name: README.md\n    pattern: ''\n"
        )
        (tmp_path / "README.md").write_text("v0.1.0\n")

        result = runner.invoke(cli, ["bump", "-C", str(tmp_path), *NO_GIT])

        assert result.exit_code == 0, result.output
        assert result.output.strip().endswith("0.2.0")
        assert (tmp_path / "README.md").read_text() == "v0.2.0\n"

    def test_profiles(self, runner, tmp_path):
        with patch("vrs.cli.bump.bump", return_value="1.1.0") as mock_bump:
            result = runner.invoke(
                cli,
                ["bump", "-C", str(tmp_path), *NO_GIT, "-p", "a", "--profile", "b,c", "-p", "a"],
            )

        assert result.exit_code == 0, result.output
        mock_bump.assert_called_once_with(
            BumpOptions(
                basedir=tmp_path,
                git_commit=False,
                git_push=False,
                active_profiles=("a", "b", "c"),
            )
        )

    def test_profiles_from_environment(self, runner, tmp_path):
        with patch("vrs.cli.bump.bump", return_value="1.1.0") as mock_bump:
            result = runner.invoke(
                cli,
                ["bump", "-C", str(tmp_path), *NO_GIT],
                env={"VRS_PROFILES": "docs chart"},
            )

        assert result.exit_code == 0, result.output
        options = mock_bump.call_args.args[0]
        assert options.active_profiles == ("docs", "chart")

    def test_git_flags_from_environment(self, runner, tmp_path):
        with patch("vrs.cli.bump.bump", return_value="1.1.0") as mock_bump:
            result = runner.invoke(
                cli,
                ["bump", "-C", str(tmp_path)],
                env={"VRS_GIT_COMMIT": "false", "VRS_GIT_PUSH": "false"},
            )

        assert result.exit_code == 0, result.output
        options = mock_bump.call_args.args[0]
        assert options.git_commit is False
        assert options.git_push is False

    def test_git_flags_from_user_settings(self, runner, tmp_path):
        with patch("vrs.cli.utils.args.git_defaults", return_value=(True, False)):
            with patch("vrs.cli.bump.bump", return_value="1.1.0") as mock_bump:
                result = runner.invoke(cli, ["bump", "-C", str(tmp_path)])

        assert result.exit_code == 0, result.output
        options = mock_bump.call_args.args[0]
        assert options.git_commit is True
        assert options.git_push is False

    def test_missing_config(self, runner, tmp_path):
        result = runner.invoke(cli, ["bump", "-C", str(tmp_path), *NO_GIT])

        assert result.exit_code == 1
        assert "No vrs file found" in result.output
        assert "vrs init" in result.output

    def test_malformed_version(self, runner, tmp_path):
        (tmp_path / "vrs.yml").write_text("version: 1.x.0\n")

        result = runner.invoke(cli, ["bump", "-C", str(tmp_path), *NO_GIT])

        assert result.exit_code == 1
        assert (tmp_path / "vrs.yml").read_text() == "version: 1.x.0\n"


@pytest.mark.short
class TestCurrentCommand:
    def test_current(self, runner, tmp_path):
        (tmp_path / "vrs.yml").write_text("version: 3.4.5\n")

        result = runner.invoke(cli, ["current", "-C", str(tmp_path)])

        assert result.exit_code == 0, result.output
        assert result.output.strip() == "3.4.5"

    def test_uses_current_directory(self, runner, tmp_path, monkeypatch):
        (tmp_path / "vrs.yml").write_text("version: 3.4.5\n")
        monkeypatch.chdir(tmp_path)

        with patch(
            "vrs.cli.current.read_current_version", return_value="3.4.5"
        ) as mock_read:
            result = runner.invoke(cli, ["current"])

        assert result.exit_code == 0, result.output
        mock_read.assert_called_once_with(
            ReadCurrentOptions(basedir=tmp_path, git_commit=True, git_push=True)
        )

    def test_missing_config(self, runner, tmp_path):
        result = runner.invoke(cli, ["current", "-C", str(tmp_path)])
        assert result.exit_code == 1


@pytest.mark.short
class TestMainGroup:
    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert result.output.startswith("vrs, version ")

    def test_help_lists_commands(self, runner):
        result = runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        for name in ("init", "bump", "current"):
            assert name in result.output

    def test_debug_flag(self, runner, tmp_path):
        (tmp_path / "vrs.yml").write_text("version: 3.4.5\n")

        result = runner.invoke(cli, ["--debug", "bump", "-C", str(tmp_path), *NO_GIT])

        assert result.exit_code == 0, result.output
        assert "[vrs.versioning.operations] Bumping 3.4.5 -> 3.5.5" in result.output

    def test_no_debug_output_by_default(self, runner, tmp_path):
        (tmp_path / "vrs.yml").write_text("version: 3.4.5\n")

        result = runner.invoke(cli, ["bump", "-C", str(tmp_path), *NO_GIT])

        assert result.exit_code == 0, result.output
        assert result.output == "3.5.5\n"
