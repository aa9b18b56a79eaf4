"""Tests for the root patternctl CLI."""

import pytest
from click.testing import CliRunner

from patternctl import __version__
from patternctl.cli import cli

EXPECTED_COMMANDS = ["document", "gui", "build", "clone", "support", "singleton"]


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "Run factory, builder" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


@pytest.mark.usefixtures("_isolated_cwd")
def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


@pytest.mark.parametrize("name", EXPECTED_COMMANDS)
def test_command_registered(name: str) -> None:
    assert name in cli.commands


@pytest.mark.parametrize("name", EXPECTED_COMMANDS)
def test_command_help(cli_runner: CliRunner, name: str) -> None:
    result = cli_runner.invoke(cli, [name, "--help"])
    assert result.exit_code == 0
    assert "--examples" in result.output


@pytest.mark.usefixtures("_isolated_cwd")
def test_verbose_logs_side_effects(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-v", "--log-json", "document", "report"])
    assert result.exit_code == 0
    assert "Opening Report." in result.stderr


@pytest.mark.usefixtures("_isolated_cwd")
def test_config_option(cli_runner: CliRunner, tmp_path) -> None:
    config = tmp_path / "custom.toml"
    config.write_text('[factory]\ndocument = "presentation"\n')
    result = cli_runner.invoke(cli, ["-q", "-c", str(config), "document"])
    assert result.exit_code == 0
    assert result.output.strip() == "Presentation"


def test_cli_examples(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--examples"])
    assert result.exit_code == 0
    assert "patternctl --json singleton" in result.output


@pytest.mark.usefixtures("_isolated_cwd")
def test_invalid_env_value_exits_cleanly(cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PATTERNCTL_FACTORY__DOCUMENT", "memo")
    result = cli_runner.invoke(cli, ["document"])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Error: Invalid configuration" in result.stderr
    assert "Traceback" not in result.output


@pytest.mark.usefixtures("_isolated_cwd")
def test_invalid_desk_in_config_exits_cleanly(cli_runner: CliRunner, tmp_path) -> None:
    (tmp_path / "patternctl.toml").write_text('[chain]\ndesks = ["legal"]\n')
    result = cli_runner.invoke(cli, ["support", "billing", "Refund"])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Invalid configuration" in result.stderr


def test_missing_config_file_is_usage_error(cli_runner: CliRunner, tmp_path) -> None:
    result = cli_runner.invoke(cli, ["-c", str(tmp_path / "absent.toml"), "document"])
    assert result.exit_code == 2
