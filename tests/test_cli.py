from unittest.mock import patch

from typer.testing import CliRunner

from deps_cli.main import app
from deps_tools.checker import ProbeStatus
from deps_tools.errors import InstallError
from deps_tools.orchestrator import InstallOutcome

runner = CliRunner()


def test_validate_rejects_empty():
    result = runner.invoke(app, ["validate", ""])
    assert result.exit_code == 1
    assert "Can't be empty!" in result.output


def test_validate_accepts_name():
    result = runner.invoke(app, ["validate", "my-app"])
    assert result.exit_code == 0


@patch("deps_cli.main.probe", return_value=ProbeStatus.ABSENT)
def test_check_lists_dependencies(mock_probe):
    result = runner.invoke(app, ["check"])
    assert result.exit_code == 0
    for name in ("git", "docker", "heroku-cli"):
        assert name in result.output
    assert mock_probe.call_count == 3


@patch("deps_tools.orchestrator.ensure_installed", return_value=InstallOutcome.ALREADY_INSTALLED)
def test_ensure_selected_dependency(mock_ensure):
    result = runner.invoke(app, ["ensure", "docker"])
    assert result.exit_code == 0
    mock_ensure.assert_called_once()
    assert mock_ensure.call_args.args[0] == "docker"


@patch("deps_tools.orchestrator.ensure_installed", return_value=InstallOutcome.INSTALLED)
def test_ensure_flags_reach_settings(mock_ensure):
    result = runner.invoke(app, ["ensure", "git", "--yes", "--no-refresh"])
    assert result.exit_code == 0
    settings = mock_ensure.call_args.kwargs["settings"]
    assert settings.assume_yes is True
    assert settings.refresh_index is False


@patch("deps_tools.orchestrator.ensure_installed", side_effect=InstallError("apt install git", 100))
def test_ensure_failure_exits_non_zero(mock_ensure):
    result = runner.invoke(app, ["ensure", "git"])
    assert result.exit_code == 1
    assert "apt install git" in result.output


@patch("deps_tools.orchestrator.ensure_installed")
def test_ensure_unknown_dependency(mock_ensure):
    result = runner.invoke(app, ["ensure", "node"])
    assert result.exit_code == 1
    mock_ensure.assert_not_called()


def test_info():
    result = runner.invoke(app, ["info"])
    assert result.exit_code == 0
    assert "Package manager" in result.output


@patch("deps_tools.orchestrator.ensure_installed")
def test_ensure_reports_each_before_failure(mock_ensure):
    mock_ensure.side_effect = [InstallOutcome.ALREADY_INSTALLED, InstallError("apt install docker.io", 100)]
    result = runner.invoke(app, ["ensure", "git", "docker", "heroku-cli"])
    assert result.exit_code == 1
    assert "git is already installed" in result.output
    assert "apt install docker.io" in result.output
    assert [c.args[0] for c in mock_ensure.call_args_list] == ["git help -g", "docker"]
