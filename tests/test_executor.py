import io
from unittest.mock import MagicMock, call, patch

import pytest
from rich.console import Console

from deps_tools.config import Settings
from deps_tools.dependencies import Dependency
from deps_tools.errors import InstallError
from deps_tools.executor import run_install
from deps_tools.installers.plan import InstallPlan
from deps_tools.utils.status_reporter import StatusReporter

PLAN = InstallPlan(
    dependency=Dependency.HEROKU,
    commands=("brew tap heroku/brew", "brew install heroku"),
    refresh=("sudo apt update",),
)


def _result(returncode):
    result = MagicMock()
    result.returncode = returncode
    return result


@pytest.fixture
def reporter():
    return MagicMock(spec=StatusReporter)


@patch("subprocess.run")
def test_runs_refresh_then_commands_with_inherited_io(mock_run, reporter):
    mock_run.return_value.returncode = 0
    run_install(PLAN, reporter)
    assert mock_run.call_args_list == [
        call("sudo apt update", shell=True),
        call("brew tap heroku/brew", shell=True),
        call("brew install heroku", shell=True),
    ]
    reporter.succeed.assert_called_once_with("You're good to go")
    reporter.fail.assert_not_called()


@patch("subprocess.run")
def test_refresh_can_be_turned_off(mock_run, reporter):
    mock_run.return_value.returncode = 0
    run_install(PLAN, reporter, Settings(refresh_index=False))
    assert [c.args[0] for c in mock_run.call_args_list] == ["brew tap heroku/brew", "brew install heroku"]


@patch("subprocess.run")
def test_stops_at_first_failure(mock_run, reporter):
    mock_run.side_effect = [_result(0), _result(1), _result(0)]
    with pytest.raises(InstallError) as excinfo:
        run_install(PLAN, reporter)
    assert excinfo.value.command == "brew tap heroku/brew"
    assert excinfo.value.returncode == 1
    assert mock_run.call_count == 2
    reporter.fail.assert_called_once_with("Something went wrong")
    reporter.succeed.assert_not_called()


@patch("subprocess.run")
def test_failed_refresh_skips_install(mock_run, reporter):
    mock_run.return_value.returncode = 100
    with pytest.raises(InstallError) as excinfo:
        run_install(PLAN, reporter)
    assert excinfo.value.command == "sudo apt update"
    assert mock_run.call_count == 1


@patch("subprocess.run")
def test_command_that_cannot_start(mock_run, reporter):
    mock_run.side_effect = OSError("no shell")
    with pytest.raises(InstallError) as excinfo:
        run_install(PLAN, reporter)
    assert excinfo.value.returncode is None
    reporter.fail.assert_called_once()


#  Test the spinner is stopped while package managers own the terminal
@patch("subprocess.run")
def test_spinner_not_running_during_commands(mock_run):
    reporter = StatusReporter(Console(file=io.StringIO(), width=120))
    reporter.start("Installing git")
    spinning = []

    def fake_run(cmd, shell):
        spinning.append(reporter.is_spinning)
        return _result(0)

    mock_run.side_effect = fake_run
    run_install(PLAN, reporter)
    assert spinning == [False, False, False]
    output = reporter.console.file.getvalue()
    assert "Installing git" in output
    assert "You're good to go" in output


@patch("subprocess.run")
def test_spinner_not_running_when_command_fails(mock_run):
    reporter = StatusReporter(Console(file=io.StringIO(), width=120))
    reporter.start("Installing heroku-cli")
    spinning = []

    def fake_run(cmd, shell):
        spinning.append(reporter.is_spinning)
        return _result(1)

    mock_run.side_effect = fake_run
    with pytest.raises(InstallError):
        run_install(PLAN, reporter)
    assert spinning == [False]
    assert "Something went wrong" in reporter.console.file.getvalue()
