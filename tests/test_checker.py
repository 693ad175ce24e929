import subprocess
import unittest
from unittest.mock import patch

from deps_tools.checker import ProbeStatus, is_installed, probe


class TestChecker(unittest.TestCase):

    @patch("subprocess.run")
    def test_probe_present(self, mock_run):
        mock_run.return_value.returncode = 0
        self.assertEqual(probe("git help -g"), ProbeStatus.PRESENT)
        mock_run.assert_called_once_with("git help -g", shell=True, capture_output=True, text=True)

    @patch("subprocess.run")
    def test_probe_absent(self, mock_run):
        mock_run.return_value.returncode = 127
        self.assertEqual(probe("docker"), ProbeStatus.ABSENT)

    @patch("subprocess.run")
    def test_probe_error_when_shell_missing(self, mock_run):
        mock_run.side_effect = FileNotFoundError
        self.assertEqual(probe("docker"), ProbeStatus.PROBE_ERROR)

    @patch("subprocess.run")
    def test_probe_error_on_subprocess_error(self, mock_run):
        mock_run.side_effect = subprocess.SubprocessError("boom")
        self.assertEqual(probe("heroku --version"), ProbeStatus.PROBE_ERROR)

    @patch("subprocess.run")
    def test_is_installed_true(self, mock_run):
        mock_run.return_value.returncode = 0
        self.assertTrue(is_installed("git help -g"))

    @patch("subprocess.run")
    def test_is_installed_false(self, mock_run):
        mock_run.return_value.returncode = 1
        self.assertFalse(is_installed("git help -g"))

    @patch("subprocess.run")
    def test_is_installed_never_raises(self, mock_run):
        mock_run.side_effect = PermissionError
        self.assertFalse(is_installed("docker"))


if __name__ == "__main__":
    unittest.main()
