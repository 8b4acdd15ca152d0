"""External opener spawn tests."""

from __future__ import annotations

import subprocess
import unittest
from pathlib import Path
from unittest import mock

from lazybrowser.opener import open_file


class OpenFileTests(unittest.TestCase):
    def test_spawns_opener_with_name_in_directory_without_waiting(self) -> None:
        with mock.patch("lazybrowser.opener.subprocess.Popen") as popen:
            error = open_file(Path("/docs"), "a.txt")

        self.assertIsNone(error)
        popen.assert_called_once()
        args, kwargs = popen.call_args
        self.assertEqual(args[0], ["xdg-open", "a.txt"])
        self.assertEqual(kwargs["cwd"], Path("/docs"))
        self.assertIs(kwargs["stderr"], subprocess.DEVNULL)
        popen.return_value.wait.assert_not_called()

    def test_opener_command_may_carry_arguments(self) -> None:
        with mock.patch("lazybrowser.opener.subprocess.Popen") as popen:
            open_file(Path("/docs"), "my file.txt", opener="open -a Preview")

        self.assertEqual(popen.call_args.args[0], ["open", "-a", "Preview", "my file.txt"])

    def test_missing_program_returns_message(self) -> None:
        with mock.patch("lazybrowser.opener.subprocess.Popen", side_effect=FileNotFoundError(2, "No such file")):
            error = open_file(Path("/docs"), "a.txt")

        self.assertIsNotNone(error)
        self.assertIn("xdg-open", error)

    def test_empty_opener_returns_message(self) -> None:
        with mock.patch("lazybrowser.opener.subprocess.Popen") as popen:
            error = open_file(Path("/docs"), "a.txt", opener="  ")

        self.assertEqual(error, "Cannot open: opener is empty.")
        popen.assert_not_called()


if __name__ == "__main__":
    unittest.main()
