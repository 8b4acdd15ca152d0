"""Tests for terminal mode control sequences.

Verifies raw-mode lifecycle safety and expected escape-command payloads.
These guard the low-level terminal contract used by the main loop.
"""

from __future__ import annotations

import termios
import unittest
from unittest import mock

from lazybrowser.terminal import TerminalController


class TerminalBehaviorTests(unittest.TestCase):
    def test_enable_and_disable_tui_mode_use_alternate_screen_sequences(self) -> None:
        saved_state = [1, 2, 3]

        with mock.patch("lazybrowser.terminal.termios.tcgetattr", return_value=saved_state), mock.patch(
            "lazybrowser.terminal.tty.setraw"
        ) as setraw_mock, mock.patch("lazybrowser.terminal.os.write") as write_mock, mock.patch(
            "lazybrowser.terminal.termios.tcsetattr"
        ) as setattr_mock:
            controller = TerminalController(stdin_fd=0, stdout_fd=1)
            controller.enable_tui_mode()
            controller.disable_tui_mode()

        setraw_mock.assert_called_once_with(0, termios.TCSAFLUSH)
        self.assertEqual(write_mock.call_args_list[0].args, (1, b"\x1b[?1049h\x1b[?25l"))
        self.assertEqual(write_mock.call_args_list[1].args, (1, b"\x1b[?25h\x1b[?1049l"))
        setattr_mock.assert_called_once_with(0, termios.TCSAFLUSH, saved_state)

    def test_raw_mode_restores_terminal_after_exception(self) -> None:
        with mock.patch("lazybrowser.terminal.termios.tcgetattr", return_value=[0]):
            controller = TerminalController(stdin_fd=0, stdout_fd=1)

        with mock.patch.object(controller, "enable_tui_mode") as enable_mock, mock.patch.object(
            controller, "disable_tui_mode"
        ) as disable_mock:
            with self.assertRaises(RuntimeError):
                with controller.raw_mode():
                    raise RuntimeError("boom")

        enable_mock.assert_called_once()
        disable_mock.assert_called_once()

    def test_write_frame_retries_partial_writes(self) -> None:
        with mock.patch("lazybrowser.terminal.termios.tcgetattr", return_value=[0]):
            controller = TerminalController(stdin_fd=0, stdout_fd=1)

        chunks: list[bytes] = []

        def short_write(_fd: int, data: bytes) -> int:
            chunks.append(bytes(data[:3]))
            return min(3, len(data))

        with mock.patch("lazybrowser.terminal.os.write", side_effect=short_write):
            controller.write_frame("abcdefgh")

        self.assertEqual(b"".join(chunks), b"abcdefgh")


if __name__ == "__main__":
    unittest.main()
