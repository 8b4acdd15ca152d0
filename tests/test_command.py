"""Command-line mode state machine tests."""

from __future__ import annotations

import unittest

from lazybrowser.command import INVALID_COMMAND_NOTICE, CommandProcessor, Mode


class CommandProcessorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.executed: list[tuple[str, str | None]] = []
        self.command = CommandProcessor(on_execute=lambda text, name: self.executed.append((text, name)))

    def test_colon_from_normal_starts_editing_with_prefix(self) -> None:
        self.command.start()
        self.assertIs(self.command.mode, Mode.EDITING)
        self.assertEqual(self.command.buffer, ":")

    def test_escape_cancels_and_clears_buffer(self) -> None:
        self.command.start()
        for key in "abc":
            self.command.handle_key(key, None)

        self.command.handle_key("ESC", None)

        self.assertIs(self.command.mode, Mode.NORMAL)
        self.assertEqual(self.command.buffer, "")
        self.assertEqual(self.executed, [])

    def test_append_then_backspace_round_trips(self) -> None:
        self.command.start()
        self.command.handle_key("x", None)
        for text in ("", "a", "rm -rf", "ünï"):
            with self.subTest(text=text):
                before = self.command.buffer
                for ch in text:
                    self.command.handle_key(ch, None)
                for _ in text:
                    self.command.handle_key("BACKSPACE", None)
                self.assertEqual(self.command.buffer, before)

    def test_backspace_never_removes_leading_colon(self) -> None:
        self.command.start()
        self.command.handle_key("BACKSPACE", None)
        self.command.handle_key("BACKSPACE", None)
        self.assertEqual(self.command.buffer, ":")
        self.assertIs(self.command.mode, Mode.EDITING)

    def test_typing_rm_and_enter_executes_against_selection(self) -> None:
        self.command.start()
        for key in ("r", "m", "ENTER_CR"):
            self.command.handle_key(key, "a.txt")

        self.assertEqual(self.executed, [(":rm", "a.txt")])
        self.assertIs(self.command.mode, Mode.NORMAL)
        self.assertEqual(self.command.buffer, "")

    def test_execute_passes_none_without_selection(self) -> None:
        self.command.start()
        self.command.handle_key("ENTER_LF", None)
        self.assertEqual(self.executed, [(":", None)])

    def test_buffer_without_prefix_enters_error_mode(self) -> None:
        self.command.start()
        self.command.buffer = "rm"

        self.assertFalse(self.command.execute("a.txt"))

        self.assertIs(self.command.mode, Mode.ERROR)
        self.assertEqual(self.command.notice, INVALID_COMMAND_NOTICE)
        self.assertEqual(self.command.buffer, "")
        self.assertEqual(self.executed, [])

    def test_error_mode_is_left_only_by_starting_a_new_command(self) -> None:
        self.command.report_error("Cannot read /x: Permission denied")

        self.assertFalse(self.command.handle_key("a", None))
        self.assertIs(self.command.mode, Mode.ERROR)

        self.command.start()
        self.assertIs(self.command.mode, Mode.EDITING)
        self.assertEqual(self.command.buffer, ":")
        self.assertEqual(self.command.notice, "")

    def test_hook_can_report_its_own_error(self) -> None:
        command = CommandProcessor()
        command.on_execute = lambda text, _name: command.report_error(f"Unknown command: {text}")
        command.start()
        command.handle_key("z", None)

        command.handle_key("ENTER_CR", None)

        self.assertIs(command.mode, Mode.ERROR)
        self.assertEqual(command.notice, "Unknown command: :z")

    def test_non_printable_unbound_keys_are_ignored_while_editing(self) -> None:
        self.command.start()
        self.assertFalse(self.command.handle_key("UP", None))
        self.assertEqual(self.command.buffer, ":")

    def test_home_and_page_keys_leave_the_buffer_alone(self) -> None:
        self.command.start()
        for key in "cd x":
            self.command.handle_key(key, None)

        for key in ("HOME", "END", "PAGE_UP", "SHIFT_RIGHT", "UNKNOWN"):
            self.assertFalse(self.command.handle_key(key, None))

        self.assertIs(self.command.mode, Mode.EDITING)
        self.assertEqual(self.command.buffer, ":cd x")

    def test_edits_outside_editing_mode_are_ignored(self) -> None:
        self.command.append("x")
        self.command.backspace()
        self.assertEqual(self.command.buffer, "")
        self.assertIs(self.command.mode, Mode.NORMAL)


if __name__ == "__main__":
    unittest.main()
