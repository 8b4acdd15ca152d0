"""Main interactive loop for the browser.

``BrowserSession`` routes one event at a time to navigation or the command
line; ``run_browser`` wires the terminal, event source, and renderer around it.
Recoverable failures become an error notice instead of ending the session.
"""

from __future__ import annotations

import functools
import logging
import os
import shutil
import sys
from pathlib import Path

from .command import CommandProcessor, Mode
from .commands import run_command
from .config import BrowserConfig
from .entries import read_directory
from .errors import BrowserError
from .events import Event, EventSource, Key, Tick
from .input import Action, KeyBindingRegistry, normal_key_registry
from .navigation import NavigationController
from .opener import open_file
from .render import RenderContext, render_frame
from .terminal import TerminalController
from .ui_theme import UITheme, resolve_theme

logger = logging.getLogger(__name__)


class BrowserSession:
    """Exclusive owner of navigation and command state for one run."""

    def __init__(
        self,
        navigation: NavigationController,
        command: CommandProcessor | None = None,
        *,
        registry: KeyBindingRegistry | None = None,
        refresh_on_tick: bool = True,
    ) -> None:
        self.navigation = navigation
        self.command = command if command is not None else CommandProcessor()
        if self.command.on_execute is None:
            self.command.on_execute = self.execute_command
        self.registry = registry if registry is not None else normal_key_registry()
        self.refresh_on_tick = refresh_on_tick
        self.quit_requested = False

    def execute_command(self, command: str, selected_name: str | None) -> None:
        """Default execute hook: run a built-in ':' command."""
        if run_command(command, selected_name, self.navigation):
            self.quit_requested = True

    def handle_event(self, event: Event) -> bool:
        """Apply one event; return ``False`` once the session should end."""
        try:
            if isinstance(event, Tick):
                self._handle_tick()
            elif isinstance(event, Key):
                self._handle_key(event.code)
        except BrowserError as exc:
            logger.warning("%s", exc)
            self.command.report_error(str(exc))
        return not self.quit_requested

    def _handle_tick(self) -> None:
        # No auto-refresh while an error notice is up.
        if self.refresh_on_tick and self.command.mode is not Mode.ERROR:
            self.navigation.refresh()

    def _handle_key(self, key: str) -> None:
        if self.command.editing:
            self.command.handle_key(key, self.navigation.selected_name)
            return
        action = self.registry.resolve(key)
        if action is not None:
            self.dispatch(action)

    def dispatch(self, action: Action) -> None:
        """Run a normal-mode action."""
        if action is Action.QUIT:
            self.quit_requested = True
        elif action is Action.MOVE_UP:
            self.navigation.move_selection(-1)
        elif action is Action.MOVE_DOWN:
            self.navigation.move_selection(1)
        elif action is Action.ENTER:
            self.navigation.enter()
        elif action is Action.LEAVE:
            self.navigation.leave()
        elif action is Action.START_COMMAND:
            self.command.start()

    def render_context(self, columns: int, rows: int, theme: UITheme, style: str) -> RenderContext:
        return RenderContext(
            state=self.navigation.state,
            mode=self.command.mode,
            buffer=self.command.buffer,
            notice=self.command.notice,
            columns=columns,
            rows=rows,
            theme=theme,
            style=style,
        )


def run_browser(config: BrowserConfig, start_path: Path | None = None) -> int:
    """Browse ``start_path`` (default: cwd) until the user quits; returns exit status.

    Raises ``NavigationError`` before touching the terminal when the starting
    directory cannot be read.
    """
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()

    navigation = NavigationController.open(
        start_path if start_path is not None else Path.cwd(),
        reader=functools.partial(read_directory, show_hidden=config.show_hidden),
        opener=functools.partial(open_file, opener=config.opener),
    )
    session = BrowserSession(navigation, refresh_on_tick=config.refresh_on_tick)
    theme = resolve_theme(config.theme, no_color=bool(os.environ.get("NO_COLOR")))
    terminal = TerminalController(stdin_fd, stdout_fd)
    events = EventSource(stdin_fd, config.tick_interval_ms)
    last_size: tuple[int, int] | None = None

    def draw() -> None:
        nonlocal last_size
        term = shutil.get_terminal_size((80, 24))
        size = (term.columns, term.lines)
        frame = render_frame(session.render_context(term.columns, term.lines, theme, config.style))
        if size != last_size:
            frame = "\x1b[2J" + frame
            last_size = size
        terminal.write_frame(frame)

    logger.info("browsing %s", navigation.path)
    with terminal.raw_mode():
        events.start()
        try:
            draw()
            while True:
                event = events.next_event()
                if event is None:
                    continue
                if not session.handle_event(event):
                    break
                draw()
        finally:
            # Input must stay in raw mode until the poller has let go of stdin.
            events.stop()
            events.join(2 * config.tick_interval_ms / 1000.0)
    logger.info("quit in %s", session.navigation.path)
    return 0


__all__ = ["BrowserSession", "run_browser"]
