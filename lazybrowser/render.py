"""Frame composition for the browser screen.

The screen is a listing pane on the left, preview and info panes on the right,
and a single command/notice row at the bottom. Rendering is a pure function of
the navigation and command state plus the preview read for the selection.
"""

from __future__ import annotations

from dataclasses import dataclass

from .command import Mode
from .entries import Entry, EntryKind, describe_entry, preview_lines
from .highlight import highlight_lines, sanitize_terminal_text
from .navigation import DirectoryState
from .ui_theme import DEFAULT_THEME, UITheme

SELECTION_MARKER = ">"
DIVIDER = "│"
PREVIEW_TITLE = " Preview "
INFO_TITLE = " Info "


@dataclass(frozen=True)
class RenderContext:
    """Inputs needed to draw one frame."""

    state: DirectoryState
    mode: Mode
    buffer: str
    notice: str
    columns: int
    rows: int
    theme: UITheme = DEFAULT_THEME
    style: str = "monokai"


def fit(text: str, width: int) -> str:
    """Truncate or right-pad plain ``text`` to exactly ``width`` cells."""
    if width <= 0:
        return ""
    if len(text) > width:
        return text[:width]
    return text + " " * (width - len(text))


def listing_window(selected: int | None, count: int, visible_rows: int) -> int:
    """First listing index to draw so the selection stays on screen."""
    if selected is None or visible_rows <= 0 or count <= visible_rows:
        return 0
    start = max(0, selected - visible_rows + 1)
    return min(start, count - visible_rows)


def _entry_color(entry: Entry, theme: UITheme) -> str:
    if entry.kind is EntryKind.DIRECTORY:
        return theme.listing_dir
    if entry.kind is EntryKind.REGULAR_FILE:
        return theme.listing_file
    return theme.listing_other


def render_listing(state: DirectoryState, width: int, height: int, theme: UITheme) -> list[str]:
    """Title row plus one row per visible entry, highlighted at the selection."""
    rows = [theme.listing_title + fit(sanitize_terminal_text(f" {state.path} "), width) + theme.reset]
    visible = max(0, height - 1)
    start = listing_window(state.selected, len(state.entries), visible)
    for idx in range(start, min(len(state.entries), start + visible)):
        entry = state.entries[idx]
        label = entry.name + ("/" if entry.is_dir else "")
        label = sanitize_terminal_text(label)
        if idx == state.selected:
            rows.append(theme.listing_selected + fit(f"{SELECTION_MARKER}{label}", width) + theme.reset)
        else:
            rows.append(_entry_color(entry, theme) + fit(f" {label}", width) + theme.reset)
    while len(rows) < height:
        rows.append(fit("", width))
    return rows[:height]


def render_details(state: DirectoryState, width: int, height: int, theme: UITheme, style: str) -> list[str]:
    """Preview and info panes for the selected entry."""
    entry = state.selected_entry
    rows = [theme.preview_title + fit(PREVIEW_TITLE, width) + theme.reset]

    preview = [fit(sanitize_terminal_text(line).expandtabs(4), width) for line in preview_lines(state.path, entry)]
    if entry is not None and preview:
        preview = highlight_lines(preview, entry.name, style)
    rows.extend(row + theme.reset for row in preview)

    rows.append(fit("", width))
    rows.append(theme.info_title + fit(INFO_TITLE, width) + theme.reset)
    rows.extend(fit(sanitize_terminal_text(f" {line}"), width) for line in describe_entry(entry))

    while len(rows) < height:
        rows.append(fit("", width))
    return rows[:height]


def render_command_line(mode: Mode, buffer: str, notice: str, width: int, theme: UITheme) -> str:
    if mode is Mode.ERROR:
        return theme.error_notice + fit(sanitize_terminal_text(notice), width) + theme.reset
    if mode is Mode.EDITING:
        return fit(sanitize_terminal_text(buffer), width)
    return fit("", width)


def render_frame(context: RenderContext) -> str:
    """Compose the full-screen frame as one ANSI string."""
    columns = max(3, context.columns)
    rows = max(2, context.rows)
    theme = context.theme
    body_height = rows - 1
    left_width = max(1, (columns - 1) // 2)
    right_width = max(1, columns - left_width - 1)

    left = render_listing(context.state, left_width, body_height, theme)
    right = render_details(context.state, right_width, body_height, theme, context.style)
    divider = theme.divider + DIVIDER + theme.reset

    lines = [f"{left[idx]}{divider}{right[idx]}" for idx in range(body_height)]
    lines.append(render_command_line(context.mode, context.buffer, context.notice, columns, theme))

    out = ["\x1b[H", "\r\n".join(lines)]
    if context.mode is Mode.EDITING:
        cursor_col = min(columns, len(context.buffer) + 1)
        out.append(f"\x1b[{rows};{cursor_col}H\x1b[?25h")
    else:
        out.append("\x1b[?25l")
    return "".join(out)


__all__ = [
    "RenderContext",
    "fit",
    "listing_window",
    "render_listing",
    "render_details",
    "render_command_line",
    "render_frame",
]
