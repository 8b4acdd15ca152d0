"""Preview sanitization and syntax highlighting.

Preview text is stripped of terminal control bytes first, then colored with
Pygments using a lexer picked from the file name.
"""

from __future__ import annotations

import re
from functools import lru_cache

from pygments import highlight as pygments_highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")

FALLBACK_STYLE = "monokai"


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control bytes to avoid side effects (bell, cursor moves, etc.)."""
    if _CONTROL_RE.search(source) is None:
        return source

    out: list[str] = []
    for ch in source:
        code = ord(ch)
        if ch in {"\n", "\r", "\t"}:
            out.append(ch)
            continue
        # C0 controls + DEL + C1 controls.
        if code < 32 or code == 127 or 0x80 <= code <= 0x9F:
            out.append(f"\\x{code:02x}")
            continue
        out.append(ch)
    return "".join(out)


@lru_cache(maxsize=None)
def _normalize_style(style: str) -> str:
    try:
        get_style_by_name(style)
    except ClassNotFound:
        return FALLBACK_STYLE
    return style


@lru_cache(maxsize=None)
def _formatter_for_style(style: str) -> TerminalFormatter:
    return TerminalFormatter(style=style)


def highlight_lines(lines: list[str], filename: str, style: str = FALLBACK_STYLE) -> list[str]:
    """Color ``lines`` as source of ``filename``, one output row per input row.

    Falls back to the plain lines when highlighting fails or would change the
    row count.
    """
    if not lines:
        return []
    source = "\n".join(lines) + "\n"
    try:
        lexer = get_lexer_for_filename(filename, source, stripnl=False, stripall=False)
    except ClassNotFound:
        lexer = TextLexer(stripnl=False)

    try:
        rendered = pygments_highlight(source, lexer, _formatter_for_style(_normalize_style(style)))
    except Exception:
        return list(lines)

    rows = rendered.split("\n")
    if rows and rows[-1] in {"", "\x1b[39;49;00m", "\x1b[39m"}:
        rows.pop()
    if len(rows) != len(lines):
        return list(lines)
    return rows
