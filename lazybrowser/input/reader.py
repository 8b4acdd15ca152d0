"""Low-level terminal input decoding.

Reads raw bytes from stdin and translates them into normalized key tokens.
Handles ESC-sequence timing so a lone Escape does not wait for another key.
"""

from __future__ import annotations

import os
import select

ESC_SEQUENCE_TIMEOUT_MS = 25
_PENDING_BYTES: list[bytes] = []

_CONTROL_TOKENS = {
    b"\x03": "CTRL_C",
    b"\x08": "BACKSPACE",
    b"\x7f": "BACKSPACE",
    b"\t": "TAB",
    b"\r": "ENTER_CR",
    b"\n": "ENTER_LF",
}

_ARROW_TOKENS = {
    b"A": "UP",
    b"B": "DOWN",
    b"C": "RIGHT",
    b"D": "LEFT",
}

_HOME_END_TOKENS = {
    b"H": "HOME",
    b"F": "END",
}

_TILDE_TOKENS = {
    b"1": "HOME",
    b"7": "HOME",
    b"3": "DELETE",
    b"4": "END",
    b"8": "END",
    b"5": "PAGE_UP",
    b"6": "PAGE_DOWN",
}

CSI_MAX_LENGTH = 16


def _read_ready_byte(fd: int, timeout_ms: int) -> bytes | None:
    ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
    if not ready:
        return None
    ch = os.read(fd, 1)
    if not ch:
        return None
    return ch


def _read_utf8_tail(fd: int, lead: bytes) -> str:
    """Complete a multi-byte UTF-8 character whose lead byte was already read."""
    first = lead[0]
    if first >= 0xF0:
        missing = 3
    elif first >= 0xE0:
        missing = 2
    elif first >= 0xC0:
        missing = 1
    else:
        missing = 0
    data = lead
    for _ in range(missing):
        nxt = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if nxt is None:
            break
        data += nxt
    return data.decode("utf-8", errors="replace")


def _read_csi(fd: int) -> tuple[bytes, bytes] | None:
    """Consume a CSI sequence after ``ESC [``; returns ``(params, final)``.

    Returns ``None`` when the sequence stalls or runs past ``CSI_MAX_LENGTH``.
    """
    params = b""
    for _ in range(CSI_MAX_LENGTH):
        ch = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if ch is None:
            return None
        if 0x40 <= ch[0] <= 0x7E:
            return params, ch
        params += ch
    return None


def read_key(fd: int, timeout_ms: int | None = None) -> str:
    """Read one key token from ``fd``.

    Returns ``""`` when ``timeout_ms`` elapses without input and raises
    ``EOFError`` once the input stream is closed. Escape sequences with no
    binding of their own come back as ``"UNKNOWN"``.
    """
    if _PENDING_BYTES:
        ch = _PENDING_BYTES.pop(0)
    else:
        if timeout_ms is not None:
            ready, _, _ = select.select([fd], [], [], max(0.0, timeout_ms / 1000.0))
            if not ready:
                return ""

        ch = os.read(fd, 1)
        if not ch:
            raise EOFError("terminal input closed")

    token = _CONTROL_TOKENS.get(ch)
    if token is not None:
        return token

    if ch != b"\x1b":
        return _read_utf8_tail(fd, ch)

    # Escape / arrow key sequences.
    seq = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
    if seq is None:
        return "ESC"
    if seq == b"O":
        final = _read_ready_byte(fd, ESC_SEQUENCE_TIMEOUT_MS)
        if final is None:
            return "ESC"
        return _ARROW_TOKENS.get(final) or _HOME_END_TOKENS.get(final, "UNKNOWN")
    if seq != b"[":
        _PENDING_BYTES.append(seq)
        return "ESC"
    csi = _read_csi(fd)
    if csi is None:
        return "ESC"
    params, final = csi
    if not params and final in _ARROW_TOKENS:
        return _ARROW_TOKENS[final]
    if final == b"~":
        return _TILDE_TOKENS.get(params, "UNKNOWN")
    if final in {b"H", b"F"} and not params:
        return _HOME_END_TOKENS[final]
    if params.startswith(b"1;") and final in {b"C", b"D"}:
        side = "RIGHT" if final == b"C" else "LEFT"
        modifier = params[2:]
        if modifier == b"2":
            return f"SHIFT_{side}"
        if modifier in {b"3", b"9"}:
            return f"ALT_{side}"
    return "UNKNOWN"
