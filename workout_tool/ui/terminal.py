"""POSIX terminal handling: cbreak mode and keyboard decoding."""

from __future__ import annotations

import os
import select
import sys
from typing import Any

from workout_tool.core.errors import InputDeviceError, TerminalError

# How long to wait for the rest of an escape sequence after a lone ESC byte.
ESC_SEQUENCE_TIMEOUT_SEC = 0.05

_ESCAPE_SEQUENCES = {
    "[A": "up",
    "[B": "down",
    "[C": "right",
    "[D": "left",
    "OA": "up",
    "OB": "down",
    "OC": "right",
    "OD": "left",
}

_CONTROL_KEYS = {
    "\r": "enter",
    "\n": "enter",
    "\t": "tab",
    "\x7f": "backspace",
    "\x08": "backspace",
}


class PosixKeyboard:
    """Keyboard input device reading raw bytes from a file descriptor."""

    def __init__(self, fd: int) -> None:
        self._fd = fd
        self._pending = ""

    def poll(self, timeout: float) -> bool:
        if self._pending:
            return True
        readable, _, _ = select.select([self._fd], [], [], max(0.0, timeout))
        return bool(readable)

    def read_key(self) -> str | None:
        ch = self._read_char()
        if ch == "\x1b":
            return self._read_escape()
        if ch in _CONTROL_KEYS:
            return _CONTROL_KEYS[ch]
        if ch.isprintable():
            return ch
        return None

    def _read_escape(self) -> str | None:
        if not self.poll(ESC_SEQUENCE_TIMEOUT_SEC):
            return "esc"
        lead = self._read_char()
        if lead not in ("[", "O"):
            if lead != "\x1b" and lead.isprintable():
                # Terminals send Alt+key as ESC followed by the key.
                return f"alt+{lead}"
            self._pending += lead
            return "esc"
        if not self.poll(ESC_SEQUENCE_TIMEOUT_SEC):
            return "esc"
        seq = lead + self._read_char()
        if seq in _ESCAPE_SEQUENCES:
            return _ESCAPE_SEQUENCES[seq]
        # Drain the tail of longer CSI sequences (e.g. "[5~") so it is not
        # decoded as separate keys.
        while seq[-1].isdigit() or seq[-1] == ";":
            if not self.poll(ESC_SEQUENCE_TIMEOUT_SEC):
                break
            seq += self._read_char()
        return None

    def _read_char(self) -> str:
        if self._pending:
            ch, self._pending = self._pending[0], self._pending[1:]
            return ch
        data = os.read(self._fd, 1)
        if not data:
            raise InputDeviceError("Keyboard input closed")
        return data.decode("latin-1")


class TerminalSession:
    """Puts stdin into cbreak mode for the lifetime of a ``with`` block."""

    def __init__(self, stream: Any = None) -> None:
        self._stream = stream if stream is not None else sys.stdin
        self._fd: int | None = None
        self._saved: Any = None

    @property
    def fd(self) -> int:
        if self._fd is None:
            raise TerminalError("Terminal session is not active")
        return self._fd

    def keyboard(self) -> PosixKeyboard:
        return PosixKeyboard(self.fd)

    def __enter__(self) -> TerminalSession:
        try:
            import termios
            import tty
        except ImportError as exc:
            raise TerminalError("A POSIX terminal is required") from exc

        if not self._stream.isatty():
            raise TerminalError("Standard input is not a terminal")
        fd = self._stream.fileno()
        try:
            self._saved = termios.tcgetattr(fd)
            tty.setcbreak(fd)
        except (termios.error, OSError) as exc:
            raise TerminalError(f"Unable to enter cbreak mode: {exc}") from exc
        self._fd = fd
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._fd is None:
            return
        import termios

        fd, saved = self._fd, self._saved
        self._fd = None
        try:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)
        except (termios.error, OSError) as exc:
            raise TerminalError(f"Unable to restore terminal: {exc}") from exc
