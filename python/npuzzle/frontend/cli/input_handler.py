"""Single-keypress reader for the terminal frontend.

Arrow keys and WASD fling a tile; the remaining keys drive the session.
Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys

from npuzzle.backend.models.board import Direction

# -- key tables ----------------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "r": "shuffle",
    "v": "solve",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}

DIRECTIONS: dict[str, Direction] = {d.value: d for d in Direction}


def _resolve(ch: str) -> str:
    return _KEY_MAP.get(ch.lower(), "")


# -- public API ----------------------------------------------------------------


def get_key_timeout(timeout: float) -> str | None:
    """Wait up to *timeout* seconds for a keypress.

    Returns an action string (``"up"``, ``"shuffle"``, ``"quit"`` …),
    ``""`` for an unmapped key, or ``None`` when nothing was pressed.
    """
    if os.name == "nt":
        return _read_windows(timeout)
    return _read_unix(timeout)


def _read_windows(timeout: float) -> str | None:
    import msvcrt  # type: ignore[import-not-found]
    import time

    end = time.monotonic() + timeout
    while time.monotonic() < end:
        if msvcrt.kbhit():
            ch = msvcrt.getwch()
            if ch in ("\x00", "\xe0"):
                return {"H": "up", "P": "down", "K": "left", "M": "right"}.get(
                    msvcrt.getwch(), ""
                )
            return _resolve(ch)
        time.sleep(0.02)
    return None


def _read_unix(timeout: float) -> str | None:
    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)

    def _next(wait: float) -> str | None:
        ready, _, _ = select.select([fd], [], [], wait)
        if not ready:
            return None
        # os.read keeps select() accurate for multi-byte escape sequences.
        return os.read(fd, 1).decode("utf-8", errors="ignore")

    try:
        tty.setraw(fd)
        ch = _next(timeout)
        if ch is None:
            return None
        if ch != "\x1b":
            return _resolve(ch)

        # ESC [ A/B/C/D, or a bare Escape.
        if _next(0.1) != "[":
            return "quit"
        return _ARROW_MAP.get(_next(0.1) or "", "")
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
