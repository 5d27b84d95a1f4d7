"""ANSI-aware text measurement and row fitting.

Every frame row must occupy exactly the screen width, so rows are measured
and clipped in terminal cells with escape sequences passed through untouched.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
# Capturing variant: ``split`` yields text at even and escapes at odd positions.
_ANSI_SPLIT_RE = re.compile(f"({ANSI_ESCAPE_RE.pattern})")
TAB_STOP = 8


def char_display_width(ch: str, col: int) -> int:
    """Cells taken by ``ch`` when drawn at column ``col`` (tabs depend on position)."""
    if ch == "\t":
        return TAB_STOP - col % TAB_STOP
    if unicodedata.combining(ch):
        return 0
    return 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1


def display_width(text: str) -> int:
    """Return the column width of ``text`` ignoring ANSI escapes."""
    col = 0
    for ch in ANSI_ESCAPE_RE.sub("", text):
        col += char_display_width(ch, col)
    return col


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Cut ``text`` to at most ``max_cols`` cells.

    Escapes are kept and cost nothing; tabs become spaces; a wide character
    that would straddle the edge is dropped.
    """
    if max_cols <= 0:
        return ""

    out: list[str] = []
    col = 0
    for idx, part in enumerate(_ANSI_SPLIT_RE.split(text)):
        if idx % 2:
            out.append(part)
            continue
        for ch in part:
            w = char_display_width(ch, col)
            if col + w > max_cols:
                return "".join(out)
            out.append(" " * w if ch == "\t" else ch)
            col += w
    return "".join(out)


def fit_ansi_line(text: str, width: int) -> str:
    """Clip ``text`` to ``width`` columns and pad it with spaces to exactly that width."""
    clipped = clip_ansi_line(text, width)
    pad = max(0, width - display_width(clipped))
    if "\x1b" in clipped:
        clipped += "\033[0m"
    return clipped + " " * pad


__all__ = [
    "ANSI_ESCAPE_RE",
    "TAB_STOP",
    "char_display_width",
    "display_width",
    "clip_ansi_line",
    "fit_ansi_line",
]
