"""Frame rendering for the two-pane browser and the path editor.

``build_frame`` is a pure projection of ``AppState`` onto screen rows and
re-derives all geometry on every call. ``render_frame`` writes one full frame.
"""

from __future__ import annotations

import os
import sys

from ..ansi import fit_ansi_line
from ..state import AppState, EditSession, Pane, Side
from ..ui_theme import DEFAULT_THEME, UITheme
from .file_kinds import KIND_SOURCE, file_kind

HIGHLIGHT_SYMBOL = ">> "
BROWSE_STATUS_HINTS: tuple[tuple[str, str], ...] = (
    ("H", "edit left"),
    ("L", "edit right"),
    ("q", "quit"),
)
EDIT_STATUS_HINTS: tuple[tuple[str, str], ...] = (
    ("Enter", "open"),
    ("Esc", "cancel"),
    ("Up/Down", "suggestion"),
)


def _list_window_start(selected: int | None, total: int, rows: int) -> int:
    """First visible index so that ``selected`` stays inside ``rows`` rows."""
    if rows <= 0 or selected is None or not (0 <= selected < total):
        return 0
    return max(0, selected - rows + 1)


def _status_line(label: str, hints: tuple[tuple[str, str], ...], width: int, theme: UITheme) -> str:
    text = f" {label}  " + "  ".join(f"{key} {action}" for key, action in hints)
    return f"{theme.reverse}{fit_ansi_line(text, width)}{theme.reset}"


def _entry_row(path: str, width: int, highlighted: bool, theme: UITheme) -> str:
    name = os.path.basename(path) or path
    color = theme.file_source if file_kind(path) == KIND_SOURCE else theme.file_default
    if highlighted:
        return f"{theme.reverse}{fit_ansi_line(name, width)}{theme.reset}"
    return fit_ansi_line(f"{color}{name}{theme.reset}", width)


def pane_rows(
    pane: Pane,
    width: int,
    rows: int,
    theme: UITheme,
    *,
    edit_key: str,
    show_listing: bool = True,
) -> list[str]:
    """Header, rule and file rows for one pane, each exactly ``width`` columns."""
    out = [
        fit_ansi_line(f"{theme.pane_header}{pane.path}{theme.reset}", width),
        fit_ansi_line(f"{theme.divider}{'─' * width}{theme.reset}", width),
    ]
    body_rows = max(0, rows - len(out))
    body: list[str] = []
    if show_listing and pane.entries is None:
        body.append(fit_ansi_line(f"{theme.empty_hint}press {edit_key} to open a directory{theme.reset}", width))
    elif show_listing and not pane.entries:
        body.append(fit_ansi_line(f"{theme.empty_hint}(no files){theme.reset}", width))
    elif show_listing:
        start = _list_window_start(pane.selected, len(pane.entries), body_rows)
        for idx in range(start, min(len(pane.entries), start + body_rows)):
            body.append(_entry_row(pane.entries[idx], width, idx == pane.selected, theme))
    body = body[:body_rows]
    body.extend(" " * width for _ in range(body_rows - len(body)))
    return (out + body)[:rows]


def browse_rows(
    state: AppState,
    width: int,
    height: int,
    theme: UITheme,
    *,
    show_right_listing: bool = True,
) -> list[str]:
    content_rows = max(0, height - 1)
    left_width = max(1, (width - 1) // 2)
    right_width = max(1, width - left_width - 1)
    left = pane_rows(state.left, left_width, content_rows, theme, edit_key="H")
    right = pane_rows(
        state.right,
        right_width,
        content_rows,
        theme,
        edit_key="L",
        show_listing=show_right_listing,
    )
    divider = f"{theme.divider}│{theme.reset}"
    rows = [f"{left_row}{divider}{right_row}" for left_row, right_row in zip(left, right)]
    rows.append(_status_line("BROWSE", BROWSE_STATUS_HINTS, width, theme))
    return rows[-height:] if height > 0 else []


def suggestion_rows(session: EditSession, width: int, rows: int, theme: UITheme) -> list[str]:
    """Suggestion list rows, highlighting the cursor only when it is in range."""
    if rows <= 0:
        return []
    if session.suggestions is None:
        hint = "type a path to search directories"
        return [fit_ansi_line(f"{theme.empty_hint}{hint}{theme.reset}", width)] + [" " * width] * (rows - 1)

    highlighted = session.highlighted_index()
    start = _list_window_start(highlighted, len(session.suggestions), rows)
    out: list[str] = []
    for idx in range(start, min(len(session.suggestions), start + rows)):
        text = session.suggestions[idx]
        if idx == highlighted:
            out.append(f"{theme.reverse}{fit_ansi_line(HIGHLIGHT_SYMBOL + text, width)}{theme.reset}")
        else:
            out.append(fit_ansi_line(f"{' ' * len(HIGHLIGHT_SYMBOL)}{theme.suggestion}{text}{theme.reset}", width))
    out.extend(" " * width for _ in range(rows - len(out)))
    return out


def edit_rows(session: EditSession, width: int, height: int, theme: UITheme) -> list[str]:
    inner = max(0, width - 2)
    target = "left" if session.target is Side.LEFT else "right"
    title = f" path ({target}) "
    top = f"┌{title}{'─' * max(0, inner - len(title))}"[: width - 1] + "┐"
    field = f"{theme.input_text}{session.input}{theme.reset}▏"
    box = [
        f"{theme.input_border}{fit_ansi_line(top, width)}{theme.reset}",
        f"{theme.input_border}│{theme.reset}{fit_ansi_line(field, inner)}{theme.input_border}│{theme.reset}",
        f"{theme.input_border}{fit_ansi_line('└' + '─' * inner + '┘', width)}{theme.reset}",
    ]
    list_rows = max(0, height - len(box) - 1)
    rows = box + suggestion_rows(session, width, list_rows, theme)
    rows.append(_status_line(f"EDIT {target}", EDIT_STATUS_HINTS, width, theme))
    return rows[-height:] if height > 0 else []


def build_frame(
    state: AppState,
    width: int,
    height: int,
    theme: UITheme = DEFAULT_THEME,
    *,
    show_right_listing: bool = True,
) -> list[str]:
    """Project ``state`` onto ``height`` screen rows of ``width`` columns."""
    width = max(2, width)
    if state.edit is not None:
        return edit_rows(state.edit, width, height, theme)
    return browse_rows(state, width, height, theme, show_right_listing=show_right_listing)


def render_frame(
    state: AppState,
    width: int,
    height: int,
    theme: UITheme = DEFAULT_THEME,
    *,
    show_right_listing: bool = True,
) -> None:
    """Draw one full frame to stdout."""
    rows = build_frame(state, width, height, theme, show_right_listing=show_right_listing)
    out = "\033[H\033[J" + "\r\n".join(rows)
    os.write(sys.stdout.fileno(), out.encode("utf-8", errors="replace"))


__all__ = [
    "HIGHLIGHT_SYMBOL",
    "pane_rows",
    "browse_rows",
    "suggestion_rows",
    "edit_rows",
    "build_frame",
    "render_frame",
]
