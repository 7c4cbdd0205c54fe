import os
from dataclasses import dataclass
from typing import Dict, Optional, TextIO, Tuple

from core import LayoutError, TerminalSizeError
from core.desktop.devtools.interface.i18n import translate

MIN_COLUMNS = 30
MIN_ROWS = 18
MIN_HISTORY_CAPACITY = 1

PANEL_TODO = "todo"
PANEL_DOING = "doing"
PANEL_DONE = "done"
PANEL_ERRORS = "errors"
PANEL_COMMANDS = "commands"
PANEL_DETAIL = "detail"

PANEL_ORDER = (PANEL_TODO, PANEL_DOING, PANEL_DONE, PANEL_ERRORS, PANEL_COMMANDS, PANEL_DETAIL)


@dataclass(frozen=True)
class PanelRect:
    """0-based top-left cell plus size in cells."""
    x: int
    y: int
    width: int
    height: int


def validate_terminal_size(columns: int, rows: int) -> None:
    if columns < MIN_COLUMNS or rows < MIN_ROWS:
        raise LayoutError(
            translate(
                "ERR_TERMINAL_TOO_SMALL",
                columns=columns,
                rows=rows,
                min_columns=MIN_COLUMNS,
                min_rows=MIN_ROWS,
            )
        )


def compute_layout(columns: int, rows: int) -> Dict[str, PanelRect]:
    """Split the terminal into the six session panels.

    Top half: three task columns. Middle band (one sixth): errors and
    commands. Remainder minus the prompt row: the detail panel.
    """
    validate_terminal_size(columns, rows)
    third = columns // 3
    half = columns // 2
    top_h = rows // 2
    mid_h = rows // 6
    detail_y = top_h + mid_h
    return {
        PANEL_TODO: PanelRect(0, 0, third - 1, top_h),
        PANEL_DOING: PanelRect(third, 0, third - 1, top_h),
        PANEL_DONE: PanelRect(2 * third, 0, third - 1, top_h),
        PANEL_ERRORS: PanelRect(0, top_h, half - 1, mid_h),
        PANEL_COMMANDS: PanelRect(half, top_h, half - 1, mid_h),
        PANEL_DETAIL: PanelRect(0, detail_y, columns, rows - detail_y - 1),
    }


def history_capacity(rows: int) -> int:
    """Entries kept by each ring history: the middle panels' inner rows."""
    return max(MIN_HISTORY_CAPACITY, rows // 6 - 2)


def query_terminal_size(stream: Optional[TextIO] = None) -> Tuple[int, int]:
    """Return (columns, rows) of the terminal attached to ``stream``.

    Raises TerminalSizeError when the size cannot be queried.
    """
    try:
        fd = stream.fileno() if stream is not None else 1
        size = os.get_terminal_size(fd)
    except (AttributeError, ValueError, OSError) as exc:
        raise TerminalSizeError(translate("ERR_TERMINAL_SIZE", error=exc)) from exc
    return size.columns, size.lines
