"""Full-frame renderer: clears the terminal region and repaints every panel."""

import logging
from typing import Dict, List, TextIO

from core import RenderError
from core.desktop.devtools.interface.constants import PROMPT
from core.desktop.devtools.interface.i18n import translate
from core.desktop.devtools.interface.tui_panel import CSI, Panel, cursor_to
from util.responsive import (
    PANEL_COMMANDS,
    PANEL_DETAIL,
    PANEL_DOING,
    PANEL_DONE,
    PANEL_ERRORS,
    PANEL_ORDER,
    PANEL_TODO,
    compute_layout,
)

logger = logging.getLogger("taskman.render")

_PANEL_TITLE_KEYS = {
    PANEL_TODO: "PANEL_TODO",
    PANEL_DOING: "PANEL_DOING",
    PANEL_DONE: "PANEL_DONE",
    PANEL_ERRORS: "PANEL_ERRORS",
    PANEL_COMMANDS: "PANEL_COMMANDS",
    PANEL_DETAIL: "PANEL_DETAIL",
}


class RenderEngine:
    """Owns the six session panels; geometry is fixed for its lifetime."""

    def __init__(self, columns: int, rows: int, panels: Dict[str, Panel]):
        self.columns = columns
        self.rows = rows
        self.panels = panels

    @classmethod
    def for_terminal(cls, columns: int, rows: int) -> "RenderEngine":
        """Lay out the panels for a terminal of ``columns`` x ``rows``.

        Raises LayoutError when the terminal is too small.
        """
        layout = compute_layout(columns, rows)
        panels = {
            key: Panel(rect.x, rect.y, rect.width, rect.height, translate(_PANEL_TITLE_KEYS[key]))
            for key, rect in layout.items()
        }
        return cls(columns, rows, panels)

    def panel(self, key: str) -> Panel:
        return self.panels[key]

    @property
    def detail_panel(self) -> Panel:
        return self.panels[PANEL_DETAIL]

    def ordered_panels(self) -> List[Panel]:
        return [self.panels[key] for key in PANEL_ORDER if key in self.panels]

    def clear_sequence(self) -> str:
        """Blank every row so shrinking content leaves no artifacts."""
        blank = " " * self.columns
        return "".join(cursor_to(0, y) + blank for y in range(self.rows))

    def render(self, out: TextIO, prompt: str = PROMPT) -> None:
        """Repaint the whole frame and finish with the prompt line.

        Each panel is written in a single call. Any stream failure abandons
        the frame with RenderError.
        """
        try:
            out.write(self.clear_sequence())
            out.write(f"{CSI}H")
            for panel in self.ordered_panels():
                out.write(panel.render())
            out.write("\n" + prompt)
            out.flush()
        except (OSError, ValueError) as exc:
            logger.warning("frame aborted: %s", exc)
            raise RenderError(translate("ERR_RENDER_FAILED", error=exc)) from exc


__all__ = ["RenderEngine"]
