"""Fixed-geometry bordered text box drawn with raw ANSI cursor moves."""

from typing import Iterable, List, Optional

from core import LayoutError
from core.desktop.devtools.interface.i18n import translate
from core.desktop.devtools.interface.tui_display import DisplayMixin

CSI = "\x1b["


def cursor_to(x: int, y: int) -> str:
    """Move the cursor to 0-based cell (x, y)."""
    return f"{CSI}{y + 1};{x + 1}H"


class Panel(DisplayMixin):
    """Rectangle at (x, y) of ``width`` x ``height`` cells with a titled border.

    Content lines are clipped to ``height - 2`` rows and trimmed to
    ``width - 2`` cells when rendered; the stored lines are never modified.
    """

    FILL = "-"
    SIDE = "|"

    def __init__(self, x: int, y: int, width: int, height: int, title: str, content: Optional[Iterable[str]] = None):
        min_width = self._display_width(title) + 2
        if width < min_width:
            raise LayoutError(translate("ERR_PANEL_TOO_NARROW", title=title, min_width=min_width, width=width))
        if height < 2:
            raise LayoutError(translate("ERR_PANEL_TOO_SHORT", title=title, height=height))
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.title = title
        self.content: List[str] = list(content or [])

    @property
    def inner_width(self) -> int:
        return self.width - 2

    @property
    def inner_height(self) -> int:
        return self.height - 2

    def set_content(self, lines: Iterable[str]) -> None:
        self.content = list(lines)

    def wrap(self, text: str) -> List[str]:
        """Split text into lines that fit the interior, dropping empty ones."""
        return self._wrap_display(text, self.inner_width)

    def rows(self) -> List[str]:
        """The panel as plain text rows, top border first."""
        top = self.FILL + self._printable(self.title)
        top += self.FILL * (self.width - self._display_width(top))
        rows = [top]
        for i in range(1, self.height - 1):
            text = self._printable(self.content[i - 1].strip()) if i - 1 < len(self.content) else ""
            rows.append(self.SIDE + self._pad_display(text, self.inner_width) + self.SIDE)
        rows.append(self.FILL * self.width)
        return rows

    def render(self) -> str:
        """The panel as one string, each row preceded by its cursor move."""
        return "".join(cursor_to(self.x, self.y + i) + row for i, row in enumerate(self.rows()))

    def __repr__(self) -> str:
        return f"Panel({self.title!r}, x={self.x}, y={self.y}, {self.width}x{self.height})"


__all__ = ["Panel", "cursor_to", "CSI"]
