"""Display utilities mixin for panels - text width, trimming, padding, wrapping."""

import unicodedata
from typing import List

from wcwidth import wcwidth


class DisplayMixin:
    """Mixin providing text display utilities with proper Unicode width handling."""

    CONTROL_PLACEHOLDER = "?"

    @classmethod
    def _printable(cls, text: str) -> str:
        """Replace control characters (newlines, ESC, ...) so they never reach the terminal."""
        return "".join(
            " " if ch == "\t" else cls.CONTROL_PLACEHOLDER if unicodedata.category(ch) == "Cc" else ch
            for ch in text
        )

    @staticmethod
    def _char_width(ch: str) -> int:
        # wcwidth returns -1 for control characters; they occupy no cell here
        return max(0, wcwidth(ch) or 0)

    @classmethod
    def _display_width(cls, text: str) -> int:
        """Return visual width of text accounting for wide/narrow characters."""
        return sum(cls._char_width(ch) for ch in text)

    @classmethod
    def _trim_display(cls, text: str, width: int) -> str:
        """Trim text so visible width doesn't exceed specified width."""
        acc = []
        used = 0
        for ch in text:
            w = cls._char_width(ch)
            if used + w > width:
                break
            acc.append(ch)
            used += w
        return "".join(acc)

    @classmethod
    def _pad_display(cls, text: str, width: int) -> str:
        """Trim and pad with spaces to exact visible width."""
        trimmed = cls._trim_display(text, width)
        trimmed_width = cls._display_width(trimmed)
        if trimmed_width < width:
            trimmed += " " * (width - trimmed_width)
        return trimmed

    @classmethod
    def _wrap_display(cls, text: str, width: int) -> List[str]:
        """Break text into chunks of at most ``width`` cells, mid-word if needed.

        Existing line breaks are kept; empty lines are dropped.
        """
        lines: List[str] = []
        for raw_line in text.split("\n"):
            current = ""
            used = 0
            for ch in raw_line:
                w = cls._char_width(ch)
                if used + w > width and current:
                    lines.append(current)
                    current = ""
                    used = 0
                current += ch
                used += w
            lines.append(current)
        return [line for line in lines if line != ""]


__all__ = ["DisplayMixin"]
