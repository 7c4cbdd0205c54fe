"""Task record owned by the task manager."""

from dataclasses import dataclass
from typing import Any, Dict

from .status import DEFAULT_PRIORITY, DEFAULT_STATUS, Priority, Status

MAX_TASK_ID = 2**32 - 1


@dataclass
class Task:
    """A single tracked task.

    Attributes:
        id: Unsigned id handed out by the task manager's counter
        title: Short title shown in the list panels
        description: Free text shown by ``show``
        priority: Low < Medium < High
        status: ToDo < Doing < Done
    """

    id: int
    title: str
    description: str = ""
    priority: Priority = DEFAULT_PRIORITY
    status: Status = DEFAULT_STATUS

    def label(self) -> str:
        """One-line form used by the ToDo/Doing/Done panels."""
        return f"{self.id}. {self.priority.glyph} {self.title}"

    def log(self) -> str:
        """Multi-line form used by the detail panel."""
        meta = f"priority: {self.priority.label} | status: {self.status.label}"
        return f"{self.label()}\n{meta}\n{self.description}"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "priority": self.priority.label,
            "status": self.status.label,
        }
