from .status import Status, Priority, normalize_task_status, normalize_task_priority
from .task import Task
from .ring_history import RingHistory
from .errors import (
    TaskmanError,
    ParseError,
    TaskNotFoundError,
    PersistenceError,
    RenderError,
    LayoutError,
    TerminalSizeError,
    TaskIdsExhaustedError,
)

__all__ = [
    "Status",
    "Priority",
    "normalize_task_status",
    "normalize_task_priority",
    "Task",
    "RingHistory",
    # Errors
    "TaskmanError",
    "ParseError",
    "TaskNotFoundError",
    "PersistenceError",
    "RenderError",
    "LayoutError",
    "TerminalSizeError",
    "TaskIdsExhaustedError",
]
