#!/usr/bin/env python3
"""Session data models: the state machine and the owning context."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List

from core import RingHistory
from core.desktop.devtools.application.task_manager import TaskManager
from core.desktop.devtools.interface.tui_panel import Panel

logger = logging.getLogger("taskman.session")


class SessionState(Enum):
    RUNNING = "running"
    TERMINATING = "terminating"


@dataclass
class SessionContext:
    """Everything one session owns; passed by reference through the loop."""
    manager: TaskManager
    command_history: RingHistory[str]
    error_history: RingHistory[str]
    detail_panel: Panel
    detail_lines: List[str] = field(default_factory=list)
    state: SessionState = SessionState.RUNNING

    @property
    def running(self) -> bool:
        return self.state is SessionState.RUNNING

    def terminate(self) -> None:
        self.state = SessionState.TERMINATING

    def report_error(self, message: str) -> None:
        logger.info("error: %s", message)
        self.error_history.push(message)
