"""Apply parsed commands to the session context.

Failures surface as TaskNotFoundError, TaskIdsExhaustedError or
PersistenceError; the session loop records them in the error history.
"""

import logging

from core.desktop.devtools.interface.cli_commands import (
    Add,
    Command,
    Help,
    NoOp,
    Quit,
    Remove,
    Save,
    SetDescription,
    SetPriority,
    SetStatus,
    Show,
    Sort,
)
from core.desktop.devtools.interface.constants import HELP_TEXT
from core.desktop.devtools.interface.tui_models import SessionContext

logger = logging.getLogger("taskman.session")


def dispatch(ctx: SessionContext, command: Command) -> None:
    manager = ctx.manager
    if isinstance(command, NoOp):
        return
    if isinstance(command, Help):
        ctx.detail_lines = ctx.detail_panel.wrap(HELP_TEXT)
    elif isinstance(command, Show):
        task = manager.require(command.task_id)
        ctx.detail_lines = ctx.detail_panel.wrap(task.log())
    elif isinstance(command, Add):
        task = manager.create(command.title, command.description, command.priority, command.status)
        logger.info("added task %d", task.id)
    elif isinstance(command, Remove):
        manager.remove(command.task_id)
    elif isinstance(command, SetPriority):
        manager.change_priority(command.task_id, command.priority)
    elif isinstance(command, SetStatus):
        manager.change_status(command.task_id, command.status)
    elif isinstance(command, SetDescription):
        manager.change_description(command.task_id, command.description)
    elif isinstance(command, Sort):
        manager.sort(command.sort_by)
    elif isinstance(command, Save):
        manager.save()
    elif isinstance(command, Quit):
        ctx.terminate()
    else:
        raise TypeError(f"unsupported command: {command!r}")


__all__ = ["dispatch"]
