"""Helpers that copy session state into panel contents before each frame."""

from typing import List

from core import Status
from core.desktop.devtools.application.task_manager import TaskManager
from core.desktop.devtools.interface.tui_models import SessionContext
from core.desktop.devtools.interface.tui_render import RenderEngine
from util.responsive import PANEL_COMMANDS, PANEL_DETAIL, PANEL_DOING, PANEL_DONE, PANEL_ERRORS, PANEL_TODO

STATUS_PANELS = (
    (Status.TODO, PANEL_TODO),
    (Status.DOING, PANEL_DOING),
    (Status.DONE, PANEL_DONE),
)


def task_panel_lines(manager: TaskManager, status: Status) -> List[str]:
    return [task.label() for task in manager.filter_by_status(status)]


def refresh_task_panels(ctx: SessionContext, engine: RenderEngine) -> None:
    for status, key in STATUS_PANELS:
        engine.panel(key).set_content(task_panel_lines(ctx.manager, status))


def refresh_history_panels(ctx: SessionContext, engine: RenderEngine) -> None:
    engine.panel(PANEL_ERRORS).set_content(ctx.error_history.snapshot())
    engine.panel(PANEL_COMMANDS).set_content(ctx.command_history.snapshot())
    engine.panel(PANEL_DETAIL).set_content(ctx.detail_lines)


def refresh_panels(ctx: SessionContext, engine: RenderEngine) -> None:
    refresh_task_panels(ctx, engine)
    refresh_history_panels(ctx, engine)


__all__ = ["STATUS_PANELS", "task_panel_lines", "refresh_task_panels", "refresh_history_panels", "refresh_panels"]
