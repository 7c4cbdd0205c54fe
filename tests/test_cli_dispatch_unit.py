import pytest

from core import Priority, RingHistory, Status, TaskNotFoundError
from core.desktop.devtools.application.task_manager import SortBy, TaskManager
from core.desktop.devtools.interface.cli_commands import (
    Add,
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
from core.desktop.devtools.interface.cli_dispatch import dispatch
from core.desktop.devtools.interface.constants import HELP_TEXT
from core.desktop.devtools.interface.tui_models import SessionContext
from core.desktop.devtools.interface.tui_panel import Panel
from core import PersistenceError


@pytest.fixture
def ctx():
    return SessionContext(
        manager=TaskManager(),
        command_history=RingHistory(4),
        error_history=RingHistory(4),
        detail_panel=Panel(0, 0, 40, 10, "Show"),
    )


def test_add_then_show_puts_title_in_detail(ctx):
    dispatch(ctx, Add("Buy milk", "2 liters", Priority.MEDIUM, Status.TODO))
    dispatch(ctx, Show(0))
    assert "Buy milk" in ctx.detail_lines[0]
    assert "priority: Medium | status: ToDo" in ctx.detail_lines
    assert "2 liters" in ctx.detail_lines


def test_help_fills_detail_with_help_text(ctx):
    dispatch(ctx, Help())
    assert ctx.detail_lines == ctx.detail_panel.wrap(HELP_TEXT)
    assert any(line.startswith("add") for line in ctx.detail_lines)


def test_show_missing_task_raises(ctx):
    with pytest.raises(TaskNotFoundError):
        dispatch(ctx, Show(3))
    assert ctx.detail_lines == []


def test_remove_missing_is_silent(ctx):
    dispatch(ctx, Add("a"))
    dispatch(ctx, Remove(7))
    assert len(ctx.manager) == 1


def test_setters(ctx):
    dispatch(ctx, Add("a"))
    dispatch(ctx, SetStatus(0, Status.DONE))
    dispatch(ctx, SetPriority(0, Priority.HIGH))
    dispatch(ctx, SetDescription(0, "updated"))
    task = ctx.manager.require(0)
    assert (task.status, task.priority, task.description) == (Status.DONE, Priority.HIGH, "updated")


def test_set_status_on_missing_task_raises(ctx):
    with pytest.raises(TaskNotFoundError):
        dispatch(ctx, SetStatus(0, Status.DONE))


def test_sort(ctx):
    dispatch(ctx, Add("b"))
    dispatch(ctx, Add("a"))
    dispatch(ctx, Sort(SortBy.TITLE))
    assert [t.title for t in ctx.manager.tasks] == ["a", "b"]


def test_save_without_repository_raises(ctx):
    with pytest.raises(PersistenceError):
        dispatch(ctx, Save())


def test_quit_terminates(ctx):
    assert ctx.running
    dispatch(ctx, Quit())
    assert not ctx.running


def test_noop_changes_nothing(ctx):
    dispatch(ctx, NoOp())
    assert ctx.running
    assert len(ctx.manager) == 0


def test_unknown_command_type(ctx):
    with pytest.raises(TypeError):
        dispatch(ctx, object())
