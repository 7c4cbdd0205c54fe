"""Typed commands produced by the parser and consumed by the dispatcher."""

from dataclasses import dataclass
from typing import Union

from core import Priority, Status
from core.status import DEFAULT_PRIORITY, DEFAULT_STATUS
from core.desktop.devtools.application.task_manager import SortBy


@dataclass(frozen=True)
class Help:
    pass


@dataclass(frozen=True)
class Show:
    task_id: int


@dataclass(frozen=True)
class Add:
    title: str
    description: str = ""
    priority: Priority = DEFAULT_PRIORITY
    status: Status = DEFAULT_STATUS


@dataclass(frozen=True)
class Remove:
    task_id: int


@dataclass(frozen=True)
class SetPriority:
    task_id: int
    priority: Priority


@dataclass(frozen=True)
class SetStatus:
    task_id: int
    status: Status


@dataclass(frozen=True)
class SetDescription:
    task_id: int
    description: str


@dataclass(frozen=True)
class Sort:
    sort_by: SortBy


@dataclass(frozen=True)
class Save:
    pass


@dataclass(frozen=True)
class Quit:
    pass


@dataclass(frozen=True)
class NoOp:
    pass


Command = Union[Help, Show, Add, Remove, SetPriority, SetStatus, SetDescription, Sort, Save, Quit, NoOp]

COMMAND_NAMES = (
    "help",
    "show",
    "add",
    "remove",
    "description",
    "priority",
    "status",
    "sort",
    "save",
    "quit",
)


__all__ = [
    "Help",
    "Show",
    "Add",
    "Remove",
    "SetPriority",
    "SetStatus",
    "SetDescription",
    "Sort",
    "Save",
    "Quit",
    "NoOp",
    "Command",
    "COMMAND_NAMES",
]
