"""Application-level task store: the task list, its id counter and persistence."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Dict, List, Optional, Union

from application.ports import TaskRepository
from core import PersistenceError, Priority, Status, Task, TaskIdsExhaustedError, TaskNotFoundError
from core.status import DEFAULT_PRIORITY, DEFAULT_STATUS
from core.task import MAX_TASK_ID
from core.desktop.devtools.interface.i18n import translate

logger = logging.getLogger("taskman.store")

# An int selects by id, a str selects by exact title.
TaskSelector = Union[int, str]


class SortBy(Enum):
    NONE = "none"
    ID = "id"
    TITLE = "title"
    PRIORITY = "priority"
    STATUS = "status"

    @classmethod
    def from_string(cls, value: str) -> "SortBy":
        token = (value or "").strip().lower()
        for member in cls:
            if member.value == token:
                return member
        raise ValueError(f"Invalid sort key: {value!r}")

    @classmethod
    def choices(cls) -> str:
        return "/".join(member.value for member in cls)


_SORT_KEYS: Dict[SortBy, Callable[[Task], object]] = {
    SortBy.ID: lambda t: t.id,
    SortBy.TITLE: lambda t: t.title.casefold(),
    SortBy.PRIORITY: lambda t: t.priority.rank,
    SortBy.STATUS: lambda t: t.status.rank,
}


class TaskManager:
    def __init__(self, repository: Optional[TaskRepository] = None):
        self.repo = repository
        self._tasks: List[Task] = []
        self._next_id: int = 0

    # -------------------- persistence --------------------
    def load(self) -> None:
        """Replace the in-memory list with the repository content.

        On PersistenceError the store is left empty and the error propagates.
        """
        self._tasks = []
        self._next_id = 0
        if self.repo is None:
            return
        tasks, next_id = self.repo.load()
        self._tasks = list(tasks)
        self._next_id = next_id

    def save(self) -> None:
        if self.repo is None:
            raise PersistenceError(translate("ERR_NO_SAVE_FILE"))
        self.repo.save(list(self._tasks), self._next_id)

    # -------------------- queries --------------------
    @property
    def tasks(self) -> List[Task]:
        return list(self._tasks)

    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self) -> int:
        return len(self._tasks)

    def find_by_id(self, task_id: int) -> Optional[Task]:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    def find_by_title(self, title: str) -> Optional[Task]:
        for task in self._tasks:
            if task.title == title:
                return task
        return None

    def get(self, selector: TaskSelector) -> Optional[Task]:
        if isinstance(selector, str):
            return self.find_by_title(selector)
        return self.find_by_id(selector)

    def require(self, selector: TaskSelector) -> Task:
        task = self.get(selector)
        if task is None:
            if isinstance(selector, str):
                raise TaskNotFoundError(translate("ERR_TASK_TITLE_NOT_FOUND", title=selector))
            raise TaskNotFoundError(translate("ERR_TASK_NOT_FOUND", id=selector))
        return task

    def filter_by_status(self, status: Status) -> List[Task]:
        return [task for task in self._tasks if task.status == status]

    # -------------------- mutations --------------------
    def create(
        self,
        title: str,
        description: str = "",
        priority: Priority = DEFAULT_PRIORITY,
        status: Status = DEFAULT_STATUS,
    ) -> Task:
        if self._next_id > MAX_TASK_ID:
            raise TaskIdsExhaustedError(translate("ERR_TASK_IDS_EXHAUSTED", max_id=MAX_TASK_ID))
        task = Task(
            id=self._next_id,
            title=title,
            description=description,
            priority=priority,
            status=status,
        )
        self._next_id += 1
        self._tasks.append(task)
        logger.debug("created task %d (%s)", task.id, task.title)
        return task

    def remove(self, selector: TaskSelector) -> int:
        """Remove every matching task; returns how many were removed."""
        before = len(self._tasks)
        if isinstance(selector, str):
            self._tasks = [t for t in self._tasks if t.title != selector]
        else:
            self._tasks = [t for t in self._tasks if t.id != selector]
        removed = before - len(self._tasks)
        if removed:
            logger.debug("removed %d task(s) matching %r", removed, selector)
        return removed

    def change_status(self, selector: TaskSelector, new_status: Status) -> Task:
        task = self.require(selector)
        task.status = new_status
        return task

    def change_priority(self, selector: TaskSelector, new_priority: Priority) -> Task:
        task = self.require(selector)
        task.priority = new_priority
        return task

    def change_description(self, selector: TaskSelector, description: str) -> Task:
        task = self.require(selector)
        task.description = description
        return task

    def sort(self, sort_by: SortBy) -> None:
        key = _SORT_KEYS.get(sort_by)
        if key is None:
            return
        self._tasks.sort(key=key)


__all__ = ["TaskManager", "TaskSelector", "SortBy"]
