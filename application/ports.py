from typing import Protocol, List, Tuple
from core import Task


class TaskRepository(Protocol):
    def load(self) -> Tuple[List[Task], int]:
        """Return (tasks, next_id); raise PersistenceError on any failure."""
        ...

    def save(self, tasks: List[Task], next_id: int) -> None:
        ...

    def describe(self) -> str:
        ...
