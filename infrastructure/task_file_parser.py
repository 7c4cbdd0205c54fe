import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Tuple

from core import PersistenceError, Priority, Status, Task
from core.task import MAX_TASK_ID


class TaskFileParser:
    """Encode/decode the JSON save file.

    Current layout: ``{"next_id": N, "tasks": [record, ...]}``.
    Legacy layout (no counter): a bare ``[record, ...]`` array.
    """

    REQUIRED_FIELDS = ("id", "title", "description", "priority", "status")

    @staticmethod
    def _coerce_id(value: Any, field: str = "id", limit: int = MAX_TASK_ID) -> int:
        # bool is an int subclass; reject it explicitly
        if isinstance(value, bool) or not isinstance(value, int):
            raise PersistenceError(f"invalid {field} value {value!r} in save file")
        if value < 0 or value > limit:
            raise PersistenceError(f"{field} {value} out of range in save file")
        return value

    @staticmethod
    def _coerce_text(value: Any, field: str) -> str:
        if not isinstance(value, str):
            raise PersistenceError(f"invalid {field} value {value!r} in save file")
        return value

    @classmethod
    def _parse_record(cls, raw: Any) -> Task:
        if not isinstance(raw, Mapping):
            raise PersistenceError(f"task record must be an object, got {type(raw).__name__}")
        missing = [name for name in cls.REQUIRED_FIELDS if name not in raw]
        if missing:
            raise PersistenceError(f"task record is missing field(s): {', '.join(missing)}")
        try:
            priority = Priority.from_string(cls._coerce_text(raw["priority"], "priority"))
            status = Status.from_string(cls._coerce_text(raw["status"], "status"))
        except ValueError as exc:
            raise PersistenceError(str(exc)) from exc
        return Task(
            id=cls._coerce_id(raw["id"]),
            title=cls._coerce_text(raw["title"], "title"),
            description=cls._coerce_text(raw["description"], "description"),
            priority=priority,
            status=status,
        )

    @classmethod
    def parse_content(cls, content: str) -> Tuple[List[Task], int]:
        """Decode file content into (tasks, next_id)."""
        try:
            data = json.loads(content)
        except json.JSONDecodeError as exc:
            raise PersistenceError(f"could not decode save file: {exc}") from exc

        stored_next_id = None
        if isinstance(data, list):
            records = data
        elif isinstance(data, dict):
            records = data.get("tasks")
            if not isinstance(records, list):
                raise PersistenceError("save file has no 'tasks' array")
            if data.get("next_id") is not None:
                stored_next_id = cls._coerce_id(data["next_id"], "next_id", limit=MAX_TASK_ID + 1)
        else:
            raise PersistenceError(f"unexpected save file layout: {type(data).__name__}")

        tasks = [cls._parse_record(raw) for raw in records]
        seen: set[int] = set()
        for task in tasks:
            if task.id in seen:
                raise PersistenceError(f"duplicate task id {task.id} in save file")
            seen.add(task.id)

        next_id = max(seen) + 1 if seen else 0
        if stored_next_id is not None:
            next_id = max(next_id, stored_next_id)
        return tasks, next_id

    @classmethod
    def parse(cls, filepath: Path) -> Tuple[List[Task], int]:
        if not filepath.exists():
            raise PersistenceError(f"save file '{filepath}' not found")
        try:
            content = filepath.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise PersistenceError(f"could not read save file '{filepath}': {exc}") from exc
        return cls.parse_content(content)

    @staticmethod
    def to_file_content(tasks: List[Task], next_id: int) -> str:
        payload: Dict[str, Any] = {
            "next_id": next_id,
            "tasks": [task.to_dict() for task in tasks],
        }
        return json.dumps(payload, ensure_ascii=False, indent=2) + "\n"
