import logging
import os
import tempfile
from pathlib import Path
from typing import List, Optional, Tuple

from core import PersistenceError, Task
from application.ports import TaskRepository
from infrastructure.task_file_parser import TaskFileParser

logger = logging.getLogger("taskman.repository")


class FileTaskRepository(TaskRepository):
    """Single JSON file holding every task plus the id counter."""

    def __init__(self, save_file: Path):
        self.save_file = Path(save_file).expanduser()

    def describe(self) -> str:
        return str(self.save_file)

    def load(self) -> Tuple[List[Task], int]:
        tasks, next_id = TaskFileParser.parse(self.save_file)
        logger.debug("loaded %d task(s) from %s (next_id=%d)", len(tasks), self.save_file, next_id)
        return tasks, next_id

    def save(self, tasks: List[Task], next_id: int) -> None:
        """Replace the save file atomically; the old file survives any failure."""
        try:
            data = TaskFileParser.to_file_content(tasks, next_id).encode("utf-8")
        except UnicodeError as exc:
            raise PersistenceError(f"could not encode save file '{self.save_file}': {exc}") from exc
        tmp_path: Optional[Path] = None
        try:
            self.save_file.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                mode="wb",
                delete=False,
                dir=str(self.save_file.parent),
                prefix=f".{self.save_file.name}.",
                suffix=".tmp",
            ) as tmp:
                tmp_path = Path(tmp.name)
                tmp.write(data)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(str(tmp_path), str(self.save_file))
            tmp_path = None
        except OSError as exc:
            raise PersistenceError(f"could not write save file '{self.save_file}': {exc}") from exc
        finally:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)
        logger.info("saved %d task(s) to %s", len(tasks), self.save_file)
