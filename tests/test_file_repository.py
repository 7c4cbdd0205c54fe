import json
from pathlib import Path

import pytest

from core import PersistenceError, Priority, Status, Task
from infrastructure.file_repository import FileTaskRepository
from infrastructure.task_file_parser import TaskFileParser


def _record(task_id, title="t", priority="Low", status="ToDo", description=""):
    return {"id": task_id, "title": title, "description": description, "priority": priority, "status": status}


def test_roundtrip(tmp_path: Path):
    repo = FileTaskRepository(tmp_path / "nested" / "tasks.json")
    tasks = [
        Task(0, "Buy milk", "2 liters", Priority.MEDIUM, Status.TODO),
        Task(3, "Молоко", "", Priority.HIGH, Status.DONE),
    ]
    repo.save(tasks, 4)
    loaded, next_id = repo.load()
    assert loaded == tasks
    assert next_id == 4


def test_saved_file_layout(tmp_path: Path):
    path = tmp_path / "tasks.json"
    FileTaskRepository(path).save([Task(1, "Молоко")], 2)
    text = path.read_text(encoding="utf-8")
    assert "Молоко" in text
    assert text.endswith("\n")
    data = json.loads(text)
    assert data == {"next_id": 2, "tasks": [_record(1, "Молоко")]}


def test_missing_file_raises(tmp_path: Path):
    repo = FileTaskRepository(tmp_path / "absent.json")
    with pytest.raises(PersistenceError) as exc:
        repo.load()
    assert "absent.json" in str(exc.value)


def test_write_failure_raises(tmp_path: Path):
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    repo = FileTaskRepository(blocker / "tasks.json")
    with pytest.raises(PersistenceError):
        repo.save([], 0)


def test_describe_returns_path(tmp_path: Path):
    assert FileTaskRepository(tmp_path / "a.json").describe() == str(tmp_path / "a.json")


class TestTaskFileParser:
    def test_legacy_array_layout(self):
        content = json.dumps([_record(4, "a"), _record(1, "b", "High", "Doing")])
        tasks, next_id = TaskFileParser.parse_content(content)
        assert [t.id for t in tasks] == [4, 1]
        assert tasks[1].priority is Priority.HIGH
        assert tasks[1].status is Status.DOING
        assert next_id == 5

    def test_empty_layouts(self):
        assert TaskFileParser.parse_content("[]") == ([], 0)
        assert TaskFileParser.parse_content('{"tasks": []}') == ([], 0)

    def test_next_id_never_below_max_id(self):
        content = json.dumps({"next_id": 1, "tasks": [_record(7)]})
        _, next_id = TaskFileParser.parse_content(content)
        assert next_id == 8

    def test_next_id_may_sit_one_past_the_last_id(self):
        content = json.dumps({"next_id": 2**32, "tasks": [_record(2**32 - 1)]})
        assert TaskFileParser.parse_content(content)[1] == 2**32
        with pytest.raises(PersistenceError):
            TaskFileParser.parse_content(json.dumps({"next_id": 2**32 + 1, "tasks": []}))

    def test_stored_next_id_wins_when_larger(self):
        content = json.dumps({"next_id": 10, "tasks": [_record(2)]})
        assert TaskFileParser.parse_content(content)[1] == 10

    @pytest.mark.parametrize(
        "content",
        [
            "not json",
            '"string"',
            '{"next_id": 0}',
            json.dumps([{"id": 1, "title": "t"}]),
            json.dumps([_record(1, priority="Urgent")]),
            json.dumps([_record(1, status="Later")]),
            json.dumps([_record(-1)]),
            json.dumps([_record(2**32)]),
            json.dumps([_record(True)]),
            json.dumps([_record("1")]),
            json.dumps([_record(1), _record(1)]),
            json.dumps(["not an object"]),
        ],
    )
    def test_invalid_content_raises(self, content):
        with pytest.raises(PersistenceError):
            TaskFileParser.parse_content(content)

    def test_enum_labels_are_case_insensitive(self):
        tasks, _ = TaskFileParser.parse_content(json.dumps([_record(0, priority="high", status="done")]))
        assert tasks[0].priority is Priority.HIGH
        assert tasks[0].status is Status.DONE


def test_unencodable_title_leaves_existing_file_untouched(tmp_path: Path):
    path = tmp_path / "tasks.json"
    # json escapes a lone surrogate, so the file itself is valid
    path.write_text(json.dumps({"next_id": 2, "tasks": [_record(0, "ok"), _record(1, "bad \ud800")]}), encoding="utf-8")
    before = path.read_bytes()
    repo = FileTaskRepository(path)
    tasks, next_id = repo.load()
    assert tasks[1].title == "bad \ud800"

    with pytest.raises(PersistenceError):
        repo.save(tasks, next_id)

    assert path.read_bytes() == before
    assert sorted(p.name for p in tmp_path.iterdir()) == ["tasks.json"]


def test_save_replaces_file_without_leftovers(tmp_path: Path):
    path = tmp_path / "tasks.json"
    path.write_text("old content", encoding="utf-8")
    FileTaskRepository(path).save([Task(0, "fresh")], 1)
    assert json.loads(path.read_text(encoding="utf-8"))["tasks"][0]["title"] == "fresh"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["tasks.json"]
