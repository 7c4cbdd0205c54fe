from core import Priority, Status, Task, normalize_task_priority, normalize_task_status

import pytest


def test_status_from_string_is_case_insensitive():
    assert Status.from_string("todo") is Status.TODO
    assert Status.from_string("DOING") is Status.DOING
    assert normalize_task_status(" Done ") is Status.DONE


def test_priority_from_string_rejects_unknown():
    assert normalize_task_priority("Medium") is Priority.MEDIUM
    with pytest.raises(ValueError):
        Priority.from_string("urgent")
    with pytest.raises(ValueError):
        Status.from_string("")


def test_enums_are_ordered_by_rank():
    assert Priority.LOW < Priority.MEDIUM < Priority.HIGH
    assert Status.TODO < Status.DOING < Status.DONE
    assert sorted([Status.DONE, Status.TODO, Status.DOING]) == [Status.TODO, Status.DOING, Status.DONE]


def test_choices_lists_lowercase_labels():
    assert Status.choices() == "todo/doing/done"
    assert Priority.choices() == "low/medium/high"


def test_task_defaults_and_label():
    task = Task(id=3, title="Buy milk")
    assert task.priority is Priority.LOW
    assert task.status is Status.TODO
    assert task.description == ""
    assert task.label() == "3. [*  ] Buy milk"


def test_task_log_contains_all_fields():
    task = Task(id=0, title="Ship", description="before friday", priority=Priority.HIGH, status=Status.DOING)
    lines = task.log().split("\n")
    assert lines[0] == "0. [***] Ship"
    assert lines[1] == "priority: High | status: Doing"
    assert lines[2] == "before friday"


def test_task_to_dict_uses_labels():
    task = Task(id=7, title="t", description="d", priority=Priority.MEDIUM, status=Status.DONE)
    assert task.to_dict() == {
        "id": 7,
        "title": "t",
        "description": "d",
        "priority": "Medium",
        "status": "Done",
    }


def test_error_hierarchy():
    from core import LayoutError, ParseError, TaskmanError, TaskNotFoundError, TerminalSizeError

    assert issubclass(ParseError, TaskmanError)
    assert issubclass(TaskNotFoundError, LookupError)
    assert issubclass(TerminalSizeError, LayoutError)
    assert str(ParseError("bad input")) == "bad input"
