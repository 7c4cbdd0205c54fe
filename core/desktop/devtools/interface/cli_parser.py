"""Parser for the interactive command language.

``tokenize`` splits a line on whitespace while keeping double-quoted spans
together; ``parse_command`` turns the tokens into one typed command. Both raise
``ParseError`` (and nothing else) on bad input.

Quoting rules:
- a fragment starting with ``"`` opens a span, a fragment ending with ``"``
  closes it; fragments inside are rejoined with single spaces
- outer quotes are stripped; ``""`` yields an empty argument
- a quote that does not start a fragment is literal text (``ab"cd``)
- a span left open at end of line is an error
"""

from typing import Callable, Dict, List, Optional, Sequence

from core import ParseError, Priority, Status
from core.status import DEFAULT_PRIORITY, DEFAULT_STATUS
from core.desktop.devtools.application.task_manager import SortBy
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
from core.desktop.devtools.interface.i18n import translate
from core.task import MAX_TASK_ID

QUOTE = '"'


def tokenize(line: str) -> List[str]:
    tokens: List[str] = []
    span: Optional[List[str]] = None
    for fragment in line.split():
        if span is None:
            if not fragment.startswith(QUOTE):
                tokens.append(fragment)
            elif len(fragment) >= 2 and fragment.endswith(QUOTE):
                tokens.append(fragment[1:-1])
            else:
                span = [fragment]
            continue
        span.append(fragment)
        if fragment.endswith(QUOTE):
            tokens.append(" ".join(span)[1:-1])
            span = None
    if span is not None:
        raise ParseError(translate("ERR_UNTERMINATED_QUOTE"))
    return tokens


class _Arguments:
    """Positional cursor over a command's arguments."""

    def __init__(self, command: str, values: Sequence[str]):
        self.command = command
        self._values = list(values)
        self._pos = 0

    def required(self, arg: str) -> str:
        if self._pos >= len(self._values):
            raise ParseError(translate("ERR_MISSING_ARG", arg=arg, command=self.command))
        value = self._values[self._pos]
        self._pos += 1
        return value

    def optional(self) -> Optional[str]:
        if self._pos >= len(self._values):
            return None
        value = self._values[self._pos]
        self._pos += 1
        return value

    def finish(self) -> None:
        if self._pos < len(self._values):
            raise ParseError(translate("ERR_UNEXPECTED_ARGS", command=self.command))

    # ---- typed helpers ----
    def task_id(self) -> int:
        value = self.required("task_id")
        if not (value.isascii() and value.isdigit()) or int(value) > MAX_TASK_ID:
            raise ParseError(translate("ERR_INVALID_TASK_ID", value=value, command=self.command))
        return int(value)

    def priority(self, value: str) -> Priority:
        try:
            return Priority.from_string(value)
        except ValueError:
            raise ParseError(
                translate("ERR_INVALID_PRIORITY", value=value, command=self.command, choices=Priority.choices())
            ) from None

    def status(self, value: str) -> Status:
        try:
            return Status.from_string(value)
        except ValueError:
            raise ParseError(
                translate("ERR_INVALID_STATUS", value=value, command=self.command, choices=Status.choices())
            ) from None


def _no_args(factory: Callable[[], Command]) -> Callable[[_Arguments], Command]:
    def handler(args: _Arguments) -> Command:
        args.finish()
        return factory()

    return handler


def _parse_show(args: _Arguments) -> Command:
    task_id = args.task_id()
    args.finish()
    return Show(task_id)


def _parse_add(args: _Arguments) -> Command:
    title = args.required("title")
    description = args.optional()
    raw_priority = args.optional()
    raw_status = args.optional()
    args.finish()
    return Add(
        title=title,
        description=description if description is not None else "",
        priority=args.priority(raw_priority) if raw_priority is not None else DEFAULT_PRIORITY,
        status=args.status(raw_status) if raw_status is not None else DEFAULT_STATUS,
    )


def _parse_remove(args: _Arguments) -> Command:
    task_id = args.task_id()
    args.finish()
    return Remove(task_id)


def _parse_priority(args: _Arguments) -> Command:
    task_id = args.task_id()
    priority = args.priority(args.required("new_priority"))
    args.finish()
    return SetPriority(task_id, priority)


def _parse_status(args: _Arguments) -> Command:
    task_id = args.task_id()
    status = args.status(args.required("new_status"))
    args.finish()
    return SetStatus(task_id, status)


def _parse_description(args: _Arguments) -> Command:
    task_id = args.task_id()
    description = args.required("description")
    args.finish()
    return SetDescription(task_id, description)


def _parse_sort(args: _Arguments) -> Command:
    value = args.required("sort_key")
    args.finish()
    try:
        return Sort(SortBy.from_string(value))
    except ValueError:
        raise ParseError(
            translate("ERR_INVALID_SORT", value=value, command=args.command, choices=SortBy.choices())
        ) from None


_HANDLERS: Dict[str, Callable[[_Arguments], Command]] = {
    "help": _no_args(Help),
    "show": _parse_show,
    "add": _parse_add,
    "remove": _parse_remove,
    "priority": _parse_priority,
    "status": _parse_status,
    "description": _parse_description,
    "sort": _parse_sort,
    "save": _no_args(Save),
    "quit": _no_args(Quit),
}


def parse_command(line: str) -> Command:
    """Parse one input line into a command; raises ParseError."""
    tokens = tokenize(line)
    if not tokens:
        return NoOp()
    name = tokens[0]
    handler = _HANDLERS.get(name.lower())
    if handler is None:
        raise ParseError(translate("ERR_INVALID_COMMAND", command=name))
    return handler(_Arguments(name.lower(), tokens[1:]))


__all__ = ["tokenize", "parse_command", "QUOTE"]
