"""Error taxonomy shared by the parser, dispatcher, store and renderer."""


class TaskmanError(Exception):
    """Base class; ``str(exc)`` is the user-facing message."""


class ParseError(TaskmanError):
    """Malformed command line: bad syntax, arity, id or enum token."""


class TaskNotFoundError(TaskmanError, LookupError):
    """No task matches the requested id or title."""


class PersistenceError(TaskmanError):
    """Save file could not be opened, read, decoded or written."""


class RenderError(TaskmanError):
    """Terminal write failed mid-frame; the frame is abandoned."""


class LayoutError(TaskmanError):
    """Panel geometry cannot be laid out for the terminal size."""


class TerminalSizeError(LayoutError):
    """The terminal size could not be queried at startup."""


class TaskIdsExhaustedError(TaskmanError):
    """Every task id up to MAX_TASK_ID has been handed out."""
