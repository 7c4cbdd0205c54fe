"""Line input for the session loop: prompt_toolkit on a TTY, plain streams otherwise."""

import sys
from typing import Iterable, Optional, Protocol, TextIO

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document
from prompt_toolkit.history import InMemoryHistory

from core.desktop.devtools.interface.cli_commands import COMMAND_NAMES
from core.desktop.devtools.interface.constants import PROMPT


def is_interactive() -> bool:
    """Check that both stdin and stdout are TTYs."""
    return sys.stdin.isatty() and sys.stdout.isatty()


class LineReader(Protocol):
    # True when the reader prints its own prompt, so the frame must not.
    draws_prompt: bool

    def read_line(self) -> str:
        """Block for one line; raise EOFError when input is exhausted."""
        ...


class CommandCompleter(Completer):
    """Completes the command name (first word) only."""

    def __init__(self, names: Iterable[str] = COMMAND_NAMES):
        self.names = tuple(names)

    def get_completions(self, document: Document, complete_event):
        text = document.text_before_cursor.lstrip()
        if " " in text:
            return
        word = text.lower()
        for name in self.names:
            if name.startswith(word):
                yield Completion(name, start_position=-len(text))


class StreamLineReader:
    draws_prompt = False

    def __init__(self, stream: TextIO):
        # undecodable bytes read as U+FFFD
        reconfigure = getattr(stream, "reconfigure", None)
        if reconfigure is not None:
            reconfigure(errors="replace")
        self.stream = stream

    def read_line(self) -> str:
        line = self.stream.readline()
        if line == "":
            raise EOFError
        return line.rstrip("\r\n")


class PromptLineReader:
    draws_prompt = True

    def __init__(self, message: str = PROMPT, session: Optional[PromptSession] = None):
        self.message = message
        self.session = session or PromptSession(
            history=InMemoryHistory(),
            completer=CommandCompleter(),
            complete_while_typing=False,
        )

    def read_line(self) -> str:
        return self.session.prompt(self.message)


def make_line_reader(stream: Optional[TextIO] = None) -> LineReader:
    """prompt_toolkit reader for interactive terminals, stream reader otherwise."""
    if stream is None and is_interactive():
        return PromptLineReader()
    return StreamLineReader(stream if stream is not None else sys.stdin)


__all__ = [
    "is_interactive",
    "LineReader",
    "CommandCompleter",
    "StreamLineReader",
    "PromptLineReader",
    "make_line_reader",
]
