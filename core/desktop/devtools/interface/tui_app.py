"""Interactive session: read a line, parse, dispatch, redraw, repeat."""

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO, Tuple

from core import (
    ParseError,
    PersistenceError,
    RenderError,
    RingHistory,
    TaskIdsExhaustedError,
    TaskNotFoundError,
)
from core.desktop.devtools.application.task_manager import TaskManager
from core.desktop.devtools.interface.cli_dispatch import dispatch
from core.desktop.devtools.interface.cli_interactive import LineReader, make_line_reader
from core.desktop.devtools.interface.cli_parser import parse_command
from core.desktop.devtools.interface.constants import PROMPT
from core.desktop.devtools.interface.i18n import translate
from core.desktop.devtools.interface.tui_models import SessionContext
from core.desktop.devtools.interface.tui_render import RenderEngine
from core.desktop.devtools.interface.tui_state import refresh_panels
from infrastructure.file_repository import FileTaskRepository
from util.responsive import history_capacity, query_terminal_size

logger = logging.getLogger("taskman.session")


class TaskTrackerTUI:
    """Owns the session context and drives the per-cycle loop.

    One cycle: refresh panels, render, block for a line, record it in the
    command history, parse, dispatch. Parse and dispatch failures go to the
    error history; the loop only stops on ``quit`` or end of input.
    """

    def __init__(
        self,
        manager: TaskManager,
        engine: RenderEngine,
        reader: LineReader,
        out: Optional[TextIO] = None,
    ):
        capacity = history_capacity(engine.rows)
        self.engine = engine
        self.reader = reader
        self.out = out if out is not None else sys.stdout
        self.ctx = SessionContext(
            manager=manager,
            command_history=RingHistory(capacity),
            error_history=RingHistory(capacity),
            detail_panel=engine.detail_panel,
        )

    @classmethod
    def create(
        cls,
        save_file: Path,
        *,
        out: Optional[TextIO] = None,
        reader: Optional[LineReader] = None,
        size: Optional[Tuple[int, int]] = None,
    ) -> "TaskTrackerTUI":
        """Build a session for ``save_file``.

        Raises LayoutError (or TerminalSizeError) when no panel layout fits.
        """
        out = out if out is not None else sys.stdout
        columns, rows = size if size is not None else query_terminal_size(out)
        engine = RenderEngine.for_terminal(columns, rows)
        manager = TaskManager(FileTaskRepository(save_file))
        tui = cls(manager, engine, reader if reader is not None else make_line_reader(), out)
        tui.load_tasks()
        return tui

    def load_tasks(self) -> None:
        try:
            self.ctx.manager.load()
        except PersistenceError as exc:
            logger.warning("startup load failed: %s", exc)
            self.ctx.report_error(translate("ERR_STARTUP_LOAD", error=exc))
        else:
            logger.info("loaded %d task(s)", len(self.ctx.manager))

    def render(self) -> None:
        refresh_panels(self.ctx, self.engine)
        prompt = "" if self.reader.draws_prompt else PROMPT
        try:
            self.engine.render(self.out, prompt=prompt)
        except RenderError as exc:
            self.ctx.report_error(str(exc))

    def handle_line(self, line: str) -> None:
        line = line.rstrip()
        self.ctx.command_history.push(line)
        try:
            command = parse_command(line)
        except ParseError as exc:
            self.ctx.report_error(str(exc))
            return
        try:
            dispatch(self.ctx, command)
        except (TaskNotFoundError, TaskIdsExhaustedError, PersistenceError) as exc:
            self.ctx.report_error(str(exc))

    def run(self) -> int:
        while self.ctx.running:
            self.render()
            try:
                line = self.reader.read_line()
            except (EOFError, KeyboardInterrupt):
                logger.info("input closed, ending session")
                self.ctx.terminate()
                break
            except UnicodeDecodeError as exc:
                self.ctx.report_error(translate("ERR_INPUT_DECODE", error=exc))
                continue
            self.handle_line(line)
        self._farewell()
        return 0

    def _farewell(self) -> None:
        try:
            self.out.write("\n" + translate("STATUS_GOODBYE") + "\n")
            self.out.flush()
        except (OSError, ValueError) as exc:
            logger.warning("could not write farewell: %s", exc)


def cmd_tui(args) -> int:
    tui = TaskTrackerTUI.create(Path(args.save_file))
    return tui.run()


__all__ = ["TaskTrackerTUI", "cmd_tui"]
