# livegrep/session.py
"""
Interactive search session.

The session owns the query being typed and decides, once per input poll,
whether the screen needs redrawing. It never writes to the terminal itself;
a display adapter reads ``state`` and draws.

    EDITING --char/backspace--> EDITING
    EDITING --enter-----------> EDITING   (results committed, new block below)
    EDITING --escape----------> TERMINATED
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from .differ import changed
from .engine import Engine
from .models import KeyEvent, KeyKind, ResultSequence, SessionState

log = logging.getLogger(__name__)

# rows between a block's prompt and its first result
RESULTS_GAP = 2


class Status(Enum):
    EDITING = 1
    TERMINATED = 2


class Action(Enum):
    # What handling a key did, so the adapter knows what to redraw
    NONE = 0
    EDITED = 1
    COMMITTED = 2
    WRAPPED = 3      # committed, and the new block restarts at the top
    TERMINATED = 4


class SearchSession:
    """Drives one engine from key events. Width/height are terminal cells."""

    def __init__(self, engine: Engine, *, width: int, height: int,
                 case_insensitive: bool = False) -> None:
        self.engine = engine
        self.width = int(width)
        self.height = int(height)
        self.case_insensitive = case_insensitive
        self.status = Status.EDITING
        self.state = SessionState()

    # ------------- properties -------------

    @property
    def query(self) -> str:
        return self.state.query

    @property
    def terminated(self) -> bool:
        return self.status is Status.TERMINATED

    @property
    def visible_rows(self) -> int:
        """Result rows that fit below the current block's start."""
        return max(0, self.height - self.state.results_start_row - 1)

    @property
    def rendered_count(self) -> int:
        return min(len(self.state.rendered), self.visible_rows)

    @property
    def exit_row(self) -> int:
        """Row just below the last rendered result, where the caller leaves the cursor."""
        return min(self.state.results_start_row + self.rendered_count, max(self.height - 1, 0))

    # ------------- per tick -------------

    def compute(self) -> ResultSequence:
        return self.engine.search(self.state.query,
                                  case_insensitive=self.case_insensitive,
                                  width=self.width)

    def tick(self) -> bool:
        """
        Recompute results for the current query and compare with what is on screen.

        Returns True when the display must be redrawn; the new sequence is then
        recorded as rendered.
        """
        if self.terminated:
            return False
        new = self.compute()
        self.state.results = new
        if not changed(self.state.rendered, new):
            return False
        self.state.rendered = new
        return True

    # ------------- input -------------

    def handle(self, event: Optional[KeyEvent]) -> Action:
        if event is None or self.terminated:
            return Action.NONE
        if event.kind is KeyKind.ESCAPE:
            self.status = Status.TERMINATED
            log.info("session terminated after %d commits", self.state.commits)
            return Action.TERMINATED
        if event.kind is KeyKind.ENTER:
            return self.commit()
        if event.kind is KeyKind.BACKSPACE:
            if not self.state.query:
                return Action.NONE
            self.state.query = self.state.query[:-1]
            return Action.EDITED
        if event.kind is KeyKind.CHAR and event.char:
            self.state.query += event.char
            return Action.EDITED
        return Action.NONE

    # /* ~~~ Freeze the block on screen and start a new query under it ~~~ */
    def commit(self) -> Action:
        st = self.state
        prompt_row = st.results_start_row + self.rendered_count
        results_start = prompt_row + RESULTS_GAP
        action = Action.COMMITTED
        if self.height - results_start - 1 < 1:
            prompt_row, results_start = 0, RESULTS_GAP
            action = Action.WRAPPED
        st.prompt_row = prompt_row
        st.results_start_row = results_start
        st.query = ""
        st.results = ()
        st.rendered = ()
        st.commits += 1
        log.info("commit #%d: prompt row %d", st.commits, prompt_row)
        return action

    def resize(self, width: int, height: int) -> None:
        self.width, self.height = int(width), int(height)
        # force a redraw on the next tick
        self.state.rendered = ()
