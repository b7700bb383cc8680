# livegrep_frontend/terminal.py
# Raw-mode terminal UI: ANSI drawing, key polling, and the input loop.
from __future__ import annotations

import codecs
import logging
import os
import select
import shutil
import sys
from dataclasses import dataclass
from typing import Optional, Protocol, TextIO

from livegrep import config as CFG
from livegrep.engine import Engine
from livegrep.models import KeyEvent, KeyKind, ResultEntry, ResultSequence
from livegrep.session import Action, SearchSession

log = logging.getLogger(__name__)

CSI = "\033["
WHITE, CYAN, MAGENTA, RED = "37", "36", "35", "31"


def _c(text: str, code: str) -> str:
    return f"{CSI}{code}m{text}{CSI}0m"


def _move(row: int, col: int = 0) -> str:
    return f"{CSI}{row + 1};{col + 1}H"


# -------------------- pure formatting --------------------

def shorten_path(p: str, max_chars: int) -> str:
    """Keep the tail of long paths: the file name is what matters."""
    if len(p) <= max_chars:
        return p
    if max_chars <= len(CFG.ELLIPSIS):
        return p[len(p) - max_chars:] if max_chars > 0 else ""
    return CFG.ELLIPSIS + p[len(p) - (max_chars - len(CFG.ELLIPSIS)):]


def highlight(line: str, ranges) -> str:
    """Colour ``line``: matches magenta, everything else cyan."""
    parts = []
    last = 0
    for start, end in ranges:
        if start > last:
            parts.append(_c(line[last:start], CYAN))
        if end > start:
            parts.append(_c(line[start:end], MAGENTA))
        last = max(last, end)
    if last < len(line):
        parts.append(_c(line[last:], CYAN))
    return "".join(parts)


def format_row(entry: ResultEntry, width: int) -> str:
    """One result row: path on the left, matched text flush right."""
    if entry.is_sentinel:
        return _c(entry.line, RED)
    max_file_len = min(CFG.PATH_COLUMN, width // 2)
    display_file = shorten_path(entry.path, max_file_len)
    line, ranges = entry.line, entry.ranges
    room = max(0, width - len(display_file))
    if len(line) > room:
        # ellipses can push the text past the row; cut it so nothing wraps
        line = line[:room]
        ranges = tuple((s, min(e, room)) for s, e in ranges if s < room)
    padding = max(0, width - (len(display_file) + len(line)))
    return _c(display_file, WHITE) + " " * padding + highlight(line, ranges)


# -------------------- display adapter --------------------

@dataclass
class RenderState:
    """Where things go on screen. Built fresh from the session for every draw."""
    width: int
    height: int
    prompt_row: int = 0
    results_start_row: int = 2
    visible_rows: int = 0

    @classmethod
    def of(cls, session: SearchSession) -> "RenderState":
        return cls(
            width=session.width,
            height=session.height,
            prompt_row=session.state.prompt_row,
            results_start_row=session.state.results_start_row,
            visible_rows=session.visible_rows,
        )


class TerminalDisplay:
    """Writes ANSI sequences to ``out``; holds no search state of its own."""

    def __init__(self, out: TextIO = sys.stdout) -> None:
        self.out = out

    def write(self, s: str) -> None:
        self.out.write(s)

    def flush(self) -> None:
        self.out.flush()

    def clear_screen(self) -> None:
        self.write(f"{CSI}2J{CSI}H")

    def draw_prompt(self, rs: RenderState, query: str) -> None:
        self.write(_move(rs.prompt_row) + CFG.PROMPT + query + f"{CSI}K")

    def place_cursor(self, rs: RenderState, query: str) -> None:
        self.write(_move(rs.prompt_row, len(CFG.PROMPT) + len(query)))

    def clear_results(self, rs: RenderState) -> None:
        for i in range(rs.visible_rows):
            self.write(_move(rs.results_start_row + i) + f"{CSI}2K")

    def draw_results(self, rs: RenderState, results: ResultSequence) -> None:
        self.clear_results(rs)
        for i, entry in enumerate(results[:rs.visible_rows]):
            self.write(_move(rs.results_start_row + i) + format_row(entry, rs.width))

    def start_block(self, rs: RenderState) -> None:
        """Blank everything below a freshly committed block and draw its prompt."""
        for row in range(rs.prompt_row, rs.height):
            self.write(_move(row) + f"{CSI}2K")
        self.draw_prompt(rs, "")

    def finish(self, exit_row: int) -> None:
        self.write(_move(exit_row) + f"{CSI}?25h")
        self.flush()


# -------------------- input --------------------

def decode_key(seq: str) -> Optional[KeyEvent]:
    """Map raw terminal input to a key event; unknown sequences map to None."""
    if not seq:
        return None
    if seq == "\x1b" or seq == "\x03":
        return KeyEvent(KeyKind.ESCAPE)
    if seq.startswith("\x1b"):
        return None  # arrows, function keys, bracketed paste markers...
    if seq in ("\r", "\n"):
        return KeyEvent(KeyKind.ENTER)
    if seq in ("\x7f", "\x08"):
        return KeyEvent(KeyKind.BACKSPACE)
    if len(seq) == 1 and seq.isprintable():
        return KeyEvent.of(seq)
    return None


class KeySource(Protocol):
    def poll(self, timeout: float) -> Optional[KeyEvent]: ...


class KeyReader:
    """
    Reads keys from a tty in raw mode. Use as a context manager so the
    terminal settings are always restored.
    """

    def __init__(self, fd: Optional[int] = None) -> None:
        self.fd = sys.stdin.fileno() if fd is None else fd
        self._old = None
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    def __enter__(self) -> "KeyReader":
        import termios
        import tty
        self._old = termios.tcgetattr(self.fd)
        tty.setraw(self.fd)
        return self

    def __exit__(self, *exc) -> None:
        import termios
        if self._old is not None:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self._old)
            self._old = None

    def _ready(self, timeout: float) -> bool:
        ready, _, _ = select.select([self.fd], [], [], timeout)
        return bool(ready)

    def _read_char(self) -> str:
        while True:
            b = os.read(self.fd, 1)
            if not b:
                return ""
            ch = self._decoder.decode(b)
            if ch:
                return ch

    def poll(self, timeout: float) -> Optional[KeyEvent]:
        """Wait at most ``timeout`` seconds for one key."""
        if not self._ready(timeout):
            return None
        seq = self._read_char()
        if seq == "\x1b":
            while self._ready(0.02):
                nxt = self._read_char()
                seq += nxt
                if nxt.isalpha() or nxt == "~" or len(seq) >= 12:
                    break
        return decode_key(seq)


def terminal_size() -> tuple[int, int]:
    size = shutil.get_terminal_size()
    return size.columns, size.lines


# -------------------- main loop --------------------

def run(
    engine: Engine,
    *,
    keys: KeySource,
    display: TerminalDisplay,
    width: int,
    height: int,
    case_insensitive: bool = False,
    poll_interval: float = CFG.POLL_INTERVAL,
) -> SearchSession:
    """Run the search loop until Escape. Returns the finished session."""
    session = SearchSession(engine, width=width, height=height,
                            case_insensitive=case_insensitive)
    display.clear_screen()
    display.draw_prompt(RenderState.of(session), "")
    display.flush()

    while not session.terminated:
        rs = RenderState.of(session)
        display.draw_prompt(rs, session.query)
        if session.tick():
            display.draw_results(rs, session.state.rendered)
        display.place_cursor(rs, session.query)
        display.flush()

        action = session.handle(keys.poll(poll_interval))
        if action is Action.WRAPPED:
            display.clear_screen()
            display.draw_prompt(RenderState.of(session), "")
        elif action is Action.COMMITTED:
            display.start_block(RenderState.of(session))

    display.finish(session.exit_row)
    return session


def run_interactive(engine: Engine, *, case_insensitive: bool = False) -> int:
    """Take over the real terminal and run until Escape."""
    if not sys.stdin.isatty():
        raise RuntimeError("interactive mode needs a terminal on stdin")
    width, height = terminal_size()
    display = TerminalDisplay(sys.stdout)
    with KeyReader() as keys:
        session = run(engine, keys=keys, display=display, width=width, height=height,
                      case_insensitive=case_insensitive)
    display.write("\r\n")
    display.flush()
    log.info("exited at row %d", session.exit_row)
    return 0
