# src/livegrep/models.py
"""
Data models for the live search engine.

These classes carry no business logic; they only give shape to the values
that flow between the cache, the matcher, the windowing step and the
renderers:

- Query: the pattern plus its case flag, snapshotted once per tick.
- ResultEntry: one render-ready line (path, display text, highlight ranges).
- SessionState: what the interactive session remembers between ticks.

A result sequence is a plain tuple of ResultEntry so that two sequences
compare structurally with ``==``.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple, Tuple

from .config import INVALID_PATTERN_MESSAGE

# half-open [start, end) offsets into a line
MatchRange = Tuple[int, int]


@dataclass(frozen=True, slots=True)
class Query:
    """
    An immutable snapshot of what the user typed.

    Attributes
    ----------
    pattern : str
        The raw regular expression, exactly as typed.
    case_insensitive : bool
        Whether matching ignores case.
    """
    pattern: str
    case_insensitive: bool = False


@dataclass(frozen=True, slots=True)
class ResultEntry:
    """
    One line of output, ready for a renderer.

    Attributes
    ----------
    path : str
        Source file path as reported by the indexer. Empty for the sentinel.
    line : str
        The text to show; possibly truncated and decorated with ellipses.
    ranges : tuple of (start, end)
        Highlight ranges in ``line`` coordinates, ordered and non-overlapping.
    """
    path: str
    line: str
    ranges: Tuple[MatchRange, ...] = ()

    @property
    def is_sentinel(self) -> bool:
        return self.path == "" and self.line == INVALID_PATTERN_MESSAGE

    def to_dict(self) -> dict:
        return {"path": self.path, "line": self.line, "ranges": [list(r) for r in self.ranges]}


ResultSequence = Tuple[ResultEntry, ...]

# stands in for the whole result set when the pattern does not compile
INVALID_PATTERN_ENTRY = ResultEntry(path="", line=INVALID_PATTERN_MESSAGE, ranges=())


@dataclass(slots=True)
class SessionState:
    """
    Mutable state of one interactive session.

    ``rendered`` is the sequence last handed to the display; ``results`` is the
    one computed on the latest tick. Rows are 0-based terminal rows.
    """
    query: str = ""
    results: ResultSequence = field(default_factory=tuple)
    rendered: ResultSequence = field(default_factory=tuple)
    prompt_row: int = 0
    results_start_row: int = 2
    commits: int = 0


class KeyKind(Enum):
    # Key events the session understands
    CHAR = 1
    BACKSPACE = 2
    ENTER = 3
    ESCAPE = 4


class KeyEvent(NamedTuple):
    kind: KeyKind
    char: str = ""  # only set for KeyKind.CHAR

    @classmethod
    def of(cls, ch: str) -> "KeyEvent":
        return cls(KeyKind.CHAR, ch)
