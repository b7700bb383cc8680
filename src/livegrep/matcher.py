from __future__ import annotations
from typing import Iterator, List, Optional

import regex

from .models import MatchRange


def iter_lines(text: str) -> Iterator[str]:
    """
    Yield the lines of a file's text.

    Lines end at ``\\n``; a single ``\\r`` before it is dropped. A final newline
    does not start an extra empty line.
    """
    if not text:
        return
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    for part in parts:
        yield part[:-1] if part.endswith("\r") else part


def find_matches(line: str, matcher: regex.Pattern,
                 timeout: Optional[float] = None) -> List[MatchRange]:
    """
    Every non-overlapping, leftmost-first match in ``line`` as (start, end).

    With ``timeout`` set, raises TimeoutError once matching this line has
    taken longer than that many seconds.
    """
    return [m.span() for m in matcher.finditer(line, timeout=timeout)]
