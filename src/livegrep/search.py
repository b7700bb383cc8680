# livegrep/search.py
from __future__ import annotations
import logging
from typing import Iterable, List, Optional, Sequence

from .cache import ContentCache
from .config import MATCH_TIMEOUT, text_budget
from .errors import ContentReadError
from .matcher import find_matches, iter_lines
from .models import INVALID_PATTERN_ENTRY, Query, ResultEntry, ResultSequence
from .query import InvalidPattern, compile_query
from .window import fit_line

log = logging.getLogger(__name__)


def browse_entries(files: Iterable[str]) -> ResultSequence:
    """Empty query: list every file once, with nothing highlighted."""
    return tuple(ResultEntry(path=f, line="", ranges=()) for f in files)


def scan_text(path: str, text: str, matcher, width: int,
              timeout: Optional[float] = None) -> List[ResultEntry]:
    """
    All hits of ``matcher`` in one file, shaped for ``width`` columns.

    ``timeout`` bounds the matching time of each line; TimeoutError propagates.
    """
    out: List[ResultEntry] = []
    for line in iter_lines(text):
        ranges = find_matches(line, matcher, timeout)
        if not ranges:
            continue
        display, display_ranges = fit_line(line, ranges, width)
        out.append(ResultEntry(path=path, line=display, ranges=display_ranges))
    return out


# /* ~~~ one full rescan for the current query ~~~ */
def search_file_contents(
    files: Sequence[str],
    query: str,
    cache: ContentCache,
    terminal_width: int,
    case_insensitive: bool = False,
) -> ResultSequence:
    """
    Turn (files, cache, query) into a render-ready result sequence.

    - empty query          -> one browse entry per file, no file is read
    - pattern won't compile -> the single invalid-pattern entry, no file is read
    - otherwise            -> one entry per matching line, files in order
    Unreadable files, and files where one line takes longer than
    MATCH_TIMEOUT to match, are skipped for this scan only.
    """
    if query == "":
        return browse_entries(files)

    matcher = compile_query(query, case_insensitive)
    if isinstance(matcher, InvalidPattern):
        return (INVALID_PATTERN_ENTRY,)

    width = text_budget(terminal_width)
    results: List[ResultEntry] = []
    for path in files:
        try:
            text = cache.get_or_load(path)
        except ContentReadError as exc:
            log.debug("skipping %s: %s", path, exc.reason)
            continue
        try:
            results.extend(scan_text(path, text, matcher, width, MATCH_TIMEOUT))
        except TimeoutError:
            log.debug("skipping %s: pattern %r timed out", path, query)
            continue
    return tuple(results)


def run_query(files: Sequence[str], query: Query, cache: ContentCache, terminal_width: int) -> ResultSequence:
    return search_file_contents(files, query.pattern, cache, terminal_width,
                                case_insensitive=query.case_insensitive)
