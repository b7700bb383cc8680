"""
Shape a matched line for a fixed display width.

Long lines are cut to a window anchored on the first match, with a few
characters of left context, and the match ranges are moved into the
coordinates of the shortened string:

    original:  ......................xxxx[match]yyyyyyyyyyyyyyyyyyyyyyyyyyyy....
                                  ^start_pos                            ^end_pos
    display:   ...xxxx[match]yyyyyyyyyyyyyyyyyyyyyyyyyyyy...
               ^^^ prefix_offset = 3

Lines that already fit are returned untouched, ranges included.
"""
from __future__ import annotations
from typing import Sequence, Tuple

from .config import CONTEXT_CHARS, ELLIPSIS
from .models import MatchRange


def window_bounds(line_len: int, anchor: int, width: int,
                  context: int = CONTEXT_CHARS) -> Tuple[int, int]:
    """Return (start_pos, end_pos) of the slice kept around ``anchor``."""
    # the anchor must stay inside the window even when width is tiny
    keep_before = min(context, anchor, max(width - 1, 0))
    start_pos = anchor - keep_before
    end_pos = min(start_pos + width, line_len)
    return start_pos, end_pos


def remap_ranges(ranges: Sequence[MatchRange], *, start_pos: int, end_pos: int,
                 prefix_offset: int, display_len: int) -> Tuple[MatchRange, ...]:
    out = []
    for start, end in ranges:
        if start < start_pos or start >= end_pos:
            continue
        new_start = start - start_pos + prefix_offset
        new_end = min(end - start_pos + prefix_offset, display_len)
        if 0 <= new_start <= display_len and 0 <= new_end <= display_len:
            out.append((new_start, new_end))
    return tuple(out)


def fit_line(line: str, ranges: Sequence[MatchRange], width: int,
             context: int = CONTEXT_CHARS) -> Tuple[str, Tuple[MatchRange, ...]]:
    """
    Fit ``line`` into ``width`` characters, keeping the first match visible.

    Returns (display_line, display_ranges). ``ranges`` must be ordered by start.
    """
    if len(line) <= width:
        return line, tuple(ranges)

    anchor = ranges[0][0] if ranges else 0
    start_pos, end_pos = window_bounds(len(line), anchor, width, context)

    display = line[start_pos:end_pos]
    prefix_offset = 0
    if start_pos > 0:
        display = ELLIPSIS + display
        prefix_offset = len(ELLIPSIS)
    if end_pos < len(line):
        display += ELLIPSIS

    return display, remap_ranges(ranges, start_pos=start_pos, end_pos=end_pos,
                                 prefix_offset=prefix_offset, display_len=len(display))
