from __future__ import annotations
from typing import Union

import regex

from .models import Query


class InvalidPattern:
    """Marker returned when a pattern does not compile."""
    __slots__ = ()

    def __repr__(self) -> str:
        return "INVALID_PATTERN"

    def __bool__(self) -> bool:
        return False


INVALID_PATTERN = InvalidPattern()

CompiledMatcher = regex.Pattern


def compile_query(pattern: str, case_insensitive: bool = False) -> Union[regex.Pattern, InvalidPattern]:
    """
    Compile ``pattern`` for line matching.

    Malformed patterns never raise; they come back as INVALID_PATTERN so the
    caller can show a message and keep accepting keystrokes.
    """
    flags = regex.IGNORECASE if case_insensitive else 0
    try:
        return regex.compile(pattern, flags)
    except (regex.error, OverflowError, RecursionError):
        return INVALID_PATTERN


def compile_matcher(query: Query) -> Union[regex.Pattern, InvalidPattern]:
    return compile_query(query.pattern, query.case_insensitive)
