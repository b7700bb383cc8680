from __future__ import annotations


class LivegrepError(Exception):
    """Base exception for search errors."""
    pass


class ContentReadError(LivegrepError):
    """A file could not be read or decoded as text."""

    def __init__(self, path: str, reason: str = "") -> None:
        self.path = path
        self.reason = reason
        msg = f"cannot read {path!r}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)
