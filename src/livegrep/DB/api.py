# livegrep/DB/api.py
from __future__ import annotations
from typing import Mapping, Optional, Protocol


class ContentSource(Protocol):
    """Where file text comes from on a cache miss."""
    # Read
    def read(self, path: str) -> str: ...
    # lifecycle
    def close(self) -> None: ...


def make_source(dsn: str, *, files: Optional[Mapping[str, str]] = None) -> ContentSource:
    """
    Factory:
      - file://   -> FileSource (reads from disk, strict UTF-8)
      - memory:// -> MemorySource (seeded from ``files`` if given)
    """
    if dsn.startswith("file://"):
        from .file_source import FileSource
        return FileSource()

    if dsn.startswith("memory://"):
        from .memory_source import MemorySource
        return MemorySource(files=files)

    raise ValueError(f"Unsupported source DSN: {dsn}")
