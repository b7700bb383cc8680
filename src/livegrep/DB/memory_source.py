# livegrep/DB/memory_source.py
from __future__ import annotations
from typing import Dict, Mapping, Optional

from ..errors import ContentReadError


class MemorySource:
    """In-memory file contents (useful for tests or embedding)."""
    def __init__(self, files: Optional[Mapping[str, str]] = None) -> None:
        self._files: Dict[str, str] = dict(files or {})
        self.reads = 0

    def put(self, path: str, text: str) -> None:
        self._files[path] = text

    def read(self, path: str) -> str:
        self.reads += 1
        try:
            return self._files[path]
        except KeyError:
            raise ContentReadError(path, "no such file") from None

    def close(self) -> None:
        self._files.clear()
