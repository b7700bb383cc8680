# livegrep/cache.py
from __future__ import annotations
import logging
from collections import OrderedDict
from typing import Iterator

from .config import CACHE_CAPACITY
from .DB.api import ContentSource

log = logging.getLogger(__name__)


class ContentCache:
    """
    Bounded LRU map of path -> full file text.

    Entries are added lazily on the first successful read. A hit hands back the
    stored ``str``; strings are immutable, so callers can never change what the
    cache holds. A failed read leaves the cache exactly as it was.
    """

    def __init__(self, source: ContentSource, capacity: int = CACHE_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("cache capacity must be at least 1")
        self._source = source
        self._capacity = int(capacity)
        self._entries: "OrderedDict[str, str]" = OrderedDict()
        self.hits = 0
        self.misses = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def get_or_load(self, path: str) -> str:
        """Return the text of ``path``, reading it on a miss.

        Raises ContentReadError (from the source) when the file cannot be read.
        """
        text = self._entries.get(path)
        if text is not None:
            self._entries.move_to_end(path)
            self.hits += 1
            return text

        self.misses += 1
        text = self._source.read(path)  # raises before any mutation
        self._entries[path] = text
        if len(self._entries) > self._capacity:
            evicted, _ = self._entries.popitem(last=False)
            log.debug("evicted %s", evicted)
        return text

    def keys(self) -> list[str]:
        """Cached paths, least recently used first."""
        return list(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, path: object) -> bool:
        return path in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)
