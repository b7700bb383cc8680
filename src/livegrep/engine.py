# livegrep/engine.py
from __future__ import annotations

import os
import logging
from typing import Iterable, Mapping, Optional, Tuple

from . import config as CFG
from .cache import ContentCache
from .DB.api import ContentSource, make_source
from .loader import list_candidate_files
from .models import Query, ResultSequence
from .search import run_query

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer that glues together:
      - the file indexer (loader.list_candidate_files),
      - a content source (disk or in-memory) behind an LRU ContentCache,
      - the per-tick search pipeline (search.search_file_contents).

    Public API (used by the terminal UI and Flask):
      * build(root, ...):                       index -> attach source -> attach cache
      * search(query, case_insensitive, width): return the result sequence
      * shutdown():                             close underlying resources

    Source DSNs (via livegrep.DB.make_source):
      - "file://"
      - "memory://"
    """

    # ------------- lifecycle -------------

    def __init__(self) -> None:
        self._files: Tuple[str, ...] = ()
        self._source: Optional[ContentSource] = None
        self._cache: Optional[ContentCache] = None

    # /* ~~~ Index a folder and wire up the content cache ~~~ */
    def build(
        self,
        root: str = CFG.DEFAULT_ROOT,
        *,
        extensions: Optional[Iterable[str]] = None,   # None -> built-in text extensions
        source_dsn: Optional[str] = None,             # "file://" (default) or "memory://"
        files: Optional[Mapping[str, str]] = None,    # seed for memory://, path -> text
        cache_capacity: int = CFG.CACHE_CAPACITY,
        verbose: bool = False,
    ) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)
            os.environ[CFG.VERBOSE_ENV] = "1"

        dsn = source_dsn or "file://"
        log.info("Initializing content source: %s", dsn)
        self._source = make_source(dsn, files=files)

        if dsn.startswith("memory://") and files is not None:
            # the seed is the file set; there is nothing on disk to walk
            self._files = tuple(files)
        else:
            if not os.path.isdir(root):
                raise ValueError(f"build(): root folder does not exist: {root}")
            log.info("Indexing files under %s", root)
            self._files = tuple(list_candidate_files(root, extensions))

        self._cache = ContentCache(self._source, capacity=cache_capacity)
        log.info("Engine build() complete: files=%d cache=%d", len(self._files), cache_capacity)

    # ------------- query -------------

    @property
    def files(self) -> Tuple[str, ...]:
        return self._files

    @property
    def cache(self) -> ContentCache:
        if self._cache is None:
            raise RuntimeError("Engine not initialized. Call build() first.")
        return self._cache

    # /* ~~~ Rescan every file for the current query ~~~ */
    def search(self, query: str, *, case_insensitive: bool = False,
               width: int = 80) -> ResultSequence:
        if self._cache is None:
            raise RuntimeError("Engine not initialized. Call build() first.")
        return run_query(self._files, Query(query, case_insensitive), self._cache, width)

    # ------------- teardown -------------

    # /* ~~~ Close underlying resources ~~~ */
    def shutdown(self) -> None:
        try:
            if self._source:
                self._source.close()
        finally:
            self._source = None
            self._cache = None
            log.info("Engine shutdown complete")
