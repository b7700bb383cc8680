from __future__ import annotations
import logging
import os
from typing import Iterable, List, Optional

from .config import DEFAULT_ROOT, TEXT_EXTENSIONS, verbose

log = logging.getLogger(__name__)

PROGRESS_EVERY_FILES = 500


def normalize_extensions(extensions: Optional[Iterable[str]]) -> frozenset[str]:
    """Lowercase, strip leading dots, drop blanks. ``None`` means the built-in set."""
    if extensions is None:
        return TEXT_EXTENSIONS
    return frozenset(e.strip().lstrip(".").lower() for e in extensions if e.strip().lstrip("."))


def _is_hidden(name: str) -> bool:
    return name.startswith(".")


def is_text_file(path: str, extensions: frozenset[str]) -> bool:
    ext = os.path.splitext(path)[1]
    if not ext:
        return False
    return ext[1:].lower() in extensions


def list_candidate_files(root: str = DEFAULT_ROOT,
                         extensions: Optional[Iterable[str]] = None) -> List[str]:
    """
    Walk ``root`` and return the files worth searching, in a stable order.

    Hidden files and hidden directories (names starting with ".") are skipped,
    as is anything whose extension is not in ``extensions`` (or the built-in
    set of text extensions when none are given). Paths are joined onto
    ``root`` as given, so the default root yields "./dir/file.txt".
    """
    exts = normalize_extensions(extensions)
    progress = verbose()
    files: List[str] = []
    for dirpath, dirnames, filenames in os.walk(root):
        # prune in place so os.walk never descends into hidden folders
        dirnames[:] = sorted(d for d in dirnames if not _is_hidden(d))
        for fn in sorted(filenames):
            if _is_hidden(fn):
                continue
            path = os.path.join(dirpath, fn)
            if not os.path.isfile(path):
                continue
            if is_text_file(fn, exts):
                files.append(path)
                if progress and len(files) % PROGRESS_EVERY_FILES == 0:
                    log.info("[scanned] files=%s", f"{len(files):,}")
    log.info("indexed %d files under %s", len(files), root)
    return files
