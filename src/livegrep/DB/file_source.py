# livegrep/DB/file_source.py
from __future__ import annotations
import logging

from ..errors import ContentReadError

log = logging.getLogger(__name__)


class FileSource:
    """Reads whole files from disk. Anything that is not valid UTF-8 is unreadable."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def read(self, path: str) -> str:
        try:
            with open(path, "r", encoding=self.encoding, newline="") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as exc:
            log.debug("read failed for %s: %s", path, exc)
            raise ContentReadError(path, str(exc)) from exc

    def close(self) -> None:
        pass
