from __future__ import annotations
import os

# where to look for files when no --root is given
DEFAULT_ROOT: str = "."

# file types treated as text unless --extensions overrides them
TEXT_EXTENSIONS: frozenset[str] = frozenset({
    "txt", "md", "rs", "py", "js", "ts", "html", "css", "json", "yaml", "yml",
    "toml", "ini", "sh", "bash", "cpp", "c", "h", "java", "go", "rb", "php", "sql",
})

# content cache: number of files kept in memory
CACHE_CAPACITY: int = 100

# /* ~~~ windowing of long lines ~~~ */
CONTEXT_CHARS: int = 20     # chars kept before the first match
ELLIPSIS: str = "..."
PATH_COLUMN: int = 30       # max width of the file path column
PATH_PADDING: int = 3       # gap between path column and line text

# input loop
POLL_INTERVAL: float = 0.1  # seconds

# matching: seconds one line may take before its file is skipped for this scan
MATCH_TIMEOUT: float = 0.05

PROMPT: str = "Search: "
INVALID_PATTERN_MESSAGE: str = "Invalid regex pattern"

# Progress logging (set LIVEGREP_VERBOSE=1 to enable)
VERBOSE_ENV: str = "LIVEGREP_VERBOSE"
DEFAULT_LOG_FILE: str = ".livegrep.log"


def verbose() -> bool:
    """True when LIVEGREP_VERBOSE=1 is set; read on every call."""
    return os.environ.get(VERBOSE_ENV) == "1"


def text_budget(terminal_width: int) -> int:
    """
    Width left for the line text once the path column is reserved.

    Never below 1, so on a very narrow terminal the anchor match still
    gets a window of its own.
    """
    return max(1, terminal_width - (PATH_COLUMN + PATH_PADDING))
