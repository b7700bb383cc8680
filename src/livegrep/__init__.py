"""
Live Search Engine

Rescans a folder of text files on every keystroke and returns the matching
lines, each one cut to fit the terminal and carrying the positions of its
matches so a renderer can highlight them.

The package keeps the moving parts separate:
- file discovery (loader) and an LRU content cache (cache, DB)
- pattern compilation (query) and line matching (matcher)
- windowing of long lines and highlight remapping (window)
- change detection between ticks (differ) and the key-driven session (session)

Example Usage:
    from livegrep import Engine

    eng = Engine()
    eng.build(".", extensions=["py", "md"])
    for entry in eng.search("def \\w+", width=120):
        print(entry.path, entry.line, entry.ranges)
    eng.shutdown()
"""

from .engine import Engine
from .models import INVALID_PATTERN_ENTRY, Query, ResultEntry
from .session import SearchSession

__version__ = "1.0.0"
__all__ = ["Engine", "SearchSession", "Query", "ResultEntry", "INVALID_PATTERN_ENTRY"]
