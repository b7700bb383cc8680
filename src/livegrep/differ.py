from __future__ import annotations
from typing import Sequence

from .models import ResultEntry


def changed(old: Sequence[ResultEntry], new: Sequence[ResultEntry]) -> bool:
    """True when the two result sequences differ in any entry or in order."""
    return tuple(old) != tuple(new)
