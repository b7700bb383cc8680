"""Terminal and web front ends for the live search engine."""
from __future__ import annotations

from .terminal import RenderState, TerminalDisplay, format_row, run, run_interactive

__all__ = ["RenderState", "TerminalDisplay", "format_row", "run", "run_interactive"]
