"""Clock formatting shared by the Qt and web views."""

from __future__ import annotations


def format_clock(seconds: int) -> str:
    """Format a second count as ``MM:SS``; negative values clamp to zero."""
    seconds = max(0, int(seconds))
    minutes, remainder = divmod(seconds, 60)
    return f"{minutes:02d}:{remainder:02d}"
