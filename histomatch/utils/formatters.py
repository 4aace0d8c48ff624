"""
Formatting utilities for Histomatch.

Provides human-readable formatting for elapsed time and scores.
"""

from __future__ import annotations

# Re-export format_score from models for convenience
from ..models import format_score


def format_duration(seconds: float) -> str:
    """
    Format seconds into a human-readable duration.

    Examples:
        >>> format_duration(4.25)
        '4.2s'
        >>> format_duration(150)
        '2m 30s'
        >>> format_duration(3665)
        '1h 1m'
    """
    if seconds < 60:
        return f"{seconds:.1f}s"
    elif seconds < 3600:
        return f"{int(seconds / 60)}m {int(seconds % 60)}s"
    else:
        hours = int(seconds / 3600)
        minutes = int((seconds % 3600) / 60)
        return f"{hours}h {minutes}m"


__all__ = ['format_duration', 'format_score']
