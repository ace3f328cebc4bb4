"""
Utility functions for the BJJ Scoreboard application.

This module contains the clock and time formatting helpers used by the
match timer and the rendered scoreboard.
"""
import time


def fmt_mmss(seconds: int) -> str:
    """
    Format seconds as MM:SS string.
    
    Args:
        seconds: Number of seconds to format
        
    Returns:
        Formatted time string in MM:SS format
        
    Example:
        >>> fmt_mmss(90)
        '01:30'
        >>> fmt_mmss(3661)
        '61:01'
    """
    m = seconds // 60
    s = seconds % 60
    return f"{m:02d}:{s:02d}"


def fmt_remaining(milliseconds: int) -> str:
    """
    Format a countdown in milliseconds as MM:SS, rounding partial seconds up.

    A countdown only shows 00:00 once it has fully expired.

    Example:
        >>> fmt_remaining(299_001)
        '05:00'
        >>> fmt_remaining(0)
        '00:00'
    """
    seconds = -(-max(0, milliseconds) // 1000)
    return fmt_mmss(seconds)


def now_ms() -> int:
    """
    Get a monotonic clock reading in whole milliseconds.
    
    Returns:
        Milliseconds from an arbitrary fixed origin; only differences are meaningful
    """
    return time.monotonic_ns() // 1_000_000
