"""
Seconds-per-elite metric.

The rate is kept exact here; rounding happens only in format_rate, which
renders it for display.
"""

from typing import Optional

from elite_splits.utils.constants import NO_VALUE_PLACEHOLDER, RATE_DECIMALS, RATE_UNIT_SUFFIX


def compute_rate(duration_seconds: Optional[float], event_count: int) -> Optional[float]:
    """
    Average seconds per elite for a segment.

    Args:
        duration_seconds: Segment time in seconds, or None
        event_count: Elites killed in the segment

    Returns:
        duration_seconds / event_count, or None when either is missing or not positive

    Examples:
        >>> compute_rate(60, 4)
        15.0
        >>> compute_rate(10, 0) is None
        True
    """
    if duration_seconds is None or not duration_seconds > 0:
        return None
    if event_count is None or not event_count > 0:
        return None
    return duration_seconds / event_count


def format_rate(rate: Optional[float], unit: str = RATE_UNIT_SUFFIX) -> str:
    """Render a rate as "12.3s/elite", or the placeholder glyph when absent."""
    if rate is None:
        return NO_VALUE_PLACEHOLDER
    return f"{rate:.{RATE_DECIMALS}f}{unit}"
