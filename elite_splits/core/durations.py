"""
Duration text parsing.

Converts split times as they appear in the run editor ("23.45",
"1:23.45", "1:23:45.67") into seconds. Anything that is not one of those
shapes yields None rather than an error.
"""

import logging
import math
import re
from typing import Optional

from elite_splits.utils.constants import (
    NO_VALUE_PLACEHOLDER,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)

logger = logging.getLogger(__name__)

_INTEGER_PART = re.compile(r"\d+")
_SECONDS_PART = re.compile(r"\d+(?:\.\d*)?|\.\d+")

# Multipliers for the leading integer parts, keyed by part count
_UNIT_SECONDS = {
    1: (),
    2: (SECONDS_PER_MINUTE,),
    3: (SECONDS_PER_HOUR, SECONDS_PER_MINUTE),
}


def parse_duration(text: Optional[str]) -> Optional[float]:
    """
    Parse a colon-delimited duration into seconds.

    Accepted formats, most significant first: SS[.frac], MM:SS[.frac],
    HH:MM:SS[.frac]. Every part but the last must be an integer; the last
    may carry a fractional tail.

    Args:
        text: Duration text, the "—" placeholder, blank, or None

    Returns:
        Seconds as float, or None when the text holds no usable value

    Examples:
        >>> parse_duration("1:23.45")
        83.45
        >>> parse_duration("—") is None
        True
    """
    if text is None or not isinstance(text, str):
        return None
    stripped = text.strip()
    if not stripped or stripped == NO_VALUE_PLACEHOLDER:
        return None

    parts = [part.strip() for part in stripped.split(":")]
    multipliers = _UNIT_SECONDS.get(len(parts))
    if multipliers is None:
        logger.debug(f"Rejected duration {text!r}: {len(parts)} colon-delimited parts")
        return None

    *leading, tail = parts
    if not all(_INTEGER_PART.fullmatch(part) for part in leading) or not _SECONDS_PART.fullmatch(tail):
        logger.debug(f"Rejected duration {text!r}: non-numeric part")
        return None

    try:
        seconds = float(tail)
        for part, multiplier in zip(leading, multipliers):
            seconds += int(part) * multiplier
    except (ValueError, OverflowError):
        logger.debug(f"Rejected duration {text!r}: value out of range")
        return None
    if not math.isfinite(seconds):
        logger.debug(f"Rejected duration {text!r}: value out of range")
        return None
    return seconds
