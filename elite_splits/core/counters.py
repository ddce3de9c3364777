"""
Elite counter codec.

Elite counts live in the run's custom variables, one per segment, under a
synthesized key. This module maps segment indices to those keys, decodes
stored text into non-negative integers, and writes counts back through a
CounterStore.
"""

import logging
import math
import re
from typing import Optional

from elite_splits.core.models import CounterStore, RunSnapshot
from elite_splits.utils.constants import ELITE_COUNT_PREFIX

logger = logging.getLogger(__name__)

_LEADING_INTEGER = re.compile(r"[+-]?\d+")


def counter_key(segment_index: int) -> str:
    """Custom variable key holding the elite count of a segment."""
    return f"{ELITE_COUNT_PREFIX}{segment_index}"


def decode_counter(raw_value: Optional[str]) -> int:
    """
    Parse a stored elite count.

    Reads the leading integer of the text, so fractional values are
    truncated ("3.7" -> 3). Missing, empty, non-numeric or out-of-range
    input yields 0 and negative results are clamped to 0.
    """
    if not raw_value or not isinstance(raw_value, str):
        return 0
    match = _LEADING_INTEGER.match(raw_value.strip())
    if match is None:
        logger.debug(f"Non-numeric elite count {raw_value!r}, using 0")
        return 0
    try:
        count = int(match.group())
    except ValueError:
        logger.debug(f"Elite count {raw_value!r} out of range, using 0")
        return 0
    return max(0, count)


def read_segment_count(snapshot: RunSnapshot, segment_index: int) -> int:
    """Elite count stored for a segment; 0 when no counter exists."""
    entry = snapshot.custom_variables.get(counter_key(segment_index))
    return decode_counter(entry.value) if entry is not None else 0


def write_segment_count(store: CounterStore, segment_index: int, value: float) -> None:
    """
    Store the elite count of a segment.

    The value is floored and clamped to >= 0 (non-finite values become 0),
    then written as text. Stores that support the permanent flag get the
    counter marked permanent so it is saved with the run.
    """
    if isinstance(value, float) and not math.isfinite(value):
        logger.debug(f"Non-finite elite count {value!r} for segment {segment_index}, using 0")
        count = 0
    else:
        count = max(0, math.floor(value))

    key = counter_key(segment_index)
    store.set_custom_variable(key, str(count))
    if store.supports_permanent_flag:
        store.set_custom_variable_is_permanent(key, True)
    logger.debug(f"Wrote elite count {count} for segment {segment_index}")
