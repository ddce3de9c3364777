"""
Segment Aggregation

Builds one SegmentRecord per segment of a run snapshot and computes the
run-wide elite totals shown by the elite counter (completed / total).

Core Principles:
- Records follow the run's canonical segment order (index 0..N-1)
- Records are rebuilt from the snapshot on every call, never cached or mutated
- Out-of-range indices are clipped, never raised
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional
import logging

from elite_splits.core.counters import read_segment_count
from elite_splits.core.durations import parse_duration
from elite_splits.core.metrics import compute_rate
from elite_splits.core.models import RunSnapshot, SegmentRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CounterProgress:
    """Elites in completed segments against elites in the whole run."""
    current: int
    total: int


def build_records(snapshot: RunSnapshot) -> List[SegmentRecord]:
    """
    Compute elite metrics for every segment of the run.

    Args:
        snapshot: Captured run editor state

    Returns:
        One SegmentRecord per segment, in segment order. duration_seconds is
        kept only when positive; rate is set only when both the duration and
        the elite count are positive.
    """
    records = []
    for index, segment in enumerate(snapshot.segments):
        event_count = read_segment_count(snapshot, index)
        duration = parse_duration(segment.segment_time)
        if duration is not None and duration <= 0:
            duration = None
        records.append(
            SegmentRecord(
                segment_index=index,
                event_count=event_count,
                duration_seconds=duration,
                rate=compute_rate(duration, event_count),
            )
        )
    logger.debug(
        f"Built {len(records)} segment records, "
        f"{sum(1 for r in records if r.rate is not None)} with a rate"
    )
    return records


def total_event_count(snapshot: RunSnapshot) -> int:
    """Sum of elite counts over all segments."""
    return sum(read_segment_count(snapshot, index) for index in range(snapshot.segment_count))


def completed_event_count(snapshot: RunSnapshot, up_to_exclusive_index: Optional[int]) -> int:
    """
    Sum of elite counts over segments [0, up_to_exclusive_index).

    Args:
        snapshot: Captured run editor state
        up_to_exclusive_index: Current split index from the timer; None or
            <= 0 means nothing is completed yet

    Returns:
        Elites in completed segments; the range stops at the last segment
    """
    if up_to_exclusive_index is None or up_to_exclusive_index <= 0:
        return 0
    stop = int(min(up_to_exclusive_index, snapshot.segment_count))
    return sum(read_segment_count(snapshot, index) for index in range(stop))


def counter_progress(snapshot: RunSnapshot, current_split_index: Optional[int]) -> CounterProgress:
    """Completed and total elite counts for the elite counter display."""
    return CounterProgress(
        current=completed_event_count(snapshot, current_split_index),
        total=total_event_count(snapshot),
    )


def format_counter_progress(progress: CounterProgress, unit: str = "") -> str:
    """Render progress as "current/total" followed by an optional unit label."""
    return f"{progress.current}/{progress.total}{unit}"
