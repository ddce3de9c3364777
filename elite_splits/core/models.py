"""
Elite Splits Data Models

Defines the immutable snapshot types consumed by the metric engine, the
derived per-segment record, the highlight policy variants, and the write
interface of the external counter store.

Snapshots are captured state, never live timer events. Everything here is
frozen; the engine recomputes records from a snapshot on every call.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import FrozenSet, Mapping, Optional, Tuple, Union


@dataclass(frozen=True)
class SegmentSnapshot:
    """
    One segment of a run as stored by the run editor.

    Attributes:
        name: Segment label (display only)
        segment_time: Human-readable duration text ("1:23.45"), "—" or None
    """
    name: str = ""
    segment_time: Optional[str] = None


@dataclass(frozen=True)
class CounterValue:
    """A custom variable value and its metadata."""
    value: str
    is_permanent: bool = True


@dataclass(frozen=True)
class RunSnapshot:
    """
    Captured run editor state.

    Attributes:
        segments: Segments in canonical run order (index 0..N-1)
        custom_variables: Counter store contents keyed by custom variable name
    """
    segments: Tuple[SegmentSnapshot, ...] = ()
    custom_variables: Mapping[str, CounterValue] = field(default_factory=dict)

    @property
    def segment_count(self) -> int:
        return len(self.segments)


@dataclass(frozen=True)
class SegmentRecord:
    """
    Derived elite metrics for a single segment.

    rate is seconds of segment time per elite; it is set only when both the
    duration and the elite count are positive.
    """
    segment_index: int
    event_count: int
    duration_seconds: Optional[float] = None
    rate: Optional[float] = None


# ---------- Highlight policies ----------

@dataclass(frozen=True)
class NoHighlight:
    """Highlighting disabled."""


@dataclass(frozen=True)
class PercentageHighlight:
    """Flag the worst ``percentage`` percent of candidates (rounded up)."""
    percentage: Optional[float] = None


@dataclass(frozen=True)
class RankHighlight:
    """Flag the worst ``count`` candidates."""
    count: Optional[int] = None


@dataclass(frozen=True)
class AbsoluteHighlight:
    """Flag every candidate whose rate is at or above ``threshold`` seconds."""
    threshold: Optional[float] = None


HighlightPolicy = Union[NoHighlight, PercentageHighlight, RankHighlight, AbsoluteHighlight]

HighlightSet = FrozenSet[int]


# ---------- Counter store ----------

class CounterStore(ABC):
    """
    Write interface of the collaborator that owns counter storage.

    Stores that can flag a variable as permanent (saved with the run) set
    ``supports_permanent_flag`` to True and override
    ``set_custom_variable_is_permanent``. Other stores keep the defaults and
    their own default durability applies.
    """

    supports_permanent_flag: bool = False

    @abstractmethod
    def set_custom_variable(self, key: str, value: str) -> None:
        """Write a custom variable value."""

    def set_custom_variable_is_permanent(self, key: str, is_permanent: bool) -> None:
        """Mark a custom variable as (not) saved with the run."""
