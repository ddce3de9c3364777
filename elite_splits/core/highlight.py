"""
Highlight Selection

Decides which segments are flagged as underperforming under a highlight
policy. Only segments with a rate are candidates. Candidates are ranked
worst (slowest, highest seconds per elite) first; equal rates keep their
segment order.

Missing, non-positive or NaN policy parameters select nothing. Nothing in
this module raises for a well-typed policy.
"""

from __future__ import annotations
from typing import List, Optional, Sequence
import logging
import math

from elite_splits.core.models import (
    AbsoluteHighlight,
    HighlightPolicy,
    HighlightSet,
    PercentageHighlight,
    RankHighlight,
    SegmentRecord,
)

logger = logging.getLogger(__name__)

_EMPTY: HighlightSet = frozenset()


def _is_positive(value: Optional[float]) -> bool:
    # NaN compares False, so it falls out here too
    return value is not None and value > 0


def rank_candidates(records: Sequence[SegmentRecord]) -> List[SegmentRecord]:
    """
    Candidates ordered worst first.

    Records without a rate are dropped. The sort is stable, so equal rates
    stay in their input order.
    """
    candidates = [record for record in records if record.rate is not None]
    return sorted(candidates, key=lambda record: record.rate, reverse=True)


def _worst_count(candidate_count: int, policy: HighlightPolicy) -> int:
    """How many of the ranked candidates a percentage or rank policy flags."""
    if isinstance(policy, PercentageHighlight):
        if not _is_positive(policy.percentage):
            return 0
        share = candidate_count * policy.percentage / 100
        return candidate_count if share >= candidate_count else math.ceil(share)

    if not _is_positive(policy.count):
        return 0
    # Fractional counts round up: RankHighlight(0.5) flags one segment
    return candidate_count if policy.count >= candidate_count else math.ceil(policy.count)


def select_highlights(records: Sequence[SegmentRecord], policy: HighlightPolicy) -> HighlightSet:
    """
    Segment indices to highlight.

    Args:
        records: Segment records, usually from build_records()
        policy: NoHighlight, PercentageHighlight, RankHighlight or AbsoluteHighlight

    Returns:
        Frozen set of segment indices (empty when nothing qualifies)

    Policies:
        - PercentageHighlight(p): the worst ceil(candidates * p / 100)
        - RankHighlight(n): the worst min(n, candidates)
        - AbsoluteHighlight(t): every candidate with rate >= t
    """
    if not isinstance(policy, (PercentageHighlight, RankHighlight, AbsoluteHighlight)):
        return _EMPTY

    if isinstance(policy, AbsoluteHighlight):
        if not _is_positive(policy.threshold):
            logger.debug(f"Ignoring absolute highlight with threshold {policy.threshold!r}")
            return _EMPTY
        return frozenset(
            record.segment_index
            for record in records
            if record.rate is not None and record.rate >= policy.threshold
        )

    ranked = rank_candidates(records)
    if not ranked:
        return _EMPTY

    count = _worst_count(len(ranked), policy)
    if count == 0:
        logger.debug(f"Highlight policy {policy!r} selects no segments")
    return frozenset(record.segment_index for record in ranked[:count])
