"""
Pytest configuration for elite split tests.

Shared fixtures for building run snapshots and run state documents.
"""

import pytest

from elite_splits.core.counters import counter_key
from elite_splits.core.models import CounterValue, RunSnapshot, SegmentSnapshot


@pytest.fixture
def make_snapshot():
    """Factory: make_snapshot(times, counts) -> RunSnapshot.

    counts holds raw stored text per segment; None leaves the counter unset.
    """
    def _make(times, counts=None):
        segments = tuple(
            SegmentSnapshot(name=f"Stage {index + 1}", segment_time=time)
            for index, time in enumerate(times)
        )
        variables = {
            counter_key(index): CounterValue(value=value)
            for index, value in enumerate(counts or [])
            if value is not None
        }
        return RunSnapshot(segments=segments, custom_variables=variables)
    return _make


@pytest.fixture
def sample_snapshot(make_snapshot):
    """Five segments: rates 30, 20, none (no elites), none (no time), 15."""
    return make_snapshot(
        ["1:30.00", "1:00", "0:45.5", "—", "1:00"],
        ["3", "3", "0", "2", "4"],
    )


@pytest.fixture
def sample_state():
    """Editor-state document matching the run JSON format."""
    return {
        "segments": [
            {"name": "Forest", "segment_time": "2:00.00"},
            {"name": "Cave", "segment_time": "1:30.00"},
            {"name": "Castle", "segment_time": "45.0"},
            {"name": "Boss", "segment_time": None},
        ],
        "metadata": {
            "run_id": "any%",
            "custom_variables": {
                "__elite_count_seg_0": {"value": "4", "is_permanent": True},
                "__elite_count_seg_1": {"value": "2", "is_permanent": True},
                "__elite_count_seg_2": {"value": "3", "is_permanent": True},
                "__elite_count_seg_3": {"value": "1", "is_permanent": True},
            },
        },
    }
