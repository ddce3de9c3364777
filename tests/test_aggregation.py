"""
Unit tests for segment aggregation and run totals.
"""

import pytest

from elite_splits.core.aggregation import (
    CounterProgress,
    build_records,
    completed_event_count,
    counter_progress,
    format_counter_progress,
    total_event_count,
)
from elite_splits.core.models import RunSnapshot, SegmentRecord


class TestBuildRecords:
    """Test per-segment record construction."""

    def test_one_record_per_segment_in_order(self, sample_snapshot):
        """Test records follow segment order."""
        records = build_records(sample_snapshot)
        assert [r.segment_index for r in records] == [0, 1, 2, 3, 4]

    def test_rates(self, sample_snapshot):
        """Test rates are composed from duration and count."""
        rates = [r.rate for r in build_records(sample_snapshot)]
        assert rates == [30.0, 20.0, None, None, 15.0]

    def test_record_fields(self, sample_snapshot):
        """Test a full record."""
        assert build_records(sample_snapshot)[0] == SegmentRecord(
            segment_index=0, event_count=3, duration_seconds=90.0, rate=30.0
        )

    def test_missing_time_keeps_count(self, sample_snapshot):
        """Test a segment without time still reports its elite count."""
        record = build_records(sample_snapshot)[3]
        assert record.event_count == 2
        assert record.duration_seconds is None
        assert record.rate is None

    def test_zero_duration_dropped(self, make_snapshot):
        """Test non-positive durations are not kept on the record."""
        record = build_records(make_snapshot(["0:00"], ["3"]))[0]
        assert record.duration_seconds is None
        assert record.rate is None

    def test_empty_run(self):
        """Test a run without segments."""
        assert build_records(RunSnapshot()) == []

    def test_repeatable(self, sample_snapshot):
        """Test records are rebuilt identically from the same snapshot."""
        assert build_records(sample_snapshot) == build_records(sample_snapshot)


class TestTotals:
    """Test run-wide and completed elite counts."""

    def test_total(self, sample_snapshot):
        """Test the total sums every segment."""
        assert total_event_count(sample_snapshot) == 3 + 3 + 0 + 2 + 4

    def test_total_empty_run(self):
        """Test a run without segments totals 0."""
        assert total_event_count(RunSnapshot()) == 0

    def test_total_ignores_counters_beyond_segments(self, make_snapshot):
        """Test counters without a segment are not counted."""
        snapshot = make_snapshot(["1:00"], ["2", "50"])
        assert total_event_count(snapshot) == 2

    @pytest.mark.parametrize("index", [None, 0, -3])
    def test_completed_nothing(self, sample_snapshot, index):
        """Test absent or non-positive index counts nothing."""
        assert completed_event_count(sample_snapshot, index) == 0

    def test_completed_prefix(self, sample_snapshot):
        """Test segments before the index are summed."""
        assert completed_event_count(sample_snapshot, 2) == 6
        assert completed_event_count(sample_snapshot, 4) == 8

    def test_completed_past_end(self, sample_snapshot):
        """Test an index beyond the run stops at the last segment."""
        n = sample_snapshot.segment_count
        assert completed_event_count(sample_snapshot, n + 5) == total_event_count(sample_snapshot)


class TestCounterProgress:
    """Test the elite counter display model."""

    def test_progress(self, sample_snapshot):
        """Test completed and total counts together."""
        assert counter_progress(sample_snapshot, 1) == CounterProgress(current=3, total=12)

    def test_progress_before_start(self, sample_snapshot):
        """Test progress with no current split."""
        assert counter_progress(sample_snapshot, None) == CounterProgress(current=0, total=12)

    def test_format(self):
        """Test current/total rendering with a unit label."""
        assert format_counter_progress(CounterProgress(3, 12)) == "3/12"
        assert format_counter_progress(CounterProgress(3, 12), unit=" elites") == "3/12 elites"
