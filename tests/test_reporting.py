"""
Unit tests for the segment report table and CSV export.
"""

import pandas as pd

from elite_splits.core.aggregation import build_records
from elite_splits.reporting import REPORT_COLUMNS, export_records_to_csv, records_to_frame


class TestRecordsToFrame:
    """Test report table construction."""

    def test_columns_and_rows(self, sample_snapshot):
        """Test one row per record with the report columns."""
        df = records_to_frame(build_records(sample_snapshot))
        assert list(df.columns) == REPORT_COLUMNS
        assert len(df) == 5

    def test_highlight_and_display(self, sample_snapshot):
        """Test highlight flags and rendered rates."""
        df = records_to_frame(build_records(sample_snapshot), highlights={0, 1})
        assert df["highlighted"].tolist() == [True, True, False, False, False]
        assert df["rate_display"].tolist() == ["30.0s/elite", "20.0s/elite", "—", "—", "15.0s/elite"]

    def test_missing_rate_is_nan(self, sample_snapshot):
        """Test absent rates become NaN in the numeric column."""
        df = records_to_frame(build_records(sample_snapshot))
        assert pd.isna(df.loc[2, "rate"])
        assert df.loc[0, "rate"] == 30.0

    def test_segment_names(self, sample_snapshot):
        """Test names are attached by segment index."""
        df = records_to_frame(build_records(sample_snapshot), segment_names=["Intro", "Hub"])
        assert df["segment_name"].tolist() == ["Intro", "Hub", "", "", ""]

    def test_empty(self):
        """Test an empty record list gives an empty table."""
        df = records_to_frame([])
        assert df.empty
        assert list(df.columns) == REPORT_COLUMNS


class TestExportRecordsToCsv:
    """Test CSV export."""

    def test_export(self, tmp_path, make_snapshot):
        """Test rates are written with fixed precision."""
        records = build_records(make_snapshot(["1:40"], ["3"]))
        path = export_records_to_csv(records_to_frame(records), tmp_path / "out" / "elites.csv")

        lines = open(path, encoding="utf-8").read().splitlines()
        assert lines[0] == ",".join(REPORT_COLUMNS)
        assert "33.3333" in lines[1]
        assert lines[1].endswith(",False")
