"""
Segment Report Utilities

Tabulates segment records for display and CSV export. Numeric columns are
exported with a fixed decimal precision so the output stays readable.
"""

import logging
from pathlib import Path
from typing import AbstractSet, Optional, Sequence, Union

import pandas as pd

from elite_splits.core.metrics import format_rate
from elite_splits.core.models import SegmentRecord
from elite_splits.utils.constants import DECIMAL_PRECISION

logger = logging.getLogger(__name__)

REPORT_COLUMNS = [
    "segment_index",
    "segment_name",
    "event_count",
    "duration_seconds",
    "rate",
    "rate_display",
    "highlighted",
]


def records_to_frame(
    records: Sequence[SegmentRecord],
    highlights: AbstractSet[int] = frozenset(),
    segment_names: Optional[Sequence[str]] = None,
) -> pd.DataFrame:
    """
    Build the per-segment report table.

    Args:
        records: Segment records in segment order
        highlights: Segment indices to mark as highlighted
        segment_names: Optional labels, indexed by segment index

    Returns:
        DataFrame with REPORT_COLUMNS; missing durations and rates are NaN
    """
    names = list(segment_names or [])
    rows = [
        {
            "segment_index": record.segment_index,
            "segment_name": names[record.segment_index] if record.segment_index < len(names) else "",
            "event_count": record.event_count,
            "duration_seconds": record.duration_seconds,
            "rate": record.rate,
            "rate_display": format_rate(record.rate),
            "highlighted": record.segment_index in highlights,
        }
        for record in records
    ]
    df = pd.DataFrame(rows, columns=REPORT_COLUMNS)
    df["event_count"] = df["event_count"].astype(int)
    df["highlighted"] = df["highlighted"].astype(bool)
    for col in ["duration_seconds", "rate"]:
        df[col] = pd.to_numeric(df[col], errors="coerce")
    return df


def export_records_to_csv(df: pd.DataFrame, csv_path: Union[str, Path]) -> str:
    """
    Export a report table to CSV with consistent decimal formatting.

    Args:
        df: Table from records_to_frame()
        csv_path: Output path; parent directories are created

    Returns:
        Path to the exported CSV file
    """
    out = Path(csv_path)
    out.parent.mkdir(parents=True, exist_ok=True)

    export = df.copy()
    for col in ["duration_seconds", "rate"]:
        if col in export.columns:
            export[col] = export[col].round(DECIMAL_PRECISION)

    export.to_csv(out, index=False, float_format=f"%.{DECIMAL_PRECISION}f")
    logger.info(f"Exported {len(export)} segment rows to {out}")
    return str(out)
