"""
Elite Splits

Per-segment elite metrics for timed runs: parses stored durations and
elite counters, derives seconds-per-elite rates, and picks the segments to
flag as underperforming under a highlight policy.
"""

__version__ = "0.3.0"
