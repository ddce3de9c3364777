"""
Core Package

This package contains the elite metric engine.

Structure:
- models - snapshot, record and highlight policy types
- durations - duration text parsing
- counters - elite counter keys, decoding and writes
- metrics - seconds-per-elite rate and its display form
- aggregation - per-segment records and run totals
- highlight - highlight policy evaluation

Usage:
Core modules are imported by the io, config, reporting and CLI layers. Do not import those layers from core.
"""
