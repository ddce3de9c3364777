"""
In-memory run editor.

Plays the collaborator role for the counter codec: holds segments and
custom variables, accepts counter writes, hands out immutable snapshots,
and serializes back to the editor-state document. Only permanent custom
variables are written out, so a counter survives saving the run only if it
was marked permanent.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional
import logging

from elite_splits.core.models import CounterStore, CounterValue, RunSnapshot, SegmentSnapshot

logger = logging.getLogger(__name__)


class RunEditor(CounterStore):
    """Mutable run state with permanent-flag support."""

    supports_permanent_flag = True

    def __init__(
        self,
        segments: Optional[List[SegmentSnapshot]] = None,
        custom_variables: Optional[Dict[str, CounterValue]] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ):
        self.segments: List[SegmentSnapshot] = list(segments or [])
        self.custom_variables: Dict[str, CounterValue] = dict(custom_variables or {})
        # Non-variable metadata fields, passed through on serialization
        self.metadata: Dict[str, Any] = dict(metadata or {})

    @classmethod
    def from_snapshot(cls, snapshot: RunSnapshot, metadata: Optional[Dict[str, Any]] = None) -> "RunEditor":
        return cls(list(snapshot.segments), dict(snapshot.custom_variables), metadata)

    def set_custom_variable(self, key: str, value: str) -> None:
        # New variables start out non-permanent until flagged
        existing = self.custom_variables.get(key)
        is_permanent = existing.is_permanent if existing is not None else False
        self.custom_variables[key] = CounterValue(value=value, is_permanent=is_permanent)

    def set_custom_variable_is_permanent(self, key: str, is_permanent: bool) -> None:
        existing = self.custom_variables.get(key)
        if existing is None:
            logger.warning(f"Cannot flag unknown custom variable {key!r}")
            return
        self.custom_variables[key] = CounterValue(value=existing.value, is_permanent=is_permanent)

    def snapshot(self) -> RunSnapshot:
        return RunSnapshot(segments=tuple(self.segments), custom_variables=dict(self.custom_variables))

    def to_state_dict(self) -> Dict[str, Any]:
        """Editor-state document; temporary custom variables are left out."""
        variables = {
            key: {"value": entry.value, "is_permanent": True}
            for key, entry in self.custom_variables.items()
            if entry.is_permanent
        }
        dropped = len(self.custom_variables) - len(variables)
        if dropped:
            logger.debug(f"Dropping {dropped} temporary custom variable(s) from saved state")
        return {
            "segments": [
                {"name": segment.name, "segment_time": segment.segment_time}
                for segment in self.segments
            ],
            "metadata": {**self.metadata, "custom_variables": variables},
        }
