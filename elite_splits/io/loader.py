"""
Run state loader.

Reads and writes the run editor-state JSON document and converts it into
RunSnapshot values:

    {
      "segments": [{"name": "Stage 1", "segment_time": "1:23.45"}, ...],
      "metadata": {
        "custom_variables": {
          "__elite_count_seg_0": {"value": "4", "is_permanent": true}
        }
      }
    }

Only the document structure is validated here. Unparseable durations and
counters are kept as text; the engine turns them into "no value" / 0.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from elite_splits.core.models import CounterValue, RunSnapshot, SegmentSnapshot
from elite_splits.io.editor import RunEditor

logger = logging.getLogger(__name__)


class RunStateError(ValueError):
    """Raised when a run state document has the wrong structure."""


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def _segments_from_state(state: Dict[str, Any]) -> Tuple[SegmentSnapshot, ...]:
    raw_segments = state.get("segments")
    if raw_segments is None:
        raw_segments = []
    if not isinstance(raw_segments, list):
        raise RunStateError("run state field 'segments' must be a list")

    segments = []
    for index, raw in enumerate(raw_segments):
        if not isinstance(raw, dict):
            raise RunStateError(f"segment {index} must be an object, got {type(raw).__name__}")
        segments.append(
            SegmentSnapshot(
                name=_text(raw.get("name")) or "",
                segment_time=_text(raw.get("segment_time")),
            )
        )
    return tuple(segments)


def _variables_from_state(state: Dict[str, Any]) -> Dict[str, CounterValue]:
    metadata = state.get("metadata")
    if metadata is None:
        metadata = {}
    if not isinstance(metadata, dict):
        raise RunStateError("run state field 'metadata' must be an object")
    raw_variables = metadata.get("custom_variables")
    if raw_variables is None:
        raw_variables = {}
    if not isinstance(raw_variables, dict):
        raise RunStateError("run state field 'metadata.custom_variables' must be an object")

    variables = {}
    for key, raw in raw_variables.items():
        # Accept bare values as well as {"value": ..., "is_permanent": ...}
        if isinstance(raw, dict):
            is_permanent = raw.get("is_permanent", True)
            if not isinstance(is_permanent, bool):
                raise RunStateError(
                    f"custom variable {key!r} field 'is_permanent' must be true or false"
                )
            variables[str(key)] = CounterValue(
                value=_text(raw.get("value")) or "",
                is_permanent=is_permanent,
            )
        else:
            variables[str(key)] = CounterValue(value=_text(raw) or "")
    return variables


def snapshot_from_state(state: Dict[str, Any]) -> RunSnapshot:
    """
    Build a RunSnapshot from an editor-state document.

    Raises:
        RunStateError: If the document, its segments/metadata or an is_permanent flag have the wrong type
    """
    if not isinstance(state, dict):
        raise RunStateError(f"run state must be a JSON object, got {type(state).__name__}")
    return RunSnapshot(
        segments=_segments_from_state(state),
        custom_variables=_variables_from_state(state),
    )


def editor_from_state(state: Dict[str, Any]) -> RunEditor:
    """RunEditor over an editor-state document, keeping its other metadata fields."""
    snapshot = snapshot_from_state(state)
    metadata = {
        key: value
        for key, value in (state.get("metadata") or {}).items()
        if key != "custom_variables"
    }
    return RunEditor.from_snapshot(snapshot, metadata)


def load_run_state(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load an editor-state JSON document.

    Raises:
        FileNotFoundError: If the file does not exist
        RunStateError: If the file is not valid JSON
    """
    state_path = Path(path)
    if not state_path.exists():
        raise FileNotFoundError(f"run state not found at {state_path}")

    logger.info(f"Loading run state from {state_path}")
    with state_path.open("r", encoding="utf-8") as handle:
        try:
            return json.load(handle)
        except json.JSONDecodeError as e:
            raise RunStateError(f"run state at {state_path} is not valid JSON: {e}") from e


def save_run_state(state: Dict[str, Any], path: Union[str, Path]) -> Path:
    """Write an editor-state document as indented UTF-8 JSON."""
    state_path = Path(path)
    state_path.parent.mkdir(parents=True, exist_ok=True)
    with state_path.open("w", encoding="utf-8") as handle:
        json.dump(state, handle, indent=2, ensure_ascii=False)
    logger.info(f"Saved run state to {state_path}")
    return state_path
