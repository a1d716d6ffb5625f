"""
State snapshot utilities for logging and hashing.

Snapshots never carry live resources: the socket handle is replaced by a
placeholder token and catalog entries are rendered by name.
"""

import hashlib
from typing import Any, Dict

from pyrsistent import thaw

from .canonical import canonical_json_bytes, canonical_json_str
from .state import AppState, record_field

SOCKET_PLACEHOLDER = "[socket]"

_CATALOG_FIELDS = ("instruments", "visualizers")
_SELECTION_FIELDS = ("instrument", "visualizer")


def _entry_name(entry: Any) -> Any:
    name = record_field(entry, "name")
    return name if name is not None else str(entry)


def redact_state(state: AppState) -> Dict[str, Any]:
    """
    Convert a snapshot to a plain dict safe to log or serialize.

    Args:
        state: Snapshot to redact

    Returns:
        Dict with socket elided and catalog entries reduced to names
    """
    out: Dict[str, Any] = {}
    for key, value in state.items():
        if key == "socket":
            out[key] = SOCKET_PLACEHOLDER if value is not None else None
        elif key in _CATALOG_FIELDS:
            out[key] = [_entry_name(e) for e in value]
        elif key in _SELECTION_FIELDS:
            out[key] = _entry_name(value) if value is not None else None
        else:
            out[key] = thaw(value)
    return out


def snapshot_json(state: AppState) -> str:
    """Canonical JSON of the redacted snapshot."""
    return canonical_json_str(redact_state(state))


def compute_state_hash(state: AppState) -> str:
    """
    Compute SHA-256 hash of the redacted snapshot.

    Returns:
        Hex string (64 characters)
    """
    return hashlib.sha256(canonical_json_bytes(redact_state(state))).hexdigest()
