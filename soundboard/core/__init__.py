"""
Core state reduction primitives.

This module provides:
- Action / ActionKind: Immutable tagged state change requests
- AppState: Persistent application state snapshot
- Reducer: Dispatch of actions to pure transition handlers
- Snapshot: Redacted, canonical state rendering for logs and hashes
"""

from .actions import (
    Action,
    ActionKind,
    add_note_to_song,
    create_song,
    delete_socket,
    get_recording_status,
    play_song,
    record_a_song,
    set_location,
    set_socket,
    set_songs,
    stop_song,
    trigger_recording,
    trigger_recording_popup,
)
from .state import AppState, CatalogEntry, SocketHandle
from .reducer import Reducer, app_reducer, build_reducer
from .snapshot import SOCKET_PLACEHOLDER, compute_state_hash, redact_state, snapshot_json
from .canonical import canonicalize, canonical_json_bytes, canonical_json_str
from .errors import (
    ActionScriptError,
    InvalidTransitionError,
    MalformedPayloadError,
    SoundboardError,
)

__all__ = [
    "Action",
    "ActionKind",
    "add_note_to_song",
    "create_song",
    "delete_socket",
    "get_recording_status",
    "play_song",
    "record_a_song",
    "set_location",
    "set_socket",
    "set_songs",
    "stop_song",
    "trigger_recording",
    "trigger_recording_popup",
    "AppState",
    "CatalogEntry",
    "SocketHandle",
    "Reducer",
    "app_reducer",
    "build_reducer",
    "SOCKET_PLACEHOLDER",
    "compute_state_hash",
    "redact_state",
    "snapshot_json",
    "canonicalize",
    "canonical_json_bytes",
    "canonical_json_str",
    "ActionScriptError",
    "InvalidTransitionError",
    "MalformedPayloadError",
    "SoundboardError",
]
