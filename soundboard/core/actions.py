"""
Action model for state transitions.

An Action is an immutable, tagged request to change the application state.
The payload is deep-frozen on construction so later mutation of caller-held
data cannot leak into the action.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence, Union

from pyrsistent import PMap, freeze, pmap, thaw


class ActionKind(str, Enum):
    """Closed set of action kinds. Values are the dispatcher's wire spellings."""

    SET_SOCKET = "SET_SOCKET"
    DELETE_SOCKET = "DELETE_SOCKET"
    SET_SONGS = "SET_SONGS"
    PLAY_SONG = "PLAY_SONG"
    STOP_SONG = "STOP_SONG"
    SET_LOCATION = "SET_LOCATION"
    TRIGGER_RECORDING = "TRIGGER_RECORDING"
    # Reserved: declared but has no transition.
    GET_RECORDING_STATUS = "GET_RECORDING_STATUS"
    RECORD_A_SONG = "RECORD_A_SONG"
    TRIGGER_RECORDING_POPUP = "TRIGGER_RECORDING_POPUP"
    ADD_NOTE_TO_SONG = "ADD_NOTE_TO_SONG"
    CREATE_SONG = "CREATE_SONG"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Action:
    """
    Immutable action record.

    Fields:
        kind: ActionKind, or the raw string when the kind is not recognized
        payload: Deep-frozen mapping of kind-specific arguments
    """
    kind: Union[ActionKind, str]
    payload: PMap = field(default_factory=pmap)

    def __post_init__(self) -> None:
        kind = self.kind
        if not isinstance(kind, ActionKind):
            try:
                kind = ActionKind(kind)
            except ValueError:
                kind = str(kind)
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "payload", freeze(dict(self.payload or {})))

    @property
    def type(self) -> str:
        """Wire spelling of the kind."""
        return self.kind.value if isinstance(self.kind, ActionKind) else self.kind

    def get(self, key: str, default: Any = None) -> Any:
        return self.payload.get(key, default)

    def get_in(self, path: Sequence[str], default: Any = None) -> Any:
        """
        Read a nested payload value.

        Returns default as soon as any step of the path is missing or is not
        a mapping.
        """
        cur: Any = self.payload
        for key in path:
            if not isinstance(cur, Mapping) or key not in cur:
                return default
            cur = cur[key]
        return cur

    def has(self, key: str) -> bool:
        return key in self.payload

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "args": thaw(self.payload)}

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "Action":
        return Action(kind=data["type"], payload=data.get("args") or {})


def set_socket(socket: Any) -> Action:
    return Action(ActionKind.SET_SOCKET, {"socket": socket})


def delete_socket() -> Action:
    return Action(ActionKind.DELETE_SOCKET)


def set_songs(songs: Iterable[Any]) -> Action:
    return Action(ActionKind.SET_SONGS, {"songs": list(songs)})


def play_song(song_id: Any) -> Action:
    return Action(ActionKind.PLAY_SONG, {"id": song_id})


def stop_song() -> Action:
    return Action(ActionKind.STOP_SONG)


def set_location(pathname: str = "", search: str = "") -> Action:
    return Action(
        ActionKind.SET_LOCATION,
        {"location": {"pathname": pathname, "search": search}},
    )


def trigger_recording(is_recording: Optional[bool] = None) -> Action:
    """Toggle recording. The flag may be omitted when toggling from state."""
    payload = {} if is_recording is None else {"isRecording": is_recording}
    return Action(ActionKind.TRIGGER_RECORDING, payload)


def get_recording_status() -> Action:
    return Action(ActionKind.GET_RECORDING_STATUS)


def record_a_song(song: Iterable[Any]) -> Action:
    return Action(ActionKind.RECORD_A_SONG, {"song": list(song)})


def trigger_recording_popup(open_popup: Optional[bool] = None) -> Action:
    payload = {} if open_popup is None else {"openPopup": open_popup}
    return Action(ActionKind.TRIGGER_RECORDING_POPUP, payload)


def add_note_to_song(note: Any) -> Action:
    return Action(ActionKind.ADD_NOTE_TO_SONG, {"note": note})


def create_song(song_title: str) -> Action:
    return Action(ActionKind.CREATE_SONG, {"songTitle": song_title})
