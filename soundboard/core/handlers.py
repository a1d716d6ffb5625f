"""
Transition handlers for the soundboard client.

One handler per action kind. Handlers never mutate their input: each returns
a new AppState (or the same one when nothing changes). The only side effect
is releasing a socket the state is about to drop.
"""

from typing import Any, Mapping, Sequence
from urllib.parse import parse_qsl

from pyrsistent import PVector

from ..config import TOGGLE_FROM_STATE, ReducerConfig
from ..logging_config import get_logger
from .actions import Action, ActionKind
from .errors import MalformedPayloadError
from .state import AppState, SocketHandle, find_by_name, record_field

_MISSING = object()


def register_handlers(reducer) -> None:
    reducer.register(ActionKind.SET_SOCKET, on_set_socket)
    reducer.register(ActionKind.DELETE_SOCKET, on_delete_socket)
    reducer.register(ActionKind.SET_SONGS, on_set_songs)
    reducer.register(ActionKind.PLAY_SONG, on_play_song)
    reducer.register(ActionKind.STOP_SONG, on_stop_song)
    reducer.register(ActionKind.SET_LOCATION, on_set_location)
    reducer.register(ActionKind.TRIGGER_RECORDING, on_trigger_recording)
    reducer.register(ActionKind.TRIGGER_RECORDING_POPUP, on_trigger_recording_popup)
    reducer.register(ActionKind.RECORD_A_SONG, on_record_a_song)
    reducer.register(ActionKind.ADD_NOTE_TO_SONG, on_add_note_to_song)
    reducer.register(ActionKind.CREATE_SONG, on_create_song)


def _require(action: Action, key: str) -> Any:
    value = action.get(key, _MISSING)
    if value is _MISSING:
        raise MalformedPayloadError(action.type, key)
    return value


def _require_sequence(action: Action, key: str) -> Sequence[Any]:
    value = _require(action, key)
    if not isinstance(value, (PVector, tuple)):
        raise MalformedPayloadError(action.type, key, "is not a sequence")
    return value


def _payload_str(action: Action, path: Sequence[str]) -> str:
    parent = action.get_in(path[:-1], None)
    if parent is not None and not isinstance(parent, Mapping):
        raise MalformedPayloadError(action.type, ".".join(path[:-1]), "is not a mapping")
    value = action.get_in(path, "")
    if value is None:
        return ""
    if not isinstance(value, str):
        raise MalformedPayloadError(action.type, ".".join(path), "is not a string")
    return value


def _release_socket(state: AppState, keep: Any = None) -> None:
    old = state.get("socket")
    if old is not None and old is not keep:
        get_logger(__name__).debug("closing socket")
        old.close()


def on_set_socket(state: AppState, action: Action, config: ReducerConfig) -> AppState:
    socket = _require(action, "socket")
    if socket is not None and not isinstance(socket, SocketHandle):
        raise MalformedPayloadError(action.type, "socket", "has no close()")
    _release_socket(state, keep=socket)
    if socket is None:
        return state.discard("socket")
    return state.set("socket", socket)


def on_delete_socket(state: AppState, action: Action, config: ReducerConfig) -> AppState:
    _release_socket(state)
    return state.discard("socket")


def on_set_songs(state: AppState, action: Action, config: ReducerConfig) -> AppState:
    return state.set("songs", _require_sequence(action, "songs"))


def on_play_song(state: AppState, action: Action, config: ReducerConfig) -> AppState:
    song_id = _require(action, "id")
    for song in state.songs:
        if record_field(song, "id") == song_id:
            return state.set("notes", record_field(song, "notes", ()))

    get_logger(__name__, trace_id=action.type).warning(
        "no song with id %r, keeping current state", song_id
    )
    return state


def on_stop_song(state: AppState, action: Action, config: ReducerConfig) -> AppState:
    return state.discard("notes")


def _instrument_name(pathname: str) -> str:
    path = pathname[1:] if pathname.startswith("/") else pathname
    return path.split("/", 1)[0]


def _visualizer_name(search: str) -> str:
    query = search[1:] if search.startswith("?") else search
    for key, value in parse_qsl(query, keep_blank_values=True):
        if key == "visualizer":
            return value
    return ""


def _select(state: AppState, key: str, entry: Any) -> AppState:
    if entry is None:
        return state.discard(key)
    return state.set(key, entry)


def on_set_location(state: AppState, action: Action, config: ReducerConfig) -> AppState:
    pathname = _payload_str(action, ("location", "pathname"))
    search = _payload_str(action, ("location", "search"))

    instrument = find_by_name(state.instruments, _instrument_name(pathname))
    visualizer = find_by_name(state.visualizers, _visualizer_name(search))

    next_state = _select(state, "instrument", instrument)
    return _select(next_state, "visualizer", visualizer)


def _toggle(state: AppState, action: Action, config: ReducerConfig, name: str, key: str) -> AppState:
    if config.toggle_source == TOGGLE_FROM_STATE:
        current = state[name]
    else:
        current = _require(action, key)
    return state.set(name, not current)


def on_trigger_recording(state: AppState, action: Action, config: ReducerConfig) -> AppState:
    return _toggle(state, action, config, "is_recording", "isRecording")


def on_trigger_recording_popup(state: AppState, action: Action, config: ReducerConfig) -> AppState:
    return _toggle(state, action, config, "open_popup", "openPopup")


def on_record_a_song(state: AppState, action: Action, config: ReducerConfig) -> AppState:
    return state.set("song", _require_sequence(action, "song"))


def on_add_note_to_song(state: AppState, action: Action, config: ReducerConfig) -> AppState:
    note = _require(action, "note")
    return state.set("song", state.song.append(note))


def _next_song_id(songs: Sequence[Any]) -> int:
    ids = [record_field(s, "id") for s in songs]
    ints = [i for i in ids if isinstance(i, int) and not isinstance(i, bool)]
    return max(ints, default=0) + 1


def on_create_song(state: AppState, action: Action, config: ReducerConfig) -> AppState:
    song_title = _require(action, "songTitle")
    if not isinstance(song_title, str):
        raise MalformedPayloadError(action.type, "songTitle", "is not a string")

    get_logger(__name__, trace_id=action.type).info(
        "song created: %r (%d notes)", song_title, len(state.song)
    )

    if not config.commit_on_create:
        return state.set("song_title", song_title)

    record = {
        "id": _next_song_id(state.songs),
        "songTitle": song_title,
        "notes": list(state.song),
    }
    return state.set(
        songs=state.songs.append(record),
        song=(),
        song_title="",
    )
