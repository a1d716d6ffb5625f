"""
State model for the soundboard client.

AppState is a persistent record: every transition returns a new snapshot that
shares unchanged fields with the previous one.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Protocol, runtime_checkable

from pyrsistent import PRecord, PVector, field, freeze, pvector


@runtime_checkable
class SocketHandle(Protocol):
    """Live connection owned by the state. Only close() is ever used."""

    def close(self) -> Any:
        ...


@dataclass(frozen=True)
class CatalogEntry:
    """
    Selectable instrument or visualizer.

    Fields:
        name: Lookup key, matched exactly
        behavior: Opaque payload owned by the UI layer
    """
    name: str
    behavior: Any = None


def _frozen_seq(value: Iterable[Any]) -> PVector:
    return pvector(freeze(item) for item in value)


class AppState(PRecord):
    """
    Immutable snapshot of all application-visible data.

    Optional fields (socket, notes, instrument, visualizer) are absent from
    the record when unset, never stored as None.
    """
    socket = field()
    songs = field(initial=pvector(), factory=_frozen_seq)
    notes = field(factory=_frozen_seq)
    instruments = field(initial=pvector(), factory=_frozen_seq)
    visualizers = field(initial=pvector(), factory=_frozen_seq)
    instrument = field()
    visualizer = field()
    is_recording = field(type=bool, initial=False)
    open_popup = field(type=bool, initial=False)
    song = field(initial=pvector(), factory=_frozen_seq)
    song_title = field(type=str, initial="")

    @classmethod
    def initial(
        cls,
        instruments: Iterable[Any] = (),
        visualizers: Iterable[Any] = (),
        songs: Iterable[Any] = (),
    ) -> "AppState":
        return cls(instruments=instruments, visualizers=visualizers, songs=songs)


def record_field(record: Any, key: str, default: Any = None) -> Any:
    """Read a field from a mapping record or an attribute record."""
    if isinstance(record, Mapping):
        return record.get(key, default)
    return getattr(record, key, default)


def find_by_name(catalog: Iterable[Any], name: str) -> Optional[Any]:
    """First catalog entry whose name equals name exactly, or None."""
    for entry in catalog:
        if record_field(entry, "name") == name:
            return entry
    return None
