import pytest

from soundboard.core import AppState, CatalogEntry, build_reducer


class FakeSocket:
    """Socket stand-in that counts close() calls."""

    def __init__(self, name: str = "ws") -> None:
        self.name = name
        self.close_calls = 0

    def close(self) -> None:
        self.close_calls += 1

    def __repr__(self) -> str:
        return f"FakeSocket({self.name!r})"


@pytest.fixture
def reducer():
    return build_reducer()


@pytest.fixture
def piano():
    return CatalogEntry("piano")


@pytest.fixture
def bars():
    return CatalogEntry("bars")


@pytest.fixture
def state(piano, bars):
    return AppState.initial(
        instruments=[piano, CatalogEntry("xylophone")],
        visualizers=[bars, CatalogEntry("waveform")],
    )


@pytest.fixture
def make_socket():
    return FakeSocket
