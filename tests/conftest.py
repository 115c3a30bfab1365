"""
Pytest configuration and fixtures for PyAudioPlayer tests.
"""
import os

import pytest

from pyaudioplayer.core.engine import BaseAudioEngine
from pyaudioplayer.core.projector import PlaybackStateProjector
from pyaudioplayer.core.commands import PlaybackCommands
from pyaudioplayer.core.sequence import SourceSequence
from pyaudioplayer.core.types import AudioSource


class FakeEngine(BaseAudioEngine):
    """In-process engine that records primitive calls and emits on demand."""

    def __init__(self):
        super().__init__()
        self.calls = []
        self.sequence = SourceSequence()
        self.disposed = False

    def count(self, name):
        return sum(1 for call in self.calls if call[0] == name)

    def emit_sequence(self):
        self.sequenceStateChanged.emit(self.sequence.state())

    def open(self, sources, initial_index=0):
        self.calls.append(("open", list(sources), initial_index))
        self.sequence.load(sources, initial_index)

    def play(self):
        self.calls.append(("play",))

    def pause(self):
        self.calls.append(("pause",))

    def seek(self, position):
        self.calls.append(("seek", position))

    def seek_to_next(self):
        self.calls.append(("seek_to_next",))

    def seek_to_previous(self):
        self.calls.append(("seek_to_previous",))

    def shuffle(self):
        self.calls.append(("shuffle",))

    def set_shuffle_mode_enabled(self, enabled):
        self.calls.append(("set_shuffle_mode_enabled", enabled))
        self.sequence.shuffle_enabled = enabled

    def set_loop_mode(self, mode):
        self.calls.append(("set_loop_mode", mode))

    def append_source(self, source):
        self.calls.append(("append_source", source))
        self.sequence.append(source)

    def remove_source_at(self, index):
        self.calls.append(("remove_source_at", index))
        self.sequence.remove_at(index)

    @property
    def shuffle_mode_enabled(self):
        return self.sequence.shuffle_enabled

    @property
    def sequence_length(self):
        return len(self.sequence)

    def dispose(self):
        self.calls.append(("dispose",))
        self.disposed = True


@pytest.fixture(scope="session", autouse=True)
def qt_app():
    """One Qt application for the whole run, offscreen when widgets are available."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    try:
        from PyQt6.QtWidgets import QApplication
    except ImportError:
        from PyQt6.QtCore import QCoreApplication as QApplication
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def engine() -> FakeEngine:
    """Create a recording fake engine."""
    return FakeEngine()


@pytest.fixture
def projector(engine) -> PlaybackStateProjector:
    """Create a projector subscribed to the fake engine."""
    return PlaybackStateProjector(engine)


@pytest.fixture
def commands(engine, projector) -> PlaybackCommands:
    """Create a command facade over the fake engine."""
    return PlaybackCommands(engine, projector)


@pytest.fixture
def three_sources() -> list[AudioSource]:
    """Three labelled sources."""
    return [
        AudioSource(uri=f"https://example.com/song-{n}.mp3", tag=f"Song {n}")
        for n in range(1, 4)
    ]


@pytest.fixture
def emitted(projector) -> list:
    """Snapshots published through snapshotChanged, in order."""
    snapshots = []
    projector.snapshotChanged.connect(snapshots.append)
    return snapshots
