"""
Audio engine boundary for PyAudioPlayer.
Declares the signals and primitives the projector and commands rely on.
"""
from __future__ import annotations
from typing import Sequence

from PyQt6.QtCore import QObject, pyqtSignal

from .config import LoopMode
from .types import AudioSource


class BaseAudioEngine(QObject):
    """
    Base class for playback engines.

    Subclasses emit the five signals below from the GUI thread and implement
    the primitives. Signals carry float seconds for positions and durations.
    """
    playerStateChanged = pyqtSignal(object)       # PlayerState
    positionChanged = pyqtSignal(float)
    bufferedPositionChanged = pyqtSignal(float)
    durationChanged = pyqtSignal(object)          # Optional[float]
    sequenceStateChanged = pyqtSignal(object)     # Optional[SequenceState]

    def open(self, sources: Sequence[AudioSource], initial_index: int = 0) -> None:
        """Replace the current sequence and prepare the item at initial_index."""
        raise NotImplementedError

    def play(self) -> None:
        raise NotImplementedError

    def pause(self) -> None:
        raise NotImplementedError

    def seek(self, position: float) -> None:
        raise NotImplementedError

    def seek_to_next(self) -> None:
        raise NotImplementedError

    def seek_to_previous(self) -> None:
        raise NotImplementedError

    def shuffle(self) -> None:
        """Recompute the shuffled effective order."""
        raise NotImplementedError

    def set_shuffle_mode_enabled(self, enabled: bool) -> None:
        raise NotImplementedError

    def set_loop_mode(self, mode: LoopMode) -> None:
        raise NotImplementedError

    def append_source(self, source: AudioSource) -> None:
        raise NotImplementedError

    def remove_source_at(self, index: int) -> None:
        raise NotImplementedError

    @property
    def shuffle_mode_enabled(self) -> bool:
        raise NotImplementedError

    @property
    def sequence_length(self) -> int:
        raise NotImplementedError

    def dispose(self) -> None:
        """Release playback resources. Later commands are dropped."""
        raise NotImplementedError
