"""
Concatenated source sequence for PyAudioPlayer.
Holds the playlist, its shuffle order and the loop mode used by the media engine.
"""
from __future__ import annotations
from typing import Iterable, Optional

import numpy as np

from .config import LoopMode
from .types import AudioSource, SequenceState


class SourceSequence:
    """
    Ordered playlist with a current item, a shuffle permutation and a loop mode.
    Navigation always walks the effective order (shuffled when shuffle is on).
    """
    __slots__ = ('_sources', '_current_index', '_shuffle_indices', 'shuffle_enabled', 'loop_mode')

    def __init__(self, sources: Iterable[AudioSource] = (), initial_index: int = 0) -> None:
        self._sources: list[AudioSource] = []
        self._current_index: Optional[int] = None
        self._shuffle_indices: list[int] = []
        self.shuffle_enabled = False
        self.loop_mode = LoopMode.OFF
        self.load(sources, initial_index)

    def __len__(self) -> int:
        return len(self._sources)

    @property
    def sources(self) -> tuple[AudioSource, ...]:
        return tuple(self._sources)

    @property
    def current_index(self) -> Optional[int]:
        return self._current_index

    @current_index.setter
    def current_index(self, value: Optional[int]) -> None:
        if value is not None and not 0 <= value < len(self._sources):
            raise IndexError(f"Sequence index out of range: {value}")
        self._current_index = value

    @property
    def current_source(self) -> Optional[AudioSource]:
        if self._current_index is None:
            return None
        return self._sources[self._current_index]

    @property
    def order(self) -> list[int]:
        """Indices in the order they will be played."""
        if self.shuffle_enabled:
            return list(self._shuffle_indices)
        return list(range(len(self._sources)))

    def load(self, sources: Iterable[AudioSource], initial_index: int = 0) -> None:
        """Replace all sources; the shuffle order resets to insertion order."""
        self._sources = list(sources)
        self._shuffle_indices = list(range(len(self._sources)))
        if not self._sources:
            self._current_index = None
        else:
            self._current_index = max(0, min(initial_index, len(self._sources) - 1))

    def shuffle(self, rng: Optional[np.random.Generator] = None) -> None:
        """Build a fresh permutation that starts with the current item."""
        rng = rng if rng is not None else np.random.default_rng()
        indices = [int(i) for i in rng.permutation(len(self._sources))]
        if self._current_index is not None:
            indices.remove(self._current_index)
            indices.insert(0, self._current_index)
        self._shuffle_indices = indices

    def append(self, source: AudioSource) -> int:
        """Append a source at the end of both orders and return its index."""
        self._sources.append(source)
        index = len(self._sources) - 1
        self._shuffle_indices.append(index)
        if self._current_index is None:
            self._current_index = index
        return index

    def remove_at(self, index: int) -> Optional[AudioSource]:
        """Remove the source at index and return it, None if index is invalid."""
        if not 0 <= index < len(self._sources):
            return None
        removed = self._sources.pop(index)
        self._shuffle_indices = [
            i if i < index else i - 1
            for i in self._shuffle_indices
            if i != index
        ]
        current = self._current_index
        if current is not None:
            if not self._sources:
                self._current_index = None
            elif index < current:
                self._current_index = current - 1
            elif index == current:
                self._current_index = min(current, len(self._sources) - 1)
        return removed

    def next_index(self) -> Optional[int]:
        """Index after the current one in the effective order, None at the end."""
        return self._step(1)

    def previous_index(self) -> Optional[int]:
        """Index before the current one in the effective order, None at the start."""
        return self._step(-1)

    def advance_on_completion(self) -> Optional[int]:
        """Index to play once the current item has finished, None to stop."""
        if self._current_index is None:
            return None
        if self.loop_mode == LoopMode.ONE:
            return self._current_index
        return self.next_index()

    def _step(self, delta: int) -> Optional[int]:
        if self._current_index is None:
            return None
        order = self.order
        position = order.index(self._current_index) + delta
        if 0 <= position < len(order):
            return order[position]
        if self.loop_mode == LoopMode.ALL:
            return order[position % len(order)]
        return None

    def state(self) -> SequenceState:
        return SequenceState(
            sequence=tuple(self._sources),
            current_index=self._current_index,
            shuffle_enabled=self.shuffle_enabled,
            shuffle_indices=tuple(self._shuffle_indices),
        )
