"""
Type definitions for the PyAudioPlayer core module.
Payloads carried by the engine signals.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .config import ProcessingStage


@dataclass(frozen=True, slots=True)
class PlayerState:
    """Engine-state signal payload."""
    playing: bool = False
    processing_stage: ProcessingStage = ProcessingStage.IDLE


@dataclass(frozen=True, eq=False, slots=True)
class AudioSource:
    """
    A playable source reference and its label.
    Compared by identity, so two entries with the same URI stay distinct items.
    """
    uri: str
    tag: str = ""

    @property
    def is_remote(self) -> bool:
        return self.uri.startswith(("http://", "https://"))


@dataclass(frozen=True, slots=True)
class SequenceState:
    """Sequence-state signal payload (playlist variant)."""
    sequence: tuple[AudioSource, ...] = ()
    current_index: Optional[int] = None
    shuffle_enabled: bool = False
    shuffle_indices: tuple[int, ...] = ()

    @property
    def current_source(self) -> Optional[AudioSource]:
        """Source at the current index, None if there is none."""
        if self.current_index is None or not 0 <= self.current_index < len(self.sequence):
            return None
        return self.sequence[self.current_index]

    @property
    def effective_sequence(self) -> tuple[AudioSource, ...]:
        """Play order currently in effect (post-shuffle when shuffle is on)."""
        if self.shuffle_enabled and len(self.shuffle_indices) == len(self.sequence):
            return tuple(self.sequence[i] for i in self.shuffle_indices)
        return self.sequence
