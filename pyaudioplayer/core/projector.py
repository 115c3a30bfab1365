"""
Playback state projector for PyAudioPlayer.
Folds the engine's independent signals into one immutable snapshot.
"""
from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Optional

from PyQt6.QtCore import QObject, pyqtSignal

from .config import ButtonState, ProcessingStage
from .snapshot import PlaybackSnapshot
from .types import PlayerState, SequenceState

if TYPE_CHECKING:
    from .engine import BaseAudioEngine

logger = logging.getLogger("PyAudioPlayer")

_LOADING_STAGES = (ProcessingStage.LOADING, ProcessingStage.BUFFERING)


class PlaybackStateProjector(QObject):
    """
    Owns the current PlaybackSnapshot.

    Every engine emission is applied against the latest snapshot and replaces
    it; observers connect to snapshotChanged or read `snapshot`. Superseded
    snapshots are never queued, so slow observers only see the latest one.
    """
    snapshotChanged = pyqtSignal(object)

    def __init__(self, engine: "BaseAudioEngine", parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._engine = engine
        self._snapshot = PlaybackSnapshot()
        self._disposed = False
        self._connections = [
            (engine.playerStateChanged, self._on_player_state),
            (engine.positionChanged, self._on_position),
            (engine.bufferedPositionChanged, self._on_buffered_position),
            (engine.durationChanged, self._on_duration),
            (engine.sequenceStateChanged, self._on_sequence_state),
        ]
        for signal, slot in self._connections:
            signal.connect(slot)

    @property
    def snapshot(self) -> PlaybackSnapshot:
        """Latest snapshot. Read-only; replaced on every update."""
        return self._snapshot

    @property
    def is_disposed(self) -> bool:
        return self._disposed

    def _replace(self, **changes) -> None:
        if self._disposed:
            return
        self._snapshot = self._snapshot.copy_with(**changes)
        self.snapshotChanged.emit(self._snapshot)

    def predict(self, **changes) -> None:
        """
        Write locally predicted fields ahead of engine confirmation.
        The next authoritative engine signal may overwrite them.
        """
        self._replace(**changes)

    # --- Folds ---

    def _on_player_state(self, state: PlayerState) -> None:
        stage = state.processing_stage
        if stage in _LOADING_STAGES:
            button_state = ButtonState.LOADING
        elif not state.playing:
            button_state = ButtonState.PAUSED
        elif stage != ProcessingStage.COMPLETED:
            button_state = ButtonState.PLAYING
        else:
            logger.info("Playback completed; rewinding to start")
            self._engine.seek(0.0)
            self._engine.pause()
            button_state = ButtonState.PAUSED
        logger.debug("Player state %s/%s -> %s", state.playing, stage.name, button_state.name)
        self._replace(button_state=button_state)

    def _on_position(self, position: float) -> None:
        self._replace(current_position=position)

    def _on_buffered_position(self, position: float) -> None:
        self._replace(buffered_position=position)

    def _on_duration(self, duration: Optional[float]) -> None:
        self._replace(total_duration=duration if duration is not None else 0.0)

    def _on_sequence_state(self, state: Optional[SequenceState]) -> None:
        if state is None:
            return

        current = state.current_source
        effective = state.effective_sequence
        row = next((i for i, source in enumerate(effective) if source is current), None)
        self._replace(
            current_track_label=current.tag if current is not None else "",
            current_track_index=row,
        )

        self._replace(playlist=[source.tag for source in effective])

        self._replace(shuffle_enabled=state.shuffle_enabled)

        if effective:
            is_first = effective[0] is current
            is_last = effective[-1] is current
        else:
            # Nothing to navigate to in either direction
            is_first = is_last = True
        self._replace(is_first_track=is_first, is_last_track=is_last)
        logger.debug(
            "Sequence state: %d item(s), current=%r, shuffle=%s",
            len(effective), current.tag if current is not None else None, state.shuffle_enabled,
        )

    def dispose(self) -> None:
        """Cancel all subscriptions and release the engine."""
        if self._disposed:
            return
        self._disposed = True
        for signal, slot in self._connections:
            try:
                signal.disconnect(slot)
            except TypeError as e:
                logger.warning("Signal already disconnected: %s", e)
        self._connections = []
        self._engine.dispose()
        logger.info("Playback state projector disposed")
