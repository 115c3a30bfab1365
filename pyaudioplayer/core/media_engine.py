"""
Qt Multimedia playback engine for PyAudioPlayer.
Plays a SourceSequence through QMediaPlayer and reports through the engine signals.
"""
from __future__ import annotations
import logging
import os
from typing import Optional, Sequence

import numpy as np
from PyQt6.QtCore import QObject, QTimer, QUrl
from PyQt6.QtMultimedia import QAudioOutput, QMediaPlayer

from .config import PLAYER_CONFIG, LoopMode, PlayerConfig, ProcessingStage
from .engine import BaseAudioEngine
from .sequence import SourceSequence
from .types import AudioSource, PlayerState

logger = logging.getLogger("PyAudioPlayer")

_STAGES = {
    QMediaPlayer.MediaStatus.NoMedia: ProcessingStage.IDLE,
    QMediaPlayer.MediaStatus.LoadingMedia: ProcessingStage.LOADING,
    QMediaPlayer.MediaStatus.StalledMedia: ProcessingStage.BUFFERING,
    QMediaPlayer.MediaStatus.BufferingMedia: ProcessingStage.BUFFERING,
    QMediaPlayer.MediaStatus.LoadedMedia: ProcessingStage.READY,
    QMediaPlayer.MediaStatus.BufferedMedia: ProcessingStage.READY,
    QMediaPlayer.MediaStatus.EndOfMedia: ProcessingStage.COMPLETED,
    QMediaPlayer.MediaStatus.InvalidMedia: ProcessingStage.IDLE,
}


def source_url(source: AudioSource) -> QUrl:
    """HTTP sources load by URL; anything else is a bundled or local file path."""
    if source.is_remote:
        return QUrl(source.uri)
    return QUrl.fromLocalFile(os.path.abspath(source.uri))


class MediaEngine(BaseAudioEngine):
    """
    QMediaPlayer-backed engine with playlist, shuffle and loop support.
    Qt 6 has no playlist type, so the sequence is kept in a SourceSequence
    and the player is pointed at its current item.
    """

    def __init__(
        self,
        config: PlayerConfig = PLAYER_CONFIG,
        rng: Optional[np.random.Generator] = None,
        parent: Optional[QObject] = None
    ) -> None:
        super().__init__(parent)
        self._config = config
        self._rng = rng if rng is not None else np.random.default_rng()
        self._sequence = SourceSequence()
        self._playing = False
        self._stage = ProcessingStage.IDLE
        self._disposed = False

        self._audio_output = QAudioOutput(self)
        self._audio_output.setVolume(config.default_volume)
        self._player = QMediaPlayer(self)
        self._player.setAudioOutput(self._audio_output)
        self._player.mediaStatusChanged.connect(self._on_media_status)
        self._player.durationChanged.connect(self._on_duration)
        self._player.bufferProgressChanged.connect(self._on_buffer_progress)
        self._player.errorOccurred.connect(self._on_error)

        # Position is published on a fixed cadence while playing
        self._position_timer = QTimer(self)
        self._position_timer.setInterval(config.position_interval_ms)
        self._position_timer.timeout.connect(self._emit_position)
        logger.info("MediaEngine initialized")

    # --- State reporting ---

    def _emit_player_state(self) -> None:
        self.playerStateChanged.emit(PlayerState(self._playing, self._stage))

    def _emit_sequence_state(self) -> None:
        self.sequenceStateChanged.emit(self._sequence.state())

    def _emit_position(self) -> None:
        self.positionChanged.emit(self._player.position() / 1000.0)

    def _set_stage(self, stage: ProcessingStage) -> None:
        if stage != self._stage:
            self._stage = stage
            self._emit_player_state()

    def _on_media_status(self, status: QMediaPlayer.MediaStatus) -> None:
        logger.debug("Media status: %s", status.name)
        if status == QMediaPlayer.MediaStatus.EndOfMedia:
            self._on_end_of_media()
            return
        if status == QMediaPlayer.MediaStatus.InvalidMedia:
            logger.warning("Invalid media: %s", self._player.source().toString())
            self._playing = False
            self._position_timer.stop()
            self._stage = ProcessingStage.IDLE
            self._emit_player_state()
            return
        if status in (QMediaPlayer.MediaStatus.LoadedMedia, QMediaPlayer.MediaStatus.BufferedMedia):
            source = self._sequence.current_source
            if source is not None and not source.is_remote:
                self.bufferedPositionChanged.emit(self._player.duration() / 1000.0)
        self._set_stage(_STAGES.get(status, ProcessingStage.IDLE))

    def _on_end_of_media(self) -> None:
        next_index = self._sequence.advance_on_completion()
        if next_index is None:
            self._position_timer.stop()
            self._emit_position()
            self._set_stage(ProcessingStage.COMPLETED)
            return
        if next_index == self._sequence.current_index:
            logger.debug("Repeating current item")
            self._player.setPosition(0)
            self._player.play()
            return
        self._sequence.current_index = next_index
        self._load_current()
        self._emit_sequence_state()

    def _on_duration(self, duration_ms: int) -> None:
        self.durationChanged.emit(duration_ms / 1000.0 if duration_ms > 0 else None)

    def _on_buffer_progress(self, progress: float) -> None:
        """
        Estimate the buffered position from the playback buffer fill level.

        Qt reports how full its playback buffer is, not how much of the
        source has been downloaded, so a full buffer only vouches for
        `buffer_window_seconds` past the playhead. Clamped to [position, duration].
        """
        position = self._player.position() / 1000.0
        duration = self._player.duration() / 1000.0
        lookahead = min(max(0.0, duration - position), self._config.buffer_window_seconds)
        buffered = position + lookahead * max(0.0, min(progress, 1.0))
        self.bufferedPositionChanged.emit(max(position, min(buffered, duration)))

    def _on_error(self, error: QMediaPlayer.Error, message: str) -> None:
        logger.error("Playback error (%s): %s", error.name, message)
        self._playing = False
        self._position_timer.stop()
        self._emit_player_state()

    def _load_current(self) -> None:
        """Point the player at the sequence's current item, keeping the play intent."""
        source = self._sequence.current_source
        if source is None:
            self._player.stop()
            self._player.setSource(QUrl())
            self.durationChanged.emit(None)
            self.positionChanged.emit(0.0)
            self.bufferedPositionChanged.emit(0.0)
            return
        logger.info("Loading %s (%s)", source.tag, source.uri)
        self._player.setSource(source_url(source))
        self.positionChanged.emit(0.0)
        self.bufferedPositionChanged.emit(0.0)
        if self._playing:
            self._player.play()

    # --- Primitives ---

    def open(self, sources: Sequence[AudioSource], initial_index: int = 0) -> None:
        if self._disposed:
            return
        self._sequence.load(sources, initial_index)
        logger.info("Opened sequence with %d source(s)", len(self._sequence))
        self._load_current()
        self._emit_sequence_state()

    def play(self) -> None:
        if self._disposed or self._sequence.current_source is None:
            return
        self._playing = True
        self._player.play()
        self._position_timer.start()
        self._emit_player_state()

    def pause(self) -> None:
        if self._disposed:
            return
        self._playing = False
        self._player.pause()
        self._position_timer.stop()
        self._emit_position()
        self._emit_player_state()

    def seek(self, position: float) -> None:
        if self._disposed:
            return
        self._player.setPosition(int(max(0.0, position) * 1000))
        self.positionChanged.emit(max(0.0, position))
        if self._stage == ProcessingStage.COMPLETED:
            self._set_stage(ProcessingStage.READY)

    def seek_to_next(self) -> None:
        self._jump_to(self._sequence.next_index())

    def seek_to_previous(self) -> None:
        self._jump_to(self._sequence.previous_index())

    def _jump_to(self, index: Optional[int]) -> None:
        if self._disposed:
            return
        if index is None:
            logger.debug("No item to skip to")
            return
        self._sequence.current_index = index
        self._load_current()
        self._emit_sequence_state()

    def shuffle(self) -> None:
        if self._disposed:
            return
        self._sequence.shuffle(self._rng)
        self._emit_sequence_state()

    def set_shuffle_mode_enabled(self, enabled: bool) -> None:
        if self._disposed:
            return
        self._sequence.shuffle_enabled = bool(enabled)
        self._emit_sequence_state()

    def set_loop_mode(self, mode: LoopMode) -> None:
        if self._disposed:
            return
        self._sequence.loop_mode = mode
        logger.debug("Loop mode set to %s", mode.name)

    def append_source(self, source: AudioSource) -> None:
        if self._disposed:
            return
        was_empty = self._sequence.current_source is None
        self._sequence.append(source)
        if was_empty:
            self._load_current()
        self._emit_sequence_state()

    def remove_source_at(self, index: int) -> None:
        if self._disposed:
            return
        previous = self._sequence.current_source
        removed = self._sequence.remove_at(index)
        if removed is None:
            logger.warning("Cannot remove source at %d: index out of range", index)
            return
        if self._sequence.current_source is not previous:
            self._load_current()
            if self._sequence.current_source is None:
                # Nothing left to play
                self._playing = False
                self._position_timer.stop()
                self._stage = ProcessingStage.IDLE
                self._emit_player_state()
        self._emit_sequence_state()

    @property
    def shuffle_mode_enabled(self) -> bool:
        return self._sequence.shuffle_enabled

    @property
    def sequence_length(self) -> int:
        return len(self._sequence)

    def dispose(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        self._position_timer.stop()
        try:
            self._player.stop()
            self._player.setSource(QUrl())
        except Exception as e:
            logger.warning("Error stopping media player: %s", e)
        self._player.deleteLater()
        self._audio_output.deleteLater()
        logger.info("MediaEngine disposed")
