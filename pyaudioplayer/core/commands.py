"""
Command facade for PyAudioPlayer.
Translates user intents into engine primitive calls.
"""
from __future__ import annotations
import logging
from typing import TYPE_CHECKING

from .config import PLAYER_CONFIG, LoopMode, PlayerConfig, RepeatMode
from .types import AudioSource

if TYPE_CHECKING:
    from .engine import BaseAudioEngine
    from .projector import PlaybackStateProjector

logger = logging.getLogger("PyAudioPlayer")

_LOOP_MODES = {
    RepeatMode.OFF: LoopMode.OFF,
    RepeatMode.REPEAT_ONE: LoopMode.ONE,
    RepeatMode.REPEAT_ALL: LoopMode.ALL,
}


class PlaybackCommands:
    """
    The only mutation entry points for the UI.

    Pass-through commands touch no local state. Repeat and shuffle write a
    predicted value into the snapshot; playlist edits leave the snapshot to the
    projector's sequence fold. Nothing is validated or intercepted here.
    """
    __slots__ = ('_engine', '_projector', '_config', '__weakref__')

    def __init__(
        self,
        engine: "BaseAudioEngine",
        projector: "PlaybackStateProjector",
        config: PlayerConfig = PLAYER_CONFIG
    ) -> None:
        self._engine = engine
        self._projector = projector
        self._config = config

    def play(self) -> None:
        self._engine.play()

    def pause(self) -> None:
        self._engine.pause()

    def seek(self, position: float) -> None:
        self._engine.seek(position)

    def skip_to_next(self) -> None:
        self._engine.seek_to_next()

    def skip_to_previous(self) -> None:
        self._engine.seek_to_previous()

    def cycle_repeat_mode(self) -> RepeatMode:
        """Advance OFF -> REPEAT_ONE -> REPEAT_ALL -> OFF and mirror it into the engine."""
        modes = list(RepeatMode)
        current = self._projector.snapshot.repeat_mode
        next_mode = modes[(modes.index(current) + 1) % len(modes)]
        self._projector.predict(repeat_mode=next_mode)
        self._engine.set_loop_mode(_LOOP_MODES[next_mode])
        logger.debug("Repeat mode: %s -> %s", current.name, next_mode.name)
        return next_mode

    def toggle_shuffle(self) -> bool:
        """Flip shuffle, reading the current flag from the engine."""
        enable = not self._engine.shuffle_mode_enabled
        if enable:
            self._engine.shuffle()
        self._engine.set_shuffle_mode_enabled(enable)
        self._projector.predict(shuffle_enabled=enable)
        logger.debug("Shuffle %s", "enabled" if enable else "disabled")
        return enable

    def append_track(self) -> AudioSource:
        """Append the next demo track, named after its position in the playlist."""
        number = self._engine.sequence_length + 1
        source = AudioSource(
            uri=self._config.track_uri(number),
            tag=self._config.track_label(number),
        )
        logger.info("Appending %s (%s)", source.tag, source.uri)
        self._engine.append_source(source)
        return source

    def remove_track(self) -> bool:
        """Remove the last playlist entry. No-op on an empty playlist."""
        index = self._engine.sequence_length - 1
        if index < 0:
            logger.debug("Remove requested on empty playlist")
            return False
        logger.info("Removing playlist entry %d", index)
        self._engine.remove_source_at(index)
        return True
