"""
Player session for PyAudioPlayer.
Wires an engine to its projector and command facade and owns their lifetime.
"""
from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Optional

from .commands import PlaybackCommands
from .config import PLAYER_CONFIG, PlayerConfig
from .projector import PlaybackStateProjector
from .types import AudioSource

if TYPE_CHECKING:
    from .engine import BaseAudioEngine
    from .snapshot import PlaybackSnapshot

logger = logging.getLogger("PyAudioPlayer")


def demo_sources(config: Optional[PlayerConfig] = None) -> list[AudioSource]:
    """The fixed demo playlist: Song 1..N from the configured base URL."""
    config = config or PLAYER_CONFIG
    return [
        AudioSource(uri=config.track_uri(n), tag=config.track_label(n))
        for n in range(1, config.demo_track_count + 1)
    ]


class PlayerSession:
    """
    Projector/commands pair bound to one engine.
    Injected into the UI; there is no process-wide player state.
    """
    __slots__ = ('engine', 'projector', 'commands', '_config', '__weakref__')

    def __init__(self, engine: "BaseAudioEngine", config: PlayerConfig = PLAYER_CONFIG) -> None:
        self._config = config
        self.engine = engine
        self.projector = PlaybackStateProjector(engine)
        self.commands = PlaybackCommands(engine, self.projector, config)

    @property
    def snapshot(self) -> "PlaybackSnapshot":
        return self.projector.snapshot

    def open_demo_playlist(self) -> None:
        """Open the configured demo tracks as one concatenated source."""
        sources = demo_sources(self._config)
        logger.info("Opening demo playlist (%d tracks)", len(sources))
        self.engine.open(sources)

    def open_clip(self, uri: str, tag: str = "") -> None:
        """Single-clip variant: a one-item sequence, both edges at once."""
        logger.info("Opening clip: %s", uri)
        self.engine.open([AudioSource(uri=uri, tag=tag)])

    def dispose(self) -> None:
        """Tear down subscriptions and release the engine."""
        self.projector.dispose()
