"""
PyAudioPlayer Core Module

This module contains the playback logic:
- PlaybackStateProjector: Folds engine signals into one PlaybackSnapshot
- PlaybackCommands: User intents forwarded to the engine
- PlayerSession: Engine, projector and commands wired together
- BaseAudioEngine: Engine boundary (signals and primitives)
- SourceSequence: Playlist, shuffle order and loop mode

The Qt Multimedia engine lives in `media_engine` and is imported on demand.
"""
from .commands import PlaybackCommands
from .engine import BaseAudioEngine
from .projector import PlaybackStateProjector
from .sequence import SourceSequence
from .session import PlayerSession, demo_sources
from .snapshot import PlaybackSnapshot
from .types import AudioSource, PlayerState, SequenceState
from .config import (
    PLAYER_CONFIG,
    UI_CONFIG,
    ButtonState,
    LoopMode,
    ProcessingStage,
    RepeatMode
)

__all__ = [
    # Main classes
    'PlaybackStateProjector',
    'PlaybackCommands',
    'PlayerSession',
    'BaseAudioEngine',
    'SourceSequence',
    'PlaybackSnapshot',
    # Payloads
    'AudioSource',
    'PlayerState',
    'SequenceState',
    'demo_sources',
    # Config
    'PLAYER_CONFIG',
    'UI_CONFIG',
    'ButtonState',
    'LoopMode',
    'ProcessingStage',
    'RepeatMode',
]
