"""
Centralized configuration for PyAudioPlayer.
All magic numbers and default settings in one place.
"""
from dataclasses import dataclass
from enum import Enum, auto


class ButtonState(Enum):
    """State of the play/pause button."""
    PAUSED = auto()
    PLAYING = auto()
    LOADING = auto()


class RepeatMode(Enum):
    """Repeat toggle. Declaration order is the cycle order."""
    OFF = auto()
    REPEAT_ONE = auto()
    REPEAT_ALL = auto()


class ProcessingStage(Enum):
    """Lifecycle phase of the current source as reported by the engine."""
    IDLE = auto()
    LOADING = auto()
    BUFFERING = auto()
    READY = auto()
    COMPLETED = auto()


class LoopMode(Enum):
    """Engine loop primitive values."""
    OFF = auto()
    ONE = auto()
    ALL = auto()


@dataclass(frozen=True, slots=True)
class PlayerConfig:
    """Playback and demo source configuration."""
    demo_base_url: str = "https://www.soundhelix.com/examples/mp3"
    demo_track_count: int = 3
    track_file_pattern: str = "SoundHelix-Song-{number}.mp3"
    track_label_pattern: str = "Song {number}"
    position_interval_ms: int = 200
    buffer_window_seconds: float = 30.0  # Lookahead covered by a full playback buffer
    default_volume: float = 1.0

    def track_uri(self, number: int) -> str:
        return f"{self.demo_base_url}/{self.track_file_pattern.format(number=number)}"

    def track_label(self, number: int) -> str:
        return self.track_label_pattern.format(number=number)


@dataclass(frozen=True, slots=True)
class UIConfig:
    """Window and widget settings."""
    window_title: str = "PyAudioPlayer"
    window_width: int = 420
    window_height: int = 640
    title_font_size: int = 28
    control_icon_size: int = 28
    play_icon_size: int = 40
    accent_color: str = "#2cc7c9"  # Teal
    icon_color: str = "white"
    disabled_color: str = "gray"
    progress_color: tuple[int, int, int] = (44, 199, 201)
    buffered_color: tuple[int, int, int] = (90, 90, 90)
    track_color: tuple[int, int, int] = (45, 45, 45)
    seek_step_seconds: float = 5.0


# Global config instances (immutable singletons)
PLAYER_CONFIG = PlayerConfig()
UI_CONFIG = UIConfig()
