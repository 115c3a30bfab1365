from dataclasses import dataclass, replace
from typing import Optional

from .config import ButtonState, RepeatMode


@dataclass(frozen=True, slots=True)
class PlaybackSnapshot:
    """
    Immutable composite of every UI-relevant playback field.
    Replaced wholesale on each update, never mutated in place.
    """
    current_position: float = 0.0
    buffered_position: float = 0.0
    total_duration: float = 0.0
    button_state: ButtonState = ButtonState.PAUSED
    repeat_mode: RepeatMode = RepeatMode.OFF
    shuffle_enabled: bool = False
    current_track_label: str = ""
    current_track_index: Optional[int] = None  # Row in playlist
    playlist: tuple[str, ...] = ()
    is_first_track: bool = True
    is_last_track: bool = True

    def copy_with(self, **changes) -> "PlaybackSnapshot":
        """Returns a full copy with the given fields overridden."""
        if "playlist" in changes:
            changes["playlist"] = tuple(changes["playlist"])
        return replace(self, **changes)
