"""
PyAudioPlayer UI Module

Qt-based user interface components:
- MainWindow: Main application window
- AudioControlButtons: Repeat, previous, play/pause, next, shuffle
- AudioProgressBar: Position, buffered range and seeking
- PlaylistView / CurrentTrackTitle / AddRemoveButtons: Playlist display and editing
"""
from .main_window import MainWindow
from .control_buttons import AudioControlButtons
from .progress_bar import AudioProgressBar
from .playlist_view import AddRemoveButtons, CurrentTrackTitle, PlaylistView

__all__ = [
    'MainWindow',
    'AudioControlButtons',
    'AudioProgressBar',
    'AddRemoveButtons',
    'CurrentTrackTitle',
    'PlaylistView',
]
