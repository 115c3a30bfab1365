from PyQt6.QtWidgets import QMainWindow, QWidget, QVBoxLayout
from PyQt6.QtGui import QAction, QKeySequence

from pyaudioplayer.core.config import UI_CONFIG, ButtonState
from pyaudioplayer.ui.control_buttons import AudioControlButtons
from pyaudioplayer.ui.playlist_view import AddRemoveButtons, CurrentTrackTitle, PlaylistView
from pyaudioplayer.ui.progress_bar import AudioProgressBar
from pyaudioplayer.utils.logger import logger

class MainWindow(QMainWindow):
    def __init__(self, session):
        super().__init__()

        self.setWindowTitle(UI_CONFIG.window_title)
        self.resize(UI_CONFIG.window_width, UI_CONFIG.window_height)

        # Core Components
        self.session = session
        self.commands = session.commands
        self.session.projector.snapshotChanged.connect(self.on_snapshot_changed)

        # UI Setup
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)
        self.main_layout.setContentsMargins(20, 20, 20, 20)

        self.title = CurrentTrackTitle()
        self.playlist_view = PlaylistView()
        self.add_remove_buttons = AddRemoveButtons(self.commands)
        self.progress_bar = AudioProgressBar()
        self.progress_bar.seekRequested.connect(self.commands.seek)
        self.control_buttons = AudioControlButtons(self.commands)

        self.main_layout.addWidget(self.title)
        self.main_layout.addWidget(self.playlist_view, stretch=1)
        self.main_layout.addWidget(self.add_remove_buttons)
        self.main_layout.addWidget(self.progress_bar)
        self.main_layout.addWidget(self.control_buttons)

        self.create_shortcuts()
        self.on_snapshot_changed(self.session.snapshot)
        self.statusBar().showMessage("Ready")

    def create_shortcuts(self):
        shortcuts = [
            ("Space", self.toggle_play_pause),
            ("Right", lambda: self.seek_relative(UI_CONFIG.seek_step_seconds)),
            ("Left", lambda: self.seek_relative(-UI_CONFIG.seek_step_seconds)),
            ("Ctrl+Right", self.next_track),
            ("Ctrl+Left", self.previous_track),
        ]
        for key, handler in shortcuts:
            action = QAction(self)
            action.setShortcut(QKeySequence(key))
            action.triggered.connect(handler)
            self.addAction(action)

    def on_snapshot_changed(self, snapshot):
        self.title.apply_snapshot(snapshot)
        self.playlist_view.apply_snapshot(snapshot)
        self.progress_bar.apply_snapshot(snapshot)
        self.control_buttons.apply_snapshot(snapshot)

    def toggle_play_pause(self):
        state = self.session.snapshot.button_state
        if state == ButtonState.PLAYING:
            self.commands.pause()
        elif state == ButtonState.PAUSED:
            self.commands.play()

    def seek_relative(self, delta):
        snapshot = self.session.snapshot
        target = snapshot.current_position + delta
        if snapshot.total_duration > 0:
            target = min(target, snapshot.total_duration)
        self.commands.seek(max(0.0, target))

    def next_track(self):
        # Navigation is disabled at the playlist edges
        if not self.session.snapshot.is_last_track:
            self.commands.skip_to_next()

    def previous_track(self):
        if not self.session.snapshot.is_first_track:
            self.commands.skip_to_previous()

    def closeEvent(self, event):
        logger.info("Closing player window")
        self.session.dispose()
        super().closeEvent(event)
