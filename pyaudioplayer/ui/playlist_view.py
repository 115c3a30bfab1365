from PyQt6.QtWidgets import QWidget, QHBoxLayout, QLabel, QListWidget, QPushButton
from PyQt6.QtCore import Qt, QSize
from PyQt6.QtGui import QFont
import qtawesome as qta

from pyaudioplayer.core.config import UI_CONFIG


class CurrentTrackTitle(QLabel):
    """Large label with the current track's name."""

    def __init__(self, parent=None):
        super().__init__(parent)
        font = QFont()
        font.setPointSize(UI_CONFIG.title_font_size)
        self.setFont(font)
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setContentsMargins(0, 20, 0, 0)

    def apply_snapshot(self, snapshot):
        self.setText(snapshot.current_track_label)


class PlaylistView(QListWidget):
    """Track labels in play order. Rebuilt only when the playlist changes."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.labels = ()
        self.setSelectionMode(QListWidget.SelectionMode.NoSelection)
        self.setFocusPolicy(Qt.FocusPolicy.NoFocus)

    def apply_snapshot(self, snapshot):
        if snapshot.playlist != self.labels:
            self.labels = snapshot.playlist
            self.clear()
            self.addItems(list(self.labels))
        self.highlight(snapshot.current_track_index)

    def highlight(self, current_row):
        for row in range(self.count()):
            item = self.item(row)
            font = item.font()
            font.setBold(row == current_row)
            item.setFont(font)


class AddRemoveButtons(QWidget):
    """Append a demo track to, or drop the last track from, the playlist."""

    def __init__(self, commands, parent=None):
        super().__init__(parent)
        self.commands = commands

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 20)

        self.btn_add = QPushButton()
        self.btn_add.setIcon(qta.icon("fa5s.plus", color=UI_CONFIG.icon_color))
        self.btn_add.setIconSize(QSize(18, 18))
        self.btn_add.setToolTip("Add track")
        self.btn_add.clicked.connect(self.commands.append_track)

        self.btn_remove = QPushButton()
        self.btn_remove.setIcon(qta.icon("fa5s.minus", color=UI_CONFIG.icon_color))
        self.btn_remove.setIconSize(QSize(18, 18))
        self.btn_remove.setToolTip("Remove last track")
        self.btn_remove.clicked.connect(self.commands.remove_track)

        layout.addStretch()
        layout.addWidget(self.btn_add)
        layout.addStretch()
        layout.addWidget(self.btn_remove)
        layout.addStretch()
