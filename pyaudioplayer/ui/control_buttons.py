from PyQt6.QtWidgets import QWidget, QHBoxLayout, QPushButton
from PyQt6.QtCore import QSize
import qtawesome as qta

from pyaudioplayer.core.config import UI_CONFIG, ButtonState, RepeatMode

# Style for transport buttons
BUTTON_STYLE = """
    QPushButton {
        background-color: transparent;
        border-radius: 20px;
        padding: 5px;
    }
    QPushButton:hover { background-color: #444; }
    QPushButton:pressed { background-color: #555; }
"""

REPEAT_ICONS = {
    RepeatMode.OFF: ("mdi.repeat", UI_CONFIG.disabled_color),
    RepeatMode.REPEAT_ONE: ("mdi.repeat-once", UI_CONFIG.icon_color),
    RepeatMode.REPEAT_ALL: ("mdi.repeat", UI_CONFIG.icon_color),
}


def _icon(name, color=UI_CONFIG.icon_color, **options):
    return qta.icon(name, color=color, color_disabled=UI_CONFIG.disabled_color, **options)


class AudioControlButtons(QWidget):
    """Repeat, previous, play/pause, next and shuffle in one row."""

    def __init__(self, commands, parent=None):
        super().__init__(parent)
        self.commands = commands
        self.button_state = ButtonState.PAUSED
        self.repeat_mode = None
        self.shuffle_enabled = None
        self.init_ui()

    def _make_button(self, icon_size):
        btn = QPushButton()
        btn.setIconSize(QSize(icon_size, icon_size))
        btn.setStyleSheet(BUTTON_STYLE)
        return btn

    def init_ui(self):
        self.layout = QHBoxLayout()
        self.setLayout(self.layout)
        self.setFixedHeight(UI_CONFIG.play_icon_size + 24)

        size = UI_CONFIG.control_icon_size

        self.btn_repeat = self._make_button(size)
        self.btn_repeat.setToolTip("Repeat")
        self.btn_repeat.clicked.connect(self.commands.cycle_repeat_mode)

        self.btn_previous = self._make_button(size)
        self.btn_previous.setIcon(_icon("mdi.skip-previous"))
        self.btn_previous.setToolTip("Previous")
        self.btn_previous.clicked.connect(self.commands.skip_to_previous)

        self.btn_play_pause = self._make_button(UI_CONFIG.play_icon_size)
        self.btn_play_pause.clicked.connect(self.on_play_pause_clicked)
        self.spinner = qta.Spin(self.btn_play_pause)

        self.btn_next = self._make_button(size)
        self.btn_next.setIcon(_icon("mdi.skip-next"))
        self.btn_next.setToolTip("Next")
        self.btn_next.clicked.connect(self.commands.skip_to_next)

        self.btn_shuffle = self._make_button(size)
        self.btn_shuffle.setToolTip("Shuffle")
        self.btn_shuffle.clicked.connect(self.commands.toggle_shuffle)

        for btn in (self.btn_repeat, self.btn_previous, self.btn_play_pause, self.btn_next, self.btn_shuffle):
            self.layout.addStretch()
            self.layout.addWidget(btn)
        self.layout.addStretch()

    def apply_snapshot(self, snapshot):
        # Icons are rebuilt only when their mode changes, not on position ticks
        if snapshot.repeat_mode != self.repeat_mode:
            self.repeat_mode = snapshot.repeat_mode
            name, color = REPEAT_ICONS[self.repeat_mode]
            self.btn_repeat.setIcon(_icon(name, color=color))

        self.btn_previous.setEnabled(not snapshot.is_first_track)
        self.btn_next.setEnabled(not snapshot.is_last_track)

        if snapshot.shuffle_enabled != self.shuffle_enabled:
            self.shuffle_enabled = snapshot.shuffle_enabled
            shuffle_color = UI_CONFIG.icon_color if self.shuffle_enabled else UI_CONFIG.disabled_color
            self.btn_shuffle.setIcon(_icon("mdi.shuffle", color=shuffle_color))

        if snapshot.button_state != self.button_state or self.btn_play_pause.icon().isNull():
            self.button_state = snapshot.button_state
            self.update_play_pause_icon()

    def update_play_pause_icon(self):
        if self.button_state == ButtonState.LOADING:
            self.btn_play_pause.setIcon(_icon("fa5s.spinner", color=UI_CONFIG.accent_color, animation=self.spinner))
            self.btn_play_pause.setToolTip("Loading")
        elif self.button_state == ButtonState.PLAYING:
            self.btn_play_pause.setIcon(_icon("mdi.pause"))
            self.btn_play_pause.setToolTip("Pause")
        else:
            self.btn_play_pause.setIcon(_icon("mdi.play"))
            self.btn_play_pause.setToolTip("Play")

    def on_play_pause_clicked(self):
        # No action while the source is loading
        if self.button_state == ButtonState.PLAYING:
            self.commands.pause()
        elif self.button_state == ButtonState.PAUSED:
            self.commands.play()
