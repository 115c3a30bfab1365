from PyQt6.QtWidgets import QWidget
from PyQt6.QtCore import Qt, QRectF, QPointF, pyqtSignal
from PyQt6.QtGui import QPainter, QColor, QFont

from pyaudioplayer.core.config import UI_CONFIG
from pyaudioplayer.utils.timefmt import format_duration

class AudioProgressBar(QWidget):
    """
    Progress bar with buffered range and seek thumb.
    Time labels sit below the bar: elapsed on the left, total on the right.
    """
    seekRequested = pyqtSignal(float)  # Emits seconds

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setFixedHeight(48)
        self.setMinimumWidth(160)
        self.setCursor(Qt.CursorShape.PointingHandCursor)

        self.progress = 0.0
        self.buffered = 0.0
        self.total = 0.0

        self.bar_color = QColor(*UI_CONFIG.track_color)
        self.buffered_color = QColor(*UI_CONFIG.buffered_color)
        self.progress_color = QColor(*UI_CONFIG.progress_color)
        self.text_color = QColor(200, 200, 200)

        self.margin = 8
        self.bar_height = 5
        self.thumb_radius = 7
        self.dragging = False
        self.drag_seconds = 0.0

    def apply_snapshot(self, snapshot):
        self.progress = snapshot.current_position
        self.buffered = snapshot.buffered_position
        self.total = snapshot.total_duration
        self.update()

    @property
    def displayed_seconds(self):
        """Position shown by the thumb: the drag target while dragging."""
        return self.drag_seconds if self.dragging else self.progress

    def _bar_width(self):
        return max(1, self.width() - 2 * self.margin)

    def _ratio(self, seconds):
        if self.total <= 0:
            return 0.0
        return max(0.0, min(1.0, seconds / self.total))

    def seconds_at(self, x):
        """Maps a widget x coordinate onto the track timeline."""
        ratio = (x - self.margin) / self._bar_width()
        return max(0.0, min(1.0, ratio)) * self.total

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setPen(Qt.PenStyle.NoPen)

        width = self._bar_width()
        bar_y = self.thumb_radius + 2
        radius = self.bar_height / 2

        # Base, buffered and played ranges
        painter.setBrush(self.bar_color)
        painter.drawRoundedRect(QRectF(self.margin, bar_y, width, self.bar_height), radius, radius)

        buffered_w = self._ratio(self.buffered) * width
        if buffered_w > 0:
            painter.setBrush(self.buffered_color)
            painter.drawRoundedRect(QRectF(self.margin, bar_y, buffered_w, self.bar_height), radius, radius)

        progress_x = self._ratio(self.displayed_seconds) * width
        if progress_x > 0:
            painter.setBrush(self.progress_color)
            painter.drawRoundedRect(QRectF(self.margin, bar_y, progress_x, self.bar_height), radius, radius)

        # Thumb
        painter.setBrush(self.progress_color)
        painter.drawEllipse(QPointF(self.margin + progress_x, bar_y + radius), self.thumb_radius, self.thumb_radius)

        # Labels
        painter.setPen(self.text_color)
        painter.setFont(QFont("Arial", 9))
        label_rect = QRectF(self.margin, bar_y + self.bar_height + 6, width, 18)
        painter.drawText(label_rect, Qt.AlignmentFlag.AlignLeft, format_duration(self.displayed_seconds))
        painter.drawText(label_rect, Qt.AlignmentFlag.AlignRight, format_duration(self.total))

    def mousePressEvent(self, event):
        if self.total <= 0:
            return
        self.dragging = True
        self.drag_seconds = self.seconds_at(event.position().x())
        self.update()

    def mouseMoveEvent(self, event):
        if self.dragging:
            self.drag_seconds = self.seconds_at(event.position().x())
            self.update()

    def mouseReleaseEvent(self, event):
        if not self.dragging:
            return
        self.dragging = False
        self.seekRequested.emit(self.seconds_at(event.position().x()))
        self.update()
