from PyQt5.QtWidgets import QWidget, QVBoxLayout, QLabel, QSizePolicy
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QPainter, QPixmap

from storytray.config import TRAY_PADDING, SINGLE_STORY_COLOR, PLACEHOLDER_COLOR
from storytray.controllers.tray_state import TrayState
from storytray.models.ring import TrayStyle
from storytray.ui.border_painter import (draw_arc_strokes, draw_plain_ring,
                                         draw_gradient_ring, draw_avatar)
from storytray.utils.arc_layout import arc_strokes
from storytray.utils.border_geometry import gradient_ring, avatar_rect, inset_rect
from storytray.utils.error_manager import (InvalidConfiguration, layout_error, render_error,
                                           system_error, ErrorSeverity)


class TrayCanvas(QWidget):
    """Paints the avatar and its border for a TrayState"""

    def __init__(self, state, parent=None):
        super().__init__(parent)
        self.state = state
        self.pixmap = None
        self._reported = set()
        self.apply_size()

    def apply_size(self):
        width, height = self.state.style.size
        self.setFixedSize(int(width), int(height))
        self._reported = set()

    def content_size(self):
        width, height = self.state.style.size
        return (width - TRAY_PADDING * 2, height - TRAY_PADDING * 2)

    def paintEvent(self, event):
        painter = QPainter(self)
        try:
            painter.translate(TRAY_PADDING, TRAY_PADDING)
            size = self.content_size()
            # Avatar and border fail independently
            self._paint_part("avatar", self.paint_avatar, painter, size)
            self._paint_part("border", self.paint_border, painter, size)
        finally:
            painter.end()

    def _paint_part(self, part, paint, painter, size):
        try:
            paint(painter, size)
        except InvalidConfiguration as e:
            # Report once per style
            if part in self._reported:
                return
            self._reported.add(part)
            details = {'style_size': self.state.style.size, 'part': part}
            if part == "avatar":
                layout_error("No room for the tray avatar", error=e, details=details)
            else:
                render_error("Could not paint story tray border", error=e, details=details)

    def paint_avatar(self, painter, size):
        style = self.state.style
        rounded = avatar_rect(size, style.stroke_width, style.gap_size, style.border_radius)
        draw_avatar(painter, rounded, self.pixmap, PLACEHOLDER_COLOR)

    def paint_border(self, painter, size):
        style = self.state.style
        stroke_rect = inset_rect((0, 0) + tuple(size), style.stroke_width / 2)

        if style.segment_count == 1:
            # One story: plain ring, the arc layout is not used
            color = SINGLE_STORY_COLOR if style.color is None else style.color
            draw_plain_ring(painter, stroke_rect, color, style.stroke_width)
        elif style.is_segmented:
            draw_arc_strokes(painter, arc_strokes(style.ring_spec(), stroke_rect))
        else:
            ring = gradient_ring(size, style.stroke_width, style.border_radius,
                                 self.state.current_colors, style.color_stops,
                                 self.state.phase)
            draw_gradient_ring(painter, ring)


class StoryTray(QWidget):
    """
    Story tray: avatar with a story border and an optional username below.

    Tapping emits `tapped`; the owner decides when to call start_animation()
    and stop_animation() (usually while the stories are being prepared).
    """
    tapped = pyqtSignal()

    def __init__(self, style=None, username=None, avatar_path=None, parent=None):
        super().__init__(parent)
        self.state = TrayState(style or TrayStyle())
        self.setup_ui(username)
        self.set_avatar(avatar_path)
        self._ensure_animator()

    def _ensure_animator(self):
        if not self.state.created:
            animator = self.state.create()
            animator.phase_changed.connect(self._on_phase_changed)

    @property
    def tray_style(self):
        return self.state.style

    @property
    def is_animating(self):
        return self.state.is_animating

    def setup_ui(self, username):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(5)

        self.canvas = TrayCanvas(self.state)
        layout.addWidget(self.canvas, alignment=Qt.AlignHCenter)

        self.username_label = QLabel()
        self.username_label.setAlignment(Qt.AlignCenter)
        self.username_label.setSizePolicy(QSizePolicy.Preferred, QSizePolicy.Fixed)
        layout.addWidget(self.username_label)

        self.set_username(username)

    def set_username(self, username):
        self.username_label.setText(username or "")
        self.username_label.setVisible(bool(username))

    def set_avatar(self, avatar_path):
        """Show a local image file inside the tray; None shows the placeholder"""
        pixmap = None
        if avatar_path:
            pixmap = QPixmap(avatar_path)
            if pixmap.isNull():
                system_error(f"Could not load avatar image: {avatar_path}", ErrorSeverity.LOW)
                pixmap = None
        self.canvas.pixmap = pixmap
        self.canvas.update()

    def set_style(self, style):
        """Replace the tray style"""
        self.state.on_config_change(style)
        self.canvas.apply_size()
        self.canvas.update()

    def start_animation(self):
        self._ensure_animator()
        self.state.start_animation()
        self.canvas.update()

    def stop_animation(self):
        self.state.stop_animation()
        self.canvas.update()

    def _on_phase_changed(self, phase):
        # Always redraw, the border changes every tick
        self.canvas.update()

    def mousePressEvent(self, event):
        if event.button() == Qt.LeftButton:
            self.tapped.emit()
            event.accept()
            return
        super().mousePressEvent(event)

    def dispose(self):
        """Stop the animation and release the animator"""
        self.state.destroy()

    def closeEvent(self, event):
        self.dispose()
        event.accept()
