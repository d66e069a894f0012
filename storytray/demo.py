import sys
from PyQt5.QtWidgets import QApplication, QMainWindow, QWidget, QHBoxLayout, QMessageBox
from PyQt5.QtCore import QTimer

from storytray.config import PREPARE_DELAY_MS
from storytray.models.ring import TrayStyle, TrayShape
from storytray.ui.story_tray import StoryTray
from storytray.utils.error_manager import ErrorManager, InvalidConfiguration, config_error, ErrorSeverity

DEMO_TRAYS = [
    ("gradient", dict()),
    ("one story", dict(segment_count=1)),
    ("three stories", dict(segment_count=3, space_length=12)),
    ("seven stories", dict(segment_count=7, space_length=8, color="#e1306c")),
    ("rounded", dict(size=(80, 100), shape=TrayShape.RECTANGLE)),
]


class TrayDemo(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("Story Trays")
        self.error_manager = ErrorManager()
        self.trays = []
        self.setup_ui()

    def setup_ui(self):
        container = QWidget()
        layout = QHBoxLayout(container)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(16)

        for username, options in DEMO_TRAYS:
            try:
                style = TrayStyle(**options)
            except InvalidConfiguration as e:
                config_error(f"Skipping tray '{username}'", ErrorSeverity.HIGH, error=e)
                continue

            tray = StoryTray(style, username=username)
            tray.tapped.connect(lambda tray=tray: self.open_stories(tray))
            layout.addWidget(tray)
            self.trays.append(tray)

        self.setCentralWidget(container)
        self.statusBar().showMessage("Tap a tray to load its stories")

        if not self.trays:
            QMessageBox.critical(self, "Story Trays", "No tray could be created. Check the log for details.")

    def open_stories(self, tray):
        """Animate the tray while its stories are 'prepared'"""
        if tray.is_animating:
            return
        tray.start_animation()
        self.statusBar().showMessage("Preparing stories...")
        QTimer.singleShot(PREPARE_DELAY_MS, lambda: self.stories_ready(tray))

    def stories_ready(self, tray):
        tray.stop_animation()
        self.statusBar().showMessage("Stories ready", 3000)

    def closeEvent(self, event):
        for tray in self.trays:
            tray.dispose()
        self.error_manager.logger.info("Story tray demo closed")
        event.accept()


def main():
    app = QApplication(sys.argv)
    window = TrayDemo()
    window.show()
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
