import logging
import math
from PyQt5.QtCore import QObject, pyqtSignal, QTimer, QElapsedTimer

from storytray.config import ANIMATION_DURATION_MS, FRAME_INTERVAL_MS
from storytray.utils.error_manager import InvalidConfiguration

logger = logging.getLogger('storytray')


class AnimatorState:
    """Enum-like class for animator states"""
    IDLE = "idle"
    RUNNING = "running"


def phase_at(elapsed_ms, duration_ms):
    """Normalized progress in [0, 1) after `elapsed_ms` of a repeating animation."""
    if duration_ms <= 0:
        raise InvalidConfiguration(f"duration_ms must be positive, got {duration_ms}")
    return (elapsed_ms / duration_ms) % 1.0


class RotationAnimator(QObject):
    """
    Repeating phase generator for the tray border rotation.

    Idle -> start() -> Running -> stop() -> Idle. While running, every frame
    tick advances the phase by the elapsed time and emits phase_changed.
    stop() always resets the phase to 0.
    """

    # Signals
    phase_changed = pyqtSignal(float)
    state_changed = pyqtSignal(str)

    def __init__(self, duration_ms=ANIMATION_DURATION_MS, interval_ms=FRAME_INTERVAL_MS, parent=None):
        super().__init__(parent)

        if duration_ms <= 0:
            raise InvalidConfiguration(f"duration_ms must be positive, got {duration_ms}")
        if interval_ms <= 0:
            raise InvalidConfiguration(f"interval_ms must be positive, got {interval_ms}")

        self._duration_ms = duration_ms
        self.interval_ms = interval_ms

        self._state = AnimatorState.IDLE
        self._elapsed_ms = 0
        self._phase = 0.0

        self._clock = QElapsedTimer()
        self._timer = QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._on_tick)

    @property
    def state(self):
        return self._state

    @property
    def is_running(self):
        return self._state == AnimatorState.RUNNING

    @property
    def phase(self):
        return self._phase

    @property
    def duration_ms(self):
        return self._duration_ms

    @duration_ms.setter
    def duration_ms(self, duration_ms):
        """Change the cycle length; the phase carries on from where it is."""
        if duration_ms <= 0:
            raise InvalidConfiguration(f"duration_ms must be positive, got {duration_ms}")
        self._elapsed_ms = self._phase * duration_ms
        self._duration_ms = duration_ms

    @property
    def rotation_angle(self):
        """Gradient rotation in radians"""
        return self._phase * 2 * math.pi

    @property
    def rotation_degrees(self):
        return self._phase * 360

    def start(self):
        """Start repeating from phase 0. Does nothing when already running."""
        if self.is_running:
            logger.debug("Rotation animator already running")
            return

        self._elapsed_ms = 0
        self._phase = 0.0
        self._set_state(AnimatorState.RUNNING)
        self._clock.start()
        self._timer.start()

    def stop(self):
        """Stop advancing and reset the phase to 0."""
        if self._timer.isActive():
            self._timer.stop()

        was_running = self.is_running
        self._elapsed_ms = 0
        self._phase = 0.0
        self._set_state(AnimatorState.IDLE)

        if was_running:
            self.phase_changed.emit(self._phase)

    def advance(self, elapsed_ms):
        """
        Move the phase forward by `elapsed_ms` and notify subscribers.

        Ignored while idle.
        """
        if not self.is_running:
            return
        if elapsed_ms < 0:
            raise InvalidConfiguration(f"elapsed_ms must not be negative, got {elapsed_ms}")

        self._elapsed_ms += elapsed_ms
        self._phase = phase_at(self._elapsed_ms, self.duration_ms)
        self.phase_changed.emit(self._phase)

    def _on_tick(self):
        # Frames can arrive within the same millisecond
        elapsed = max(1, self._clock.restart())
        self.advance(elapsed)

    def _set_state(self, state):
        if state != self._state:
            self._state = state
            logger.debug(f"Rotation animator {state}")
            self.state_changed.emit(state)

    def dispose(self):
        """Stop the timer and detach subscribers"""
        self.stop()
        try:
            self.phase_changed.disconnect()
        except TypeError:
            # No connections
            pass
