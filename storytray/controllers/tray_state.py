import logging

from storytray.config import FRAME_INTERVAL_MS
from storytray.controllers.rotation_animator import RotationAnimator
from storytray.utils.colors import to_qcolor, compute_faded_colors

logger = logging.getLogger('storytray')


class TrayState:
    """
    Animation state of one tray, owned by the widget that shows it.

    Holds the base and faded border colors and the rotation animator.
    The owner calls create() when the tray is shown, destroy() when it goes
    away, and on_config_change() when the style is replaced.
    """

    def __init__(self, style, interval_ms=FRAME_INTERVAL_MS):
        self.style = style
        self.interval_ms = interval_ms
        self.animator = None
        self.base_colors = []
        self.faded_colors = []
        self.current_colors = []

    @property
    def created(self):
        return self.animator is not None

    @property
    def is_animating(self):
        return self.animator is not None and self.animator.is_running

    @property
    def phase(self):
        return 0.0 if self.animator is None else self.animator.phase

    def create(self):
        """Compute colors and build the animator"""
        if self.created:
            return self.animator

        self._load_colors()
        self.animator = RotationAnimator(
            duration_ms=self.style.animation_duration_ms,
            interval_ms=self.interval_ms,
        )
        return self.animator

    def destroy(self):
        """Stop and drop the animator"""
        if self.animator is None:
            return
        self.animator.dispose()
        self.animator.deleteLater()
        self.animator = None

    def on_config_change(self, style):
        """
        Swap in a new style.

        A changed gradient recomputes the faded colors and puts the full
        colors back, even mid-animation. A running animation keeps going
        with the new duration.
        """
        old_style = self.style
        self.style = style

        if old_style.border_gradient_colors != style.border_gradient_colors:
            self._load_colors()

        if self.animator is not None and old_style.animation_duration_ms != style.animation_duration_ms:
            self.animator.duration_ms = style.animation_duration_ms

    def start_animation(self):
        """Dim the border and start rotating"""
        if not self.created:
            self.create()
        self.current_colors = list(self.faded_colors)
        self.animator.start()

    def stop_animation(self):
        """Reset the rotation and restore the full colors"""
        if self.animator is not None:
            self.animator.stop()
        self.current_colors = list(self.base_colors)

    def _load_colors(self):
        self.base_colors = [to_qcolor(c) for c in self.style.border_gradient_colors]
        self.faded_colors = compute_faded_colors(self.base_colors)
        self.current_colors = list(self.base_colors)
        logger.debug(f"Tray colors loaded ({len(self.base_colors)} stops)")
