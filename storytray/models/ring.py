from storytray.config import (TRAY_SIZE, TRAY_SHAPE, BORDER_GRADIENT_COLORS, GAP_SIZE,
                    STROKE_WIDTH, ANIMATION_DURATION_MS, SPACE_LENGTH,
                    SEGMENT_COLOR)
from storytray.utils.colors import to_qcolor
from storytray.utils.error_manager import InvalidConfiguration


class TrayShape:
    """Enum-like class for tray shapes"""
    CIRCLE = "circle"
    RECTANGLE = "rectangle"


class Segment:
    """One story arc of a segmented ring, in degrees clockwise from 3 o'clock."""
    __slots__ = ('start_degree', 'sweep_degree')

    def __init__(self, start_degree, sweep_degree):
        self.start_degree = start_degree
        self.sweep_degree = sweep_degree

    @property
    def end_degree(self):
        return self.start_degree + self.sweep_degree

    def __eq__(self, other):
        if not isinstance(other, Segment):
            return NotImplemented
        return (self.start_degree, self.sweep_degree) == (other.start_degree, other.sweep_degree)

    def __repr__(self):
        return f"Segment(start_degree={self.start_degree!r}, sweep_degree={self.sweep_degree!r})"


class RingSpec:
    """
    What a segmented ring looks like: how many stories, the gap between them,
    the stroke width and a color.
    """
    def __init__(self, segment_count, gap_degrees=SPACE_LENGTH, stroke_width=STROKE_WIDTH,
                 color=SEGMENT_COLOR):
        self.segment_count = segment_count
        self.gap_degrees = gap_degrees
        self.stroke_width = stroke_width
        self.color = color

    def validate(self):
        if isinstance(self.segment_count, bool) or not isinstance(self.segment_count, int):
            raise InvalidConfiguration(f"segment_count must be an integer, got {self.segment_count!r}")
        if self.segment_count < 1:
            raise InvalidConfiguration(f"segment_count must be at least 1, got {self.segment_count}")
        if self.gap_degrees < 0:
            raise InvalidConfiguration(f"gap_degrees must not be negative, got {self.gap_degrees}")
        if self.stroke_width <= 0:
            raise InvalidConfiguration(f"stroke_width must be positive, got {self.stroke_width}")
        to_qcolor(self.color)
        return self

    def to_dict(self):
        return {
            'segment_count': self.segment_count,
            'gap_degrees': self.gap_degrees,
            'stroke_width': self.stroke_width,
            'color': to_qcolor(self.color).name(),
        }


class TrayStyle:
    """
    Visual configuration of a story tray.

    `border_radius` defaults to the width for circles (fully round) and to a
    tenth of the width for rectangles.
    """
    def __init__(self,
                 size=TRAY_SIZE,
                 shape=TRAY_SHAPE,
                 border_gradient_colors=None,
                 color_stops=None,
                 gap_size=GAP_SIZE,
                 stroke_width=STROKE_WIDTH,
                 animation_duration_ms=ANIMATION_DURATION_MS,
                 border_radius=None,
                 segment_count=None,
                 space_length=None,
                 color=None):
        self.size = tuple(size)
        self.shape = shape
        self.border_gradient_colors = list(
            BORDER_GRADIENT_COLORS if border_gradient_colors is None else border_gradient_colors
        )
        self.color_stops = None if color_stops is None else list(color_stops)
        self.gap_size = gap_size
        self.stroke_width = stroke_width
        self.animation_duration_ms = animation_duration_ms
        self.segment_count = segment_count
        self.space_length = space_length
        self.color = color

        width = self.size[0]
        if shape == TrayShape.CIRCLE:
            self.border_radius = width
        else:
            self.border_radius = border_radius if border_radius is not None else width / 10

        self.validate()

    @property
    def width(self):
        return self.size[0]

    @property
    def height(self):
        return self.size[1]

    @property
    def is_segmented(self):
        return self.segment_count is not None and self.segment_count != 1

    def validate(self):
        if len(self.size) != 2 or self.width <= 0 or self.height <= 0:
            raise InvalidConfiguration(f"Tray size must be two positive numbers, got {self.size!r}")
        if self.shape not in (TrayShape.CIRCLE, TrayShape.RECTANGLE):
            raise InvalidConfiguration(f"Unknown tray shape: {self.shape!r}")
        if self.shape == TrayShape.CIRCLE and self.width != self.height:
            raise InvalidConfiguration("Size width and height must be equal for a circular tray")
        if len(self.border_gradient_colors) < 2:
            raise InvalidConfiguration("At least 2 colors are required for tray border gradient")
        for value in self.border_gradient_colors:
            to_qcolor(value)
        if self.color_stops is not None and len(self.color_stops) != len(self.border_gradient_colors):
            raise InvalidConfiguration("Color stops must match the number of gradient colors")
        if self.stroke_width <= 0:
            raise InvalidConfiguration(f"stroke_width must be positive, got {self.stroke_width}")
        if self.gap_size < 0:
            raise InvalidConfiguration(f"gap_size must not be negative, got {self.gap_size}")
        if self.animation_duration_ms <= 0:
            raise InvalidConfiguration("Animation duration must be positive")
        if self.color is not None:
            to_qcolor(self.color)
        if self.segment_count is not None:
            self.ring_spec().validate()
        return self

    def ring_spec(self):
        """RingSpec for the segmented border of this tray."""
        return RingSpec(
            segment_count=self.segment_count,
            gap_degrees=SPACE_LENGTH if self.space_length is None else self.space_length,
            stroke_width=self.stroke_width,
            color=SEGMENT_COLOR if self.color is None else self.color,
        )

    def copy(self, **changes):
        """Return a new style with some fields replaced."""
        values = {
            'size': self.size,
            'shape': self.shape,
            'border_gradient_colors': self.border_gradient_colors,
            'color_stops': self.color_stops,
            'gap_size': self.gap_size,
            'stroke_width': self.stroke_width,
            'animation_duration_ms': self.animation_duration_ms,
            'border_radius': None if self.shape == TrayShape.CIRCLE else self.border_radius,
            'segment_count': self.segment_count,
            'space_length': self.space_length,
            'color': self.color,
        }
        values.update(changes)
        return TrayStyle(**values)
