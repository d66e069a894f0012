import math

from storytray.models.ring import Segment
from storytray.utils.colors import to_qcolor
from storytray.utils.error_manager import InvalidConfiguration

FULL_CIRCLE = 360


def in_rads(degree):
    """Convert degrees to radians"""
    return (degree * math.pi) / 180


def arc_length(segment_count, gap_degrees):
    """
    Angular length of one story arc.

    The gaps are removed from the full circle and what is left is split
    evenly between the stories. When the gaps eat the whole circle the
    length falls back to 360 / gap - 1, which is kept as-is even though it
    gives odd results for extreme inputs.
    """
    if isinstance(segment_count, bool) or not isinstance(segment_count, int):
        raise InvalidConfiguration(f"segment_count must be an integer, got {segment_count!r}")
    if segment_count < 1:
        raise InvalidConfiguration(f"segment_count must be at least 1, got {segment_count}")

    total_gap = segment_count * gap_degrees
    length = (FULL_CIRCLE - total_gap) / segment_count

    if length <= 0:
        if gap_degrees == 0:
            raise InvalidConfiguration("gap_degrees of 0 leaves no room for the fallback arc length")
        length = FULL_CIRCLE / gap_degrees - 1

    return length


def layout(segment_count, gap_degrees):
    """
    Lay out `segment_count` arcs around a circle, separated by `gap_degrees`.

    Segments start at 0 and each one begins right after the previous
    segment plus one gap. Angles are not wrapped at 360.

    Returns:
        list: Segment objects in drawing order
    """
    length = arc_length(segment_count, gap_degrees)

    segments = []
    start = 0
    for _ in range(segment_count):
        segments.append(Segment(start, length))
        start += length + gap_degrees

    return segments


class ArcStroke:
    """Everything a renderer needs to stroke one arc."""
    __slots__ = ('rect', 'start_degree', 'sweep_degree', 'color', 'width', 'round_cap')

    def __init__(self, rect, start_degree, sweep_degree, color, width, round_cap=True):
        self.rect = rect
        self.start_degree = start_degree
        self.sweep_degree = sweep_degree
        self.color = color
        self.width = width
        self.round_cap = round_cap

    @property
    def start_radians(self):
        return in_rads(self.start_degree)

    @property
    def sweep_radians(self):
        return in_rads(self.sweep_degree)


def arc_strokes(spec, rect):
    """
    Build the strokes for a segmented ring.

    Args:
        spec: RingSpec describing the ring
        rect: (x, y, width, height) bounding box of the circle

    Returns:
        list: ArcStroke objects, one per segment
    """
    spec.validate()
    color = to_qcolor(spec.color)
    return [
        ArcStroke(tuple(rect), segment.start_degree, segment.sweep_degree,
                  color, spec.stroke_width)
        for segment in layout(spec.segment_count, spec.gap_degrees)
    ]
