from storytray.utils.colors import to_qcolor, default_stops
from storytray.utils.error_manager import InvalidConfiguration


def clamp_radius(width, height, radius):
    """Rounded-rect radius limited to half of the shorter side."""
    return max(0.0, min(radius, width / 2, height / 2))


def inset_rect(rect, amount):
    x, y, w, h = rect
    return (x + amount, y + amount, w - amount * 2, h - amount * 2)


class RoundedRect:
    __slots__ = ('rect', 'radius')

    def __init__(self, rect, radius):
        self.rect = tuple(rect)
        self.radius = clamp_radius(self.rect[2], self.rect[3], radius)

    def __repr__(self):
        return f"RoundedRect(rect={self.rect!r}, radius={self.radius!r})"


class GradientRing:
    """
    Continuous border: the area between `outer` and `inner`, filled with a
    sweep gradient turned clockwise by `rotation_degrees`.
    """
    __slots__ = ('outer', 'inner', 'colors', 'stops', 'rotation_degrees')

    def __init__(self, outer, inner, colors, stops, rotation_degrees):
        self.outer = outer
        self.inner = inner
        self.colors = colors
        self.stops = stops
        self.rotation_degrees = rotation_degrees


def border_rects(size, stroke_width, radius):
    """
    Outer and inner rounded rects of a border of `stroke_width` drawn inside
    a box of `size`.
    """
    width, height = size
    if stroke_width <= 0:
        raise InvalidConfiguration(f"stroke_width must be positive, got {stroke_width}")
    if stroke_width * 2 >= min(width, height):
        raise InvalidConfiguration("Stroke is too wide for the tray size")

    outer = RoundedRect((0, 0, width, height), radius)
    inner = RoundedRect(inset_rect(outer.rect, stroke_width), radius - stroke_width)
    return outer, inner


def gradient_ring(size, stroke_width, radius, colors, stops=None, phase=0.0):
    """Descriptor for the rotating gradient border at animation `phase`."""
    outer, inner = border_rects(size, stroke_width, radius)
    qcolors = [to_qcolor(c) for c in colors]
    if len(qcolors) < 2:
        raise InvalidConfiguration("At least 2 colors are required for a gradient border")
    if stops is None:
        stops = default_stops(len(qcolors))
    elif len(stops) != len(qcolors):
        raise InvalidConfiguration("Color stops must match the number of colors")
    return GradientRing(outer, inner, qcolors, list(stops), phase * 360)


def avatar_rect(size, stroke_width, gap_size, border_radius):
    """
    Rounded rect the avatar image is clipped to: centered in the tray and
    inset by the stroke plus the transparent gap.
    """
    inset = stroke_width + gap_size
    width, height = size
    rect = (inset, inset, width - inset * 2, height - inset * 2)
    if rect[2] <= 0 or rect[3] <= 0:
        raise InvalidConfiguration("Stroke and gap leave no room for the avatar")
    return RoundedRect(rect, border_radius - inset)
