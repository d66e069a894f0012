from PyQt5.QtGui import QColor

from storytray.utils.error_manager import InvalidConfiguration


def to_qcolor(value):
    """
    Convert a color value to a new QColor.

    Accepts a QColor, a '#RRGGBB' / '#AARRGGBB' string, an int in 0xAARRGGBB
    form, or an (r, g, b) / (r, g, b, a) tuple.
    """
    if isinstance(value, QColor):
        color = QColor(value)
    elif isinstance(value, str):
        color = QColor(value)
    elif isinstance(value, int) and not isinstance(value, bool):
        if value < 0 or value > 0xFFFFFFFF:
            raise InvalidConfiguration(f"Color out of range: {value:#x}")
        color = QColor.fromRgba(value)
    elif isinstance(value, (tuple, list)) and len(value) in (3, 4):
        if not all(isinstance(c, int) and 0 <= c <= 255 for c in value):
            raise InvalidConfiguration(f"Invalid color components: {value!r}")
        color = QColor(*value)
    else:
        raise InvalidConfiguration(f"Unsupported color value: {value!r}")

    if not color.isValid():
        raise InvalidConfiguration(f"Invalid color: {value!r}")
    return color


def to_rgba(value):
    """Return an (r, g, b, a) tuple for any value accepted by to_qcolor."""
    return to_qcolor(value).getRgb()


def faded_opacities(count):
    """
    Opacity for every position of a faded gradient of `count` colors.

    The first color gets 1/count, every later color i gets 1/i.
    """
    return [1 / count if i == 0 else 1 / i for i in range(count)]


def compute_faded_colors(colors):
    """
    Return copies of `colors` with their alpha replaced by the faded opacities.

    Used to dim the tray border while it is loading.
    """
    base = [to_qcolor(c) for c in colors]
    faded = []
    for color, opacity in zip(base, faded_opacities(len(base))):
        color.setAlphaF(opacity)
        faded.append(color)
    return faded


def default_stops(count):
    """Evenly spaced gradient stops in [0, 1]."""
    if count < 2:
        return [0.0] * count
    return [i / (count - 1) for i in range(count)]


def sweep_color_at(colors, stops, t):
    """
    Sample a sweep gradient at normalized position `t` in [0, 1].

    Returns an (r, g, b, a) tuple. Positions outside the stop range clamp to
    the first or last color, the same way a sweep gradient pads.
    """
    rgba = [to_rgba(c) for c in colors]
    if not rgba:
        raise InvalidConfiguration("At least one color is required")
    if stops is None:
        stops = default_stops(len(rgba))
    if len(stops) != len(rgba):
        raise InvalidConfiguration("Color stops must match the number of colors")

    if t <= stops[0]:
        return rgba[0]
    if t >= stops[-1]:
        return rgba[-1]

    for i in range(1, len(stops)):
        if t <= stops[i]:
            span = stops[i] - stops[i - 1]
            local = 0.0 if span <= 0 else (t - stops[i - 1]) / span
            a, b = rgba[i - 1], rgba[i]
            return tuple(int(round(a[k] + (b[k] - a[k]) * local)) for k in range(4))

    return rgba[-1]
