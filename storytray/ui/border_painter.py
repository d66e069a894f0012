from PyQt5.QtCore import Qt, QRectF, QPointF
from PyQt5.QtGui import QPainter, QPainterPath, QPen, QBrush, QConicalGradient, QColor

# QPainter arcs are measured in 1/16th of a degree
ARC_UNIT = 16


def to_qrectf(rect):
    x, y, w, h = rect
    return QRectF(x, y, w, h)


def rounded_path(rounded):
    path = QPainterPath()
    path.addRoundedRect(to_qrectf(rounded.rect), rounded.radius, rounded.radius)
    return path


def draw_arc_strokes(painter, strokes):
    """
    Stroke every arc descriptor.

    Descriptors run clockwise from 3 o'clock; QPainter runs counterclockwise,
    hence the negated angles.
    """
    painter.save()
    painter.setRenderHint(QPainter.Antialiasing)
    painter.setBrush(Qt.NoBrush)
    for stroke in strokes:
        pen = QPen(QColor(stroke.color), stroke.width)
        pen.setCapStyle(Qt.RoundCap if stroke.round_cap else Qt.FlatCap)
        painter.setPen(pen)
        painter.drawArc(
            to_qrectf(stroke.rect),
            int(round(-stroke.start_degree * ARC_UNIT)),
            int(round(-stroke.sweep_degree * ARC_UNIT)),
        )
    painter.restore()


def draw_plain_ring(painter, rect, color, width):
    """Full circular stroke used for a single story"""
    painter.save()
    painter.setRenderHint(QPainter.Antialiasing)
    painter.setBrush(Qt.NoBrush)
    painter.setPen(QPen(QColor(color), width))
    painter.drawEllipse(to_qrectf(rect))
    painter.restore()


def conical_gradient(ring):
    """
    QConicalGradient equivalent of a clockwise sweep gradient turned by
    ring.rotation_degrees.
    """
    x, y, w, h = ring.outer.rect
    gradient = QConicalGradient(QPointF(x + w / 2, y + h / 2), -ring.rotation_degrees)
    for color, stop in zip(ring.colors, ring.stops):
        gradient.setColorAt(1.0 - stop, QColor(color))
    return gradient


def draw_gradient_ring(painter, ring):
    """Fill the area between the outer and inner rounded rects with the gradient"""
    path = rounded_path(ring.outer).subtracted(rounded_path(ring.inner))

    painter.save()
    painter.setRenderHint(QPainter.Antialiasing)
    painter.fillPath(path, QBrush(conical_gradient(ring)))
    painter.restore()


def draw_avatar(painter, rounded, pixmap=None, placeholder=None):
    """Draw the avatar clipped to `rounded`, or a flat placeholder."""
    painter.save()
    painter.setRenderHint(QPainter.Antialiasing)
    painter.setRenderHint(QPainter.SmoothPixmapTransform)
    painter.setClipPath(rounded_path(rounded))

    target = to_qrectf(rounded.rect)
    if pixmap is not None and not pixmap.isNull():
        # Cover: scale to fill then crop the overflow
        scaled = pixmap.scaled(int(target.width()), int(target.height()),
                               Qt.KeepAspectRatioByExpanding, Qt.SmoothTransformation)
        source = QRectF((scaled.width() - target.width()) / 2,
                        (scaled.height() - target.height()) / 2,
                        target.width(), target.height())
        painter.drawPixmap(target, scaled, source)
    elif placeholder is not None:
        painter.fillRect(target, QColor(placeholder))

    painter.restore()
