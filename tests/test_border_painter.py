import unittest

import support


def blank_image(width, height):
    from PyQt5.QtCore import Qt
    from PyQt5.QtGui import QImage

    image = QImage(width, height, QImage.Format_ARGB32)
    image.fill(Qt.transparent)
    return image


def alpha_at(image, x, y):
    from PyQt5.QtGui import QColor

    return QColor(image.pixel(x, y)).alpha()


class TestBorderPainter(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.app = support.qt_app()

    def paint(self, image, draw):
        from PyQt5.QtGui import QPainter

        painter = QPainter(image)
        try:
            draw(painter)
        finally:
            painter.end()

    def test_arcs_run_clockwise_from_three_oclock(self) -> None:
        from storytray.ui.border_painter import draw_arc_strokes
        from storytray.utils.arc_layout import ArcStroke

        image = blank_image(100, 100)
        stroke = ArcStroke((5, 5, 90, 90), 0, 90, "#009688", 4, round_cap=False)
        self.paint(image, lambda p: draw_arc_strokes(p, [stroke]))

        # Bottom-right quadrant is painted, top-right is not
        self.assertGreater(alpha_at(image, 81, 81), 0)
        self.assertEqual(alpha_at(image, 81, 18), 0)

    def test_plain_ring_is_hollow(self) -> None:
        from storytray.ui.border_painter import draw_plain_ring

        image = blank_image(100, 100)
        self.paint(image, lambda p: draw_plain_ring(p, (5, 5, 90, 90), "#4CAF50", 4))

        self.assertGreater(alpha_at(image, 5, 50), 0)
        self.assertGreater(alpha_at(image, 50, 95), 0)
        self.assertEqual(alpha_at(image, 50, 50), 0)

    def test_gradient_ring_fills_only_the_border(self) -> None:
        from storytray.ui.border_painter import draw_gradient_ring
        from storytray.utils.border_geometry import gradient_ring

        image = blank_image(80, 80)
        ring = gradient_ring((80, 80), 6, 80, ["#ff0000", "#0000ff"])
        self.paint(image, lambda p: draw_gradient_ring(p, ring))

        self.assertGreater(alpha_at(image, 3, 40), 0)
        self.assertEqual(alpha_at(image, 40, 40), 0)
        self.assertEqual(alpha_at(image, 0, 0), 0)

    def test_conical_gradient_stops_are_mirrored(self) -> None:
        from storytray.ui.border_painter import conical_gradient
        from storytray.utils.border_geometry import gradient_ring

        ring = gradient_ring((80, 80), 2, 80, ["#ff0000", "#00ff00", "#0000ff"], stops=[0.0, 0.25, 1.0], phase=0.5)
        gradient = conical_gradient(ring)

        stops = sorted((round(pos, 4), color.name()) for pos, color in gradient.stops())
        self.assertEqual(stops, [(0.0, "#0000ff"), (0.75, "#00ff00"), (1.0, "#ff0000")])
        self.assertEqual(gradient.angle() % 360, 180)
        self.assertEqual((gradient.center().x(), gradient.center().y()), (40, 40))

    def test_avatar_placeholder_is_clipped(self) -> None:
        from storytray.ui.border_painter import draw_avatar
        from storytray.utils.border_geometry import RoundedRect

        image = blank_image(40, 40)
        rounded = RoundedRect((0, 0, 40, 40), 20)
        self.paint(image, lambda p: draw_avatar(p, rounded, None, "#e4e8f0"))

        self.assertEqual(alpha_at(image, 20, 20), 255)
        self.assertEqual(alpha_at(image, 0, 0), 0)

    def test_avatar_pixmap_covers_the_rect(self) -> None:
        from PyQt5.QtGui import QPixmap, QColor
        from storytray.ui.border_painter import draw_avatar
        from storytray.utils.border_geometry import RoundedRect

        pixmap = QPixmap(20, 10)
        pixmap.fill(QColor("#ff0000"))

        image = blank_image(40, 40)
        rounded = RoundedRect((0, 0, 40, 40), 0)
        self.paint(image, lambda p: draw_avatar(p, rounded, pixmap, "#e4e8f0"))

        self.assertEqual(QColor(image.pixel(20, 20)).name(), "#ff0000")
        self.assertEqual(QColor(image.pixel(2, 2)).name(), "#ff0000")


if __name__ == "__main__":
    unittest.main()
