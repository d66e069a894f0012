import math
import unittest

import support


class TestPhaseAt(unittest.TestCase):
    def test_wraps_every_duration(self) -> None:
        from storytray.controllers.rotation_animator import phase_at

        self.assertEqual(phase_at(0, 1000), 0.0)
        self.assertEqual(phase_at(250, 1000), 0.25)
        self.assertEqual(phase_at(1500, 1000), 0.5)
        self.assertEqual(phase_at(2000, 1000), 0.0)

    def test_rejects_non_positive_duration(self) -> None:
        from storytray.controllers.rotation_animator import phase_at
        from storytray.utils.error_manager import InvalidConfiguration

        with self.assertRaises(InvalidConfiguration):
            phase_at(10, 0)


class TestRotationAnimator(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.app = support.qt_app()

    def setUp(self) -> None:
        from storytray.controllers.rotation_animator import RotationAnimator

        self.animator = RotationAnimator(duration_ms=1000, interval_ms=16)
        self.phases = []
        self.states = []
        self.animator.phase_changed.connect(self.phases.append)
        self.animator.state_changed.connect(self.states.append)

    def tearDown(self) -> None:
        self.animator.dispose()

    def test_starts_idle(self) -> None:
        from storytray.controllers.rotation_animator import AnimatorState

        self.assertEqual(self.animator.state, AnimatorState.IDLE)
        self.assertFalse(self.animator.is_running)
        self.assertEqual(self.animator.phase, 0.0)

    def test_idle_animator_does_not_advance(self) -> None:
        self.animator.advance(100)

        self.assertEqual(self.animator.phase, 0.0)
        self.assertEqual(self.phases, [])

    def test_phase_increases_while_running(self) -> None:
        from storytray.controllers.rotation_animator import AnimatorState

        self.animator.start()
        self.assertEqual(self.animator.state, AnimatorState.RUNNING)

        for _ in range(5):
            self.animator.advance(100)

        self.assertEqual(len(self.phases), 5)
        for before, after in zip(self.phases, self.phases[1:]):
            self.assertGreater(after, before)
        self.assertAlmostEqual(self.animator.phase, 0.5)

    def test_phase_wraps_and_repeats(self) -> None:
        self.animator.start()
        self.animator.advance(900)
        self.animator.advance(150)

        self.assertTrue(self.animator.is_running)
        self.assertAlmostEqual(self.animator.phase, 0.05)
        self.assertLess(self.animator.phase, 1.0)

    def test_stop_resets_phase(self) -> None:
        from storytray.controllers.rotation_animator import AnimatorState

        self.animator.start()
        self.animator.advance(300)
        self.animator.stop()

        self.assertEqual(self.animator.state, AnimatorState.IDLE)
        self.assertEqual(self.animator.phase, 0.0)
        self.assertEqual(self.phases[-1], 0.0)
        self.assertEqual(self.states, [AnimatorState.RUNNING, AnimatorState.IDLE])

        self.animator.advance(300)
        self.assertEqual(self.animator.phase, 0.0)

    def test_stop_when_idle_is_quiet(self) -> None:
        self.animator.stop()

        self.assertEqual(self.phases, [])
        self.assertEqual(self.states, [])

    def test_restart_begins_at_zero(self) -> None:
        self.animator.start()
        self.animator.advance(400)
        self.animator.stop()
        self.animator.start()
        self.animator.advance(100)

        self.assertAlmostEqual(self.animator.phase, 0.1)

    def test_start_while_running_keeps_phase(self) -> None:
        self.animator.start()
        self.animator.advance(400)
        self.animator.start()

        self.assertAlmostEqual(self.animator.phase, 0.4)

    def test_rotation_angle(self) -> None:
        self.animator.start()
        self.animator.advance(250)

        self.assertAlmostEqual(self.animator.rotation_angle, math.pi / 2)
        self.assertAlmostEqual(self.animator.rotation_degrees, 90)

    def test_negative_elapsed_time_raises(self) -> None:
        from storytray.utils.error_manager import InvalidConfiguration

        self.animator.start()
        with self.assertRaises(InvalidConfiguration):
            self.animator.advance(-1)

    def test_timer_drives_the_phase(self) -> None:
        from PyQt5.QtTest import QTest

        self.animator.start()
        QTest.qWait(120)

        self.assertGreater(len(self.phases), 0)
        self.assertGreater(self.animator.phase, 0.0)

        self.animator.stop()
        ticks = len(self.phases)
        QTest.qWait(60)
        self.assertEqual(len(self.phases), ticks)

    def test_duration_change_keeps_the_phase(self) -> None:
        self.animator.start()
        self.animator.advance(250)

        self.animator.duration_ms = 4000
        self.assertAlmostEqual(self.animator.phase, 0.25)

        self.animator.advance(400)
        self.assertAlmostEqual(self.animator.phase, 0.35)

    def test_duration_must_stay_positive(self) -> None:
        from storytray.utils.error_manager import InvalidConfiguration

        with self.assertRaises(InvalidConfiguration):
            self.animator.duration_ms = 0
        self.assertEqual(self.animator.duration_ms, 1000)

    def test_invalid_timing(self) -> None:
        from storytray.controllers.rotation_animator import RotationAnimator
        from storytray.utils.error_manager import InvalidConfiguration

        with self.assertRaises(InvalidConfiguration):
            RotationAnimator(duration_ms=0)
        with self.assertRaises(InvalidConfiguration):
            RotationAnimator(interval_ms=0)


if __name__ == "__main__":
    unittest.main()
