import unittest
from unittest.mock import patch

from pomodorino import InvalidDurationError
from pomodorino.service import SessionTimer


class _FakeClock:
    def __init__(self, start: float = 100.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class SessionTimerCharacterizationTests(unittest.TestCase):
    def setUp(self) -> None:
        self.clock = _FakeClock()
        patcher = patch("pomodorino.service.time.monotonic", new=self.clock)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_rejects_non_positive_goal(self) -> None:
        for goal_minutes in (0, -1, -25):
            with self.subTest(goal_minutes=goal_minutes):
                with self.assertRaises(InvalidDurationError):
                    SessionTimer(goal_minutes=goal_minutes)

    def test_rejects_non_integer_goal(self) -> None:
        for goal_minutes in (1.5, True, "25"):
            with self.subTest(goal_minutes=goal_minutes):
                with self.assertRaises(InvalidDurationError):
                    SessionTimer(goal_minutes=goal_minutes)  # type: ignore[arg-type]

    def test_invalid_duration_is_a_value_error(self) -> None:
        with self.assertRaises(ValueError):
            SessionTimer(goal_minutes=0)

    def test_new_timer_is_idle(self) -> None:
        timer = SessionTimer(goal_minutes=25)

        self.assertEqual("idle", timer.phase)
        self.assertFalse(timer.is_running)
        self.assertFalse(timer.is_completed)
        self.assertEqual(0.0, timer.elapsed_seconds)
        self.assertEqual(0.0, timer.progress)
        self.assertEqual("25:00", timer.formatted_time)

    def test_start_sets_running_with_zero_elapsed(self) -> None:
        timer = SessionTimer(goal_minutes=25)
        result = timer.start()

        self.assertTrue(result.accepted)
        self.assertEqual("started", result.reason)
        self.assertEqual("running", result.snapshot.phase)
        self.assertTrue(timer.is_running)
        self.assertAlmostEqual(0.0, timer.elapsed_seconds)

    def test_start_while_running_is_noop(self) -> None:
        timer = SessionTimer(goal_minutes=25)
        timer.start()
        self.clock.advance(5)

        result = timer.start()

        self.assertFalse(result.accepted)
        self.assertEqual("already_running", result.reason)
        self.assertEqual(5.0, timer.elapsed_seconds)

    def test_stop_freezes_elapsed(self) -> None:
        timer = SessionTimer(goal_minutes=25)
        timer.start()
        self.clock.advance(90)
        result = timer.stop()
        self.clock.advance(100)

        self.assertTrue(result.accepted)
        self.assertEqual("stopped", timer.phase)
        self.assertFalse(timer.is_running)
        self.assertEqual(90.0, timer.elapsed_seconds)
        self.assertEqual("23:30", timer.formatted_time)

    def test_stop_when_not_running_is_idempotent_noop(self) -> None:
        timer = SessionTimer(goal_minutes=25)
        first = timer.stop()
        second = timer.stop()

        self.assertFalse(first.accepted)
        self.assertFalse(second.accepted)
        self.assertEqual("not_running", second.reason)
        self.assertEqual("idle", second.snapshot.phase)

    def test_one_minute_goal_without_overtime_auto_stops(self) -> None:
        timer = SessionTimer(goal_minutes=1, allows_overtime=False)
        timer.start()
        self.clock.advance(61)

        self.assertTrue(timer.is_completed)
        self.assertFalse(timer.is_running)
        self.assertEqual(1.0, timer.progress)
        self.assertEqual("00:00", timer.formatted_time)
        self.assertEqual(60.0, timer.elapsed_seconds)
        self.assertEqual("completed", timer.phase)

    def test_auto_stop_happens_exactly_at_goal(self) -> None:
        timer = SessionTimer(goal_minutes=1)
        timer.start()
        self.clock.advance(59.5)
        self.assertTrue(timer.is_running)
        self.assertFalse(timer.is_completed)

        self.clock.advance(0.5)
        self.assertFalse(timer.is_running)
        self.assertTrue(timer.is_completed)

    def test_progress_never_exceeds_one_without_overtime(self) -> None:
        timer = SessionTimer(goal_minutes=1)
        timer.start()
        for _ in range(30):
            self.clock.advance(7)
            self.assertLessEqual(timer.progress, 1.0)
        self.assertEqual(1.0, timer.progress)

    def test_overtime_keeps_running_past_goal(self) -> None:
        timer = SessionTimer(goal_minutes=25, allows_overtime=True)
        timer.start()
        self.clock.advance(30 * 60)

        self.assertTrue(timer.is_running)
        self.assertTrue(timer.is_completed)
        self.assertAlmostEqual(1.2, timer.progress)
        self.assertEqual("overtime", timer.phase)
        self.assertEqual("00:00", timer.formatted_time)

    def test_overtime_stop_freezes_completed_progress(self) -> None:
        timer = SessionTimer(goal_minutes=25, allows_overtime=True)
        timer.start()
        self.clock.advance(30 * 60)
        timer.stop()
        self.clock.advance(60)

        self.assertFalse(timer.is_running)
        self.assertEqual("completed", timer.phase)
        self.assertAlmostEqual(1.2, timer.progress)

    def test_reset_returns_to_idle_from_any_state(self) -> None:
        def running(timer: SessionTimer) -> None:
            timer.start()
            self.clock.advance(10)

        def stopped(timer: SessionTimer) -> None:
            running(timer)
            timer.stop()

        def completed(timer: SessionTimer) -> None:
            timer.start()
            self.clock.advance(120)

        scenarios = {
            "idle": (False, lambda timer: None),
            "running": (False, running),
            "stopped": (False, stopped),
            "completed": (False, completed),
            "overtime": (True, completed),
        }
        for name, (allows_overtime, prepare) in scenarios.items():
            with self.subTest(state=name):
                timer = SessionTimer(goal_minutes=1, allows_overtime=allows_overtime)
                prepare(timer)

                result = timer.reset()

                self.assertTrue(result.accepted)
                self.assertEqual(0.0, timer.elapsed_seconds)
                self.assertFalse(timer.is_running)
                self.assertFalse(timer.is_completed)
                self.assertEqual("idle", timer.phase)

    def test_start_after_stop_begins_a_fresh_run(self) -> None:
        timer = SessionTimer(goal_minutes=25)
        timer.start()
        self.clock.advance(100)
        timer.stop()

        timer.start()
        self.clock.advance(10)

        self.assertEqual(10.0, timer.elapsed_seconds)

    def test_resume_preserves_elapsed(self) -> None:
        timer = SessionTimer(goal_minutes=25)
        timer.start()
        self.clock.advance(100)
        timer.stop()
        self.clock.advance(50)

        result = timer.resume()
        self.clock.advance(10)

        self.assertTrue(result.accepted)
        self.assertEqual("resumed", result.reason)
        self.assertEqual(110.0, timer.elapsed_seconds)

    def test_resume_rejections(self) -> None:
        idle = SessionTimer(goal_minutes=1)
        self.assertEqual("not_started", idle.resume().reason)

        running = SessionTimer(goal_minutes=1)
        running.start()
        self.assertEqual("already_running", running.resume().reason)

        completed = SessionTimer(goal_minutes=1)
        completed.start()
        self.clock.advance(61)
        result = completed.resume()
        self.assertFalse(result.accepted)
        self.assertEqual("completed", result.reason)

    def test_resume_allowed_after_stopping_in_overtime(self) -> None:
        timer = SessionTimer(goal_minutes=1, allows_overtime=True)
        timer.start()
        self.clock.advance(70)
        timer.stop()

        result = timer.resume()
        self.clock.advance(20)

        self.assertTrue(result.accepted)
        self.assertEqual(90.0, timer.elapsed_seconds)
        self.assertAlmostEqual(1.5, timer.progress)

    def test_apply_dispatches_known_actions(self) -> None:
        timer = SessionTimer(goal_minutes=25)

        self.assertEqual("started", timer.apply("start").reason)
        self.assertEqual("stopped", timer.apply("stop").reason)
        self.assertEqual("resumed", timer.apply("resume").reason)
        self.assertEqual("reset", timer.apply("reset").reason)

    def test_apply_rejects_unknown_action(self) -> None:
        timer = SessionTimer(goal_minutes=25)
        result = timer.apply("pause")

        self.assertFalse(result.accepted)
        self.assertEqual("unsupported_action", result.reason)
        self.assertEqual("idle", result.snapshot.phase)

    def test_formatted_time_rounds_partial_seconds_up(self) -> None:
        timer = SessionTimer(goal_minutes=1)
        timer.start()
        self.clock.advance(0.4)
        self.assertEqual("01:00", timer.formatted_time)

        self.clock.advance(59.4)
        self.assertEqual("00:01", timer.formatted_time)

    def test_from_settings_uses_goal_and_overtime(self) -> None:
        class _Settings:
            goal_minutes = 5
            allows_overtime = True

        timer = SessionTimer.from_settings(_Settings())

        self.assertEqual(5, timer.goal_minutes)
        self.assertEqual(300, timer.goal_seconds)
        self.assertTrue(timer.allows_overtime)


if __name__ == "__main__":
    unittest.main()
