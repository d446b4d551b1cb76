"""Thread-safe in-memory session timer behind a ripening pomodorino."""

from __future__ import annotations

import logging
import math
import threading
import time
from dataclasses import dataclass
from typing import Callable, Literal, Optional

from .constants import (
    ACTION_RESET,
    ACTION_RESUME,
    ACTION_START,
    ACTION_STOP,
    DEFAULT_GOAL_MINUTES,
    PHASE_COMPLETED,
    PHASE_IDLE,
    PHASE_OVERTIME,
    PHASE_RUNNING,
    PHASE_STOPPED,
    REASON_ALREADY_RUNNING,
    REASON_COMPLETED,
    REASON_NOT_RUNNING,
    REASON_NOT_STARTED,
    REASON_RESET,
    REASON_RESUMED,
    REASON_STARTED,
    REASON_STOPPED,
    REASON_UNSUPPORTED_ACTION,
    RUNNING_PHASES,
    SECONDS_PER_MINUTE,
)
from .errors import InvalidDurationError
from .formatting import format_duration

SessionPhase = Literal["idle", "running", "overtime", "stopped", "completed"]
SessionAction = Literal["start", "stop", "resume", "reset"]


@dataclass(frozen=True)
class SessionSnapshot:
    """Immutable timer snapshot read by the host view once per tick."""
    phase: SessionPhase
    goal_seconds: int
    elapsed_seconds: float
    allows_overtime: bool

    @property
    def is_running(self) -> bool:
        return self.phase in RUNNING_PHASES

    @property
    def is_completed(self) -> bool:
        return self.elapsed_seconds >= self.goal_seconds

    @property
    def progress(self) -> float:
        return self.elapsed_seconds / self.goal_seconds

    @property
    def remaining_seconds(self) -> int:
        remaining = int(math.ceil(self.goal_seconds - self.elapsed_seconds))
        return max(0, min(self.goal_seconds, remaining))

    @property
    def formatted_time(self) -> str:
        return format_duration(self.remaining_seconds)


@dataclass(frozen=True)
class SessionActionResult:
    """Result envelope returned after applying a timer command."""
    action: str
    accepted: bool
    reason: str
    snapshot: SessionSnapshot


@dataclass(frozen=True)
class SessionTick:
    """Tick payload emitted while the session is running."""
    snapshot: SessionSnapshot
    completed: bool = False


class SessionTimer:
    """Single-run session timer with monotonic timing and optional overtime.

    Time is never pushed: every read recomputes elapsed time from the
    monotonic clock. Without overtime the first read at or past the goal
    clamps elapsed time to the goal and stops the timer.
    """

    def __init__(
        self,
        goal_minutes: int = DEFAULT_GOAL_MINUTES,
        allows_overtime: bool = False,
        *,
        logger: Optional[logging.Logger] = None,
    ):
        if isinstance(goal_minutes, bool) or not isinstance(goal_minutes, int):
            raise InvalidDurationError(
                f"goal_minutes must be an integer, got: {goal_minutes!r}"
            )
        if goal_minutes <= 0:
            raise InvalidDurationError(
                f"goal_minutes must be greater than zero, got: {goal_minutes}"
            )

        self._goal_minutes = goal_minutes
        self._goal_seconds = goal_minutes * SECONDS_PER_MINUTE
        self._allows_overtime = bool(allows_overtime)
        self._logger = logger or logging.getLogger("pomodorino")
        self._lock = threading.Lock()

        self._started_at_monotonic: Optional[float] = None
        self._frozen_elapsed_seconds: float = 0.0
        self._has_started = False
        self._completion_announced = False
        self._last_emitted_second: Optional[int] = None

    @classmethod
    def from_settings(
        cls,
        settings,
        *,
        logger: Optional[logging.Logger] = None,
    ) -> "SessionTimer":
        return cls(
            settings.goal_minutes,
            settings.allows_overtime,
            logger=logger,
        )

    @property
    def goal_minutes(self) -> int:
        return self._goal_minutes

    @property
    def goal_seconds(self) -> int:
        return self._goal_seconds

    @property
    def allows_overtime(self) -> bool:
        return self._allows_overtime

    @property
    def phase(self) -> SessionPhase:
        return self.snapshot().phase

    @property
    def is_running(self) -> bool:
        return self.snapshot().is_running

    @property
    def is_completed(self) -> bool:
        return self.snapshot().is_completed

    @property
    def elapsed_seconds(self) -> float:
        return self.snapshot().elapsed_seconds

    @property
    def progress(self) -> float:
        return self.snapshot().progress

    @property
    def formatted_time(self) -> str:
        return self.snapshot().formatted_time

    def snapshot(self) -> SessionSnapshot:
        with self._lock:
            return self._snapshot_locked(time.monotonic())

    def start(self) -> SessionActionResult:
        """Begin a fresh run; a no-op while already running."""
        with self._lock:
            now = time.monotonic()
            self._elapsed_locked(now)
            if self._started_at_monotonic is not None:
                return self._result_locked(ACTION_START, False, REASON_ALREADY_RUNNING, now)

            self._frozen_elapsed_seconds = 0.0
            self._started_at_monotonic = now
            self._has_started = True
            self._completion_announced = False
            self._last_emitted_second = None
            self._logger.info(
                "Session started: goal=%ss overtime=%s",
                self._goal_seconds,
                self._allows_overtime,
            )
            return self._result_locked(ACTION_START, True, REASON_STARTED, now)

    def stop(self) -> SessionActionResult:
        """Freeze elapsed time; a no-op when not running."""
        with self._lock:
            now = time.monotonic()
            elapsed = self._elapsed_locked(now)
            if self._started_at_monotonic is None:
                return self._result_locked(ACTION_STOP, False, REASON_NOT_RUNNING, now)

            self._frozen_elapsed_seconds = elapsed
            self._started_at_monotonic = None
            self._logger.info("Session stopped: elapsed=%.1fs", elapsed)
            return self._result_locked(ACTION_STOP, True, REASON_STOPPED, now)

    def resume(self) -> SessionActionResult:
        """Continue a stopped run, keeping the elapsed time frozen at stop."""
        with self._lock:
            now = time.monotonic()
            elapsed = self._elapsed_locked(now)
            if self._started_at_monotonic is not None:
                return self._result_locked(ACTION_RESUME, False, REASON_ALREADY_RUNNING, now)
            if not self._has_started:
                return self._result_locked(ACTION_RESUME, False, REASON_NOT_STARTED, now)
            if not self._allows_overtime and elapsed >= self._goal_seconds:
                return self._result_locked(ACTION_RESUME, False, REASON_COMPLETED, now)

            self._started_at_monotonic = now
            self._logger.info("Session resumed: elapsed=%.1fs", elapsed)
            return self._result_locked(ACTION_RESUME, True, REASON_RESUMED, now)

    def reset(self) -> SessionActionResult:
        """Return to idle with zero elapsed time, whatever the current phase."""
        with self._lock:
            now = time.monotonic()
            self._started_at_monotonic = None
            self._frozen_elapsed_seconds = 0.0
            self._has_started = False
            self._completion_announced = False
            self._last_emitted_second = None
            self._logger.info("Session reset: goal=%ss", self._goal_seconds)
            return self._result_locked(ACTION_RESET, True, REASON_RESET, now)

    def apply(self, action: str) -> SessionActionResult:
        handlers: dict[str, Callable[[], SessionActionResult]] = {
            ACTION_START: self.start,
            ACTION_STOP: self.stop,
            ACTION_RESUME: self.resume,
            ACTION_RESET: self.reset,
        }
        handler = handlers.get(action)
        if handler is None:
            with self._lock:
                return self._result_locked(
                    action,
                    False,
                    REASON_UNSUPPORTED_ACTION,
                    time.monotonic(),
                )
        return handler()

    def poll(self) -> Optional[SessionTick]:
        """Return tick updates while running (max once per second + completion)."""
        with self._lock:
            now = time.monotonic()
            elapsed = self._elapsed_locked(now)
            if elapsed >= self._goal_seconds and not self._completion_announced:
                self._completion_announced = True
                self._last_emitted_second = int(elapsed)
                self._logger.info("Session completed: elapsed=%ss", int(elapsed))
                return SessionTick(snapshot=self._snapshot_locked(now), completed=True)

            if self._started_at_monotonic is None:
                return None

            second = int(elapsed)
            if self._last_emitted_second == second:
                return None

            self._last_emitted_second = second
            return SessionTick(snapshot=self._snapshot_locked(now), completed=False)

    def _result_locked(
        self,
        action: str,
        accepted: bool,
        reason: str,
        now: float,
    ) -> SessionActionResult:
        return SessionActionResult(
            action=action,
            accepted=accepted,
            reason=reason,
            snapshot=self._snapshot_locked(now),
        )

    def _snapshot_locked(self, now: float) -> SessionSnapshot:
        elapsed = self._elapsed_locked(now)
        return SessionSnapshot(
            phase=self._phase_locked(elapsed),
            goal_seconds=self._goal_seconds,
            elapsed_seconds=elapsed,
            allows_overtime=self._allows_overtime,
        )

    def _phase_locked(self, elapsed: float) -> SessionPhase:
        completed = elapsed >= self._goal_seconds
        if self._started_at_monotonic is not None:
            return PHASE_OVERTIME if completed else PHASE_RUNNING
        if completed:
            return PHASE_COMPLETED
        if self._has_started:
            return PHASE_STOPPED
        return PHASE_IDLE

    def _elapsed_locked(self, now: float) -> float:
        started_at = self._started_at_monotonic
        if started_at is None:
            return self._frozen_elapsed_seconds

        elapsed = self._frozen_elapsed_seconds + max(0.0, now - started_at)
        if not self._allows_overtime and elapsed >= self._goal_seconds:
            # Clamp and stop exactly at the goal.
            self._frozen_elapsed_seconds = float(self._goal_seconds)
            self._started_at_monotonic = None
            self._logger.info("Session reached goal, stopping: goal=%ss", self._goal_seconds)
            return self._frozen_elapsed_seconds
        return elapsed
