"""Host-side glue turning session timer snapshots into timer screen state."""

from __future__ import annotations

import logging
from typing import Optional

from pomodorino import SessionActionResult, SessionSnapshot, SessionTimer, format_duration
from ripeness import BLACK, POMODORINO_GRADIENT, Color, OutOfRangeError, RipenessGradient

from .state import (
    BUTTON_FINISHED,
    BUTTON_NOT_STARTED,
    BUTTON_RUNNING,
    HarvestTally,
    TimerButtonState,
    TimerViewState,
)

DEFAULT_BACKGROUND_SHADE = 0.2


class TimerViewModel:
    """Owns one session timer and derives what the timer screen shows.

    The host polls `tick()` on a fixed cadence; user input goes through
    `press_button()`. Ripeness values the gradient rejects fall back to a
    neutral color instead of failing the frame.
    """

    def __init__(
        self,
        timer: SessionTimer,
        *,
        tally: Optional[HarvestTally] = None,
        gradient: RipenessGradient = POMODORINO_GRADIENT,
        fallback_color: Color = BLACK,
        background_shade: float = DEFAULT_BACKGROUND_SHADE,
        logger: Optional[logging.Logger] = None,
    ):
        if not 0.0 <= background_shade <= 1.0:
            raise ValueError(
                f"background_shade must be in [0, 1], got: {background_shade}"
            )

        self._timer = timer
        self._tally = tally if tally is not None else HarvestTally()
        self._gradient = gradient
        self._fallback_color = fallback_color
        self._background_shade = background_shade
        self._logger = logger or logging.getLogger("view")
        self._using_fallback = False

    @classmethod
    def from_settings(
        cls,
        timer: SessionTimer,
        settings,
        *,
        tally: Optional[HarvestTally] = None,
        logger: Optional[logging.Logger] = None,
    ) -> "TimerViewModel":
        return cls(
            timer,
            tally=tally,
            fallback_color=Color.from_hex(settings.fallback_color),
            background_shade=settings.background_shade,
            logger=logger,
        )

    @property
    def timer(self) -> SessionTimer:
        return self._timer

    @property
    def tally(self) -> HarvestTally:
        return self._tally

    @property
    def button_state(self) -> TimerButtonState:
        return _button_state_for(self._timer.snapshot())

    def press_button(self) -> SessionActionResult:
        """Start a pomodorino, or harvest a ripe one and start the next."""
        if self.button_state == BUTTON_FINISHED:
            total = self._tally.harvest()
            self._logger.info("Pomodorino harvested: total=%s", total)
            self._timer.reset()
        return self._timer.start()

    def tick(self) -> Optional[TimerViewState]:
        """Poll the timer; return a fresh frame only when the timer ticked."""
        tick = self._timer.poll()
        if tick is None:
            return None
        if tick.completed:
            self._logger.info(
                "Pomodorino ripe: goal=%s",
                format_duration(tick.snapshot.goal_seconds),
            )
        return self.render(tick.snapshot)

    def render(self, snapshot: Optional[SessionSnapshot] = None) -> TimerViewState:
        snapshot = snapshot or self._timer.snapshot()
        color = self._resolve_color(snapshot.progress)
        return TimerViewState(
            pomodorino_count=self._tally.count,
            goal_text=f"Goal: {format_duration(snapshot.goal_seconds)}",
            time_text=snapshot.formatted_time,
            ripeness=snapshot.progress,
            color=color,
            background=(color, color.mix(BLACK, self._background_shade)),
            button_state=_button_state_for(snapshot),
            phase=snapshot.phase,
        )

    def close(self) -> None:
        self._timer.stop()

    def _resolve_color(self, ripeness: float) -> Color:
        try:
            color = self._gradient.color(ripeness)
        except OutOfRangeError as error:
            if not self._using_fallback:
                self._logger.warning(
                    "Error determining color, using %s: %s",
                    self._fallback_color.hex,
                    error,
                )
                self._using_fallback = True
            return self._fallback_color

        self._using_fallback = False
        return color


def _button_state_for(snapshot: SessionSnapshot) -> TimerButtonState:
    if snapshot.is_completed:
        return BUTTON_FINISHED
    if snapshot.is_running:
        return BUTTON_RUNNING
    return BUTTON_NOT_STARTED
