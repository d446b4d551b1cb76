"""Renderable state and session context for the pomodorino timer screen."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from ripeness import Color

BUTTON_NOT_STARTED = "not_started"
BUTTON_RUNNING = "running"
BUTTON_FINISHED = "finished"

TimerButtonState = Literal["not_started", "running", "finished"]


@dataclass
class HarvestTally:
    """Count of harvested pomodorini, owned by the app session and passed in."""
    count: int = 0

    def harvest(self) -> int:
        self.count += 1
        return self.count


@dataclass(frozen=True)
class TimerViewState:
    """Everything a renderer needs to draw one frame of the timer screen."""
    pomodorino_count: int
    goal_text: str
    time_text: str
    ripeness: float
    color: Color
    background: tuple[Color, Color]
    button_state: TimerButtonState
    phase: str

    @property
    def count_text(self) -> str:
        return f"{self.pomodorino_count} 🍅"
