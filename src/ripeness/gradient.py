"""Piecewise-linear gradient mapping ripeness to pomodorino colors."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .color import Color
from .errors import OutOfRangeError

MIN_RIPENESS = 0.0
MAX_RIPENESS = 2.0

GradientStop = tuple[float, Color]

UNRIPE_COLOR = Color.from_hex("#5ba83b")
TURNING_COLOR = Color.from_hex("#f2c12e")
BLUSHING_COLOR = Color.from_hex("#f28c28")
RIPE_COLOR = Color.from_hex("#e53935")
OVERRIPE_COLOR = Color.from_hex("#6d1b1b")


class RipenessGradient:
    """Ordered color breakpoints over the ripeness domain [0.0, 2.0].

    Colors between two breakpoints are interpolated linearly in each RGB
    channel, so every channel is monotonic within a segment.
    """

    def __init__(self, stops: Sequence[GradientStop]):
        if len(stops) < 2:
            raise ValueError("A ripeness gradient needs at least two stops")

        positions = [float(position) for position, _ in stops]
        if positions[0] != MIN_RIPENESS or positions[-1] != MAX_RIPENESS:
            raise ValueError(
                f"Gradient stops must span [{MIN_RIPENESS}, {MAX_RIPENESS}], "
                f"got: [{positions[0]}, {positions[-1]}]"
            )
        if any(right <= left for left, right in zip(positions, positions[1:])):
            raise ValueError("Gradient stop positions must be strictly increasing")

        self._stops: tuple[GradientStop, ...] = tuple(
            (position, color) for position, (_, color) in zip(positions, stops)
        )
        self._positions = np.array(positions, dtype=float)
        self._channels = np.array([color.as_tuple() for _, color in stops], dtype=float)

    @property
    def stops(self) -> tuple[GradientStop, ...]:
        return self._stops

    def color(self, ripeness: float) -> Color:
        value = float(ripeness)
        # NaN fails both comparisons.
        if not MIN_RIPENESS <= value <= MAX_RIPENESS:
            raise OutOfRangeError(value, MIN_RIPENESS, MAX_RIPENESS)

        channels = [
            float(np.interp(value, self._positions, self._channels[:, index]))
            for index in range(3)
        ]
        return Color(*(int(round(channel)) for channel in channels))


POMODORINO_GRADIENT = RipenessGradient(
    (
        (0.0, UNRIPE_COLOR),
        (0.5, TURNING_COLOR),
        (0.75, BLUSHING_COLOR),
        (1.0, RIPE_COLOR),
        (2.0, OVERRIPE_COLOR),
    )
)


def color_for_ripeness(ripeness: float) -> Color:
    """Look up the pomodorino color for a progress value in [0.0, 2.0]."""
    return POMODORINO_GRADIENT.color(ripeness)
