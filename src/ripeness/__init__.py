"""Ripeness-to-color mapping for the pomodorino display."""

from .color import BLACK, Color
from .errors import OutOfRangeError, RipenessError
from .gradient import (
    MAX_RIPENESS,
    MIN_RIPENESS,
    OVERRIPE_COLOR,
    POMODORINO_GRADIENT,
    RIPE_COLOR,
    UNRIPE_COLOR,
    RipenessGradient,
    color_for_ripeness,
)

__all__ = [
    "BLACK",
    "Color",
    "MAX_RIPENESS",
    "MIN_RIPENESS",
    "OVERRIPE_COLOR",
    "OutOfRangeError",
    "POMODORINO_GRADIENT",
    "RIPE_COLOR",
    "RipenessError",
    "RipenessGradient",
    "UNRIPE_COLOR",
    "color_for_ripeness",
]
