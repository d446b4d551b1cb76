from .errors import InvalidDurationError, PomodorinoError
from .formatting import format_duration
from .service import (
    DEFAULT_GOAL_MINUTES,
    SessionAction,
    SessionActionResult,
    SessionPhase,
    SessionSnapshot,
    SessionTick,
    SessionTimer,
)

__all__ = [
    "DEFAULT_GOAL_MINUTES",
    "InvalidDurationError",
    "PomodorinoError",
    "SessionAction",
    "SessionActionResult",
    "SessionPhase",
    "SessionSnapshot",
    "SessionTick",
    "SessionTimer",
    "format_duration",
]
