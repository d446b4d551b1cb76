"""Timer screen model hosting one session timer."""

from .model import TimerViewModel
from .state import (
    BUTTON_FINISHED,
    BUTTON_NOT_STARTED,
    BUTTON_RUNNING,
    HarvestTally,
    TimerButtonState,
    TimerViewState,
)

__all__ = [
    "BUTTON_FINISHED",
    "BUTTON_NOT_STARTED",
    "BUTTON_RUNNING",
    "HarvestTally",
    "TimerButtonState",
    "TimerViewModel",
    "TimerViewState",
]
