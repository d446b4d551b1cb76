"""Phase, action, and reason constants used by the session timer."""

from __future__ import annotations

DEFAULT_GOAL_MINUTES = 25
SECONDS_PER_MINUTE = 60

PHASE_IDLE = "idle"
PHASE_RUNNING = "running"
PHASE_OVERTIME = "overtime"
PHASE_STOPPED = "stopped"
PHASE_COMPLETED = "completed"

RUNNING_PHASES: frozenset[str] = frozenset({PHASE_RUNNING, PHASE_OVERTIME})

ACTION_START = "start"
ACTION_STOP = "stop"
ACTION_RESUME = "resume"
ACTION_RESET = "reset"

REASON_STARTED = "started"
REASON_STOPPED = "stopped"
REASON_RESUMED = "resumed"
REASON_RESET = "reset"
REASON_ALREADY_RUNNING = "already_running"
REASON_NOT_RUNNING = "not_running"
REASON_NOT_STARTED = "not_started"
REASON_COMPLETED = "completed"
REASON_UNSUPPORTED_ACTION = "unsupported_action"
