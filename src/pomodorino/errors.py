class PomodorinoError(Exception):
    """Base exception for session timer failures."""


class InvalidDurationError(PomodorinoError, ValueError):
    """Raised when a session timer is configured with a non-positive goal."""
