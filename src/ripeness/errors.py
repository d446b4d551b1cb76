class RipenessError(Exception):
    """Base exception for ripeness color lookups."""


class OutOfRangeError(RipenessError, ValueError):
    """Raised when a ripeness value falls outside the gradient domain."""

    def __init__(self, value: float, lower: float, upper: float):
        super().__init__(f"Ripeness must be in [{lower}, {upper}], got: {value}")
        self.value = value
        self.lower = lower
        self.upper = upper
