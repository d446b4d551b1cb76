"""RGB color value used by the ripeness gradient and the host view."""

from __future__ import annotations

import re
from dataclasses import dataclass

_HEX_PATTERN = re.compile(r"#?([0-9a-fA-F]{6})")


@dataclass(frozen=True)
class Color:
    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"Color.{name} must be in [0, 255], got: {value}")

    @classmethod
    def from_hex(cls, text: str) -> "Color":
        match = _HEX_PATTERN.fullmatch(text.strip())
        if match is None:
            raise ValueError(f"Color must be formatted as #RRGGBB, got: {text!r}")
        raw = match.group(1)
        return cls(int(raw[0:2], 16), int(raw[2:4], 16), int(raw[4:6], 16))

    @property
    def hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    def mix(self, other: "Color", by: float) -> "Color":
        """Blend toward `other`; `by=0` keeps this color, `by=1` returns `other`."""
        if not 0.0 <= by <= 1.0:
            raise ValueError(f"Mix fraction must be in [0, 1], got: {by}")
        return Color(
            *(
                int(round(own + (target - own) * by))
                for own, target in zip(self.as_tuple(), other.as_tuple())
            )
        )


BLACK = Color(0, 0, 0)
