"""Dataclass schema objects used by runtime configuration loading."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_CONFIG_FILE = "config.toml"


class AppConfigurationError(Exception):
    """Raised when application configuration fails."""


@dataclass(frozen=True)
class TimerSettings:
    """Session timer settings loaded from `[timer]`."""
    goal_minutes: int = 25
    allows_overtime: bool = False


@dataclass(frozen=True)
class ViewSettings:
    """Timer screen and polling settings loaded from `[view]`."""
    tick_interval_seconds: float = 1.0
    fallback_color: str = "#000000"
    background_shade: float = 0.2
    harvest_limit: int = 0


@dataclass(frozen=True)
class AppConfig:
    """Top-level immutable app configuration assembled from TOML sections."""
    timer: TimerSettings
    view: ViewSettings
    source_file: str
