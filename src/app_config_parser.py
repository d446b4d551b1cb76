"""Typed parser for config.toml sections into immutable app settings."""

from __future__ import annotations

from typing import Any, Mapping

from app_config_schema import (
    AppConfig,
    AppConfigurationError,
    TimerSettings,
    ViewSettings,
)
from ripeness import Color


def parse_app_config(
    raw: Mapping[str, Any],
    *,
    source_file: str,
) -> AppConfig:
    """Parse raw TOML mappings into strongly typed application settings."""
    timer = _parse_timer_settings(_section(raw, "timer"))
    view = _parse_view_settings(_section(raw, "view"))
    return AppConfig(timer=timer, view=view, source_file=source_file)


def _parse_timer_settings(section: Mapping[str, Any]) -> TimerSettings:
    goal_minutes = _as_int(section.get("goal_minutes", 25), "timer.goal_minutes")
    if goal_minutes <= 0:
        raise AppConfigurationError(
            f"timer.goal_minutes must be greater than zero, got: {goal_minutes}"
        )
    return TimerSettings(
        goal_minutes=goal_minutes,
        allows_overtime=_as_bool(
            section.get("allows_overtime", False),
            "timer.allows_overtime",
        ),
    )


def _parse_view_settings(section: Mapping[str, Any]) -> ViewSettings:
    tick_interval_seconds = _as_float(
        section.get("tick_interval_seconds", 1.0),
        "view.tick_interval_seconds",
    )
    if tick_interval_seconds <= 0:
        raise AppConfigurationError("view.tick_interval_seconds must be > 0")

    fallback_color = _as_str(section.get("fallback_color", "#000000"), "view.fallback_color")
    try:
        Color.from_hex(fallback_color)
    except ValueError as error:
        raise AppConfigurationError(f"view.fallback_color: {error}") from error

    background_shade = _as_float(
        section.get("background_shade", 0.2),
        "view.background_shade",
    )
    if not 0.0 <= background_shade <= 1.0:
        raise AppConfigurationError("view.background_shade must be in [0, 1]")

    harvest_limit = _as_int(section.get("harvest_limit", 0), "view.harvest_limit")
    if harvest_limit < 0:
        raise AppConfigurationError("view.harvest_limit must be >= 0")

    return ViewSettings(
        tick_interval_seconds=tick_interval_seconds,
        fallback_color=fallback_color,
        background_shade=background_shade,
        harvest_limit=harvest_limit,
    )


def _section(root: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    raw = root.get(name, {})
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise AppConfigurationError(f"[{name}] must be a table.")
    return raw


def _as_str(value: Any, field: str) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    raise AppConfigurationError(f"{field} must be a string.")


def _as_bool(value: Any, field: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "1", "yes", "on"):
            return True
        if lowered in ("false", "0", "no", "off"):
            return False
    raise AppConfigurationError(f"{field} must be a boolean.")


def _as_int(value: Any, field: str) -> int:
    if isinstance(value, bool):
        raise AppConfigurationError(f"{field} must be an integer.")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as error:
            raise AppConfigurationError(f"{field} must be an integer.") from error
    raise AppConfigurationError(f"{field} must be an integer.")


def _as_float(value: Any, field: str) -> float:
    if isinstance(value, bool):
        raise AppConfigurationError(f"{field} must be a float.")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError as error:
            raise AppConfigurationError(f"{field} must be a float.") from error
    raise AppConfigurationError(f"{field} must be a float.")
