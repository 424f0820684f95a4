from __future__ import annotations

import os
from datetime import timedelta

from core.interfaces import DemoModeProvider
from core.models import DemoModeConfig

DEFAULT_MAX_CRITICAL_TASKS = 5
DEFAULT_CACHE_TTL_SECONDS = 300

_TRUTHY = {"1", "true", "yes", "on"}


def is_demo_mode() -> bool:
    return (os.getenv("PM_DEMO_MODE", "") or "").strip().lower() in _TRUTHY


def demo_mode_config() -> DemoModeConfig:
    raw = (os.getenv("PM_DEMO_MAX_CRITICAL_TASKS", "") or "").strip()
    try:
        limit = int(raw) if raw else DEFAULT_MAX_CRITICAL_TASKS
    except ValueError:
        limit = DEFAULT_MAX_CRITICAL_TASKS
    return DemoModeConfig(max_critical_tasks=max(1, limit))


def cache_ttl() -> timedelta:
    raw = (os.getenv("PM_CRITICAL_PATH_CACHE_TTL_SECONDS", "") or "").strip()
    try:
        seconds = int(raw) if raw else DEFAULT_CACHE_TTL_SECONDS
    except ValueError:
        seconds = DEFAULT_CACHE_TTL_SECONDS
    return timedelta(seconds=max(0, seconds))


class EnvDemoModeProvider(DemoModeProvider):
    """Reads PM_DEMO_MODE on every call so toggling it needs no restart."""

    def is_demo_mode(self) -> bool:
        return is_demo_mode()


class StaticDemoModeProvider(DemoModeProvider):
    def __init__(self, enabled: bool = False) -> None:
        self.enabled = enabled

    def is_demo_mode(self) -> bool:
        return self.enabled


__all__ = [
    "DEFAULT_MAX_CRITICAL_TASKS",
    "DEFAULT_CACHE_TTL_SECONDS",
    "is_demo_mode",
    "demo_mode_config",
    "cache_ttl",
    "EnvDemoModeProvider",
    "StaticDemoModeProvider",
]
