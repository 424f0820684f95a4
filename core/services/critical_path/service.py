from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Callable, Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.events.domain_events import domain_events
from core.exceptions import CacheIOError, SettingsIOError, ValidationError
from core.interfaces import (
    CriticalPathCacheRepository,
    CriticalPathSettingsRepository,
    DemoModeProvider,
    DependencyRepository,
    TaskCriticalDataRepository,
    TaskRepository,
)
from core.models import CriticalPathResult, CriticalPathSettings, DemoModeConfig, Task, TaskDependency
from core.services.common.base import ServiceBase
from core.services.common.time import utc_now
from core.services.critical_path.policy import cache_ttl, demo_mode_config
from core.services.scheduling import apply_demo_view, calculate_critical_path

logger = logging.getLogger(__name__)


class CriticalPathService(ServiceBase):
    """
    Gateway around the CPM engine:
    - runs the pure computation and caches the full result per project
    - serves the demo projection when the demo flag is on
    - persists per-project display settings and per-task critical flags

    Cache and settings reads degrade to recompute/defaults on storage
    failure; structural graph errors always reach the caller.
    """

    def __init__(
        self,
        session: Session,
        cache_repo: CriticalPathCacheRepository,
        settings_repo: CriticalPathSettingsRepository,
        task_data_repo: TaskCriticalDataRepository,
        demo_mode: DemoModeProvider,
        task_repo: TaskRepository | None = None,
        dependency_repo: DependencyRepository | None = None,
        demo_config: DemoModeConfig | None = None,
        ttl: timedelta | None = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        super().__init__(session)
        self._cache_repo = cache_repo
        self._settings_repo = settings_repo
        self._task_data_repo = task_data_repo
        self._demo_mode = demo_mode
        self._task_repo = task_repo
        self._dependency_repo = dependency_repo
        self._demo_config = demo_config or demo_mode_config()
        self._ttl = ttl if ttl is not None else cache_ttl()
        self._clock = clock

    # ---------------- computation ----------------

    def calculate_critical_path(
        self,
        project_id: str,
        tasks: Sequence[Task],
        dependencies: Sequence[TaskDependency],
    ) -> CriticalPathResult:
        demo = self._demo_mode.is_demo_mode()
        result = self._compute_and_cache(project_id, tasks, dependencies)
        if demo:
            return apply_demo_view(result, self._demo_config)
        return result

    def recalculate_project(self, project_id: str) -> CriticalPathResult:
        """Loads the project's tasks and dependencies, computes, and writes each task's flags back."""
        if self._task_repo is None or self._dependency_repo is None:
            raise ValidationError(
                "recalculate_project needs task and dependency repositories.",
                code="MISSING_REPOSITORY",
            )
        tasks = self._task_repo.list_by_project(project_id)
        dependencies = self._dependency_repo.list_by_project(project_id)

        demo = self._demo_mode.is_demo_mode()
        full = self._compute_and_cache(project_id, tasks, dependencies)
        try:
            for info in full.tasks.values():
                self._task_data_repo.update_critical_data(
                    project_id,
                    info.id,
                    is_critical=info.is_critical,
                    total_float=info.total_float,
                    demo=demo,
                )
            self.commit()
        except Exception:
            self.rollback()
            raise
        if demo:
            return apply_demo_view(full, self._demo_config)
        return full

    def _compute_and_cache(
        self,
        project_id: str,
        tasks: Sequence[Task],
        dependencies: Sequence[TaskDependency],
    ) -> CriticalPathResult:
        result = calculate_critical_path(tasks, dependencies)
        logger.info(
            "Critical path for project %s: %d task(s), %d critical, duration %s",
            project_id,
            len(result.tasks),
            len(result.critical_tasks),
            result.project_duration,
        )
        # the cache always holds the full result; demo truncation is view-only
        self._cache_result(project_id, result)
        domain_events.critical_path_changed.emit(project_id)
        return result

    # ---------------- cache ----------------

    def get_cached_critical_path(self, project_id: str) -> Optional[CriticalPathResult]:
        result = self._read_cache(project_id)
        if result is None:
            return None
        if self._demo_mode.is_demo_mode():
            return apply_demo_view(result, self._demo_config)
        return result

    def clear_critical_path_cache(self, project_id: str) -> None:
        try:
            self._cache_repo.delete(project_id)
            self.commit()
        except (CacheIOError, SQLAlchemyError) as exc:
            logger.warning("Failed to clear critical path cache for project %s: %s", project_id, exc)
            return
        domain_events.critical_path_cache_cleared.emit(project_id)

    def _read_cache(self, project_id: str) -> Optional[CriticalPathResult]:
        try:
            cached = self._cache_repo.get(project_id)
        except (CacheIOError, SQLAlchemyError) as exc:
            logger.warning("Error getting cached critical path for project %s: %s", project_id, exc)
            return None
        if cached is None:
            return None
        result, expires_at = cached
        if expires_at <= self._clock():
            return None
        return result

    def _cache_result(self, project_id: str, result: CriticalPathResult) -> None:
        expires_at = self._clock() + self._ttl
        try:
            self._cache_repo.put(project_id, result, expires_at)
            self.commit()
        except (CacheIOError, SQLAlchemyError) as exc:
            logger.warning("Failed to cache critical path result for project %s: %s", project_id, exc)

    # ---------------- settings ----------------

    def get_critical_path_settings(self, project_id: str) -> CriticalPathSettings:
        try:
            settings = self._settings_repo.get(project_id)
        except (SettingsIOError, SQLAlchemyError) as exc:
            logger.error("Error getting critical path settings for project %s: %s", project_id, exc)
            return CriticalPathSettings()
        return settings or CriticalPathSettings()

    def save_critical_path_settings(self, project_id: str, settings: CriticalPathSettings) -> None:
        demo = self._demo_mode.is_demo_mode()
        if demo:
            # critical-only view is not offered in demo mode
            settings = settings.without_critical_only()
        try:
            self._settings_repo.upsert(project_id, settings, demo=demo)
            self.commit()
        except SettingsIOError as exc:
            logger.error("Error saving critical path settings for project %s: %s", project_id, exc)
            raise
        except SQLAlchemyError as exc:
            logger.error("Error saving critical path settings for project %s: %s", project_id, exc)
            raise SettingsIOError(f"Could not save critical path settings: {exc}") from exc
        logger.info("Critical path settings saved for project %s", project_id)
        domain_events.critical_path_settings_changed.emit(project_id)

    def get_demo_mode_config(self) -> DemoModeConfig:
        return self._demo_config

    # ---------------- task records ----------------

    def update_task_critical_path_data(
        self,
        project_id: str,
        task_id: str,
        is_critical: bool,
        total_float: float,
    ) -> None:
        demo = self._demo_mode.is_demo_mode()
        try:
            self._task_data_repo.update_critical_data(
                project_id,
                task_id,
                is_critical=is_critical,
                total_float=total_float,
                demo=demo,
            )
            self.commit()
        except Exception as exc:
            logger.error("Error updating critical path data for task %s: %s", task_id, exc)
            self.rollback()
            raise
        logger.info(
            "Updated critical path data for task %s: is_critical=%s total_float=%s",
            task_id,
            is_critical,
            total_float,
        )
        domain_events.task_critical_data_changed.emit(task_id)


__all__ = ["CriticalPathService"]
