# core/interfaces.py
from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from core.models import CriticalPathResult, CriticalPathSettings, Task, TaskDependency


class CriticalPathCacheRepository(ABC):
    @abstractmethod
    def get(self, project_id: str) -> Optional[tuple[CriticalPathResult, datetime]]:
        """Returns the stored result and its expiry, or None."""

    @abstractmethod
    def put(self, project_id: str, result: CriticalPathResult, expires_at: datetime) -> None: ...

    @abstractmethod
    def delete(self, project_id: str) -> None: ...


class CriticalPathSettingsRepository(ABC):
    @abstractmethod
    def get(self, project_id: str) -> Optional[CriticalPathSettings]: ...

    @abstractmethod
    def upsert(self, project_id: str, settings: CriticalPathSettings, *, demo: bool) -> None: ...


class TaskCriticalDataRepository(ABC):
    @abstractmethod
    def update_critical_data(
        self,
        project_id: str,
        task_id: str,
        *,
        is_critical: bool,
        total_float: float,
        demo: bool,
    ) -> None: ...


class TaskRepository(ABC):
    @abstractmethod
    def list_by_project(self, project_id: str) -> List[Task]: ...


class DependencyRepository(ABC):
    @abstractmethod
    def list_by_project(self, project_id: str) -> List[TaskDependency]: ...


class DemoModeProvider(ABC):
    @abstractmethod
    def is_demo_mode(self) -> bool: ...


__all__ = [
    "CriticalPathCacheRepository",
    "CriticalPathSettingsRepository",
    "TaskCriticalDataRepository",
    "TaskRepository",
    "DependencyRepository",
    "DemoModeProvider",
]
