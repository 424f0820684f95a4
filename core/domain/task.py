from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional
from uuid import uuid4

from core.domain.enums import DependencyType


def generate_id() -> str:
    return str(uuid4())


@dataclass(frozen=True)
class Task:
    id: str
    name: str
    duration: int = 0
    start: Optional[date] = None
    end: Optional[date] = None
    # must-finish-by, in time units from project start
    deadline: Optional[int] = None

    @staticmethod
    def create(name: str, duration: int = 0, **extra) -> "Task":
        return Task(id=generate_id(), name=name, duration=duration, **extra)


@dataclass(frozen=True)
class TaskDependency:
    id: str
    source_task_id: str
    target_task_id: str
    type: DependencyType = DependencyType.FINISH_TO_START
    lag: int = 0  # negative for lead time

    @staticmethod
    def create(
        source_task_id: str,
        target_task_id: str,
        type: DependencyType = DependencyType.FINISH_TO_START,
        lag: int = 0,
    ) -> "TaskDependency":
        return TaskDependency(
            id=generate_id(),
            source_task_id=source_task_id,
            target_task_id=target_task_id,
            type=type,
            lag=lag,
        )


__all__ = ["generate_id", "Task", "TaskDependency"]
