# core/exceptions.py
from __future__ import annotations

from typing import Sequence


class DomainError(Exception):
    """Base class for domain-level errors."""
    def __init__(self, message: str, *, code: str | None = None):
        super().__init__(message)
        self.code = code or self.__class__.__name__


class ValidationError(DomainError):
    """Raised when data is invalid or violates constraints."""


class NotFoundError(DomainError):
    """Raised when an entity is not found."""


class BusinessRuleError(DomainError):
    """Raised when business rules are violated (e.g., circular dependencies)."""


class CycleDetectedError(BusinessRuleError):
    """Raised when the dependency graph is not acyclic."""

    def __init__(self, task_ids: Sequence[str], *, message: str | None = None):
        self.task_ids = tuple(task_ids)
        super().__init__(
            message or "Cannot schedule project: circular dependency detected "
            f"between tasks {', '.join(self.task_ids)}.",
            code="SCHEDULE_CYCLE",
        )


class InvalidDependencyReference(ValidationError):
    """Raised when a dependency points at a task id that is not in the task list."""

    def __init__(self, dependency_id: str, task_id: str):
        self.dependency_id = dependency_id
        self.task_id = task_id
        super().__init__(
            f"Dependency {dependency_id} references unknown task {task_id}.",
            code="INVALID_DEPENDENCY_REFERENCE",
        )


class InfeasibleScheduleWarning(DomainError, UserWarning):
    """Issued when a task ends up with negative total float (over-constrained schedule)."""

    def __init__(self, task_id: str, total_float: float, *, infeasible_count: int = 1):
        self.task_id = task_id
        self.total_float = total_float
        self.infeasible_count = infeasible_count
        super().__init__(
            f"Schedule is infeasible: {infeasible_count} task(s) with negative float, "
            f"worst is {task_id} with total float {total_float}.",
            code="INFEASIBLE_SCHEDULE",
        )


class PersistenceError(DomainError):
    """Raised when an external store fails."""


class CacheIOError(PersistenceError):
    """Critical path cache read/write failed."""


class SettingsIOError(PersistenceError):
    """Critical path settings read/write failed."""
