# core/models.py
from core.domain import (
    ComputedTask,
    CriticalPathResult,
    CriticalPathSettings,
    DemoModeConfig,
    DependencyType,
    InfeasibleTask,
    Task,
    TaskDependency,
    generate_id,
)

__all__ = [
    "generate_id",
    "DependencyType",
    "Task",
    "TaskDependency",
    "ComputedTask",
    "InfeasibleTask",
    "CriticalPathResult",
    "CriticalPathSettings",
    "DemoModeConfig",
]
