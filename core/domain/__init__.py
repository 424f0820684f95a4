from core.domain.critical_path import (
    DEMO_WATERMARK,
    EPSILON,
    ComputedTask,
    CriticalPathResult,
    CriticalPathSettings,
    DemoModeConfig,
    InfeasibleTask,
)
from core.domain.enums import DependencyType, as_dependency_type
from core.domain.task import Task, TaskDependency, generate_id

__all__ = [
    "generate_id",
    "DependencyType",
    "as_dependency_type",
    "Task",
    "TaskDependency",
    "EPSILON",
    "DEMO_WATERMARK",
    "ComputedTask",
    "InfeasibleTask",
    "CriticalPathResult",
    "CriticalPathSettings",
    "DemoModeConfig",
]
