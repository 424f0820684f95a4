from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional, Tuple

# Absorbs floating-point error from lag arithmetic.
EPSILON = 0.01

DEMO_WATERMARK = "DEMO LIMIT - Not full critical path shown"


@dataclass(frozen=True)
class ComputedTask:
    id: str
    early_start: float
    early_finish: float
    late_start: float
    late_finish: float
    total_float: float
    is_critical: bool
    is_infeasible: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "early_start": self.early_start,
            "early_finish": self.early_finish,
            "late_start": self.late_start,
            "late_finish": self.late_finish,
            "total_float": self.total_float,
            "is_critical": self.is_critical,
            "is_infeasible": self.is_infeasible,
        }

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "ComputedTask":
        return ComputedTask(
            id=str(data["id"]),
            early_start=data["early_start"],
            early_finish=data["early_finish"],
            late_start=data["late_start"],
            late_finish=data["late_finish"],
            total_float=data["total_float"],
            is_critical=bool(data["is_critical"]),
            is_infeasible=bool(data.get("is_infeasible", False)),
        )


@dataclass(frozen=True)
class InfeasibleTask:
    task_id: str
    total_float: float


@dataclass(frozen=True)
class CriticalPathResult:
    tasks: Dict[str, ComputedTask]
    critical_tasks: Tuple[str, ...]
    critical_dependencies: Tuple[str, ...]
    project_duration: float
    infeasible_tasks: Tuple[InfeasibleTask, ...] = ()
    is_demo_view: bool = False
    watermark: Optional[str] = None

    @property
    def is_feasible(self) -> bool:
        return not self.infeasible_tasks

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tasks": {task_id: info.to_dict() for task_id, info in self.tasks.items()},
            "critical_tasks": list(self.critical_tasks),
            "critical_dependencies": list(self.critical_dependencies),
            "project_duration": self.project_duration,
            "infeasible_tasks": [
                {"task_id": item.task_id, "total_float": item.total_float}
                for item in self.infeasible_tasks
            ],
            "is_demo_view": self.is_demo_view,
            "watermark": self.watermark,
        }

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "CriticalPathResult":
        return CriticalPathResult(
            tasks={
                str(task_id): ComputedTask.from_dict(info)
                for task_id, info in (data.get("tasks") or {}).items()
            },
            critical_tasks=tuple(data.get("critical_tasks") or ()),
            critical_dependencies=tuple(data.get("critical_dependencies") or ()),
            project_duration=data.get("project_duration", 0),
            infeasible_tasks=tuple(
                InfeasibleTask(task_id=str(item["task_id"]), total_float=item["total_float"])
                for item in data.get("infeasible_tasks") or ()
            ),
            is_demo_view=bool(data.get("is_demo_view", False)),
            watermark=data.get("watermark"),
        )


@dataclass(frozen=True)
class CriticalPathSettings:
    show_critical_path: bool = False
    critical_only: bool = False

    def without_critical_only(self) -> "CriticalPathSettings":
        return replace(self, critical_only=False)

    def to_dict(self) -> Dict[str, bool]:
        return {
            "show_critical_path": self.show_critical_path,
            "critical_only": self.critical_only,
        }

    @staticmethod
    def from_dict(data: Optional[Mapping[str, Any]]) -> "CriticalPathSettings":
        if not data:
            return CriticalPathSettings()
        return CriticalPathSettings(
            show_critical_path=bool(data.get("show_critical_path", False)),
            critical_only=bool(data.get("critical_only", False)),
        )


@dataclass(frozen=True)
class DemoModeConfig:
    max_critical_tasks: int = 5
    watermark: str = field(default=DEMO_WATERMARK)


__all__ = [
    "EPSILON",
    "DEMO_WATERMARK",
    "ComputedTask",
    "InfeasibleTask",
    "CriticalPathResult",
    "CriticalPathSettings",
    "DemoModeConfig",
]
