from __future__ import annotations

from dataclasses import replace

from core.models import CriticalPathResult, DemoModeConfig


def apply_demo_view(
    result: CriticalPathResult,
    config: DemoModeConfig | None = None,
) -> CriticalPathResult:
    """
    Read-only projection of a full result for demo mode.

    Keeps the first N critical tasks and N-1 critical dependencies, and
    rewrites every task's is_critical to match the kept set. `result` is
    left untouched.
    """
    config = config or DemoModeConfig()
    limit = max(0, config.max_critical_tasks)
    kept_tasks = result.critical_tasks[:limit]
    kept_dependencies = result.critical_dependencies[: max(0, limit - 1)]
    kept = set(kept_tasks)

    tasks = {
        task_id: replace(info, is_critical=task_id in kept)
        for task_id, info in result.tasks.items()
    }
    return replace(
        result,
        tasks=tasks,
        critical_tasks=kept_tasks,
        critical_dependencies=kept_dependencies,
        is_demo_view=True,
        watermark=config.watermark,
    )


__all__ = ["apply_demo_view"]
