from __future__ import annotations

import logging
import warnings
from typing import Sequence

from core.exceptions import InfeasibleScheduleWarning
from core.models import CriticalPathResult, Task, TaskDependency
from core.services.scheduling.graph import build_dependency_graph
from core.services.scheduling.passes import run_backward_pass, run_forward_pass
from core.services.scheduling.results import build_critical_path_result

logger = logging.getLogger(__name__)


def calculate_critical_path(
    tasks: Sequence[Task],
    dependencies: Sequence[TaskDependency],
) -> CriticalPathResult:
    """
    CPM over plain task/dependency records:
    - forward pass: ES/EF
    - backward pass: LS/LF
    - FS, SS, FF, SF with signed lag
    - total float, critical tasks, critical dependencies

    Raises CycleDetectedError / InvalidDependencyReference on malformed
    input. A schedule with negative float is still returned, with an
    InfeasibleScheduleWarning issued.
    """
    graph = build_dependency_graph(tasks, dependencies)
    early = run_forward_pass(graph)
    late = run_backward_pass(graph, early.project_duration)
    result = build_critical_path_result(graph, early, late)

    if result.infeasible_tasks:
        worst = min(result.infeasible_tasks, key=lambda item: item.total_float)
        logger.warning(
            "Infeasible schedule: %d task(s) with negative float, worst %s (%s)",
            len(result.infeasible_tasks),
            worst.task_id,
            worst.total_float,
        )
        warnings.warn(
            InfeasibleScheduleWarning(
                worst.task_id,
                worst.total_float,
                infeasible_count=len(result.infeasible_tasks),
            ),
            stacklevel=2,
        )

    return result


__all__ = ["calculate_critical_path"]
