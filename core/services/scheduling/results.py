from __future__ import annotations

from typing import Dict, List

from core.models import ComputedTask, CriticalPathResult, InfeasibleTask
from core.domain.critical_path import EPSILON
from core.services.scheduling.constraints import early_start_constraint
from core.services.scheduling.graph import DependencyGraph
from core.services.scheduling.passes import EarlyTimes, LateTimes


def classify_tasks(
    graph: DependencyGraph,
    early: EarlyTimes,
    late: LateTimes,
) -> tuple[Dict[str, ComputedTask], List[str], List[InfeasibleTask]]:
    """
    Critical ids come back in computation (topological) order, so any
    prefix of them is a connected run from the project start.
    """
    computed: Dict[str, ComputedTask] = {}
    infeasible: List[InfeasibleTask] = []

    for index, task in enumerate(graph.tasks):
        est = early.early_start[index]
        lst = late.late_start[index]
        total_float = lst - est

        # negative float is its own condition, neither critical nor slack
        is_infeasible = total_float <= -EPSILON
        is_critical = abs(total_float) < EPSILON

        computed[task.id] = ComputedTask(
            id=task.id,
            early_start=est,
            early_finish=early.early_finish[index],
            late_start=lst,
            late_finish=late.late_finish[index],
            total_float=total_float,
            is_critical=is_critical,
            is_infeasible=is_infeasible,
        )
        if is_infeasible:
            infeasible.append(InfeasibleTask(task_id=task.id, total_float=total_float))

    critical = [
        graph.tasks[index].id
        for index in early.topo_order
        if computed[graph.tasks[index].id].is_critical
    ]
    return computed, critical, infeasible


def classify_dependencies(
    graph: DependencyGraph,
    early: EarlyTimes,
    computed: Dict[str, ComputedTask],
) -> List[str]:
    """
    A dependency is critical when it links two critical tasks and is the one
    driving the target's early start. Ordered by the target's topological
    position, then input order.
    """
    position = {index: rank for rank, index in enumerate(early.topo_order)}
    critical: List[tuple[int, int, str]] = []
    for edge_index, edge in enumerate(graph.edges):
        dep = edge.dependency
        source = computed[dep.source_task_id]
        target = computed[dep.target_task_id]
        if not (source.is_critical and target.is_critical):
            continue

        contribution = early_start_constraint(
            dep.type,
            dep.lag,
            early.early_start[edge.source],
            early.early_finish[edge.source],
            graph.tasks[edge.target].duration,
        )
        if abs(early.early_start[edge.target] - contribution) < EPSILON:
            critical.append((position[edge.target], edge_index, dep.id))
    return [dep_id for _, _, dep_id in sorted(critical)]


def build_critical_path_result(
    graph: DependencyGraph,
    early: EarlyTimes,
    late: LateTimes,
) -> CriticalPathResult:
    computed, critical_tasks, infeasible = classify_tasks(graph, early, late)
    critical_dependencies = classify_dependencies(graph, early, computed)
    return CriticalPathResult(
        tasks=computed,
        critical_tasks=tuple(critical_tasks),
        critical_dependencies=tuple(critical_dependencies),
        project_duration=early.project_duration,
        infeasible_tasks=tuple(infeasible),
    )


__all__ = ["classify_tasks", "classify_dependencies", "build_critical_path_result"]
