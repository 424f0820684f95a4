from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import List

from core.exceptions import CycleDetectedError
from core.services.scheduling.constraints import early_start_constraint, late_finish_constraint
from core.services.scheduling.graph import DependencyGraph


@dataclass(frozen=True)
class EarlyTimes:
    early_start: tuple[float, ...]
    early_finish: tuple[float, ...]
    topo_order: tuple[int, ...]

    @property
    def project_duration(self) -> float:
        return max(self.early_finish, default=0)


@dataclass(frozen=True)
class LateTimes:
    late_start: tuple[float, ...]
    late_finish: tuple[float, ...]


def _raise_cycle(graph: DependencyGraph, finalized: List[bool]) -> None:
    stuck = [graph.tasks[i].id for i, done in enumerate(finalized) if not done]
    raise CycleDetectedError(stuck)


def run_forward_pass(graph: DependencyGraph) -> EarlyTimes:
    count = len(graph)
    es: List[float] = [0] * count
    ef: List[float] = [0] * count
    finalized = [False] * count
    remaining = [len(graph.predecessors[i]) for i in range(count)]

    queue: deque[int] = deque()
    for index in range(count):
        if graph.is_root(index):
            es[index] = 0
            ef[index] = graph.tasks[index].duration
            finalized[index] = True
            queue.append(index)

    order: List[int] = []
    while queue:
        current = queue.popleft()
        order.append(current)
        for edge_index in graph.successors[current]:
            target = graph.edges[edge_index].target
            remaining[target] -= 1
            if remaining[target] > 0:
                continue

            duration = graph.tasks[target].duration
            candidates = []
            for incoming in graph.predecessors[target]:
                edge = graph.edges[incoming]
                candidates.append(
                    early_start_constraint(
                        edge.dependency.type,
                        edge.dependency.lag,
                        es[edge.source],
                        ef[edge.source],
                        duration,
                    )
                )
            es[target] = max(candidates)
            ef[target] = es[target] + duration
            finalized[target] = True
            queue.append(target)

    if len(order) != count:
        _raise_cycle(graph, finalized)

    return EarlyTimes(early_start=tuple(es), early_finish=tuple(ef), topo_order=tuple(order))


def _late_finish_bound(graph: DependencyGraph, index: int, project_duration: float) -> float:
    deadline = graph.tasks[index].deadline
    if deadline is not None and deadline < project_duration:
        return deadline
    return project_duration


def run_backward_pass(graph: DependencyGraph, project_duration: float) -> LateTimes:
    """
    Terminal tasks finish at the project duration. Every other task is also
    bounded by it (implicit link to the project finish) and by its deadline.
    """
    count = len(graph)
    ls: List[float] = [0] * count
    lf: List[float] = [0] * count
    finalized = [False] * count
    remaining = [len(graph.successors[i]) for i in range(count)]

    queue: deque[int] = deque()
    for index in range(count):
        if graph.is_terminal(index):
            lf[index] = _late_finish_bound(graph, index, project_duration)
            ls[index] = lf[index] - graph.tasks[index].duration
            finalized[index] = True
            queue.append(index)

    processed = 0
    while queue:
        current = queue.popleft()
        processed += 1
        for edge_index in graph.predecessors[current]:
            source = graph.edges[edge_index].source
            remaining[source] -= 1
            if remaining[source] > 0:
                continue

            duration = graph.tasks[source].duration
            late_finish = _late_finish_bound(graph, source, project_duration)
            for outgoing in graph.successors[source]:
                edge = graph.edges[outgoing]
                late_finish = min(
                    late_finish,
                    late_finish_constraint(
                        edge.dependency.type,
                        edge.dependency.lag,
                        ls[edge.target],
                        lf[edge.target],
                        duration,
                    ),
                )
            lf[source] = late_finish
            ls[source] = late_finish - duration
            finalized[source] = True
            queue.append(source)

    if processed != count:
        _raise_cycle(graph, finalized)

    return LateTimes(late_start=tuple(ls), late_finish=tuple(lf))


__all__ = ["EarlyTimes", "LateTimes", "run_forward_pass", "run_backward_pass"]
