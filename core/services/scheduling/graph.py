from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, List, Sequence

from core.domain.enums import as_dependency_type
from core.exceptions import InvalidDependencyReference, ValidationError
from core.models import Task, TaskDependency


@dataclass(frozen=True)
class Edge:
    dependency: TaskDependency
    source: int
    target: int


@dataclass(frozen=True)
class DependencyGraph:
    """
    Arena of tasks indexed by input position.

    successors[i] / predecessors[i] hold indexes into `edges`, so both
    passes walk each edge once.
    """

    tasks: tuple[Task, ...]
    index_by_id: Dict[str, int]
    edges: tuple[Edge, ...]
    successors: tuple[tuple[int, ...], ...]
    predecessors: tuple[tuple[int, ...], ...]

    def __len__(self) -> int:
        return len(self.tasks)

    def is_root(self, index: int) -> bool:
        return not self.predecessors[index]

    def is_terminal(self, index: int) -> bool:
        return not self.successors[index]


def build_dependency_graph(
    tasks: Sequence[Task],
    dependencies: Sequence[TaskDependency],
) -> DependencyGraph:
    index_by_id: Dict[str, int] = {}
    for index, task in enumerate(tasks):
        if task.id in index_by_id:
            raise ValidationError(f"Duplicate task id: {task.id}", code="DUPLICATE_TASK_ID")
        if task.duration is None or task.duration < 0:
            raise ValidationError(
                f"Task {task.id} has invalid duration {task.duration!r}; expected >= 0.",
                code="INVALID_DURATION",
            )
        index_by_id[task.id] = index

    edges: List[Edge] = []
    successors: List[List[int]] = [[] for _ in tasks]
    predecessors: List[List[int]] = [[] for _ in tasks]

    for dep in dependencies:
        source = index_by_id.get(dep.source_task_id)
        if source is None:
            raise InvalidDependencyReference(dep.id, dep.source_task_id)
        target = index_by_id.get(dep.target_task_id)
        if target is None:
            raise InvalidDependencyReference(dep.id, dep.target_task_id)

        dep_type = as_dependency_type(dep.type)
        if dep_type is not dep.type:
            dep = replace(dep, type=dep_type)

        edge_index = len(edges)
        edges.append(Edge(dependency=dep, source=source, target=target))
        successors[source].append(edge_index)
        predecessors[target].append(edge_index)

    return DependencyGraph(
        tasks=tuple(tasks),
        index_by_id=index_by_id,
        edges=tuple(edges),
        successors=tuple(tuple(items) for items in successors),
        predecessors=tuple(tuple(items) for items in predecessors),
    )


__all__ = ["Edge", "DependencyGraph", "build_dependency_graph"]
