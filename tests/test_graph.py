import pytest

from cpm_helpers import fs, make_task
from core.exceptions import InvalidDependencyReference, ValidationError
from core.models import DependencyType, TaskDependency
from core.services.scheduling import (
    build_dependency_graph,
    calculate_critical_path,
    run_backward_pass,
    run_forward_pass,
)


def test_graph_builds_successor_and_predecessor_lists(branch_project):
    tasks, deps = branch_project

    graph = build_dependency_graph(tasks, deps)

    t2 = graph.index_by_id["T2"]
    successor_targets = [graph.tasks[graph.edges[e].target].id for e in graph.successors[t2]]
    predecessor_sources = [graph.tasks[graph.edges[e].source].id for e in graph.predecessors[t2]]
    assert successor_targets == ["T3", "T5"]
    assert predecessor_sources == ["T1"]
    assert graph.is_root(graph.index_by_id["T1"])
    assert graph.is_terminal(graph.index_by_id["T5"])
    assert graph.is_terminal(graph.index_by_id["T7"])
    assert len(graph) == 7


def test_dangling_target_raises_invalid_reference():
    tasks = [make_task("A", 1)]
    deps = [fs("D1", "A", "GHOST")]

    with pytest.raises(InvalidDependencyReference) as exc:
        build_dependency_graph(tasks, deps)

    assert exc.value.dependency_id == "D1"
    assert exc.value.task_id == "GHOST"
    assert exc.value.code == "INVALID_DEPENDENCY_REFERENCE"


def test_dangling_source_aborts_whole_calculation():
    tasks = [make_task("A", 1)]
    deps = [fs("D1", "GHOST", "A")]

    with pytest.raises(InvalidDependencyReference):
        calculate_critical_path(tasks, deps)


def test_duplicate_task_ids_are_rejected():
    with pytest.raises(ValidationError) as exc:
        build_dependency_graph([make_task("A", 1), make_task("A", 2)], [])
    assert exc.value.code == "DUPLICATE_TASK_ID"


def test_negative_duration_is_rejected():
    with pytest.raises(ValidationError) as exc:
        build_dependency_graph([make_task("A", -1)], [])
    assert exc.value.code == "INVALID_DURATION"


def test_short_code_dependency_types_are_accepted():
    tasks = [make_task("A", 3), make_task("B", 2)]
    deps = [
        TaskDependency(id="AB", source_task_id="A", target_task_id="B", type="FS"),
        TaskDependency(id="AB2", source_task_id="A", target_task_id="B", type="start-to-start", lag=1),
    ]

    graph = build_dependency_graph(tasks, deps)
    result = calculate_critical_path(tasks, deps)

    assert [edge.dependency.type for edge in graph.edges] == [
        DependencyType.FINISH_TO_START,
        DependencyType.START_TO_START,
    ]
    assert result.tasks["B"].early_start == 3
    assert result.critical_dependencies == ("AB",)


def test_unknown_dependency_type_is_a_validation_error():
    tasks = [make_task("A", 1), make_task("B", 1)]
    deps = [TaskDependency(id="AB", source_task_id="A", target_task_id="B", type="bogus")]

    with pytest.raises(ValidationError) as exc:
        calculate_critical_path(tasks, deps)
    assert exc.value.code == "INVALID_DEPENDENCY_TYPE"


def test_passes_seed_from_roots_and_terminals():
    tasks = [make_task("A", 2), make_task("B", 3), make_task("C", 1)]
    deps = [fs("AB", "A", "B")]

    graph = build_dependency_graph(tasks, deps)
    early = run_forward_pass(graph)
    late = run_backward_pass(graph, early.project_duration)

    roots = [graph.tasks[i].id for i in range(len(graph)) if graph.is_root(i)]
    terminals = [graph.tasks[i].id for i in range(len(graph)) if graph.is_terminal(i)]
    assert roots == ["A", "C"]
    assert terminals == ["B", "C"]
    assert [graph.tasks[i].id for i in early.topo_order[:2]] == roots
    assert early.early_start == (0, 2, 0)
    assert late.late_finish == (2, 5, 5)
