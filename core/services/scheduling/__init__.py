from .demo_view import apply_demo_view
from .engine import calculate_critical_path
from .graph import DependencyGraph, build_dependency_graph
from .passes import EarlyTimes, LateTimes, run_backward_pass, run_forward_pass
from .results import build_critical_path_result, classify_dependencies, classify_tasks

__all__ = [
    "calculate_critical_path",
    "apply_demo_view",
    "DependencyGraph",
    "build_dependency_graph",
    "EarlyTimes",
    "LateTimes",
    "run_forward_pass",
    "run_backward_pass",
    "classify_tasks",
    "classify_dependencies",
    "build_critical_path_result",
]
