from .critical_path import CriticalPathService, EnvDemoModeProvider, StaticDemoModeProvider
from .scheduling import apply_demo_view, calculate_critical_path

__all__ = [
    "CriticalPathService",
    "EnvDemoModeProvider",
    "StaticDemoModeProvider",
    "calculate_critical_path",
    "apply_demo_view",
]
