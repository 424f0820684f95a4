from .policy import EnvDemoModeProvider, StaticDemoModeProvider, cache_ttl, demo_mode_config, is_demo_mode
from .service import CriticalPathService

__all__ = [
    "CriticalPathService",
    "EnvDemoModeProvider",
    "StaticDemoModeProvider",
    "is_demo_mode",
    "demo_mode_config",
    "cache_ttl",
]
