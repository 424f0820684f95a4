from infra.db.critical_path.mapper import (
    CRITICAL_PATH_CACHE_KEY,
    cache_from_orm,
    cache_to_orm,
    settings_from_orm,
    settings_to_orm,
)
from infra.db.critical_path.repository import (
    SqlAlchemyCriticalPathCacheRepository,
    SqlAlchemyCriticalPathSettingsRepository,
)

__all__ = [
    "CRITICAL_PATH_CACHE_KEY",
    "cache_to_orm",
    "cache_from_orm",
    "settings_to_orm",
    "settings_from_orm",
    "SqlAlchemyCriticalPathCacheRepository",
    "SqlAlchemyCriticalPathSettingsRepository",
]
