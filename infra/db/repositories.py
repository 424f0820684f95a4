# infra/db/repositories.py
from infra.db.critical_path import (
    SqlAlchemyCriticalPathCacheRepository,
    SqlAlchemyCriticalPathSettingsRepository,
)
from infra.db.task import SqlAlchemyDependencyRepository, SqlAlchemyTaskRepository

__all__ = [
    "SqlAlchemyTaskRepository",
    "SqlAlchemyDependencyRepository",
    "SqlAlchemyCriticalPathCacheRepository",
    "SqlAlchemyCriticalPathSettingsRepository",
]
