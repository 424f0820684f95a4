from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, Callable

from sqlalchemy.orm import Session

from core.interfaces import DemoModeProvider
from core.models import CriticalPathResult, DemoModeConfig
from core.services.critical_path import CriticalPathService, EnvDemoModeProvider
from core.services.common.time import utc_now
from infra.db.base import build_session_factory
from infra.db.repositories import (
    SqlAlchemyCriticalPathCacheRepository,
    SqlAlchemyCriticalPathSettingsRepository,
    SqlAlchemyDependencyRepository,
    SqlAlchemyTaskRepository,
)
from infra.logging_config import setup_logging
from infra.migrate import run_migrations
from infra.operational_support import bind_trace_id
from infra.path import database_url

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServiceGraph:
    session: Session
    task_repo: SqlAlchemyTaskRepository
    dependency_repo: SqlAlchemyDependencyRepository
    cache_repo: SqlAlchemyCriticalPathCacheRepository
    settings_repo: SqlAlchemyCriticalPathSettingsRepository
    critical_path_service: CriticalPathService

    def as_dict(self) -> dict[str, Any]:
        return {
            "session": self.session,
            "task_repo": self.task_repo,
            "dependency_repo": self.dependency_repo,
            "cache_repo": self.cache_repo,
            "settings_repo": self.settings_repo,
            "critical_path_service": self.critical_path_service,
        }


def build_service_graph(
    session: Session,
    *,
    demo_mode: DemoModeProvider | None = None,
    demo_config: DemoModeConfig | None = None,
    ttl: timedelta | None = None,
    clock: Callable[[], datetime] = utc_now,
) -> ServiceGraph:
    task_repo = SqlAlchemyTaskRepository(session)
    dependency_repo = SqlAlchemyDependencyRepository(session)
    cache_repo = SqlAlchemyCriticalPathCacheRepository(session)
    settings_repo = SqlAlchemyCriticalPathSettingsRepository(session)

    critical_path_service = CriticalPathService(
        session,
        cache_repo=cache_repo,
        settings_repo=settings_repo,
        task_data_repo=task_repo,
        demo_mode=demo_mode or EnvDemoModeProvider(),
        task_repo=task_repo,
        dependency_repo=dependency_repo,
        demo_config=demo_config,
        ttl=ttl,
        clock=clock,
    )
    return ServiceGraph(
        session=session,
        task_repo=task_repo,
        dependency_repo=dependency_repo,
        cache_repo=cache_repo,
        settings_repo=settings_repo,
        critical_path_service=critical_path_service,
    )


def bootstrap_service_graph(
    db_url: str | None = None,
    *,
    log_dir: Path | None = None,
    demo_mode: DemoModeProvider | None = None,
) -> ServiceGraph:
    """Headless startup: logging, schema upgrade, session, wired services."""
    setup_logging(log_dir=log_dir)
    url = db_url or database_url()
    run_migrations(db_url=url)
    session = build_session_factory(url)()
    return build_service_graph(session, demo_mode=demo_mode)


def recalculate_traced(graph: ServiceGraph, project_id: str, trace_id: str | None = None) -> CriticalPathResult:
    with bind_trace_id(trace_id) as bound:
        logger.info("Recalculating critical path for project %s", project_id)
        result = graph.critical_path_service.recalculate_project(project_id)
        logger.info("Recalculation %s finished", bound)
        return result


__all__ = ["ServiceGraph", "build_service_graph", "bootstrap_service_graph", "recalculate_traced"]
