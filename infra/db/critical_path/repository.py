from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.exceptions import CacheIOError, SettingsIOError
from core.interfaces import CriticalPathCacheRepository, CriticalPathSettingsRepository
from core.models import CriticalPathResult, CriticalPathSettings
from infra.db.critical_path.mapper import (
    CRITICAL_PATH_CACHE_KEY,
    cache_from_orm,
    cache_to_orm,
    settings_from_orm,
    settings_to_orm,
)
from infra.db.models import CriticalPathCacheORM, ProgrammeSettingsORM
from core.services.common.time import utc_now


class SqlAlchemyCriticalPathCacheRepository(CriticalPathCacheRepository):
    def __init__(self, session: Session):
        self.session = session

    def get(self, project_id: str) -> Optional[tuple[CriticalPathResult, datetime]]:
        try:
            obj = self.session.get(CriticalPathCacheORM, (project_id, CRITICAL_PATH_CACHE_KEY))
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise CacheIOError(f"Could not read critical path cache: {exc}") from exc
        return cache_from_orm(obj) if obj else None

    def put(self, project_id: str, result: CriticalPathResult, expires_at: datetime) -> None:
        try:
            self.session.merge(cache_to_orm(project_id, result, expires_at, utc_now()))
            self.session.flush()
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise CacheIOError(f"Could not write critical path cache: {exc}") from exc

    def delete(self, project_id: str) -> None:
        stmt = delete(CriticalPathCacheORM).where(
            CriticalPathCacheORM.project_id == project_id,
            CriticalPathCacheORM.cache_key == CRITICAL_PATH_CACHE_KEY,
        )
        try:
            self.session.execute(stmt)
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise CacheIOError(f"Could not clear critical path cache: {exc}") from exc


class SqlAlchemyCriticalPathSettingsRepository(CriticalPathSettingsRepository):
    def __init__(self, session: Session):
        self.session = session

    def get(self, project_id: str) -> Optional[CriticalPathSettings]:
        try:
            obj = self.session.get(ProgrammeSettingsORM, project_id)
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise SettingsIOError(f"Could not read critical path settings: {exc}") from exc
        return settings_from_orm(obj) if obj else None

    def upsert(self, project_id: str, settings: CriticalPathSettings, *, demo: bool) -> None:
        try:
            self.session.merge(settings_to_orm(project_id, settings, demo=demo, updated_at=utc_now()))
            self.session.flush()
        except SQLAlchemyError as exc:
            self.session.rollback()
            raise SettingsIOError(f"Could not write critical path settings: {exc}") from exc


__all__ = ["SqlAlchemyCriticalPathCacheRepository", "SqlAlchemyCriticalPathSettingsRepository"]
