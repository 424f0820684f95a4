from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Any, Optional

from core.models import CriticalPathResult, CriticalPathSettings
from infra.db.models import CriticalPathCacheORM, ProgrammeSettingsORM

logger = logging.getLogger(__name__)

CRITICAL_PATH_CACHE_KEY = "programme_critical_path_cache"


def _to_json(payload: dict[str, Any]) -> str:
    return json.dumps(payload, default=str, ensure_ascii=False, sort_keys=True)


def _from_json(raw: str | None) -> dict[str, Any]:
    if not raw:
        return {}
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        return {}
    return value if isinstance(value, dict) else {}


def cache_to_orm(
    project_id: str,
    result: CriticalPathResult,
    expires_at: datetime,
    updated_at: datetime,
) -> CriticalPathCacheORM:
    return CriticalPathCacheORM(
        project_id=project_id,
        cache_key=CRITICAL_PATH_CACHE_KEY,
        cache_data=_to_json(result.to_dict()),
        expires_at=expires_at,
        updated_at=updated_at,
    )


def cache_from_orm(obj: CriticalPathCacheORM) -> Optional[tuple[CriticalPathResult, datetime]]:
    payload = _from_json(obj.cache_data)
    if not payload:
        logger.warning("Ignoring unreadable critical path cache entry for project %s", obj.project_id)
        return None
    try:
        result = CriticalPathResult.from_dict(payload)
    except (KeyError, TypeError, ValueError) as exc:
        logger.warning("Ignoring malformed critical path cache entry for project %s: %s", obj.project_id, exc)
        return None
    return result, obj.expires_at


def settings_to_orm(
    project_id: str,
    settings: CriticalPathSettings,
    *,
    demo: bool,
    updated_at: datetime,
) -> ProgrammeSettingsORM:
    return ProgrammeSettingsORM(
        project_id=project_id,
        critical_path_settings=_to_json(settings.to_dict()),
        demo=demo,
        updated_at=updated_at,
    )


def settings_from_orm(obj: ProgrammeSettingsORM) -> CriticalPathSettings:
    return CriticalPathSettings.from_dict(_from_json(obj.critical_path_settings))


__all__ = [
    "CRITICAL_PATH_CACHE_KEY",
    "cache_to_orm",
    "cache_from_orm",
    "settings_to_orm",
    "settings_from_orm",
]
