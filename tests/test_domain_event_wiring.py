from core.events.domain_events import domain_events
from core.exceptions import CacheIOError
from core.models import CriticalPathSettings

from cpm_helpers import make_task


class _OfflineCache:
    def delete(self, project_id):
        raise CacheIOError("offline")


def test_settings_save_emits_settings_changed(services):
    svc = services["critical_path_service"]
    seen: list[str] = []

    def _on_settings_changed(project_id: str) -> None:
        seen.append(project_id)

    domain_events.critical_path_settings_changed.connect(_on_settings_changed)
    try:
        svc.save_critical_path_settings("P1", CriticalPathSettings(show_critical_path=True))
    finally:
        domain_events.critical_path_settings_changed.disconnect(_on_settings_changed)

    assert seen == ["P1"]


def test_task_flag_update_emits_task_critical_data_changed(services):
    svc = services["critical_path_service"]
    services["task_repo"].add("P1", make_task("A", 2))
    services["session"].commit()
    seen: list[str] = []

    def _on_task_changed(task_id: str) -> None:
        seen.append(task_id)

    domain_events.task_critical_data_changed.connect(_on_task_changed)
    try:
        svc.update_task_critical_path_data("P1", "A", True, 0)
    finally:
        domain_events.task_critical_data_changed.disconnect(_on_task_changed)

    assert seen == ["A"]


def test_failed_cache_clear_does_not_emit(services, monkeypatch):
    svc = services["critical_path_service"]
    seen: list[str] = []
    monkeypatch.setattr(svc, "_cache_repo", _OfflineCache())

    domain_events.critical_path_cache_cleared.connect(seen.append)
    try:
        svc.clear_critical_path_cache("P1")
    finally:
        domain_events.critical_path_cache_cleared.disconnect(seen.append)

    assert seen == []
