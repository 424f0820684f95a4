"""Notify listeners (timeline, task table) when critical path data for a project changes."""
from core.events.signal import Signal


class DomainEvents:
    def __init__(self) -> None:
        self.critical_path_changed: Signal[str] = Signal()           # project_id
        self.critical_path_cache_cleared: Signal[str] = Signal()     # project_id
        self.critical_path_settings_changed: Signal[str] = Signal()  # project_id
        self.task_critical_data_changed: Signal[str] = Signal()      # task_id


# SINGLE global instance
domain_events = DomainEvents()
