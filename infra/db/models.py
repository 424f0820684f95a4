# infra/db/models.py
from __future__ import annotations
from datetime import date, datetime
from typing import Optional

from sqlalchemy import (
    Boolean,
    Date,
    DateTime,
    Enum as SAEnum,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column

from infra.db.base import Base
from core.models import DependencyType


class TaskORM(Base):
    __tablename__ = "tasks"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    project_id: Mapped[str] = mapped_column(String, nullable=False)
    name: Mapped[str] = mapped_column(String, nullable=False)
    duration: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    start_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    end_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    deadline: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    # written back from the critical path computation
    is_critical: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    total_float: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    demo: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    updated_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
Index("idx_tasks_project_id", TaskORM.project_id)


class TaskDependencyORM(Base):
    __tablename__ = "task_dependencies"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    source_task_id: Mapped[str] = mapped_column(String, ForeignKey("tasks.id", ondelete="CASCADE"), nullable=False)
    target_task_id: Mapped[str] = mapped_column(String, ForeignKey("tasks.id", ondelete="CASCADE"), nullable=False)
    dependency_type: Mapped[DependencyType] = mapped_column(
        SAEnum(DependencyType), default=DependencyType.FINISH_TO_START, nullable=False
    )
    lag: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
Index("idx_dep_source", TaskDependencyORM.source_task_id)
Index("idx_dep_target", TaskDependencyORM.target_task_id)


class CriticalPathCacheORM(Base):
    __tablename__ = "programme_cache"

    project_id: Mapped[str] = mapped_column(String, primary_key=True)
    cache_key: Mapped[str] = mapped_column(String(64), primary_key=True)
    cache_data: Mapped[str] = mapped_column(Text, nullable=False, default="{}")
    expires_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)


class ProgrammeSettingsORM(Base):
    __tablename__ = "programme_settings"

    project_id: Mapped[str] = mapped_column(String, primary_key=True)
    critical_path_settings: Mapped[str] = mapped_column(Text, nullable=False, default="{}")
    demo: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
