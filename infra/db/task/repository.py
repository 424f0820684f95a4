from __future__ import annotations

from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.orm import Session

from core.exceptions import NotFoundError
from core.interfaces import DependencyRepository, TaskCriticalDataRepository, TaskRepository
from core.models import Task, TaskDependency
from infra.db.models import TaskDependencyORM, TaskORM
from infra.db.task.mapper import dependency_from_orm, dependency_to_orm, task_from_orm, task_to_orm
from core.services.common.time import utc_now


class SqlAlchemyTaskRepository(TaskRepository, TaskCriticalDataRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, project_id: str, task: Task) -> None:
        self.session.add(task_to_orm(task, project_id))

    def get(self, task_id: str) -> Optional[Task]:
        obj = self.session.get(TaskORM, task_id)
        return task_from_orm(obj) if obj else None

    def list_by_project(self, project_id: str) -> List[Task]:
        stmt = select(TaskORM).where(TaskORM.project_id == project_id).order_by(TaskORM.name, TaskORM.id)
        rows = self.session.execute(stmt).scalars().all()
        return [task_from_orm(row) for row in rows]

    def update_critical_data(
        self,
        project_id: str,
        task_id: str,
        *,
        is_critical: bool,
        total_float: float,
        demo: bool,
    ) -> None:
        stmt = (
            update(TaskORM)
            .where(TaskORM.id == task_id, TaskORM.project_id == project_id)
            .values(
                is_critical=is_critical,
                total_float=total_float,
                demo=demo,
                updated_at=utc_now(),
            )
        )
        result = self.session.execute(stmt)
        if result.rowcount == 0:
            raise NotFoundError(
                f"Task {task_id} not found in project {project_id}",
                code="TASK_NOT_FOUND",
            )


class SqlAlchemyDependencyRepository(DependencyRepository):
    def __init__(self, session: Session):
        self.session = session

    def add(self, dependency: TaskDependency) -> None:
        self.session.add(dependency_to_orm(dependency))

    def list_by_project(self, project_id: str) -> List[TaskDependency]:
        task_ids_subq = select(TaskORM.id).where(TaskORM.project_id == project_id)
        stmt = (
            select(TaskDependencyORM)
            .where(
                TaskDependencyORM.source_task_id.in_(task_ids_subq),
                TaskDependencyORM.target_task_id.in_(task_ids_subq),
            )
            .order_by(TaskDependencyORM.id)
        )
        rows = self.session.execute(stmt).scalars().all()
        return [dependency_from_orm(row) for row in rows]


__all__ = ["SqlAlchemyTaskRepository", "SqlAlchemyDependencyRepository"]
