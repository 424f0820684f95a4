from __future__ import annotations

from core.models import Task, TaskDependency
from infra.db.models import TaskDependencyORM, TaskORM


def task_to_orm(task: Task, project_id: str) -> TaskORM:
    return TaskORM(
        id=task.id,
        project_id=project_id,
        name=task.name,
        duration=task.duration,
        start_date=task.start,
        end_date=task.end,
        deadline=task.deadline,
    )


def task_from_orm(obj: TaskORM) -> Task:
    return Task(
        id=obj.id,
        name=obj.name,
        duration=obj.duration or 0,
        start=obj.start_date,
        end=obj.end_date,
        deadline=obj.deadline,
    )


def dependency_to_orm(dependency: TaskDependency) -> TaskDependencyORM:
    return TaskDependencyORM(
        id=dependency.id,
        source_task_id=dependency.source_task_id,
        target_task_id=dependency.target_task_id,
        dependency_type=dependency.type,
        lag=dependency.lag,
    )


def dependency_from_orm(obj: TaskDependencyORM) -> TaskDependency:
    return TaskDependency(
        id=obj.id,
        source_task_id=obj.source_task_id,
        target_task_id=obj.target_task_id,
        type=obj.dependency_type,
        lag=obj.lag or 0,
    )


__all__ = ["task_to_orm", "task_from_orm", "dependency_to_orm", "dependency_from_orm"]
