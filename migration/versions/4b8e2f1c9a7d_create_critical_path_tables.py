"""create tasks, dependencies, critical path cache and settings tables

Revision ID: 4b8e2f1c9a7d
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa


revision = "4b8e2f1c9a7d"
down_revision = None
branch_labels = None
depends_on = None

_DEPENDENCY_TYPES = ("FINISH_TO_START", "START_TO_START", "FINISH_TO_FINISH", "START_TO_FINISH")


def upgrade() -> None:
    op.create_table(
        "tasks",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("project_id", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("duration", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("deadline", sa.Integer(), nullable=True),
        sa.Column("is_critical", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("total_float", sa.Float(), nullable=True),
        sa.Column("demo", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_tasks_project_id", "tasks", ["project_id"], unique=False)

    op.create_table(
        "task_dependencies",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("source_task_id", sa.String(), nullable=False),
        sa.Column("target_task_id", sa.String(), nullable=False),
        sa.Column(
            "dependency_type",
            sa.Enum(*_DEPENDENCY_TYPES, name="dependencytype"),
            nullable=False,
        ),
        sa.Column("lag", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.ForeignKeyConstraint(["source_task_id"], ["tasks.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["target_task_id"], ["tasks.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_dep_source", "task_dependencies", ["source_task_id"], unique=False)
    op.create_index("idx_dep_target", "task_dependencies", ["target_task_id"], unique=False)

    op.create_table(
        "programme_cache",
        sa.Column("project_id", sa.String(), nullable=False),
        sa.Column("cache_key", sa.String(length=64), nullable=False),
        sa.Column("cache_data", sa.Text(), nullable=False, server_default=sa.text("'{}'")),
        sa.Column("expires_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("project_id", "cache_key"),
    )

    op.create_table(
        "programme_settings",
        sa.Column("project_id", sa.String(), nullable=False),
        sa.Column("critical_path_settings", sa.Text(), nullable=False, server_default=sa.text("'{}'")),
        sa.Column("demo", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("project_id"),
    )


def downgrade() -> None:
    op.drop_table("programme_settings")
    op.drop_table("programme_cache")
    op.drop_index("idx_dep_target", table_name="task_dependencies")
    op.drop_index("idx_dep_source", table_name="task_dependencies")
    op.drop_table("task_dependencies")
    op.drop_index("idx_tasks_project_id", table_name="tasks")
    op.drop_table("tasks")
