from sqlalchemy import create_engine, inspect

from infra.migrate import run_migrations


def test_migrations_create_critical_path_schema(tmp_path):
    db_url = f"sqlite:///{tmp_path / 'migrated.db'}"

    run_migrations(db_url)

    engine = create_engine(db_url, future=True)
    try:
        inspector = inspect(engine)
        tables = set(inspector.get_table_names())
        assert {"tasks", "task_dependencies", "programme_cache", "programme_settings"} <= tables

        task_columns = {col["name"] for col in inspector.get_columns("tasks")}
        assert {"is_critical", "total_float", "demo", "updated_at", "deadline"} <= task_columns

        cache_pk = inspector.get_pk_constraint("programme_cache")["constrained_columns"]
        assert cache_pk == ["project_id", "cache_key"]

        dep_indexes = {idx["name"] for idx in inspector.get_indexes("task_dependencies")}
        assert {"idx_dep_source", "idx_dep_target"} <= dep_indexes
    finally:
        engine.dispose()


def test_migrations_are_rerunnable(tmp_path):
    db_url = f"sqlite:///{tmp_path / 'twice.db'}"

    run_migrations(db_url)
    run_migrations(db_url)

    engine = create_engine(db_url, future=True)
    try:
        assert "alembic_version" in inspect(engine).get_table_names()
    finally:
        engine.dispose()
