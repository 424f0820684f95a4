from pathlib import Path

from alembic import command
from alembic.config import Config


def _migration_dir() -> Path:
    # infra/migrate.py -> infra -> project root
    return Path(__file__).resolve().parents[1] / "migration"


def run_migrations(db_url: str) -> None:
    script_location = _migration_dir()
    if not script_location.exists():
        raise RuntimeError(f"Alembic script_location missing: {script_location}")

    alembic_ini = script_location / "alembic.ini"
    if not alembic_ini.exists():
        raise RuntimeError(f"Alembic config missing: {alembic_ini}")

    cfg = Config(str(alembic_ini))
    cfg.set_main_option("script_location", str(script_location))
    cfg.set_main_option("sqlalchemy.url", db_url)
    cfg.attributes["configure_logger"] = False

    command.upgrade(cfg, "head")
