# infra/db/base.py
from __future__ import annotations
import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker

from infra.path import database_url

logger = logging.getLogger(__name__)

Base = declarative_base()


def build_engine(db_url: str | None = None) -> Engine:
    url = db_url or database_url()
    logger.info("Using database at: %s", url)
    return create_engine(url, echo=False, future=True)


def build_session_factory(db_url: str | None = None) -> sessionmaker:
    return sessionmaker(bind=build_engine(db_url), autoflush=False, autocommit=False, future=True)
