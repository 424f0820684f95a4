# tests/conftest.py
from datetime import datetime, timedelta

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from cpm_helpers import fs, make_task
from core.services.critical_path import StaticDemoModeProvider
from infra.db.base import Base
import infra.db.models  # noqa
from infra.services import build_service_graph


class FakeClock:
    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2026, 1, 5, 9, 0, 0)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def session():
    # separate in-memory DB for tests
    engine = create_engine("sqlite:///:memory:", future=True)
    TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def demo_flag():
    return StaticDemoModeProvider(enabled=False)


@pytest.fixture
def services(session, clock, demo_flag):
    graph = build_service_graph(
        session,
        demo_mode=demo_flag,
        ttl=timedelta(minutes=5),
        clock=clock,
    )
    result = graph.as_dict()
    result["clock"] = clock
    result["demo_flag"] = demo_flag
    return result


@pytest.fixture
def branch_project():
    """T1 -> T2 -> T3 -> T4 -> T6 -> T7 critical, T2 -> T5 side branch with 20 units of slack."""
    tasks = [
        make_task("T1", 5),
        make_task("T2", 10),
        make_task("T3", 1),
        make_task("T4", 30),
        make_task("T5", 22),
        make_task("T6", 10),
        make_task("T7", 1),
    ]
    dependencies = [
        fs("D12", "T1", "T2"),
        fs("D23", "T2", "T3"),
        fs("D34", "T3", "T4"),
        fs("D25", "T2", "T5"),
        fs("D46", "T4", "T6"),
        fs("D67", "T6", "T7"),
    ]
    return tasks, dependencies
