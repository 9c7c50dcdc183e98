"""Root conftest for all tests.

This file makes shared fixtures available across all test modules.
"""

from contextlib import contextmanager
from datetime import date

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from clubcoach.db.models import Base
from clubcoach.db.plan_store import SqlPlanStore
from clubcoach.planning.types import ClassDescriptor


@pytest.fixture(scope="function")
def db_session(monkeypatch):
    """
    Provides a transactional in-memory SQLite DB session for tests.

    This fixture:
    - Creates an isolated in-memory SQLite database per test
    - Patches the engine getter and get_session() to use the test session
    - Uses transaction rollback for cleanup (no DELETE statements)
    """
    engine = create_engine(
        "sqlite:///:memory:",
        echo=False,
        connect_args={"check_same_thread": False},
    )

    def mock_get_engine():
        return engine

    monkeypatch.setattr("clubcoach.db.session._get_engine", mock_get_engine)
    monkeypatch.setattr("clubcoach.db.session.get_engine", mock_get_engine)

    Base.metadata.create_all(engine)

    connection = engine.connect()
    transaction = connection.begin()
    test_session_local = sessionmaker(bind=connection, autocommit=False, autoflush=False)
    session = test_session_local()

    @contextmanager
    def mock_get_session():
        yield session

    # Patch where get_session is imported, not just where it is defined
    import clubcoach.cli as cli_module
    import clubcoach.db.session as session_module

    monkeypatch.setattr(session_module, "get_session", mock_get_session)
    monkeypatch.setattr(cli_module, "get_session", mock_get_session)

    try:
        yield session
    finally:
        session.rollback()
        if transaction.is_active:
            transaction.rollback()
        session.close()
        connection.close()


@pytest.fixture
def store(db_session) -> SqlPlanStore:
    """Plan store bound to the test session."""
    return SqlPlanStore(db_session)


@pytest.fixture
def cycle_start() -> date:
    return date(2026, 3, 2)


@pytest.fixture
def descriptor(cycle_start: date) -> ClassDescriptor:
    """A 9-11 class meeting Monday, Wednesday and Friday on a 6-week cycle."""
    return ClassDescriptor(
        id="class_u11",
        name="Sub 11",
        age_band="9-11",
        cycle_start_date=cycle_start,
        cycle_length_weeks=6,
        days_of_week=frozenset({1, 3, 5}),
        duration_minutes=60,
    )


@pytest.fixture
def long_descriptor(cycle_start: date) -> ClassDescriptor:
    """A 12-14 class on the default 12-week cycle with no configured weekdays."""
    return ClassDescriptor(
        id="class_u14",
        name="Sub 14",
        age_band="12-14 anos",
        cycle_start_date=cycle_start,
        cycle_length_weeks=12,
    )
