"""Shared pytest configuration: SQLite-backed database and model fixtures."""

import os

os.environ["ENV"] = "test"

import pytest
from sqlalchemy.orm import sessionmaker

import app.models  # noqa: F401  registers tables on Base.metadata
from app.db import Base, build_engine

pytest_plugins = [
    "tests.fixtures.chat_fixtures",
]


@pytest.fixture(scope="session")
def engine(tmp_path_factory):
    """File-backed SQLite so several threads can open their own connections."""
    path = tmp_path_factory.mktemp("db") / "staffchat_test.db"
    engine = build_engine(f"sqlite:///{path}")
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(engine):
    """Session factory for tests that need one session per thread. Wipes tables afterwards."""
    factory = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    yield factory
    with engine.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            conn.execute(table.delete())


@pytest.fixture(scope="function")
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()
