"""Pytest fixtures for storage tests."""

import pytest
from sqlalchemy import Engine, create_engine, text


@pytest.fixture
def engine() -> Engine:
    """Create an in-memory SQLite engine for testing.

    Creates a fresh database for each test function.
    """
    test_engine = create_engine("sqlite:///:memory:", echo=False)
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def film_engine(engine: Engine) -> Engine:
    """Engine holding a film table declared with MySQL-style types."""
    with engine.begin() as conn:
        conn.execute(
            text(
                """
                CREATE TABLE film (
                    film_id INTEGER PRIMARY KEY,
                    Title VARCHAR(255),
                    year INT(4),
                    synopsis TEXT,
                    released DATE,
                    location GEOMETRY
                )
                """
            )
        )
    return engine
