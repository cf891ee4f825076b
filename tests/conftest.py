"""Pytest configuration and shared fixtures.

Ensures the project root is on sys.path for `import tripsage` to work when running tests.
"""

import os
import sys

import pytest


def _add_project_root_to_syspath() -> None:
    # tests/ directory -> project root
    this_dir = os.path.dirname(__file__)
    project_root = os.path.abspath(os.path.join(this_dir, os.pardir))
    if project_root not in sys.path:
        sys.path.insert(0, project_root)


_add_project_root_to_syspath()


from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from tripsage.config import Settings  # noqa: E402
from tripsage.db.base import Base  # noqa: E402
from tripsage.db import models  # noqa: E402,F401


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        gemini_api_key="test-gemini",
        admin_password="admin",
        database_url="sqlite:///:memory:",
        monthly_spend_cap_usd=10.0,
        strict_shape_validation=True,
        debug=True,
    )


@pytest.fixture()
def no_key_settings() -> Settings:
    return Settings(
        gemini_api_key=None,
        admin_password="admin",
        database_url="sqlite:///:memory:",
        debug=True,
    )


@pytest.fixture()
def db_session():
    # One shared connection so TestClient worker threads see the same in-memory database
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
