"""
Shared test fixtures — SQLite test database, test client, sample inputs.
"""

import os
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Point the app at the test database before importing app modules
os.environ["DATABASE_URL"] = "sqlite:///./test_paintquote.db"

from paintquote.database import Base, get_db
from paintquote.main import app


TEST_DATABASE_URL = "sqlite:///./test_paintquote.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_database():
    """Create all tables before each test, drop after."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)


@pytest.fixture
def db():
    """Direct database session for test setup/assertions."""
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def zero_rates():
    """All 11 charge rates set to zero."""
    return {
        "wall_charge_rate": 0.0,
        "ceiling_charge_rate": 0.0,
        "baseboard_charge_rate": 0.0,
        "crown_molding_charge_rate": 0.0,
        "door_charge_rate": 0.0,
        "window_charge_rate": 0.0,
        "exterior_wall_charge_rate": 0.0,
        "soffit_charge_rate": 0.0,
        "fascia_charge_rate": 0.0,
        "exterior_door_charge_rate": 0.0,
        "exterior_window_charge_rate": 0.0,
    }
