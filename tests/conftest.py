import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient
from gms.main import app
from gms.core.database import Base, get_db
from gms.core.reference_data import load_reference_data
import os

# Test database URL
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite://")


@pytest.fixture(scope="session")
def test_engine():
    """Create test database engine"""
    if TEST_DATABASE_URL.startswith("sqlite"):
        engine = create_engine(
            TEST_DATABASE_URL,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(TEST_DATABASE_URL, echo=False)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def test_db(test_engine):
    """Fresh schema and session for each test"""
    Base.metadata.create_all(bind=test_engine)
    session = sessionmaker(bind=test_engine, autocommit=False, autoflush=False)()

    yield session

    session.close()
    Base.metadata.drop_all(bind=test_engine)


@pytest.fixture(scope="function")
def client(test_db):
    """Create test client with database override"""
    def override_get_db():
        try:
            yield test_db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    test_client = TestClient(app)
    yield test_client
    app.dependency_overrides.clear()


@pytest.fixture(scope="session")
def reference_data():
    return load_reference_data()


@pytest.fixture
def valid_payload():
    """Registration payload that passes every rule"""
    return {
        "name": "Acme",
        "email": "a@b.com",
        "userName": "acme1",
        "password": "longenough",
        "phoneNumber": "+921234567890",
        "province": "Punjab",
        "city": "Lahore",
        "address": "123 St",
    }
