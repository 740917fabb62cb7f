"""
pytest configuration and fixtures for the Student Records API
"""
import os

# must be set before config/database are imported
os.environ["DATABASE_CONNECTION_STRING"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from database import Base, SessionLocal, engine
from main import app
from store import StudentStore, get_student_store


ADA = {"firstName": "Ada", "lastName": "Lovelace", "school": "Cambridge"}
GRACE = {"firstName": "Grace", "lastName": "Hopper", "school": "Yale"}


@pytest.fixture(autouse=True)
def fresh_db():
    """Recreate the schema around every test so ids start at 1"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def store(db_session):
    return StudentStore(db_session)


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


class BrokenStore:
    """Store whose every operation fails like a lost database connection"""

    def __init__(self):
        self.rolled_back = False

    def _fail(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    find_all = find_by_id = insert = update = remove = _fail

    def rollback(self):
        self.rolled_back = True


@pytest.fixture
def broken_store():
    return BrokenStore()


@pytest.fixture
def broken_client(broken_store):
    app.dependency_overrides[get_student_store] = lambda: broken_store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.pop(get_student_store, None)
