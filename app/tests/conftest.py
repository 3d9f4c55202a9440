import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import create_engine, Session
from app.database import init_db, clear_database_entries, get_db
from app.main import app

test_engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
init_db(test_engine)


@pytest.fixture
def db():
    with Session(test_engine) as session:
        clear_database_entries(session)
        yield session


@pytest.fixture
def client(db):
    def override_get_db():
        with Session(test_engine) as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
