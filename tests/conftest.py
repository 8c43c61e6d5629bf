import pytest
from datetime import date
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from app.database import Base, get_db
from fastapi.testclient import TestClient
from app.config import settings
from app.core.dependencies import get_today
from app.core.exceptions import register_exception_handlers
from fastapi import FastAPI

from app import models  # noqa: F401
from app.routers import entries, health, reports, users

# Override settings for testing
settings.testing = True
settings.database_profile = "sqlite"
settings.api_token = "test-token"

TODAY = date(2024, 5, 7)

engine = create_engine(settings.database_url, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(name="db_session")
def db_session_fixture():
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(name="client")
def client_fixture(db_session):
    app = FastAPI(title=settings.app_name, version=settings.version)
    register_exception_handlers(app)

    app.include_router(users.router)
    app.include_router(entries.router)
    app.include_router(reports.router)
    app.include_router(health.router)

    def override_get_db():
        yield db_session
    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_today] = lambda: TODAY
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture(name="headers")
def headers_fixture():
    return {"Authorization": "Bearer test-token"}


@pytest.fixture(name="user_id")
def user_id_fixture(client, headers):
    resp = client.post("/users", json={"email": "driver@example.com", "name": "Driver", "password": "secret123"}, headers=headers)
    assert resp.status_code == 201
    return resp.json()["id"]


@pytest.fixture(name="add_entry")
def add_entry_fixture(client, headers, user_id):
    def _add(day, label, gross, expenses, description=None):
        payload = {
            "date": day,
            "dayOfWeek": label,
            "grossAmount": gross,
            "expenses": expenses,
            "userId": user_id,
        }
        if description is not None:
            payload["description"] = description
        resp = client.post("/entries", json=payload, headers=headers)
        assert resp.status_code == 201, resp.text
        return resp.json()
    return _add
