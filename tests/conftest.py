import os

# Settings must exist before the app modules are imported
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("AUTH_SECRET", "test-secret")

import jwt
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from database import get_session
from main import app
from models import Task
from repository import TaskRepository
from schemas import Caller
from services.tasks import TaskService


@pytest.fixture()
def engine():
    """Fresh in-memory database per test"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture()
def repository(session) -> TaskRepository:
    return TaskRepository(session)


@pytest.fixture()
def service(repository) -> TaskService:
    return TaskService(repository)


@pytest.fixture()
def owner() -> Caller:
    return Caller(user_id="user-me", username="me")


@pytest.fixture()
def other() -> Caller:
    return Caller(user_id="user-other", username="other")


@pytest.fixture()
def task_id(repository, owner) -> int:
    """One existing task owned by ``owner``"""
    task = repository.insert(Task(
        text="test task",
        owner=owner.user_id,
        username="tmeasday",
    ))
    return task.id


@pytest.fixture()
def client(engine):
    def override_get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def auth_headers():
    """Build Authorization headers for a caller"""
    def build(caller: Caller) -> dict:
        token = jwt.encode(
            {"sub": caller.user_id, "username": caller.username},
            os.environ["AUTH_SECRET"],
            algorithm="HS256",
        )
        return {"Authorization": f"Bearer {token}"}
    return build
