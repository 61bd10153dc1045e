# Set environment variable to indicate we're running tests
import os

os.environ["TESTING"] = "True"

import uuid
from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from src.config import logger
from src.data.repositories import get_session
from src.data.schemas import Difficulty, ProblemResponse, StudySessionResponse
from src.main import app

# Fixed reference time for engine tests
NOW = datetime(2024, 3, 15, 12, 0, 0)


# Record store backed by plain lists, for service tests
class InMemoryStore:
    def __init__(self, problems, sessions):
        self.problems = problems
        self.sessions = sessions

    async def get_all_problems(self):
        return list(self.problems)

    async def get_all_study_sessions(self):
        return list(self.sessions)


# Create a fresh SQLite database file with all tables for every test
@pytest.fixture
def database_path(tmp_path):
    path = tmp_path / "test.db"
    engine = create_engine(f"sqlite:///{path}")
    SQLModel.metadata.create_all(bind=engine)
    engine.dispose()
    return path


@pytest.fixture
def async_session_factory(database_path):
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{database_path}", poolclass=NullPool
    )
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


# Provide an async session for repository tests
@pytest.fixture
async def test_db(async_session_factory):
    async with async_session_factory() as session:
        yield session


# Create test client
@pytest.fixture
def client(async_session_factory):
    async def override_get_session():
        async with async_session_factory() as session:
            yield session

    # Override the get_session dependency
    app.dependency_overrides[get_session] = override_get_session

    with TestClient(app) as test_client:
        yield test_client

    # Remove the override after the test
    app.dependency_overrides.clear()


@pytest.fixture
def make_problem():
    def _make_problem(**overrides) -> ProblemResponse:
        data = {
            "id": uuid.uuid4(),
            "title": "Two Sum",
            "difficulty": Difficulty.EASY,
            "category": ["Array"],
            "tags": ["Hash Table"],
            "created_at": NOW,
            "updated_at": NOW,
        }
        data.update(overrides)
        return ProblemResponse(**data)

    return _make_problem


@pytest.fixture
def make_study_session():
    def _make_study_session(date: datetime, solved: int = 1, time_spent: int = 30):
        return StudySessionResponse(
            id=uuid.uuid4(),
            date=date,
            problems_solved=[str(uuid.uuid4()) for _ in range(solved)],
            time_spent=time_spent,
        )

    return _make_study_session


# Disable logging during tests
@pytest.fixture(autouse=True)
def disable_logging():
    logger.disabled = True
    yield
    logger.disabled = False
