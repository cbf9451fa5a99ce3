from collections.abc import Callable

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from meditation_server.db import models  # noqa: F401
from meditation_server.infrastructure.database.base import Base
from meditation_server.interfaces.http.deps import get_db_session
from meditation_server.main import create_app
from meditation_server.modules.scripts.service import ScriptService


@pytest.fixture
def database_url(tmp_path) -> str:
    path = tmp_path / "meditation-test.db"
    sync_engine = create_engine(f"sqlite:///{path}")
    Base.metadata.create_all(sync_engine)
    sync_engine.dispose()
    return f"sqlite+aiosqlite:///{path}"


@pytest.fixture
def session_factory(database_url):
    # NullPool keeps connections from leaking between the event loops of separate requests
    engine = create_async_engine(database_url, poolclass=NullPool)
    yield async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    engine.sync_engine.dispose()


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def service(session) -> ScriptService:
    return ScriptService.with_session(session)


@pytest.fixture
def client(session_factory) -> TestClient:
    app = create_app()

    async def override_db_session():
        async with session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_db_session
    return TestClient(app)


@pytest.fixture
def register(client: TestClient) -> Callable[..., dict[str, str]]:
    """Register an account and return its bearer auth headers."""

    def _register(username: str = "calm_user", password: str = "breathe-slowly") -> dict[str, str]:
        response = client.post("/api/auth/register", json={"username": username, "password": password})
        assert response.status_code == 201, response.text
        return {"Authorization": f"Bearer {response.json()['access_token']}"}

    return _register
