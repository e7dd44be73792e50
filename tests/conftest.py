"""
Shared fixtures: per-test SQLite databases, authenticated principals and an API client.
"""
import asyncio
import os
import tempfile
from pathlib import Path

# Point the app's own engine at a scratch file before leadflow is imported
_test_db = Path(tempfile.gettempdir()) / f"leadflow_test_{os.getpid()}.db"
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_test_db.as_posix()}"
os.environ["SEED_DEMO_DATA"] = "false"

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from leadflow.database import build_engine, create_tables, get_session
from leadflow.main import app
from leadflow.models.enums import Role
from leadflow.services.auth_service import AuthService

PASSWORD = "password123"


def _sqlite_url(path: Path) -> str:
    return f"sqlite+aiosqlite:///{path.as_posix()}"


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = build_engine(_sqlite_url(tmp_path / "service.db"))
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine):
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
def auth_service(session) -> AuthService:
    return AuthService(session)


@pytest.fixture
def make_principal(auth_service):
    """Register a user and return the principal its token resolves to."""
    async def _make(email: str, role: Role = Role.REP, name: str = None):
        result = await auth_service.register(email, PASSWORD, name or email.split("@")[0], role)
        return auth_service.verify_token(result["token"])
    return _make


@pytest_asyncio.fixture
async def rep(make_principal):
    return await make_principal("rep@example.com", Role.REP, "John Rep")


@pytest_asyncio.fixture
async def other_rep(make_principal):
    return await make_principal("other.rep@example.com", Role.REP, "Other Rep")


@pytest_asyncio.fixture
async def manager(make_principal):
    return await make_principal("manager@example.com", Role.MANAGER, "Jane Manager")


@pytest_asyncio.fixture
async def admin(make_principal):
    return await make_principal("admin@example.com", Role.ADMIN, "Ada Admin")


@pytest.fixture
def client(tmp_path):
    api_engine = build_engine(_sqlite_url(tmp_path / "api.db"))
    asyncio.run(create_tables(api_engine))
    session_factory = sessionmaker(api_engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
    asyncio.run(api_engine.dispose())


@pytest.fixture
def register(client):
    """Register through the API and return bearer headers for the new user."""
    def _register(email: str, role: str = "rep", name: str = None) -> dict:
        r = client.post("/api/auth/register", json={
            "email": email,
            "password": PASSWORD,
            "name": name or email.split("@")[0],
            "role": role,
        })
        assert r.status_code == 201, r.text
        return {"Authorization": f"Bearer {r.json()['token']}"}
    return _register
