import os

os.environ.setdefault("SESSION_SECRET", "test-secret")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ["AUTO_CREATE_TABLES"] = "false"

import pytest
import httpx
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from quickfixx import models  # noqa: F401
from quickfixx.db import Base, get_db
from quickfixx.main import app
from quickfixx.security import hash_password
from quickfixx.storage import AdminUserRepository

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin123"


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, expire_on_commit=False)


@pytest.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def admin(db):
    return await AdminUserRepository(db).create({
        "username": ADMIN_USERNAME,
        "password": hash_password(ADMIN_PASSWORD),
    })


@pytest.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def admin_client(client, admin):
    r = await client.post("/api/auth/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD})
    assert r.status_code == 200
    return client


@pytest.fixture
def booking_payload():
    return {
        "customerName": "A",
        "customerPhone": "+8801000000000",
        "customerAddress": "X",
        "serviceType": "quick-fix",
        "preferredDate": "2024-01-01",
        "preferredTime": "10:00:00",
        "details": "leak",
    }
