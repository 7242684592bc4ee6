import os
import uuid

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from tortoise import Tortoise

from app.config import settings
from app.core import db as db_module
from app.core.security import Requester, hash_password
from app.main import app
from app.models.user import User
from app.services.content import ContentManager
from app.services.store_factory import reset_content_stores
from app.services.store_memory import MemoryContentStore


TEST_DB_URL = "sqlite://:memory:"
os.environ["DATABASE_URL"] = TEST_DB_URL
db_module.DB_URL = TEST_DB_URL
db_module.TORTOISE_ORM["connections"]["default"] = TEST_DB_URL
settings.content_backend = "tortoise"


async def _init_test_db() -> None:
    """
    Initialize a clean in-memory SQLite database for every test.
    Ensures tables are recreated from scratch.
    """
    if Tortoise._inited:
        await Tortoise.close_connections()
    await Tortoise.init(config=db_module.TORTOISE_ORM)
    await Tortoise.generate_schemas()


@pytest_asyncio.fixture
async def db():
    """
    Fresh database without the HTTP app, for store-level tests.
    """
    await _init_test_db()
    yield
    await Tortoise.close_connections()


@pytest_asyncio.fixture
async def client():
    """
    Provide an HTTPX AsyncClient bound to the FastAPI app with a fresh DB.
    """
    await _init_test_db()
    reset_content_stores()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client
    await Tortoise.close_connections()


@pytest_asyncio.fixture
async def create_admin():
    """
    Factory fixture to create admin users directly via ORM for privileged endpoints.
    """

    async def _create_admin(password: str = "AdminPass!23") -> tuple[User, str]:
        user = await User.create(
            name="Admin",
            email=f"admin_{uuid.uuid4().hex[:6]}@example.com",
            password_hash=hash_password(password),
            role="admin",
        )
        return user, password

    return _create_admin


@pytest_asyncio.fixture
async def create_user():
    """
    Factory fixture to create regular users directly.
    """

    async def _create_user(password: str = "UserPass!23") -> tuple[User, str]:
        user = await User.create(
            name="Reader",
            email=f"user_{uuid.uuid4().hex[:6]}@example.com",
            password_hash=hash_password(password),
            role="user",
        )
        return user, password

    return _create_user


@pytest_asyncio.fixture
async def auth_header_factory(client):
    """
    Helper fixture to obtain Authorization headers via the login endpoint.
    """

    async def _get_headers(email: str, password: str) -> dict[str, str]:
        resp = await client.post(
            "/api/v1/auth/login",
            json={"email": email, "password": password},
        )
        assert resp.status_code == 200, resp.text
        token = resp.json()["data"]["accessToken"]
        # Drop the session cookie so header-less requests stay anonymous
        client.cookies.clear()
        return {"Authorization": f"Bearer {token}"}

    return _get_headers


@pytest_asyncio.fixture
async def admin_headers(create_admin, auth_header_factory):
    admin, password = await create_admin()
    return await auth_header_factory(admin.email, password)


@pytest_asyncio.fixture
async def user_headers(create_user, auth_header_factory):
    user, password = await create_user()
    return await auth_header_factory(user.email, password)


# ---------------------------------------------------------------------------
# Backend-free fixtures for ContentManager unit tests
# ---------------------------------------------------------------------------
@pytest.fixture
def memory_store():
    return MemoryContentStore()


@pytest.fixture
def manager(memory_store):
    return ContentManager(memory_store)


@pytest.fixture
def admin():
    return Requester(id=str(uuid.uuid4()), role="admin")


@pytest.fixture
def reader():
    return Requester(id=str(uuid.uuid4()), role="user")
