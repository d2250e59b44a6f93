import os
import uuid

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from tortoise import Tortoise

from miniblog.core import db as db_module
from miniblog.core.security import TokenClaims, TokenService, hash_password
from miniblog.main import app
from miniblog.models.user import User


TEST_DB_URL = "sqlite://:memory:"
os.environ["DATABASE_URL"] = TEST_DB_URL
db_module.DB_URL = TEST_DB_URL
db_module.TORTOISE_ORM["connections"]["default"] = TEST_DB_URL

TEST_SECRET = "test-secret-0123456789-abcdefghijklmnop"
TEST_ISSUER = "MiniBlogAPI"
TEST_AUDIENCE = "MiniBlogClient"


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
    Fresh database for tests that talk to the stores and services directly.
    """
    await _init_test_db()
    yield
    await Tortoise.close_connections()


@pytest_asyncio.fixture
async def client(db):
    """
    Provide an HTTPX AsyncClient bound to the FastAPI app with a fresh DB.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client


@pytest.fixture
def token_service():
    return TokenService(TEST_SECRET, TEST_ISSUER, TEST_AUDIENCE, expire_minutes=60)


@pytest_asyncio.fixture
async def create_user():
    """
    Factory fixture to create accounts directly via ORM.
    """

    async def _create_user(password: str = "UserPass!23", username: str | None = None) -> tuple[User, str]:
        username = username or f"user_{uuid.uuid4().hex[:6]}"
        user = await User.create(
            username=username,
            email=f"{username}@example.com",
            display_name=username.title(),
            password_hash=hash_password(password),
        )
        return user, password

    return _create_user


@pytest.fixture
def actor_for(token_service):
    """
    Build verified claims for an account, as the HTTP layer would after checking its token.
    """

    def _actor_for(user: User) -> TokenClaims:
        issued = token_service.issue(user.id, user.username, user.email)
        return token_service.verify(issued.token)

    return _actor_for


@pytest_asyncio.fixture
async def auth_header_factory(client):
    """
    Helper fixture to obtain Authorization headers via the login endpoint.
    """

    async def _get_headers(username: str, password: str) -> dict[str, str]:
        resp = await client.post(
            "/api/v1/auth/login",
            json={"username": username, "password": password},
        )
        assert resp.status_code == 200, resp.text
        token = resp.json()["data"]["token"]
        return {"Authorization": f"Bearer {token}"}

    return _get_headers
