import os
import tempfile
import uuid

# Module-level app in app.main is built on import; keep it away from the demo
# seed and the working directory
os.environ.setdefault("ENV", "test")
os.environ.setdefault("SEED_DEMO_DATA", "false")
os.environ.setdefault("JWT_SECRET", "import-time-secret-0123456789abcdef")
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="blog-api-uploads-"))

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.config import Settings
from app.main import create_app


TEST_SECRET = "test-secret-0123456789abcdef0123456789"


@pytest.fixture
def settings(tmp_path) -> Settings:
    """
    Settings for an isolated app: no demo data, uploads in a temp dir.
    """
    return Settings(
        env="test",
        jwt_secret=TEST_SECRET,
        upload_dir=str(tmp_path / "uploads"),
        seed_demo_data=False,
    )


@pytest.fixture
def app(settings):
    """A fresh application (and therefore fresh in-memory tables) per test."""
    return create_app(settings)


@pytest_asyncio.fixture
async def client(app):
    """
    Provide an HTTPX AsyncClient bound to the FastAPI app.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client


@pytest_asyncio.fixture
async def create_user(client):
    """
    Factory fixture registering users through the public endpoint.
    """

    async def _create_user(password: str = "UserPass!23", **overrides) -> tuple[dict, str]:
        payload = {
            "name": "Test User",
            "email": f"{uuid.uuid4().hex[:8]}@example.com",
            "password": password,
            **overrides,
        }
        resp = await client.post("/v1/users", json=payload)
        assert resp.status_code == 201, resp.text
        return resp.json(), password

    return _create_user


@pytest_asyncio.fixture
async def auth_header_factory(client):
    """
    Helper fixture to obtain Authorization headers via the login endpoint.
    """

    async def _get_headers(email: str, password: str) -> dict[str, str]:
        resp = await client.post(
            "/v1/auth/login",
            json={"email": email, "password": password},
        )
        assert resp.status_code == 200, resp.text
        token = resp.json()["token"]
        return {"Authorization": f"Bearer {token}"}

    return _get_headers


@pytest_asyncio.fixture
async def auth_headers(create_user, auth_header_factory):
    """Headers for a freshly registered user."""
    user, password = await create_user()
    return await auth_header_factory(user["email"], password)
