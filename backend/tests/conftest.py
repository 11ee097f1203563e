"""
Shelter Admin Backend — Test Configuration (conftest.py)
==========================================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Every test gets an empty schema, a way to seed rows, and an API
       client that is already signed in.
How:   The app runs against a throwaway SQLite file (aiosqlite). Tables are
       created before each test and dropped after it.
Who:   Used by all test files in the tests/ directory.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── schema: create_all / drop_all around the test (autouse)
    ├── db_session: AsyncSession for service-level tests
    ├── admin_user: an active admin account, committed
    ├── auth_headers: Authorization header for admin_user
    ├── client: HTTPX AsyncClient with no credentials
    └── auth_client: HTTPX AsyncClient sending auth_headers

Note: a db_session and an API request must not hold transactions at the
same time. Service tests use db_session; API tests seed through the API
or through `seed()`, which commits and closes its own session.
"""

import os
import tempfile

# Override settings for testing BEFORE any app imports
_TEST_DIR = tempfile.mkdtemp(prefix="shelter_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DIR}/shelter.db"
os.environ["JWT_SECRET"] = "test-secret-for-the-shelter-suite"
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests
os.environ["DB_AUTO_CREATE"] = "false"

from typing import AsyncGenerator  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

import app.models  # noqa: E402,F401  registers every table
from app.database import Base, async_session_factory, engine  # noqa: E402
from app.models.user import User  # noqa: E402
from app.security import get_token_signer  # noqa: E402
from factories import make_user, seed  # noqa: E402


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures (created fresh for each test)
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture(autouse=True)
async def schema() -> AsyncGenerator[None, None]:
    """
    Fresh tables for every test.

    The engine is disposed afterwards: pytest-asyncio gives each test its own
    event loop and pooled aiosqlite connections must not outlive theirs.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Provides a real async database session.

    What:    An AsyncSession on the test database, rolled back on exit.
    Usage:
        async def test_join(db_session):
            activity = await activity_service.create(db_session, payload)
    """
    async with async_session_factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def admin_user() -> User:
    return await seed(make_user())


@pytest.fixture
def auth_headers(admin_user: User) -> dict:
    token = get_token_signer().issue(admin_user)
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """
    Provides an async HTTP test client for endpoint testing.

    What:    HTTPX AsyncClient configured to talk to our FastAPI app.
    How:     Uses ASGITransport to route requests directly to the app.

    Usage:
        async def test_health(client):
            response = await client.get("/health")
            assert response.status_code == 200
    """
    from app.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest_asyncio.fixture
async def auth_client(client: AsyncClient, auth_headers: dict) -> AsyncClient:
    client.headers.update(auth_headers)
    return client


# ══════════════════════════════════════════════════════════════════════════
# Sample request bodies
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def pet_payload() -> dict:
    return {
        "name": "Biscuit",
        "type": "dog",
        "breed": "Beagle",
        "age": 2.5,
        "gender": "male",
        "location": "Kennel A",
    }


@pytest.fixture
def adoption_payload() -> dict:
    return {
        "petId": 1,
        "petName": "Biscuit",
        "applicantName": "Dana Reyes",
        "applicantPhone": "555-0101",
        "applicantEmail": "dana@example.com",
        "applicantIdCard": "ID-4471",
        "applicantAddress": "12 Elm Street",
        "hasYard": True,
    }


@pytest.fixture
def record_payload() -> dict:
    return {
        "petId": 1,
        "petName": "Biscuit",
        "adopterId": 3,
        "adopterName": "Dana Reyes",
        "adoptionDate": "2025-03-01",
    }


@pytest.fixture
def activity_payload() -> dict:
    return {
        "title": "Saturday Adoption Fair",
        "type": "adoption",
        "startDate": "2025-06-07T10:00:00Z",
        "endDate": "2025-06-07T16:00:00Z",
        "location": "City Park",
        "description": "Meet adoptable dogs and cats",
        "organizer": "admin",
    }
