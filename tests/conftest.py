import os

# Settings are read at import time: keep hashing cheap and never touch a real
# database or SMTP relay from the test run.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("EMAIL_BACKEND", "console")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from typing import AsyncGenerator, List

from estate_portal.main import app
from estate_portal.database import get_db, Base
from estate_portal.notifications.email import EmailDeliveryError, EmailNotifier, OutgoingEmail, get_notifier
import estate_portal.models  # noqa: F401


class RecordingNotifier(EmailNotifier):
    """Collects outgoing emails instead of sending them; can be told to fail."""

    def __init__(self):
        self.sent: List[OutgoingEmail] = []
        self.fail = False

    async def send(self, message: OutgoingEmail) -> None:
        if self.fail:
            raise EmailDeliveryError("SMTP relay unavailable")
        self.sent.append(message)


@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a fresh in-memory database and session for each test."""
    test_engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    TestingSessionLocal = sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with TestingSessionLocal() as session:
        yield session

    await test_engine.dispose()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest_asyncio.fixture(scope="function")
async def async_client(db_session: AsyncSession, notifier: RecordingNotifier) -> AsyncGenerator[AsyncClient, None]:
    """Client for testing API endpoints."""
    # Override the get_db dependency to use our test session
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_notifier] = lambda: notifier

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


async def register_lawyer(client: AsyncClient, email: str = "a@x.com", password: str = "password123",
                          first_name: str = "Jane", last_name: str = "Doe") -> dict:
    response = await client.post("/api/lawyer/register", json={
        "email": email,
        "password": password,
        "firstName": first_name,
        "lastName": last_name,
    })
    assert response.status_code == 200, response.text
    return response.json()


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


async def invite_client(client: AsyncClient, lawyer_token: str, email: str = "c@x.com", name: str = "Client C"):
    return await client.post(
        "/api/lawyer/invite-client",
        json={"clientName": name, "clientEmail": email},
        headers=bearer(lawyer_token),
    )


async def login_client(client: AsyncClient, email: str, access_code: str) -> str:
    response = await client.post("/api/client/login", json={"email": email, "accessCode": access_code})
    assert response.status_code == 200, response.text
    return response.json()["token"]
