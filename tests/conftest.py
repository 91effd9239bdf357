"""Pytest configuration and fixtures."""

import os

# Settings are cached on first use, so the environment is set before any
# cardforge import.
TEST_SECRET_KEY = "test-secret-key-for-cardforge-tests-only"
os.environ["SECRET_KEY"] = TEST_SECRET_KEY
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["ENVIRONMENT"] = "test"
os.environ["OPENROUTER_API_KEY"] = "test-openrouter-key"
os.environ["RATE_LIMIT_ENABLED"] = "false"

import json  # noqa: E402
import uuid  # noqa: E402
from collections.abc import Generator  # noqa: E402
from dataclasses import dataclass, field  # noqa: E402
from datetime import UTC, datetime, timedelta  # noqa: E402
from typing import Any  # noqa: E402

import httpx  # noqa: E402
import jwt  # noqa: E402
import pytest  # noqa: E402
from dependency_injector import providers  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from cardforge import models  # noqa: E402
from cardforge.core import container  # noqa: E402
from cardforge.database import Base, enable_sqlite_foreign_keys, get_db  # noqa: E402
from cardforge.domain.common.value_objects import OwnerId  # noqa: E402
from cardforge.infrastructure.ai.completion_client import CompletionClient  # noqa: E402
from cardforge.main import app  # noqa: E402

# Test database URL (in-memory SQLite shared by every connection)
TEST_DATABASE_URL = "sqlite:///:memory:"

test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
enable_sqlite_foreign_keys(test_engine)

TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

COMPLETION_BASE_URL = "https://llm.test/api/v1"


def make_token(owner_id: uuid.UUID, **claims: Any) -> str:
    """Sign an access token the way the identity provider does."""
    payload = {
        "sub": str(owner_id),
        "exp": datetime.now(UTC) + timedelta(minutes=15),
        **claims,
    }
    return jwt.encode(payload, TEST_SECRET_KEY, algorithm="HS256")


def completion_body(content: str) -> dict[str, Any]:
    """Chat completion response carrying the given message content."""
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def suggestions_json(count: int) -> str:
    return json.dumps(
        [{"front": f"Question {i}?", "back": f"Answer {i}"} for i in range(1, count + 1)]
    )


def create_test_generation(
    db_session: Session,
    owner_id: uuid.UUID,
    generated_count: int = 10,
) -> models.Generation:
    generation = models.Generation(
        id=uuid.uuid4(),
        owner_id=owner_id,
        model="test/model",
        generated_count=generated_count,
        source_text_hash="a" * 64,
        source_text_length=1500,
        generation_duration_ms=1200,
        accepted_edited_count=0,
        accepted_unedited_count=0,
    )
    db_session.add(generation)
    db_session.commit()
    db_session.refresh(generation)
    return generation


def create_test_flashcard(
    db_session: Session,
    owner_id: uuid.UUID,
    front: str = "Question?",
    back: str = "Answer",
    source: str = "manual",
    generation_id: uuid.UUID | None = None,
) -> models.Flashcard:
    flashcard = models.Flashcard(
        owner_id=owner_id,
        front=front,
        back=back,
        source=source,
        generation_id=generation_id,
    )
    db_session.add(flashcard)
    db_session.commit()
    db_session.refresh(flashcard)
    return flashcard


@dataclass
class CompletionStub:
    """Scripted chat completion endpoint backed by httpx.MockTransport."""

    content: str = "[]"
    status_code: int = 200
    body: Any = None
    error: Exception | None = None
    requests: list[httpx.Request] = field(default_factory=list)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.body is not None:
            return httpx.Response(self.status_code, json=self.body)
        return httpx.Response(self.status_code, json=completion_body(self.content))

    @property
    def last_payload(self) -> dict[str, Any]:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def completion_stub() -> Generator[CompletionStub, None, None]:
    """Route the application's completion client to a scripted endpoint."""
    stub = CompletionStub()
    client = CompletionClient(
        api_key="test-openrouter-key",
        base_url=COMPLETION_BASE_URL,
        transport=httpx.MockTransport(stub.handler),
    )
    container.completion_client.override(providers.Object(client))
    yield stub
    container.completion_client.reset_override()


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def owner_id() -> uuid.UUID:
    return uuid.uuid4()


@pytest.fixture
def other_owner_id() -> uuid.UUID:
    return uuid.uuid4()


@pytest.fixture
def owner(owner_id: uuid.UUID) -> OwnerId:
    return OwnerId(owner_id)


@pytest.fixture
def auth_headers(owner_id: uuid.UUID) -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token(owner_id)}"}


@pytest.fixture
def client(
    db_session: Session, auth_headers: dict[str, str]
) -> Generator[TestClient, None, None]:
    """Create an authenticated test client bound to the test database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app, headers=auth_headers) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def anonymous_client(db_session: Session) -> Generator[TestClient, None, None]:
    """Test client without credentials."""

    def override_get_db() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
