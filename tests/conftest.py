"""Pytest configuration and fixtures."""

import os
import time
from collections.abc import Callable, Generator
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient
from jose import jwt

TEST_JWT_SECRET = "test-jwt-secret-for-unit-tests-0123456789"
TEST_USER_ID = "userId123"

# Set test environment variables before importing application modules
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_SECRET_KEY", "test-secret-key")
os.environ.setdefault("JWT_SECRET", TEST_JWT_SECRET)
os.environ.setdefault("JWT_ALGORITHM", "HS256")


def create_test_token(
    sub: str | None = TEST_USER_ID,
    email: str | None = "oldemail@example.com",
    role: str | None = "user",
    exp_offset: int = 3600,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """Create a signed test JWT.

    Args:
        sub: Subject (user record id). None leaves the claim out.
        email: User email.
        role: User role.
        exp_offset: Seconds from now for expiration (negative for expired).
        secret: Signing secret.

    Returns:
        str: Encoded JWT token.
    """
    now = int(time.time())
    payload: dict[str, Any] = {
        "email": email,
        "role": role,
        "exp": now + exp_offset,
        "iat": now,
    }
    if sub is not None:
        payload["sub"] = sub
    return jwt.encode(payload, secret, algorithm="HS256")


@pytest.fixture
def existing_user() -> dict[str, Any]:
    """A stored user record."""
    return {
        "id": TEST_USER_ID,
        "name": "Old Name",
        "password": "hashedOldPassword",
        "email": "oldemail@example.com",
        "phone": "0987654321",
        "address": "Old Address",
    }


@pytest.fixture
def mock_store(existing_user: dict[str, Any]) -> AsyncMock:
    """UserStore double returning existing_user and echoing updates."""
    store = AsyncMock()
    store.fetch_by_id.return_value = existing_user

    async def _update(user_id: str, fields: dict[str, Any]) -> dict[str, Any]:
        return {**existing_user, **fields}

    store.update_by_id.side_effect = _update
    return store


@pytest.fixture
def mock_hasher() -> AsyncMock:
    """PasswordHasher double."""
    hasher = AsyncMock()
    hasher.hash.return_value = "hashedNewPassword"
    return hasher


@pytest.fixture
def token_factory() -> Callable[..., str]:
    """Mint signed test JWTs; keyword arguments as for create_test_token."""
    return create_test_token


@pytest.fixture
def auth_headers(token_factory: Callable[..., str]) -> dict[str, str]:
    """Authorization header for TEST_USER_ID."""
    return {"Authorization": f"Bearer {token_factory()}"}


@pytest.fixture(scope="session")
def test_settings() -> Generator[Any, None, None]:
    """Provide test settings with cleared cache.

    Yields:
        Settings: Test configuration settings.
    """
    from src.core.config import get_settings

    get_settings.cache_clear()

    settings = get_settings()
    yield settings

    get_settings.cache_clear()


@pytest.fixture
def mock_supabase_client() -> Generator[MagicMock, None, None]:
    """Provide a mocked Supabase client wherever the app looks one up.

    Yields:
        MagicMock: Mocked Supabase client for testing.
    """
    mock_client = MagicMock()

    mock_response = MagicMock()
    mock_response.data = []
    mock_client.table.return_value.select.return_value.limit.return_value.execute.return_value = (
        mock_response
    )

    with (
        patch("src.core.supabase.get_supabase_client", return_value=mock_client),
        patch("src.services.user_store.get_supabase_client", return_value=mock_client),
    ):
        yield mock_client


@pytest.fixture
def client(mock_supabase_client: MagicMock) -> Generator[TestClient, None, None]:
    """Provide a test client for the FastAPI application.

    Args:
        mock_supabase_client: Mocked Supabase client fixture.

    Yields:
        TestClient: FastAPI test client.
    """
    from src.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def service_client(
    mock_store: AsyncMock, mock_hasher: AsyncMock
) -> Generator[TestClient, None, None]:
    """Test client whose ProfileService uses the store and hasher doubles.

    Yields:
        TestClient: FastAPI test client.
    """
    from src.api.deps import get_profile_service
    from src.main import app
    from src.services.profile_service import ProfileService

    app.dependency_overrides[get_profile_service] = lambda: ProfileService(
        store=mock_store, hasher=mock_hasher
    )
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()
