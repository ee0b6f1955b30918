"""Shared test fixtures."""

import os

# config.settings requires a JWT secret at import time
os.environ.setdefault("JWT_SECRET", "unit-test-secret")

from datetime import UTC, datetime, timedelta  # noqa: E402
from unittest.mock import AsyncMock  # noqa: E402

import pytest  # noqa: E402
from jose import jwt  # noqa: E402

from config.settings import settings  # noqa: E402


def make_token(
    sub: str | None = "user-1",
    expires_in: timedelta = timedelta(minutes=30),
    secret: str | None = None,
    audience: str | None = None,
) -> str:
    """Token shaped like the hosted auth provider's access tokens."""
    now = datetime.now(UTC)
    payload: dict[str, object] = {
        "aud": audience or settings.JWT_AUDIENCE,
        "iat": now,
        "exp": now + expires_in,
    }
    if sub is not None:
        payload["sub"] = sub
    return str(jwt.encode(payload, secret or settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM))


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token('user-1')}"}


@pytest.fixture
def token_factory():
    return make_token


class FakeRedis:
    """INCR/EXPIRE subset of redis.asyncio.Redis."""

    def __init__(self) -> None:
        self.counts: dict[str, int] = {}
        self.expire = AsyncMock()

    async def incr(self, key: str) -> int:
        self.counts[key] = self.counts.get(key, 0) + 1
        return self.counts[key]


@pytest.fixture
def fake_redis() -> FakeRedis:
    return FakeRedis()
