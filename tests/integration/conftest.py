"""Integration-test fixtures (requires running PG + Redis).

Run: CM_INTEGRATION=1 pytest tests/integration -v
Pre-condition: alembic upgrade head

All integration tests share a single event-loop so that the module-level
SQLAlchemy async engine pool and Redis pool (both created at import time)
remain valid across the entire test session.
"""

import os
import uuid
from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import text

from src.cm_common.database import async_session_factory
from src.main import app


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    if os.environ.get("CM_INTEGRATION") == "1":
        return
    skip = pytest.mark.skip(reason="set CM_INTEGRATION=1 to run against live PG + Redis")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip)


@pytest_asyncio.fixture(loop_scope="session", scope="session")
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Session-scoped async HTTP client: keeps the engine pool alive."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture(loop_scope="session")
async def fresh_code() -> AsyncGenerator[str, None]:
    """Insert an unclaimed influencer code; remove it and its usage afterwards."""
    code = f"IT{uuid.uuid4().hex[:8].upper()}"
    async with async_session_factory() as session:
        await session.execute(
            text("""
                INSERT INTO influencer_codes (code, discount_rate, monthly_cap_cents, is_active)
                VALUES (:code, 0.02, 5000, TRUE)
            """),
            {"code": code},
        )
        await session.commit()
    yield code
    async with async_session_factory() as session:
        await session.execute(
            text("""
                DELETE FROM discount_usage
                WHERE code_id IN (SELECT id FROM influencer_codes WHERE code = :code)
            """),
            {"code": code},
        )
        await session.execute(
            text("DELETE FROM influencer_codes WHERE code = :code"), {"code": code}
        )
        await session.commit()
