"""API tests over ASGITransport with database and Redis dependencies overridden."""

from collections.abc import AsyncGenerator
from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

import src.cm_discount.api.router as discount_api
import src.cm_fees.api.router as fees_api
import src.cm_listing.api.router as listing_api
from src.cm_common.database import get_db_session
from src.cm_common.redis_client import get_redis
from src.cm_discount.application.service import DiscountApplicationService
from src.cm_discount.domain.models import DiscountCode
from src.cm_fees.application.service import FeeApplicationService
from src.cm_fees.domain.models import SellerFeeProfile
from src.cm_listing.application.service import ListingService
from src.cm_listing.domain.cache import HomepageCache
from src.cm_listing.domain.models import Listing
from src.main import app


async def _fake_session() -> AsyncGenerator[AsyncMock, None]:
    yield AsyncMock()


@pytest_asyncio.fixture
async def client(fake_redis) -> AsyncGenerator[AsyncClient, None]:
    async def _fake_redis():
        return fake_redis

    app.dependency_overrides[get_db_session] = _fake_session
    app.dependency_overrides[get_redis] = _fake_redis
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def discount_repo(monkeypatch: pytest.MonkeyPatch) -> AsyncMock:
    repo = AsyncMock()
    repo.get_active_code_for_user.return_value = None
    repo.claim_code.return_value = DiscountCode(
        id="code-1",
        code="GRAIL10",
        user_id="user-1",
        discount_rate=0.02,
        monthly_cap_cents=5000,
        is_active=True,
    )
    monkeypatch.setattr(discount_api, "_service", DiscountApplicationService(repo=repo))
    return repo


class TestHealth:
    async def test_health(self, client: AsyncClient) -> None:
        resp = await client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"


class TestFeesApi:
    async def test_marketplace_fee(self, client: AsyncClient) -> None:
        resp = await client.get("/api/v1/fees/marketplace", params={"price_cents": 10000})
        assert resp.status_code == 200
        body = resp.json()
        assert body["code"] == 0
        assert body["data"]["fee_charged_cents"] == 650
        assert body["data"]["payout_cents"] == 9350
        assert body["data"]["is_founding_seller"] is None
        assert body["request_id"].startswith("req_")
        assert resp.headers["X-Request-ID"] == body["request_id"]

    async def test_incoming_request_id_is_kept(self, client: AsyncClient) -> None:
        resp = await client.get(
            "/api/v1/fees/trade",
            params={"total_value": 10},
            headers={"X-Request-ID": "edge-42"},
        )
        assert resp.json()["request_id"] == "edge-42"
        assert resp.headers["X-Request-ID"] == "edge-42"

    async def test_invalid_custom_rate(self, client: AsyncClient) -> None:
        resp = await client.get(
            "/api/v1/fees/marketplace", params={"price_cents": 10000, "custom_rate": 1.5}
        )
        assert resp.status_code == 422
        assert resp.json()["code"] == 2001

    async def test_negative_price_rejected(self, client: AsyncClient) -> None:
        resp = await client.get("/api/v1/fees/marketplace", params={"price_cents": -1})
        assert resp.status_code == 422

    async def test_trade_fee(self, client: AsyncClient) -> None:
        resp = await client.get("/api/v1/fees/trade", params={"total_value": 50.01})
        assert resp.status_code == 200
        assert resp.json()["data"]["tier_label"] == "$51-$100"

    async def test_checkout(self, client: AsyncClient) -> None:
        resp = await client.get(
            "/api/v1/fees/checkout", params={"item_cents": 10000, "shipping_cents": 500}
        )
        assert resp.status_code == 200
        assert resp.json()["data"]["total_cents"] == 10699

    async def test_seller_fee_not_found(
        self, client: AsyncClient, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        repo = AsyncMock()
        repo.get_seller_fee_profile.return_value = None
        monkeypatch.setattr(fees_api, "_service", FeeApplicationService(repo=repo))
        resp = await client.get("/api/v1/fees/seller/ghost", params={"price_cents": 10000})
        assert resp.status_code == 404
        assert resp.json()["code"] == 2002

    async def test_seller_fee(self, client: AsyncClient, monkeypatch: pytest.MonkeyPatch) -> None:
        repo = AsyncMock()
        repo.get_seller_fee_profile.return_value = SellerFeeProfile("seller-1", 0.0)
        monkeypatch.setattr(fees_api, "_service", FeeApplicationService(repo=repo))
        resp = await client.get("/api/v1/fees/seller/seller-1", params={"price_cents": 10000})
        assert resp.status_code == 200
        assert resp.json()["data"]["platform_fee_cents"] == 0
        assert resp.json()["data"]["is_founding_seller"] is False


class TestDiscountApi:
    async def test_redeem_requires_token(self, client: AsyncClient, discount_repo) -> None:
        resp = await client.post("/api/v1/discounts/redeem", json={"code": "GRAIL10"})
        assert resp.status_code == 401

    async def test_redeem_success(
        self, client: AsyncClient, discount_repo, auth_headers: dict[str, str]
    ) -> None:
        resp = await client.post(
            "/api/v1/discounts/redeem", json={"code": " grail10 "}, headers=auth_headers
        )
        assert resp.status_code == 200
        assert resp.json()["data"] == {
            "success": True,
            "message": "Discount code applied successfully!",
        }
        discount_repo.claim_code.assert_awaited_once()
        assert discount_repo.claim_code.call_args.args[1:] == ("GRAIL10", "user-1")

    async def test_redeem_failure_is_still_200(
        self, client: AsyncClient, discount_repo, auth_headers: dict[str, str]
    ) -> None:
        discount_repo.claim_code.return_value = None
        resp = await client.post(
            "/api/v1/discounts/redeem", json={"code": "NOPE"}, headers=auth_headers
        )
        assert resp.status_code == 200
        assert resp.json()["data"]["success"] is False
        assert resp.json()["data"]["message"] == "Invalid or inactive code"

    async def test_redeem_rate_limited(
        self, client: AsyncClient, discount_repo, auth_headers: dict[str, str]
    ) -> None:
        discount_repo.claim_code.return_value = None
        for _ in range(5):
            resp = await client.post(
                "/api/v1/discounts/redeem", json={"code": "GUESS"}, headers=auth_headers
            )
            assert resp.status_code == 200
        resp = await client.post(
            "/api/v1/discounts/redeem", json={"code": "GUESS"}, headers=auth_headers
        )
        assert resp.status_code == 429
        assert resp.json()["code"] == 9001

    async def test_me_without_code(
        self, client: AsyncClient, discount_repo, auth_headers: dict[str, str]
    ) -> None:
        resp = await client.get("/api/v1/discounts/me", headers=auth_headers)
        assert resp.status_code == 404
        assert resp.json()["code"] == 3001

    async def test_quote_without_code(
        self, client: AsyncClient, discount_repo, auth_headers: dict[str, str]
    ) -> None:
        resp = await client.get(
            "/api/v1/discounts/quote",
            params={"item_price_cents": 20000, "shipping_method": "ship_nationwide"},
            headers=auth_headers,
        )
        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["fee_cents"] == 1000
        assert data["discount_applied"] is False
        assert data["shipping_method"] == "ship_nationwide"

    async def test_quote_with_code(
        self, client: AsyncClient, discount_repo, auth_headers: dict[str, str]
    ) -> None:
        discount_repo.get_active_code_for_user.return_value = discount_repo.claim_code.return_value
        discount_repo.sum_savings.return_value = 0
        resp = await client.get(
            "/api/v1/discounts/quote",
            params={"item_price_cents": 20000},
            headers=auth_headers,
        )
        data = resp.json()["data"]
        assert data["fee_cents"] == 400
        assert data["savings_cents"] == 600
        assert data["discount_applied"] is True


class TestListingApi:
    async def test_unknown_section(self, client: AsyncClient) -> None:
        resp = await client.get("/api/v1/listings/homepage/everything")
        assert resp.status_code == 404
        assert resp.json()["code"] == 4001

    async def test_newly_listed(self, client: AsyncClient, monkeypatch: pytest.MonkeyPatch) -> None:
        repo = AsyncMock()
        repo.list_newest_active.return_value = [
            Listing(
                id="l1",
                user_id="seller-1",
                title="Spawn #1",
                price_cents=2500,
                created_at=datetime(2026, 10, 17, tzinfo=UTC),
            )
        ]
        service = ListingService(repo=repo, cache=HomepageCache(ttl_seconds=60))
        monkeypatch.setattr(listing_api, "_service", service)

        resp = await client.get("/api/v1/listings/homepage/newly-listed")

        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["section"] == "newly-listed"
        assert data["items"][0]["price_display"] == "$25.00"
        assert data["from_cache"] is False
