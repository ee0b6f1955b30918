"""Unit tests for ListingRepository using MagicMock AsyncSession."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.cm_listing.infrastructure.persistence import ListingRepository


def _make_listing_row(**kwargs):
    row = MagicMock()
    row.id = kwargs.get("id", "listing-1")
    row.user_id = kwargs.get("user_id", "seller-1")
    row.title = kwargs.get("title", "X-Men #1")
    row.price_cents = kwargs.get("price_cents", 4500)
    row.image_url = kwargs.get("image_url")
    row.created_at = datetime(2026, 10, 1, tzinfo=UTC)
    row.profile_user_id = kwargs.get("profile_user_id", "seller-1")
    row.display_name = kwargs.get("display_name", "Mutant Books")
    row.username = kwargs.get("username", "mutants")
    return row


@pytest.fixture
def db():
    return MagicMock()


class TestListNewestActive:
    async def test_maps_rows(self, db) -> None:
        result_mock = MagicMock()
        result_mock.fetchall.return_value = [_make_listing_row(), _make_listing_row(id="listing-2")]
        db.execute = AsyncMock(return_value=result_mock)

        listings = await ListingRepository().list_newest_active(db, 120)

        assert [item.id for item in listings] == ["listing-1", "listing-2"]
        assert listings[0].profiles is not None
        assert listings[0].profiles.display_name == "Mutant Books"
        params = db.execute.call_args.args[1]
        assert params == {"status": "active", "limit": 120}
        assert "ORDER BY l.created_at DESC" in str(db.execute.call_args.args[0])

    async def test_missing_profile(self, db) -> None:
        result_mock = MagicMock()
        result_mock.fetchall.return_value = [_make_listing_row(profile_user_id=None)]
        db.execute = AsyncMock(return_value=result_mock)

        listings = await ListingRepository().list_newest_active(db, 10)

        assert listings[0].profiles is None
        assert listings[0].user_id == "seller-1"


class TestListTopPricedActive:
    async def test_orders_by_price(self, db) -> None:
        result_mock = MagicMock()
        result_mock.fetchall.return_value = []
        db.execute = AsyncMock(return_value=result_mock)

        assert await ListingRepository().list_top_priced_active(db, 5) == []
        assert "ORDER BY l.price_cents DESC" in str(db.execute.call_args.args[0])
