"""Unit tests for ListingService using a mock repository."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest

from config.settings import settings
from src.cm_common.errors import AppError
from src.cm_listing.application.schemas import ListingItem
from src.cm_listing.application.service import ListingService
from src.cm_listing.domain.cache import HomepageCache
from src.cm_listing.domain.models import Listing, SellerProfile


def _make_listing(listing_id: str, seller: str, price: int = 1000) -> Listing:
    return Listing(
        id=listing_id,
        user_id=seller,
        title=f"Comic {listing_id}",
        price_cents=price,
        created_at=datetime(2026, 10, 1, tzinfo=UTC),
        profiles=SellerProfile(user_id=seller, display_name=f"Shop {seller}"),
    )


def _service(repo: AsyncMock) -> ListingService:
    clock = MagicMock(return_value=0.0)
    return ListingService(repo=repo, cache=HomepageCache(ttl_seconds=60, clock=clock))


class TestNewlyListed:
    async def test_applies_fairness(self) -> None:
        rows = [_make_listing(f"a{i}", "A") for i in range(6)] + [_make_listing("b0", "B")]
        repo = AsyncMock()
        repo.list_newest_active.return_value = rows
        svc = _service(repo)
        db = MagicMock()

        result = await svc.get_homepage_section(db, "newly-listed")

        assert [item.id for item in result.items] == ["a0", "a1", "a2", "a3", "b0", "a4", "a5"]
        assert result.section == "newly-listed"
        assert result.from_cache is False
        repo.list_newest_active.assert_awaited_once_with(db, settings.HOMEPAGE_FETCH_LIMIT)

    async def test_second_call_served_from_cache(self) -> None:
        repo = AsyncMock()
        repo.list_newest_active.return_value = [_make_listing("a0", "A")]
        svc = _service(repo)

        await svc.get_homepage_section(MagicMock(), "newly-listed")
        result = await svc.get_homepage_section(MagicMock(), "newly-listed")

        assert result.from_cache is True
        repo.list_newest_active.assert_awaited_once()


class TestFeaturedGrails:
    async def test_interleaves_sellers(self) -> None:
        repo = AsyncMock()
        repo.list_top_priced_active.return_value = [
            _make_listing("a0", "A", 90000),
            _make_listing("a1", "A", 80000),
            _make_listing("a2", "A", 70000),
            _make_listing("b0", "B", 60000),
        ]
        svc = _service(repo)

        result = await svc.get_homepage_section(MagicMock(), "featured-grails")

        assert [item.id for item in result.items] == ["a0", "a1", "b0", "a2"]


class TestUnknownSection:
    async def test_raises_404_error(self) -> None:
        svc = _service(AsyncMock())
        with pytest.raises(AppError) as exc_info:
            await svc.get_homepage_section(MagicMock(), "trending-everything")
        assert exc_info.value.code == 4001
        assert exc_info.value.http_status == 404


class TestListingItem:
    def test_from_listing(self) -> None:
        listing = Listing(
            id="l1",
            user_id="seller-1",
            title="Hulk #181",
            price_cents=125000,
            image_url="https://img.example/hulk.jpg",
            created_at=datetime(2026, 10, 1, 12, tzinfo=UTC),
            profiles=SellerProfile(user_id="seller-1", display_name="Comic Vault!"),
        )

        item = ListingItem.from_listing(listing)

        assert item.price_display == "$1,250.00"
        assert item.seller_id == "seller-1"
        assert item.seller_slug == "comic-vault"
        assert item.created_at == "2026-10-01T12:00:00+00:00"

    def test_without_profile(self) -> None:
        listing = Listing(id="l2", user_id=None, title="Unknown", price_cents=0)
        item = ListingItem.from_listing(listing)
        assert item.seller_id is None
        assert item.seller_slug is None
        assert item.created_at is None
