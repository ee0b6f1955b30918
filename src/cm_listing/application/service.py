"""ListingService: composes homepage sections from raw rows.

newly-listed:    newest first, then homepage fairness
featured-grails: highest priced first, then carousel interleave
"""

from sqlalchemy.ext.asyncio import AsyncSession

from config.settings import settings
from src.cm_common.enums import HomepageSection
from src.cm_common.errors import UnknownHomepageSectionError
from src.cm_listing.application.schemas import HomepageSectionResponse, ListingItem
from src.cm_listing.domain.cache import HomepageCache
from src.cm_listing.domain.fairness import (
    apply_homepage_fairness,
    interleave_by_seller_for_carousel,
)
from src.cm_listing.domain.models import Listing
from src.cm_listing.domain.repository import ListingRepositoryProtocol
from src.cm_listing.infrastructure.persistence import ListingRepository


class ListingService:
    def __init__(
        self,
        repo: ListingRepositoryProtocol | None = None,
        cache: HomepageCache | None = None,
    ) -> None:
        self._repo: ListingRepositoryProtocol = repo or ListingRepository()
        self._cache = cache or HomepageCache(ttl_seconds=settings.HOMEPAGE_CACHE_TTL_SECONDS)

    async def _newly_listed(self, db: AsyncSession) -> list[Listing]:
        rows = await self._repo.list_newest_active(db, settings.HOMEPAGE_FETCH_LIMIT)
        return apply_homepage_fairness(
            rows,
            max_per_seller_in_top=settings.HOMEPAGE_MAX_PER_SELLER,
            top_window_size=settings.HOMEPAGE_TOP_WINDOW,
        )

    async def _featured_grails(self, db: AsyncSession) -> list[Listing]:
        rows = await self._repo.list_top_priced_active(db, settings.HOMEPAGE_FETCH_LIMIT)
        return interleave_by_seller_for_carousel(rows, settings.CAROUSEL_MAX_CONSECUTIVE)

    async def get_homepage_section(
        self, db: AsyncSession, section: str
    ) -> HomepageSectionResponse:
        try:
            key = HomepageSection(section)
        except ValueError:
            raise UnknownHomepageSectionError(section) from None

        loader = self._newly_listed if key is HomepageSection.NEWLY_LISTED else self._featured_grails
        listings, from_cache = await self._cache.get(key.value, lambda: loader(db))
        return HomepageSectionResponse(
            section=key.value,
            items=[ListingItem.from_listing(item) for item in listings],
            from_cache=from_cache,
        )
