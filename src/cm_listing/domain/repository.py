"""Repository Protocol for homepage listing queries."""

from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.cm_listing.domain.models import Listing


class ListingRepositoryProtocol(Protocol):
    async def list_newest_active(self, db: AsyncSession, limit: int) -> list[Listing]: ...

    async def list_top_priced_active(self, db: AsyncSession, limit: int) -> list[Listing]: ...
