"""Repository Protocol for seller fee settings."""

from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.cm_fees.domain.models import SellerFeeProfile


class SellerFeeRepositoryProtocol(Protocol):
    async def get_seller_fee_profile(
        self, db: AsyncSession, user_id: str
    ) -> SellerFeeProfile | None: ...
