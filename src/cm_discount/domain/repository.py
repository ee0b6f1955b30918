"""Repository Protocol: dependency inversion for testability.

Unit tests inject a fake that conforms to this Protocol.
Infrastructure layer provides the real implementation.
"""

from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from src.cm_discount.domain.models import DiscountCode, DiscountUsage


class DiscountRepositoryProtocol(Protocol):
    async def get_active_code_for_user(
        self, db: AsyncSession, user_id: str, for_update: bool = False
    ) -> DiscountCode | None: ...

    async def claim_code(
        self, db: AsyncSession, code: str, user_id: str
    ) -> DiscountCode | None:
        """Assign an active, unowned code to user_id in one conditional write.

        Returns None when no row matched (unknown, inactive or already claimed).
        """
        ...

    async def sum_savings(self, db: AsyncSession, user_id: str, month_year: str) -> int:
        """Savings recorded under month_year ("2026-10"), the key insert_usage writes."""
        ...

    async def insert_usage(
        self,
        db: AsyncSession,
        code_id: str,
        user_id: str,
        item_price_cents: int,
        savings_cents: int,
        month_year: str,
        claim_id: str | None,
    ) -> DiscountUsage: ...
