"""SellerFeeRepository: reads the fee columns of profiles."""

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from src.cm_fees.domain.models import SellerFeeProfile

_GET_SELLER_FEE_PROFILE_SQL = text("""
    SELECT user_id, custom_fee_rate, is_founding_seller
    FROM profiles
    WHERE user_id = :user_id
""")


class SellerFeeRepository:
    async def get_seller_fee_profile(
        self, db: AsyncSession, user_id: str
    ) -> SellerFeeProfile | None:
        result = await db.execute(_GET_SELLER_FEE_PROFILE_SQL, {"user_id": user_id})
        row = result.fetchone()
        if row is None:
            return None
        rate = row.custom_fee_rate
        return SellerFeeProfile(
            user_id=str(row.user_id),
            # NUMERIC comes back as Decimal
            custom_fee_rate=float(rate) if rate is not None else None,
            is_founding_seller=bool(row.is_founding_seller),
        )
