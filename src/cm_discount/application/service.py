"""DiscountApplicationService: influencer code redemption and capped fee quotes.

Redemption reports every failure as RedemptionResult(success=False, message)
so callers branch on a flag instead of catching. Monthly savings are summed
from discount_usage on every call; there is no stored running counter.
"""

import logging
from datetime import datetime

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.cm_common.datetime_utils import month_key, utc_now
from src.cm_common.enums import ShippingMethod
from src.cm_common.errors import DiscountCodeNotFoundError
from src.cm_discount.application.schemas import DiscountInfoResponse
from src.cm_discount.domain.models import DiscountedFee, DiscountUsage, RedemptionResult
from src.cm_discount.domain.policy import apply_capped_discount, undiscounted_fee
from src.cm_discount.domain.repository import DiscountRepositoryProtocol
from src.cm_discount.infrastructure.persistence import DiscountRepository

logger = logging.getLogger("cm.discount")

MSG_APPLIED = "Discount code applied successfully!"
MSG_NOT_AUTHENTICATED = "User not authenticated"
MSG_INVALID_CODE = "Invalid or inactive code"
MSG_ALREADY_HAS_CODE = "You already have an active discount code"
MSG_APPLY_FAILED = "Failed to apply code"


class DiscountApplicationService:
    def __init__(self, repo: DiscountRepositoryProtocol | None = None) -> None:
        self._repo: DiscountRepositoryProtocol = repo or DiscountRepository()

    async def redeem_code(
        self, db: AsyncSession, user_id: str | None, code: str
    ) -> RedemptionResult:
        if not user_id:
            return RedemptionResult(False, MSG_NOT_AUTHENTICATED)
        normalized = code.strip().upper()
        if not normalized:
            return RedemptionResult(False, MSG_INVALID_CODE)

        try:
            if await self._repo.get_active_code_for_user(db, user_id) is not None:
                return RedemptionResult(False, MSG_ALREADY_HAS_CODE)
            claimed = await self._repo.claim_code(db, normalized, user_id)
            if claimed is None:
                await db.rollback()
                return RedemptionResult(False, MSG_INVALID_CODE)
            await db.commit()
        except IntegrityError:
            # uq_influencer_codes_user_id: a parallel redemption gave this user a code
            await db.rollback()
            return RedemptionResult(False, MSG_ALREADY_HAS_CODE)
        except SQLAlchemyError:
            logger.exception("Discount code redemption failed for user %s", user_id)
            await db.rollback()
            return RedemptionResult(False, MSG_APPLY_FAILED)

        logger.info("User %s redeemed discount code %s", user_id, claimed.code)
        return RedemptionResult(True, MSG_APPLIED, claimed)

    async def get_monthly_savings(
        self, db: AsyncSession, user_id: str, now: datetime | None = None
    ) -> int:
        now = now or utc_now()
        return await self._repo.sum_savings(db, user_id, month_key(now))

    async def get_discount_info(
        self, db: AsyncSession, user_id: str, now: datetime | None = None
    ) -> DiscountInfoResponse:
        code = await self._repo.get_active_code_for_user(db, user_id)
        if code is None:
            raise DiscountCodeNotFoundError(user_id)
        savings = await self.get_monthly_savings(db, user_id, now)
        return DiscountInfoResponse.from_code(code, savings)

    async def quote_fee(
        self,
        db: AsyncSession,
        user_id: str,
        item_price_cents: int,
        shipping_method: ShippingMethod,
        now: datetime | None = None,
        for_update: bool = False,
    ) -> tuple[DiscountedFee, str | None]:
        """Fee for one sale with the user's discount, if any.

        Returns the fee and the id of the code that produced it (None when no
        code applies). for_update locks the code row so concurrent sales of one
        seller are capped against each other's savings.
        """
        code = await self._repo.get_active_code_for_user(db, user_id, for_update=for_update)
        if code is None:
            return undiscounted_fee(item_price_cents, shipping_method), None
        savings = await self.get_monthly_savings(db, user_id, now)
        fee = apply_capped_discount(
            item_price_cents,
            shipping_method,
            code.discount_rate,
            code.monthly_cap_cents,
            savings,
        )
        return fee, code.id

    async def record_sale(
        self,
        db: AsyncSession,
        user_id: str,
        item_price_cents: int,
        shipping_method: ShippingMethod,
        claim_id: str | None = None,
        now: datetime | None = None,
    ) -> tuple[DiscountedFee, DiscountUsage | None]:
        """Compute the sale's fee and append the granted savings to the ledger."""
        now = now or utc_now()
        try:
            fee, code_id = await self.quote_fee(
                db, user_id, item_price_cents, shipping_method, now, for_update=True
            )
            usage = None
            if code_id is not None and fee.discount_applied:
                usage = await self._repo.insert_usage(
                    db,
                    code_id,
                    user_id,
                    item_price_cents,
                    fee.savings_cents,
                    month_key(now),
                    claim_id,
                )
            await db.commit()
        except Exception:
            await db.rollback()
            raise
        if fee.cap_reached and fee.discount_applied:
            logger.info("User %s reached monthly discount cap", user_id)
        return fee, usage
