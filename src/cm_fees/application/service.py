"""FeeApplicationService: wraps the pure fee functions for the API.

Only the seller quote touches the database (profiles.custom_fee_rate).
"""

from sqlalchemy.ext.asyncio import AsyncSession

from src.cm_common.errors import SellerProfileNotFoundError
from src.cm_fees.application.schemas import (
    CheckoutSummaryResponse,
    MarketplaceFeeResponse,
    TradeFeeResponse,
)
from src.cm_fees.domain.constants import DEFAULT_MARKETPLACE_FEE_RATE
from src.cm_fees.domain.marketplace import (
    calculate_checkout_summary,
    calculate_marketplace_fee_with_custom_rate,
)
from src.cm_fees.domain.repository import SellerFeeRepositoryProtocol
from src.cm_fees.domain.trade import calculate_trade_fee, trade_fee_cents_each
from src.cm_fees.infrastructure.persistence import SellerFeeRepository


class FeeApplicationService:
    def __init__(self, repo: SellerFeeRepositoryProtocol | None = None) -> None:
        self._repo: SellerFeeRepositoryProtocol = repo or SellerFeeRepository()

    def quote_marketplace_fee(
        self,
        price_cents: int,
        custom_rate: float | None = None,
        is_founding_seller: bool | None = None,
    ) -> MarketplaceFeeResponse:
        calc = calculate_marketplace_fee_with_custom_rate(price_cents, custom_rate)
        rate = DEFAULT_MARKETPLACE_FEE_RATE if custom_rate is None else custom_rate
        return MarketplaceFeeResponse.from_calculation(price_cents, rate, calc, is_founding_seller)

    def quote_trade_fee(self, total_trade_value: float) -> TradeFeeResponse:
        calc = calculate_trade_fee(total_trade_value)
        return TradeFeeResponse.from_calculation(
            total_trade_value, calc, trade_fee_cents_each(total_trade_value)
        )

    def quote_checkout(self, item_cents: int, shipping_cents: int) -> CheckoutSummaryResponse:
        return CheckoutSummaryResponse.from_summary(
            calculate_checkout_summary(item_cents, shipping_cents)
        )

    async def quote_seller_fee(
        self, db: AsyncSession, seller_user_id: str, price_cents: int
    ) -> MarketplaceFeeResponse:
        profile = await self._repo.get_seller_fee_profile(db, seller_user_id)
        if profile is None:
            raise SellerProfileNotFoundError(seller_user_id)
        return self.quote_marketplace_fee(
            price_cents, profile.custom_fee_rate, profile.is_founding_seller
        )
