"""Marketplace (buy/sell) fee calculation.

Every function takes the integer price in cents and recomputes from it;
nothing is cached between calls.
"""

from src.cm_common.cents import apply_rate
from src.cm_common.errors import InvalidFeeRateError
from src.cm_fees.domain.constants import (
    BUYER_PROTECTION_FEE_CENTS,
    DEFAULT_MARKETPLACE_FEE_RATE,
    PROCESSOR_FIXED_FEE_CENTS,
    PROCESSOR_PERCENTAGE_FEE,
)
from src.cm_fees.domain.models import CheckoutSummary, FeeCalculation


def validate_fee_rate(rate: float) -> None:
    """Reject rates outside [0, 1]; out-of-range rates are never clamped."""
    if not (0 <= rate <= 1):
        raise InvalidFeeRateError(rate)


def estimate_processor_fee(price_cents: int) -> int:
    """round(price * 2.9%) + 30 cents."""
    return apply_rate(price_cents, PROCESSOR_PERCENTAGE_FEE) + PROCESSOR_FIXED_FEE_CENTS


def _fee_at_rate(price_cents: int, rate: float) -> FeeCalculation:
    max_total_fee = apply_rate(price_cents, rate)
    platform_fee = max(0, max_total_fee - estimate_processor_fee(price_cents))
    # fee_charged is derived once and subtracted directly: payout + fee == price
    return FeeCalculation(
        fee_charged=max_total_fee,
        payout=price_cents - max_total_fee,
        platform_fee=platform_fee,
    )


def calculate_marketplace_fee(price_cents: int) -> FeeCalculation:
    """Fee at the default all-in rate (6.5%)."""
    return _fee_at_rate(price_cents, DEFAULT_MARKETPLACE_FEE_RATE)


def calculate_marketplace_fee_with_custom_rate(
    price_cents: int, custom_rate: float | None
) -> FeeCalculation:
    """Fee using a seller's custom_fee_rate override.

    0    -> processor fee only, platform takes nothing (premium dealers)
    None -> default rate
    else -> the given rate in the default formula
    """
    if custom_rate is None:
        return calculate_marketplace_fee(price_cents)
    validate_fee_rate(custom_rate)
    if custom_rate == 0:
        processor_fee = estimate_processor_fee(price_cents)
        return FeeCalculation(
            fee_charged=processor_fee,
            payout=price_cents - processor_fee,
            platform_fee=0,
        )
    return _fee_at_rate(price_cents, custom_rate)


def calculate_checkout_summary(
    item_cents: int,
    shipping_cents: int,
    fee_rate: float = DEFAULT_MARKETPLACE_FEE_RATE,
    protection_fee_cents: int = BUYER_PROTECTION_FEE_CENTS,
) -> CheckoutSummary:
    """Buyer-facing order summary: fee is on item + shipping, buyer adds protection."""
    validate_fee_rate(fee_rate)
    subtotal = item_cents + shipping_cents
    return CheckoutSummary(
        subtotal=subtotal,
        platform_fee=apply_rate(subtotal, fee_rate),
        protection_fee=protection_fee_cents,
        total=subtotal + protection_fee_cents,
    )
