"""Discounted fee policy under a monthly savings cap.

When a sale's full discount would cross the cap, the discount covers the
sale up to the remaining cap and the rest is charged at the base rate.
Once the month's savings reach the cap, every later sale that month pays
the base fee.
"""

from src.cm_common.cents import apply_rate
from src.cm_common.enums import ShippingMethod
from src.cm_fees.domain.constants import (
    DISCOUNT_BASE_FEE_RATE,
    DISCOUNT_MIN_FEE_CENTS,
    LOCAL_PICKUP_FEE_RATE,
)
from src.cm_fees.domain.marketplace import validate_fee_rate
from src.cm_discount.domain.models import DiscountedFee


def standard_discountable_fee(price_cents: int, shipping_method: ShippingMethod) -> int:
    """Base fee a discount is measured against: 5% (min $5) shipped, 0 local pickup."""
    if shipping_method == ShippingMethod.LOCAL_PICKUP:
        return apply_rate(price_cents, LOCAL_PICKUP_FEE_RATE)
    return max(apply_rate(price_cents, DISCOUNT_BASE_FEE_RATE), DISCOUNT_MIN_FEE_CENTS)


def undiscounted_fee(price_cents: int, shipping_method: ShippingMethod) -> DiscountedFee:
    standard = standard_discountable_fee(price_cents, shipping_method)
    return DiscountedFee(
        fee_cents=standard,
        standard_fee_cents=standard,
        discount_applied=False,
        discount_rate=DISCOUNT_BASE_FEE_RATE,
        savings_cents=0,
        cap_reached=False,
    )


def apply_capped_discount(
    price_cents: int,
    shipping_method: ShippingMethod,
    discount_rate: float,
    monthly_cap_cents: int,
    month_savings_cents: int,
) -> DiscountedFee:
    validate_fee_rate(discount_rate)
    standard = standard_discountable_fee(price_cents, shipping_method)
    discounted = apply_rate(price_cents, discount_rate)
    full_savings = max(0, standard - discounted)

    remaining_cap = max(0, monthly_cap_cents - month_savings_cents)
    granted = min(full_savings, remaining_cap)

    return DiscountedFee(
        fee_cents=standard - granted,
        standard_fee_cents=standard,
        discount_applied=granted > 0,
        discount_rate=discount_rate,
        savings_cents=granted,
        cap_reached=month_savings_cents + granted >= monthly_cap_cents,
    )
