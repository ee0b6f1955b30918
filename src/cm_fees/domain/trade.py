"""Trade (item swap) fee tiers."""

from src.cm_common.cents import dollars_to_cents
from src.cm_fees.domain.constants import TRADE_FEE_TIERS
from src.cm_fees.domain.models import TradeFeeCalculation, TradeFeeTier


def find_trade_tier(total_trade_value: float) -> TradeFeeTier:
    """Tier whose (previous max, max] range holds the value.

    The first tier starts at its own min inclusive, so 50.01 belongs to $51-$100
    and every non-negative value hits exactly one tier. Anything else (negative
    values) falls back to the highest tier.
    """
    previous_max: int | None = None
    for tier in TRADE_FEE_TIERS:
        if previous_max is None:
            above_floor = total_trade_value >= tier.min
        else:
            above_floor = total_trade_value > previous_max
        if above_floor and (tier.max is None or total_trade_value <= tier.max):
            return tier
        previous_max = tier.max
    return TRADE_FEE_TIERS[-1]


def calculate_trade_fee(total_trade_value: float) -> TradeFeeCalculation:
    tier = find_trade_tier(total_trade_value)
    return TradeFeeCalculation(
        total_fee=tier.total,
        per_participant_fee=tier.each,
        tier_label=tier.label,
    )


def trade_fee_cents_each(total_trade_value: float) -> int:
    """Per-participant trade fee in cents, the amount actually charged."""
    return dollars_to_cents(find_trade_tier(total_trade_value).each)
