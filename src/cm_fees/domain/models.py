"""Domain models for cm_fees: pure dataclasses, no I/O."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TradeFeeTier:
    min: int                 # dollars, inclusive
    max: int | None          # dollars, inclusive; None = unbounded
    total: float             # dollars for the whole trade
    each: float              # dollars per participant

    @property
    def label(self) -> str:
        if self.max is None:
            return f"${self.min}+"
        return f"${self.min}-${self.max}"


@dataclass(frozen=True)
class FeeCalculation:
    fee_charged: int         # cents, total deducted from the seller
    payout: int              # cents, price - fee_charged
    platform_fee: int        # cents, fee_charged minus processor estimate, >= 0


@dataclass(frozen=True)
class TradeFeeCalculation:
    total_fee: float         # dollars
    per_participant_fee: float
    tier_label: str


@dataclass(frozen=True)
class CheckoutSummary:
    subtotal: int            # cents, item + shipping
    platform_fee: int        # cents, shown to the buyer, paid by the seller
    protection_fee: int      # cents
    total: int               # cents, what the buyer pays


@dataclass(frozen=True)
class SellerFeeProfile:
    user_id: str
    custom_fee_rate: float | None    # None = default rate, 0 = processor fee only
    is_founding_seller: bool = False
