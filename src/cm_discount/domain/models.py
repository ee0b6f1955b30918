"""Domain models for cm_discount: pure dataclasses, no SQLAlchemy dependency."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class DiscountCode:
    id: str
    code: str
    user_id: str | None            # None until redeemed; assignable once
    discount_rate: float           # replaces the 5% base rate, e.g. 0.02
    monthly_cap_cents: int         # max savings per calendar month
    is_active: bool
    claimed_at: datetime | None = None
    created_at: datetime | None = None


@dataclass
class DiscountUsage:
    id: int                        # BIGSERIAL
    code_id: str
    user_id: str
    item_price_cents: int
    savings_cents: int
    month_year: str                # "2026-10"
    claim_id: str | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class RedemptionResult:
    """Outcome of a code redemption. Failures are values, not exceptions."""

    success: bool
    message: str
    code: DiscountCode | None = None


@dataclass(frozen=True)
class DiscountedFee:
    fee_cents: int
    standard_fee_cents: int
    discount_applied: bool
    discount_rate: float
    savings_cents: int
    cap_reached: bool
