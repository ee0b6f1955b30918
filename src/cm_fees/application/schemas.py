"""Pydantic response schemas for cm_fees API."""

from pydantic import BaseModel

from src.cm_common.cents import cents_to_display, format_fee_rate
from src.cm_fees.domain.models import CheckoutSummary, FeeCalculation, TradeFeeCalculation


class MarketplaceFeeResponse(BaseModel):
    price_cents: int
    fee_rate: float
    fee_rate_display: str
    fee_charged_cents: int
    fee_charged_display: str
    payout_cents: int
    payout_display: str
    platform_fee_cents: int
    platform_fee_display: str
    is_founding_seller: bool | None = None  # set on seller quotes only

    @classmethod
    def from_calculation(
        cls,
        price_cents: int,
        fee_rate: float,
        calc: FeeCalculation,
        is_founding_seller: bool | None = None,
    ) -> "MarketplaceFeeResponse":
        return cls(
            price_cents=price_cents,
            fee_rate=fee_rate,
            fee_rate_display=format_fee_rate(fee_rate),
            fee_charged_cents=calc.fee_charged,
            fee_charged_display=cents_to_display(calc.fee_charged),
            payout_cents=calc.payout,
            payout_display=cents_to_display(calc.payout),
            platform_fee_cents=calc.platform_fee,
            platform_fee_display=cents_to_display(calc.platform_fee),
            is_founding_seller=is_founding_seller,
        )


class TradeFeeResponse(BaseModel):
    total_trade_value: float
    total_fee: float
    per_participant_fee: float
    per_participant_fee_cents: int
    tier_label: str

    @classmethod
    def from_calculation(
        cls, total_trade_value: float, calc: TradeFeeCalculation, each_cents: int
    ) -> "TradeFeeResponse":
        return cls(
            total_trade_value=total_trade_value,
            total_fee=calc.total_fee,
            per_participant_fee=calc.per_participant_fee,
            per_participant_fee_cents=each_cents,
            tier_label=calc.tier_label,
        )


class CheckoutSummaryResponse(BaseModel):
    subtotal_cents: int
    subtotal_display: str
    platform_fee_cents: int
    platform_fee_display: str
    protection_fee_cents: int
    protection_fee_display: str
    total_cents: int
    total_display: str

    @classmethod
    def from_summary(cls, summary: CheckoutSummary) -> "CheckoutSummaryResponse":
        return cls(
            subtotal_cents=summary.subtotal,
            subtotal_display=cents_to_display(summary.subtotal),
            platform_fee_cents=summary.platform_fee,
            platform_fee_display=cents_to_display(summary.platform_fee),
            protection_fee_cents=summary.protection_fee,
            protection_fee_display=cents_to_display(summary.protection_fee),
            total_cents=summary.total,
            total_display=cents_to_display(summary.total),
        )
