"""Pydantic schemas for cm_discount API."""

from pydantic import BaseModel, Field

from src.cm_common.cents import cents_to_display, format_fee_rate
from src.cm_common.enums import ShippingMethod
from src.cm_discount.domain.models import DiscountCode, DiscountedFee


class RedeemCodeRequest(BaseModel):
    code: str = Field(..., min_length=1, max_length=32, description="Influencer code")


class RedeemCodeResponse(BaseModel):
    success: bool
    message: str


class DiscountInfoResponse(BaseModel):
    code: str
    discount_rate: float
    discount_rate_display: str
    monthly_cap_cents: int
    monthly_cap_display: str
    current_month_savings_cents: int
    current_month_savings_display: str
    remaining_cap_cents: int
    is_active: bool

    @classmethod
    def from_code(cls, code: DiscountCode, month_savings: int) -> "DiscountInfoResponse":
        return cls(
            code=code.code,
            discount_rate=code.discount_rate,
            discount_rate_display=format_fee_rate(code.discount_rate),
            monthly_cap_cents=code.monthly_cap_cents,
            monthly_cap_display=cents_to_display(code.monthly_cap_cents),
            current_month_savings_cents=month_savings,
            current_month_savings_display=cents_to_display(month_savings),
            remaining_cap_cents=max(0, code.monthly_cap_cents - month_savings),
            is_active=code.is_active,
        )


class DiscountedFeeResponse(BaseModel):
    item_price_cents: int
    shipping_method: ShippingMethod
    fee_cents: int
    fee_display: str
    standard_fee_cents: int
    discount_applied: bool
    discount_rate: float
    savings_cents: int
    savings_display: str
    cap_reached: bool

    @classmethod
    def from_fee(
        cls, item_price_cents: int, shipping_method: ShippingMethod, fee: DiscountedFee
    ) -> "DiscountedFeeResponse":
        return cls(
            item_price_cents=item_price_cents,
            shipping_method=shipping_method,
            fee_cents=fee.fee_cents,
            fee_display=cents_to_display(fee.fee_cents),
            standard_fee_cents=fee.standard_fee_cents,
            discount_applied=fee.discount_applied,
            discount_rate=fee.discount_rate,
            savings_cents=fee.savings_cents,
            savings_display=cents_to_display(fee.savings_cents),
            cap_reached=fee.cap_reached,
        )
