"""cm_discount REST API: all endpoints require a bearer token."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.cm_common.database import get_db_session
from src.cm_common.enums import ShippingMethod
from src.cm_common.response import ApiResponse, request_id_of, success_response
from src.cm_discount.application.schemas import (
    DiscountedFeeResponse,
    RedeemCodeRequest,
    RedeemCodeResponse,
)
from src.cm_discount.application.service import DiscountApplicationService
from src.cm_gateway.auth.dependencies import get_current_user_id
from src.cm_gateway.middleware.rate_limit import limit_redemptions

router = APIRouter(prefix="/discounts", tags=["discounts"])

_service = DiscountApplicationService()


@router.post("/redeem", dependencies=[Depends(limit_redemptions)])
async def redeem(
    body: RedeemCodeRequest,
    user_id: Annotated[str, Depends(get_current_user_id)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
    request: Request,
) -> ApiResponse:
    result = await _service.redeem_code(db, user_id, body.code)
    data = RedeemCodeResponse(success=result.success, message=result.message)
    return success_response(data.model_dump(), request_id_of(request))


@router.get("/me")
async def my_discount(
    user_id: Annotated[str, Depends(get_current_user_id)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
    request: Request,
) -> ApiResponse:
    data = await _service.get_discount_info(db, user_id)
    return success_response(data.model_dump(), request_id_of(request))


@router.get("/quote")
async def quote(
    user_id: Annotated[str, Depends(get_current_user_id)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
    request: Request,
    item_price_cents: int = Query(..., ge=0),
    shipping_method: ShippingMethod = Query(ShippingMethod.SHIP_NATIONWIDE),
) -> ApiResponse:
    fee, _ = await _service.quote_fee(db, user_id, item_price_cents, shipping_method)
    data = DiscountedFeeResponse.from_fee(item_price_cents, shipping_method, fee)
    return success_response(data.model_dump(mode="json"), request_id_of(request))
