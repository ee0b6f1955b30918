"""cm_fees REST API: public fee quotes, no authentication."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.cm_common.database import get_db_session
from src.cm_common.response import ApiResponse, request_id_of, success_response
from src.cm_fees.application.service import FeeApplicationService

router = APIRouter(prefix="/fees", tags=["fees"])

_service = FeeApplicationService()


@router.get("/marketplace")
async def marketplace_fee(
    request: Request,
    price_cents: int = Query(..., ge=0, description="Item + shipping subtotal in cents"),
    custom_rate: float | None = Query(None, description="Seller rate override, 0-1"),
) -> ApiResponse:
    data = _service.quote_marketplace_fee(price_cents, custom_rate)
    return success_response(data.model_dump(), request_id_of(request))


@router.get("/trade")
async def trade_fee(
    request: Request,
    total_value: float = Query(..., ge=0, description="Combined trade value in dollars"),
) -> ApiResponse:
    data = _service.quote_trade_fee(total_value)
    return success_response(data.model_dump(), request_id_of(request))


@router.get("/checkout")
async def checkout_summary(
    request: Request,
    item_cents: int = Query(..., ge=0),
    shipping_cents: int = Query(0, ge=0),
) -> ApiResponse:
    data = _service.quote_checkout(item_cents, shipping_cents)
    return success_response(data.model_dump(), request_id_of(request))


@router.get("/seller/{seller_user_id}")
async def seller_fee(
    seller_user_id: str,
    db: Annotated[AsyncSession, Depends(get_db_session)],
    request: Request,
    price_cents: int = Query(..., ge=0),
) -> ApiResponse:
    data = await _service.quote_seller_fee(db, seller_user_id, price_cents)
    return success_response(data.model_dump(), request_id_of(request))
