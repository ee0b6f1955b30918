"""cm_listing REST API: public homepage sections."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.cm_common.database import get_db_session
from src.cm_common.response import ApiResponse, request_id_of, success_response
from src.cm_listing.application.service import ListingService

router = APIRouter(prefix="/listings", tags=["listings"])

_service = ListingService()


@router.get("/homepage/{section}")
async def homepage_section(
    section: str,
    db: Annotated[AsyncSession, Depends(get_db_session)],
    request: Request,
) -> ApiResponse:
    data = await _service.get_homepage_section(db, section)
    return success_response(data.model_dump(), request_id_of(request))
