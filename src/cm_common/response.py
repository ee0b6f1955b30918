"""Unified API response envelope.

{
    "code": 0,             // 0 = success, otherwise an AppError code
    "message": "success",
    "data": { ... },       // null on error
    "timestamp": "...",
    "request_id": "req_..."
}

Business outcomes that are not errors (a rejected discount code, for one)
travel inside data with code 0.
"""

import uuid
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field
from starlette.requests import Request


def _new_request_id() -> str:
    return f"req_{uuid.uuid4().hex[:12]}"


class ApiResponse(BaseModel):
    code: int = 0
    message: str = "success"
    data: Any = None
    timestamp: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())
    request_id: str = Field(default_factory=_new_request_id)


def request_id_of(request: Request) -> str | None:
    """Id assigned by RequestLogMiddleware, None when the middleware is not mounted."""
    return getattr(request.state, "request_id", None)


def success_response(data: Any = None, request_id: str | None = None) -> ApiResponse:
    return ApiResponse(
        code=0, message="success", data=data, request_id=request_id or _new_request_id()
    )


def error_response(code: int, message: str, request_id: str | None = None) -> ApiResponse:
    return ApiResponse(
        code=code, message=message, data=None, request_id=request_id or _new_request_id()
    )
