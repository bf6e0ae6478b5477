# storefront/utils/response.py

from typing import Any, Generic, Optional, TypeVar
from pydantic import BaseModel

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    success: bool = True
    message: str
    data: Optional[T] = None


class ErrorResponse(BaseModel):
    """Shape produced by storefront.core.error_handlers."""

    success: bool = False
    error: str
    error_code: str
    details: Optional[Any] = None


# documented on every admin router
ADMIN_ERROR_RESPONSES = {
    401: {"model": ErrorResponse, "description": "No valid admin session"},
}


def success_response(message: str, data: Any = None) -> dict:
    return {"success": True, "message": message, "data": data}
