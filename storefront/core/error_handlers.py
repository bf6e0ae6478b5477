import logging

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.constants.error_codes import ErrorCode
from storefront.core.exceptions import AppException

logger = logging.getLogger(__name__)

HTTP_STATUS_TO_ERROR_CODE = {
    400: ErrorCode.VALIDATION_ERROR,
    401: ErrorCode.UNAUTHORIZED,
    403: ErrorCode.PERMISSION_DENIED,
    404: ErrorCode.NOT_FOUND,
    405: ErrorCode.VALIDATION_ERROR,
    409: ErrorCode.CONFLICT,
    422: ErrorCode.VALIDATION_ERROR,
}


def error_json(
    status_code: int,
    message,
    error_code: ErrorCode,
    details=None,
    headers: dict | None = None,
) -> JSONResponse:
    """Every non-2xx JSON body goes through here so clients can always read ``error``."""
    return JSONResponse(
        status_code=status_code,
        content={
            "success": False,
            "error": message,
            "error_code": ErrorCode(error_code).value,
            "details": jsonable_encoder(details),
        },
        headers=headers,
    )


async def app_exception_handler(request: Request, exc: AppException):
    level = logging.ERROR if exc.status_code >= 500 else logging.INFO
    logger.log(level, "%s %s rejected: %s", request.method, request.url.path, exc.message, extra=exc.log_extra())

    return error_json(exc.status_code, exc.message, exc.error_code, exc.details, getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return error_json(422, "Invalid request data", ErrorCode.VALIDATION_ERROR, exc.errors())


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    error_code = HTTP_STATUS_TO_ERROR_CODE.get(exc.status_code, ErrorCode.INTERNAL_ERROR)
    return error_json(exc.status_code, exc.detail, error_code, headers=getattr(exc, "headers", None))


async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.exception("Constraint violation on %s %s", request.method, request.url.path)
    return error_json(409, "Database constraint violation", ErrorCode.CONFLICT)


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(
        "Unhandled exception",
        extra={"path": request.url.path, "method": request.method},
    )
    return error_json(500, "Something went wrong. Please try again.", ErrorCode.INTERNAL_ERROR)
