from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.config import (
    IS_PRODUCTION,
    SESSION_COOKIE_NAME,
    SESSION_MAX_AGE_SECONDS,
)
from storefront.core.db import get_db
from storefront.schemas.auth.auth_schemas import LoginRequest, SessionStatus
from storefront.services.auth.auth_service import login_admin, logout_admin
from storefront.utils.get_admin import read_session
from storefront.utils.response import success_response, APIResponse
from storefront.utils.logger import get_logger

logger = get_logger("auth.router")

router = APIRouter(prefix="/api/admin", tags=["Admin Auth"])


def _client(request: Request) -> str:
    return request.client.host if request.client else "unknown"


@router.post("/login")
async def login(
    payload: LoginRequest,
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db),
):
    logger.info("Login attempt", extra={"client": _client(request)})

    session = await login_admin(db, payload.password, _client(request))

    response.set_cookie(
        key=SESSION_COOKIE_NAME,
        value=session["token"],
        max_age=SESSION_MAX_AGE_SECONDS,
        path="/",
        httponly=True,
        secure=IS_PRODUCTION,
        samesite="lax",
    )

    return success_response(
        "Login successful",
        {"ok": True, "expires_at": session["expires_at"]},
    )


@router.post("/logout")
async def logout(
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db),
):
    if read_session(request):
        await logout_admin(db)

    response.delete_cookie(
        key=SESSION_COOKIE_NAME,
        path="/",
        httponly=True,
        secure=IS_PRODUCTION,
        samesite="lax",
    )

    return success_response("Logged out successfully", {"ok": True})


@router.get("/session", response_model=APIResponse[SessionStatus])
async def session_status(request: Request):
    session = read_session(request)
    if not session:
        return success_response("No active session", SessionStatus(authenticated=False))

    expires_at = datetime.fromtimestamp(session["exp"], tz=timezone.utc)
    return success_response(
        "Session active",
        SessionStatus(authenticated=True, expires_at=expires_at),
    )
