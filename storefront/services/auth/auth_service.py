from datetime import datetime, timedelta, timezone

from fastapi import status
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.config import SESSION_MAX_AGE_SECONDS
from storefront.core.exceptions import AppException
from storefront.core.security import (
    check_admin_password,
    create_session_token,
    is_admin_password_configured,
)
from storefront.constants.activity_codes import ActivityCode
from storefront.constants.error_codes import ErrorCode
from storefront.utils.activity_helpers import emit_activity
from storefront.utils.logger import get_logger

logger = get_logger("auth.service")


# =====================================================
# LOGIN
# =====================================================
async def login_admin(db: AsyncSession, password: str, client: str) -> dict:
    if not is_admin_password_configured():
        logger.error("Admin login attempted but ADMIN_PASSWORD is not configured")
        raise AppException(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "ADMIN_PASSWORD is not configured",
            ErrorCode.NOT_CONFIGURED,
        )

    if not check_admin_password(password):
        logger.warning("Invalid admin password", extra={"client": client})
        raise AppException(
            status.HTTP_401_UNAUTHORIZED,
            "Contraseña incorrecta",
            ErrorCode.INVALID_PASSWORD,
        )

    token = create_session_token()
    expires_at = datetime.now(timezone.utc) + timedelta(seconds=SESSION_MAX_AGE_SECONDS)

    await emit_activity(db=db, code=ActivityCode.LOGIN, client=client)
    await db.commit()

    logger.info("Admin login successful", extra={"client": client})

    return {
        "token": token,
        "expires_at": expires_at,
    }


# =====================================================
# LOGOUT
# =====================================================
async def logout_admin(db: AsyncSession) -> None:
    await emit_activity(db=db, code=ActivityCode.LOGOUT)
    await db.commit()

    logger.info("Admin logout")
