from fastapi import HTTPException, Query, Request, status

from storefront.core.config import SESSION_COOKIE_NAME
from storefront.core.security import check_admin_password, decode_session_token
from storefront.utils.logger import get_logger

logger = get_logger("auth.guard")


def read_session(request: Request) -> dict | None:
    token = request.cookies.get(SESSION_COOKIE_NAME)
    if not token:
        return None
    try:
        return decode_session_token(token)
    except HTTPException:
        logger.warning("Rejected invalid admin session cookie")
        return None


async def require_admin(
    request: Request,
    password: str | None = Query(None, include_in_schema=False),
) -> dict:
    """
    Session cookie first; older admin screens still send the shared
    password as a ``password`` query parameter.
    """
    session = read_session(request)
    if session:
        request.state.admin = session
        return session

    if password and check_admin_password(password):
        session = {"sub": "admin", "via": "password"}
        request.state.admin = session
        return session

    logger.warning("Unauthorized admin request", extra={"path": request.url.path})
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized",
    )
