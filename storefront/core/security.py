# storefront/core/security.py

import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

from passlib.context import CryptContext
from jose import jwt, JWTError
from fastapi import HTTPException, status

from storefront.constants.error_codes import ErrorCode
from storefront.core.exceptions import AppException
from storefront.utils.logger import get_logger

from storefront.core.config import (
    ADMIN_PASSWORD,
    ADMIN_PASSWORD_HASH,
    SESSION_SECRET_KEY,
    SESSION_ALGORITHM,
    SESSION_MAX_AGE_SECONDS,
)

logger = get_logger("auth.security")

SESSION_SUBJECT = "admin"
SESSION_TOKEN_TYPE = "admin_session"

# =====================================================
# PASSWORD HASHING
# =====================================================
pwd_context = CryptContext(
    schemes=["pbkdf2_sha256"],
    deprecated="auto",
)

def hash_password(password: str) -> str:
    return pwd_context.hash(password)

def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)

# =====================================================
# SHARED ADMIN PASSWORD
# =====================================================
def is_admin_password_configured() -> bool:
    return bool(ADMIN_PASSWORD_HASH or ADMIN_PASSWORD)

def check_admin_password(candidate: str | None) -> bool:
    if not candidate:
        return False

    if ADMIN_PASSWORD_HASH:
        try:
            return verify_password(candidate, ADMIN_PASSWORD_HASH)
        except ValueError:
            # passlib could not parse the configured hash
            logger.error("ADMIN_PASSWORD_HASH is not a valid pbkdf2_sha256 hash")
            raise AppException(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "ADMIN_PASSWORD_HASH is malformed",
                ErrorCode.NOT_CONFIGURED,
            )

    if ADMIN_PASSWORD:
        return secrets.compare_digest(
            candidate.encode("utf-8"),
            ADMIN_PASSWORD.encode("utf-8"),
        )

    return False

# =====================================================
# SESSION TOKEN
# =====================================================
def create_session_token(expires_delta: Optional[timedelta] = None) -> str:
    now = datetime.now(timezone.utc)
    expire = now + (
        expires_delta
        if expires_delta
        else timedelta(seconds=SESSION_MAX_AGE_SECONDS)
    )

    payload = {
        "sub": SESSION_SUBJECT,
        "type": SESSION_TOKEN_TYPE,
        "iat": now,
        "exp": expire,
    }

    return jwt.encode(payload, SESSION_SECRET_KEY, algorithm=SESSION_ALGORITHM)

# =====================================================
# DECODE + VALIDATE TOKEN
# =====================================================
def decode_session_token(token: str) -> dict:
    try:
        payload = jwt.decode(
            token,
            SESSION_SECRET_KEY,
            algorithms=[SESSION_ALGORITHM],
        )

        if payload.get("type") != SESSION_TOKEN_TYPE:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid session",
            )

        return payload

    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired session",
        )
