# storefront/core/config.py

import os
import secrets
from dotenv import load_dotenv
from storefront.utils.logger import get_logger

logger = get_logger(__name__)

load_dotenv()

# =====================================================
# APPLICATION
# =====================================================
APP_ENV = os.getenv("APP_ENV", "development")
if APP_ENV not in {"development", "staging", "production"}:
    raise ValueError("APP_ENV must be development | staging | production")

IS_PRODUCTION = APP_ENV == "production"
APP_VERSION = os.getenv("APP_VERSION", "1.0.0")
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]

# =====================================================
# DATABASE
# =====================================================
DB_TYPE = os.getenv("DB_TYPE", "sqlite")
if DB_TYPE not in {"postgres", "sqlite"}:
    raise ValueError("DB_TYPE must be postgres | sqlite")

if DB_TYPE == "postgres":
    DATABASE_URL = os.getenv("DATABASE_URL")
    if not DATABASE_URL:
        raise ValueError("DATABASE_URL is required for Postgres")

elif DB_TYPE == "sqlite":
    if IS_PRODUCTION:
        raise ValueError("SQLite is NOT allowed in production")
    SQLITE_PATH = os.getenv("SQLITE_PATH", "./storefront.db")
    DATABASE_URL = f"sqlite+aiosqlite:///{SQLITE_PATH}"

# ---- Pool tuning ----
DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", 5))
DB_MAX_OVERFLOW = int(os.getenv("DB_MAX_OVERFLOW", 10))
DB_POOL_TIMEOUT = int(os.getenv("DB_POOL_TIMEOUT", 30))
DB_ECHO_POOL = os.getenv("DB_ECHO_POOL", "false").lower() == "true"

# ---- SSL ----
# Supabase pooler certificates do not verify against the default bundle
DB_SSL_VERIFY = os.getenv("DB_SSL_VERIFY", "true").lower() == "true"

# =====================================================
# ADMIN SESSION
# =====================================================
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "")
ADMIN_PASSWORD_HASH = os.getenv("ADMIN_PASSWORD_HASH", "")

SESSION_SECRET_KEY = os.getenv("SESSION_SECRET_KEY")
if not SESSION_SECRET_KEY:
    if IS_PRODUCTION:
        raise ValueError("SESSION_SECRET_KEY must be set in production")
    logger.warning(
        "SESSION_SECRET_KEY not set, using a per-process key "
        "(admin sessions will not survive a restart)"
    )
    SESSION_SECRET_KEY = secrets.token_urlsafe(32)

SESSION_ALGORITHM = "HS256"
SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "admin_session")
SESSION_MAX_AGE_HOURS = int(os.getenv("SESSION_MAX_AGE_HOURS", 8))
SESSION_MAX_AGE_SECONDS = SESSION_MAX_AGE_HOURS * 60 * 60

# =====================================================
# STOREFRONT
# =====================================================
STORE_NAME = os.getenv("STORE_NAME", "Jackie Crocs")
STORE_CITY = os.getenv("STORE_CITY", "Tijuana")
WHATSAPP_PHONE = os.getenv("WHATSAPP_PHONE", "52XXXXXXXXXX")
CATALOG_REFRESH_SECONDS = int(os.getenv("CATALOG_REFRESH_SECONDS", 30))

# =====================================================
# ADMIN LISTS
# =====================================================
HISTORY_DEFAULT_LIMIT = 20
HISTORY_MAX_LIMIT = 30
FEEDBACK_LIST_LIMIT = 200
INVENTORY_PAGE_SIZE = 25
