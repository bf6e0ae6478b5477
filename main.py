# main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from sqlalchemy.exc import IntegrityError

from storefront.routers import (
    auth_router,
    activity_router,
    catalog_router,
    cart_router,
    inventory_router,
    history_router,
    lookup_router,
    feedback_router,
)

from storefront.core.config import (
    APP_ENV,
    APP_VERSION,
    CORS_ORIGINS,
    IS_PRODUCTION,
    STORE_NAME,
)
from storefront.core.db import init_models
from storefront.core.exceptions import AppException
from storefront.core.logging import setup_logging
from storefront.core.security import is_admin_password_configured
from storefront.middleware.request_logging import request_logging_middleware
from storefront.core.error_handlers import (
    app_exception_handler,
    validation_exception_handler,
    http_exception_handler,
    integrity_error_handler,
    unhandled_exception_handler,
)

APP_NAME = f"{STORE_NAME} – Storefront & Inventory API"

# ------------------------------------------------------------------------------
# LOGGING
# ------------------------------------------------------------------------------
setup_logging()
logger = logging.getLogger(__name__)


# ------------------------------------------------------------------------------
# LIFESPAN
# ------------------------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting application (%s)", APP_ENV)

    if APP_ENV == "development":
        await init_models()
        logger.info("Database tables created (development)")
    else:
        logger.info("Skipping create_all outside development")

    if not is_admin_password_configured():
        logger.warning("ADMIN_PASSWORD / ADMIN_PASSWORD_HASH not set; admin login is disabled")

    yield

    logger.info("Shutting down application")


# ------------------------------------------------------------------------------
# APP INIT
# ------------------------------------------------------------------------------
app = FastAPI(
    title=APP_NAME,
    description="Public catalog, WhatsApp cart handoff and admin inventory API",
    version=APP_VERSION,
    docs_url=None if IS_PRODUCTION else "/docs",
    redoc_url=None,
    lifespan=lifespan,
)

# ------------------------------------------------------------------------------
# EXCEPTION HANDLERS
# ------------------------------------------------------------------------------
app.add_exception_handler(AppException, app_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(IntegrityError, integrity_error_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)

# ------------------------------------------------------------------------------
# MIDDLEWARE
# ------------------------------------------------------------------------------
app.middleware("http")(request_logging_middleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "OPTIONS"],
    allow_headers=["*"],
)


# ------------------------------------------------------------------------------
# HEALTH CHECK
# ------------------------------------------------------------------------------
@app.get("/", tags=["Health"])
async def health_check():
    return {
        "status": "ok",
        "service": "storefront-api",
        "environment": APP_ENV,
        "version": APP_VERSION,
    }


# ------------------------------------------------------------------------------
# ROUTERS
# ------------------------------------------------------------------------------
app.include_router(catalog_router)
app.include_router(cart_router)
app.include_router(feedback_router)
app.include_router(auth_router)
app.include_router(activity_router)
app.include_router(inventory_router)
app.include_router(history_router)
app.include_router(lookup_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=not IS_PRODUCTION)
