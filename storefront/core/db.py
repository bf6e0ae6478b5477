# storefront/core/db.py

import ssl
from typing import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import NullPool

from storefront.core.config import (
    APP_ENV,
    DATABASE_URL,
    DB_ECHO_POOL,
    DB_MAX_OVERFLOW,
    DB_POOL_SIZE,
    DB_POOL_TIMEOUT,
    DB_SSL_VERIFY,
    DB_TYPE,
)

Base = declarative_base()


# =====================================================
# ENGINE OPTIONS PER BACKEND
# =====================================================
def _postgres_options() -> dict:
    ssl_ctx = ssl.create_default_context()
    if not DB_SSL_VERIFY:
        ssl_ctx.check_hostname = False
        ssl_ctx.verify_mode = ssl.CERT_NONE

    return {
        "connect_args": {
            "ssl": ssl_ctx,
            # the Supabase transaction pooler cannot hold prepared statements
            "statement_cache_size": 0,
            "prepared_statement_cache_size": 0,
        },
        "pool_size": DB_POOL_SIZE,
        "max_overflow": DB_MAX_OVERFLOW,
        "pool_timeout": DB_POOL_TIMEOUT,
        "pool_pre_ping": True,
    }


def _sqlite_options() -> dict:
    return {
        "connect_args": {"check_same_thread": False},
        # aiosqlite connections belong to the event loop that opened them
        "poolclass": NullPool,
    }


engine = create_async_engine(
    DATABASE_URL,
    echo=False,
    echo_pool=DB_ECHO_POOL,
    **(_postgres_options() if DB_TYPE == "postgres" else _sqlite_options()),
)

if DB_TYPE == "sqlite":
    @event.listens_for(engine.sync_engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, _):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


AsyncSessionLocal = sessionmaker(
    bind=engine,
    class_=AsyncSession,
    autoflush=False,
    expire_on_commit=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """One session per request; anything left uncommitted is rolled back."""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


# register every table on Base.metadata
import storefront.models  # noqa: E402,F401


# =====================================================
# DEVELOPMENT ONLY
# =====================================================
def _require_development(action: str) -> None:
    if APP_ENV != "development":
        raise RuntimeError(f"{action} is only allowed in development")


async def init_models():
    _require_development("init_models()")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def reset_models():
    """Drops and recreates every table. Used by the test suite."""
    _require_development("reset_models()")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
