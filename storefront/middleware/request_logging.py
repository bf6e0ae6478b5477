import time
import logging
from fastapi import Request

logger = logging.getLogger("access")

QUIET_PATHS = {"/", "/favicon.ico"}


async def request_logging_middleware(request: Request, call_next):
    started = time.perf_counter()

    response = await call_next(request)

    elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
    response.headers["X-Process-Time-Ms"] = str(elapsed_ms)

    if request.url.path in QUIET_PATHS and response.status_code < 400:
        return response

    level = logging.WARNING if response.status_code >= 500 else logging.INFO
    logger.log(
        level,
        "",
        extra={
            "client_addr": request.client.host if request.client else "unknown",
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "process_time_ms": elapsed_ms,
        },
    )

    return response
