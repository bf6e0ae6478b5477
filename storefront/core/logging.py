import os
import sys
from logging.config import dictConfig

from storefront.core.config import APP_ENV

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG" if APP_ENV == "development" else "INFO").upper()

DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
# fields supplied by request_logging_middleware through ``extra``
ACCESS_FORMAT = (
    "%(asctime)s | %(levelname)s | ACCESS | %(client_addr)s | "
    "%(method)s %(path)s | %(status_code)s | %(process_time_ms)sms"
)

# third-party loggers that are too chatty at the root level
QUIET_LOGGERS = {
    "uvicorn.access": "WARNING",
    "sqlalchemy.engine": "WARNING",
    "passlib": "ERROR",
}


def _stdout_handler(formatter: str) -> dict:
    return {
        "class": "logging.StreamHandler",
        "stream": sys.stdout,
        "formatter": formatter,
    }


def build_logging_config(level: str = LOG_LEVEL) -> dict:
    loggers = {name: {"level": lvl} for name, lvl in QUIET_LOGGERS.items()}
    loggers["access"] = {
        "handlers": ["access_console"],
        "level": "INFO",
        "propagate": False,
    }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": DEFAULT_FORMAT},
            "access": {"format": ACCESS_FORMAT},
        },
        "handlers": {
            "console": _stdout_handler("default"),
            "access_console": _stdout_handler("access"),
        },
        "loggers": loggers,
        "root": {"level": level, "handlers": ["console"]},
    }


def setup_logging():
    dictConfig(build_logging_config())
