from logging import Logger, config, getLevelName, getLogger
from typing import Any

from edgegeo.config import get_settings

LOGGER_NAME = "api"

ACCESS_FORMAT = '%(levelprefix)s %(asctime)s - %(client_addr)s - "%(request_line)s" %(status_code)s'
DEFAULT_FORMAT = "%(levelprefix)s %(asctime)s - %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def build_log_config(level: str, use_colors: bool) -> dict[str, Any]:
    """dictConfig for the app logger and uvicorn, sharing one stderr handler.

    Access lines go to stdout so that log drains can split them from app output.
    """
    log_level = getLevelName(level.upper())

    def formatter(factory: str, fmt: str) -> dict[str, Any]:
        return {"()": factory, "fmt": fmt, "datefmt": DATE_FORMAT, "use_colors": use_colors}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "access": formatter("uvicorn.logging.AccessFormatter", ACCESS_FORMAT),
            "default": formatter("uvicorn.logging.DefaultFormatter", DEFAULT_FORMAT),
        },
        "handlers": {
            "access": {"class": "logging.StreamHandler", "formatter": "access", "stream": "ext://sys.stdout"},
            "default": {"class": "logging.StreamHandler", "formatter": "default", "stream": "ext://sys.stderr"},
        },
        "loggers": {
            LOGGER_NAME: {"handlers": ["default"], "level": log_level, "propagate": False},
            "uvicorn": {"handlers": ["default"], "level": log_level, "propagate": True},
            "uvicorn.access": {"handlers": ["access"], "level": log_level, "propagate": False},
            "uvicorn.error": {"level": log_level, "propagate": False},
        },
    }


def configure_logging() -> Logger:
    settings = get_settings()
    config.dictConfig(build_log_config(settings.log_level, settings.log_colors))
    return getLogger(LOGGER_NAME)


logger = configure_logging()
