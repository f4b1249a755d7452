# storefront/core/logging.py
import logging
import sys
import colorlog

from storefront.core.config import Settings

# Drivers that log every round-trip at DEBUG
_NOISY_LOGGERS = ("pymongo", "motor", "redis", "asyncio")


def resolve_level(settings: Settings) -> int:
    """LOG_LEVEL wins when it names a known level; otherwise DEBUG flag decides."""
    if settings.LOG_LEVEL:
        level = logging.getLevelName(settings.LOG_LEVEL.strip().upper())
        if isinstance(level, int):
            return level
    return logging.DEBUG if settings.DEBUG else logging.INFO


def configure_logging(settings: Settings) -> int:
    level = resolve_level(settings)
    handler = colorlog.StreamHandler(sys.stdout)
    handler.setFormatter(
        colorlog.ColoredFormatter(
            f"%(log_color)s%(asctime)s %(levelname)-8s {settings.APP_NAME} [%(name)s]%(reset)s %(message)s",
            datefmt="%H:%M:%S",
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "bold_red",
            },
        )
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [handler]

    # Request lines follow the service level; drivers stay at WARNING
    logging.getLogger("uvicorn.error").setLevel(level)
    logging.getLogger("uvicorn.access").setLevel(level)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return level
