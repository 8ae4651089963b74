import logging
import os
from typing import Optional, Union

TRACE = 5

logging.addLevelName(TRACE, "TRACE")


DEFAULT_FORMAT = (
    "%(asctime)s %(levelname)s [%(name)s.%(funcName)s:%(lineno)d] - %(message)s"
)


def get_level() -> Union[int, str]:
    """Get the default logging level for lazyscalar.

    Level names are case-insensitive, so ``LAZYSCALAR_LOGGING_LEVEL=trace`` will
    show each step of a reduction. Numeric levels are also accepted."""
    level = os.getenv("LAZYSCALAR_LOGGING_LEVEL", "WARNING").strip()
    if level.isdigit():
        return int(level)
    return level.upper()


def get_handler(
    level: Optional[Union[int, str]] = None, fmt: str = DEFAULT_FORMAT
) -> logging.Handler:
    """Get the default logging handler for lazyscalar."""
    handler = (
        logging.StreamHandler()
        if os.getenv("LAZYSCALAR_USE_DEV_LOGGER", "").lower() == "true"
        else logging.NullHandler()
    )
    handler.setFormatter(logging.Formatter(fmt))
    handler.setLevel(level or get_level())
    return handler


def configure_root_logger(
    level: Optional[Union[int, str]] = None, fmt: str = DEFAULT_FORMAT
) -> None:
    """Configure the lazyscalar root logger."""
    level = level or get_level()
    logger = logging.getLogger("lazyscalar")
    logger.setLevel(level)
    logger.addHandler(get_handler(level=level, fmt=fmt))
