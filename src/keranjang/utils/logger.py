"""Loguru setup for Keranjang.

Handlers are installed once on import from the cached settings. Call
``configure_logging`` again after changing settings to rebuild them.
"""
import sys
from typing import List, Optional

from loguru import logger

from keranjang.config.settings import KeranjangSettings, get_settings

SIMPLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<level>{message}</level>"
)

DETAILED_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level> | "
    "<level>{extra}</level>"
)

_handler_ids: List[int] = []


def configure_logging(settings: Optional[KeranjangSettings] = None) -> List[int]:
    """
    Replace Keranjang's log handlers according to ``settings``.

    A colored stderr handler is always installed. A rotating JSON file
    handler is added only when ``LOG_FILE`` is set.

    Returns:
        Ids of the installed loguru handlers
    """
    settings = settings or get_settings()
    if not _handler_ids:
        # First call also drops loguru's default stderr handler
        logger.remove()
    for handler_id in _handler_ids:
        logger.remove(handler_id)
    _handler_ids.clear()

    fmt = DETAILED_FORMAT if settings.LOG_FORMAT == "detailed" else SIMPLE_FORMAT
    _handler_ids.append(logger.add(
        sys.stderr,
        format=fmt,
        level=settings.LOG_LEVEL,
        colorize=True,
        backtrace=True,
        diagnose=True,
    ))

    if settings.LOG_FILE:
        _handler_ids.append(logger.add(
            settings.LOG_FILE,
            level=settings.LOG_LEVEL,
            rotation=f"{settings.LOG_ROTATION_SIZE_MB} MB",
            retention=f"{settings.LOG_RETENTION_DAYS} days",
            compression="zip",
            serialize=True,
            backtrace=True,
            diagnose=True,
            enqueue=True,
        ))
    return list(_handler_ids)


def get_logger(name: str):
    """Logger bound to ``name``, namespaced under ``keranjang.``.

    Args:
        name: Usually the calling module's ``__name__`` or a class name.
    """
    if not name.startswith("keranjang.") and name != "__main__":
        name = f"keranjang.{name}"
    return logger.bind(name=name)


configure_logging()
