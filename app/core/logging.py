"""Loguru setup shared by the API process and scripts."""

import sys

from loguru import logger

from app.core.config import Settings


def configure_logging(settings: Settings) -> None:
    """Replace loguru's default sink with one honoring the configured level."""
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if settings.debug else settings.log_level.upper(),
        backtrace=settings.debug,
        diagnose=settings.debug,
        format="<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
    )
