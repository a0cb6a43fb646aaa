import os
import sys
from typing import Optional

from loguru import logger

_LOGGING_CONFIGURED = False
_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


def resolve_level(level: Optional[str] = None) -> str:
    """Pick the log level: explicit value, then LOG_LEVEL, then RUST_LOG, then INFO."""
    raw = level or os.getenv("LOG_LEVEL") or os.getenv("RUST_LOG") or "INFO"
    raw = raw.strip().upper()
    # RUST_LOG style "warn"
    if raw == "WARN":
        raw = "WARNING"
    return raw if raw in _LEVELS else "INFO"


def setup_logging(level: Optional[str] = None) -> None:
    """Configure loguru once with a consistent module:function:line format."""
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    logger.remove()
    logger.add(
        sys.stderr,
        level=resolve_level(level),
        format="{time:YYYY-MM-DD HH:mm:ss} | {level:<5} | {name}:{function}:{line} - {message}",
        enqueue=False,
        backtrace=False,
        diagnose=False,
    )
    _LOGGING_CONFIGURED = True
