"""
Logging utilities for tfconfig.

All package loggers live under the ``tfconfig`` namespace. Nothing is
printed until setup_logging installs handlers.
"""

import logging
import sys
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

ROOT_LOGGER_NAME = "tfconfig"
DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_configured = False


def setup_logging(
    level: str = "INFO",
    format_string: Optional[str] = None,
    log_file: Optional[Path | str] = None,
    console: bool = True,
) -> None:
    """
    Install handlers on the ``tfconfig`` logger.

    Args:
        level: Log level name
        format_string: Record format (DEFAULT_FORMAT if None)
        log_file: Optional file to also log to
        console: Whether to log to stderr
    """
    global _configured

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()

    handlers = []
    if console:
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding='utf-8'))

    formatter = logging.Formatter(format_string or DEFAULT_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    _configured = True


def is_configured() -> bool:
    return _configured


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, placed under the tfconfig namespace."""
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


@contextmanager
def log_operation(
    logger: logging.Logger,
    operation: str,
    level: int = logging.DEBUG,
    **context,
) -> Iterator[None]:
    """Log start and end of an operation; failures are logged and re-raised."""
    details = ", ".join(f"{k}={v}" for k, v in context.items())
    logger.log(level, f"Starting: {operation} ({details})")
    started = time.perf_counter()
    try:
        yield
    except Exception as e:
        elapsed = time.perf_counter() - started
        logger.error(f"Failed: {operation} ({elapsed:.2f}s) - {type(e).__name__}: {e}")
        raise
    logger.log(level, f"Completed: {operation} ({time.perf_counter() - started:.2f}s)")
