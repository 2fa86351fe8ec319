import logging
import time
from contextlib import contextmanager
from typing import Any, Iterator

from chartstream.config.settings import settings

logger = logging.getLogger("chartstream")
logging.basicConfig(level=settings.log_level.upper())


@contextmanager
def timed(operation: str, **kwargs: Any) -> Iterator[None]:
    start = time.perf_counter()
    try:
        yield
    finally:
        duration_ms = (time.perf_counter() - start) * 1000
        logger.info("op=%s duration_ms=%.2f %s", operation, duration_ms, _fields(kwargs))


def log_event(event: str, **kwargs: Any) -> None:
    logger.info("event=%s %s", event, _fields(kwargs))


def log_debug(event: str, **kwargs: Any) -> None:
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("event=%s %s", event, _fields(kwargs))


def log_error(event: str, message: str, **kwargs: Any) -> None:
    logger.error("event=%s message=\"%s\" %s", event, message, _fields(kwargs))


def _fields(kwargs: dict) -> str:
    return " ".join(f"{k}={v}" for k, v in kwargs.items())
