"""Logging utilities: process-wide log format and per-stage latency lines."""

import asyncio
import logging
import time
from functools import wraps
from typing import Callable, Union

# Third-party loggers that are chatty at INFO
NOISY_LOGGERS = ("httpx", "httpcore", "google_genai", "sqlalchemy.engine")


def setup_logging(level: Union[int, str] = logging.INFO):
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def _report(logger: logging.Logger, operation_name: str, start: float, error: Exception = None):
    latency_ms = (time.perf_counter() - start) * 1000
    if error is None:
        logger.info(f"{operation_name} | latency_ms={latency_ms:.2f} | status=success")
    else:
        logger.error(f"{operation_name} | latency_ms={latency_ms:.2f} | status=error | error={error}")


def log_latency(operation_name: str):
    """Log how long the wrapped call took and whether it raised."""

    def decorator(func: Callable):
        logger = logging.getLogger(func.__module__)

        if asyncio.iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args, **kwargs):
                start = time.perf_counter()
                try:
                    result = await func(*args, **kwargs)
                except Exception as e:
                    _report(logger, operation_name, start, e)
                    raise
                _report(logger, operation_name, start)
                return result

            return async_wrapper

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                _report(logger, operation_name, start, e)
                raise
            _report(logger, operation_name, start)
            return result

        return sync_wrapper

    return decorator
