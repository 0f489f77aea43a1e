import json
import logging
import time
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import UTC, datetime
from typing import Iterator

from bignumber_utils.config import settings
from bignumber_utils.errors import BigNumberUtilsError

operation_var: ContextVar[str] = ContextVar("operation", default="")

_LOGGER_NAME = "bignumber_utils"


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "service": settings.service_name,
            "environment": settings.environment,
            "logger": record.name,
            "message": record.getMessage(),
            "operation": operation_var.get() or None,
        }
        if hasattr(record, "extra_fields") and isinstance(record.extra_fields, dict):
            payload.update(record.extra_fields)
        return json.dumps({k: v for k, v in payload.items() if v is not None}, default=str)


def setup_logging(level: str | None = None) -> logging.Logger:
    library_logger = logging.getLogger(_LOGGER_NAME)
    if library_logger.hasHandlers():
        library_logger.handlers.clear()
    library_logger.setLevel((level or settings.log_level).upper())
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    library_logger.addHandler(handler)
    library_logger.propagate = False
    return library_logger


@contextmanager
def track_operation(name: str) -> Iterator[None]:
    logger = logging.getLogger(f"{_LOGGER_NAME}.calculations")
    started = time.perf_counter()
    token = operation_var.set(name)
    try:
        yield
    except BigNumberUtilsError as exc:
        logger.debug(
            "calculation.failed",
            extra={"extra_fields": {"error_code": exc.error_code}},
        )
        raise
    else:
        latency_ms = round((time.perf_counter() - started) * 1000, 3)
        logger.debug(
            "calculation.completed",
            extra={"extra_fields": {"latency_ms": latency_ms}},
        )
    finally:
        operation_var.reset(token)
