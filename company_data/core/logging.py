"""
Correlation-aware logging for the data-access layer.

Callers wrap a unit of work in correlation_scope(); every record emitted by a
company_data logger while the scope is active, including those from awaited
repository calls, carries that id in the ``cid=`` column.
"""
from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from typing import IO, Iterator, Optional, Union

PACKAGE_LOGGER = "company_data"

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | cid=%(correlation_id)s | %(message)s"

correlation_id_var: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


class CorrelationIdFilter(logging.Filter):
    """Stamp each record with the active correlation id, or "-" outside a scope."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401
        record.correlation_id = correlation_id_var.get() or "-"
        return True


# PUBLIC_INTERFACE
@contextmanager
def correlation_scope(correlation_id: str) -> Iterator[str]:
    """
    Tag log records emitted inside the block with correlation_id.

    Usage:
        with correlation_scope(request_id):
            company = await repository.get_company(company_id)
    """
    token = correlation_id_var.set(correlation_id)
    try:
        yield correlation_id
    finally:
        correlation_id_var.reset(token)


# PUBLIC_INTERFACE
def build_handler(stream: Optional[IO[str]] = None) -> logging.Handler:
    """Stream handler with the pipe-delimited format and the correlation filter."""
    handler = logging.StreamHandler(stream=stream or sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
    handler.addFilter(CorrelationIdFilter())
    return handler


# PUBLIC_INTERFACE
def configure_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """
    Attach one correlation-aware stdout handler to the package logger and set
    its level. Calling it again replaces the handler instead of stacking a
    second one.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for h in list(logger.handlers):
        if any(isinstance(f, CorrelationIdFilter) for f in h.filters):
            logger.removeHandler(h)
    logger.addHandler(build_handler())
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    return logger
