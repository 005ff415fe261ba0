from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from typing import Optional, Union


# Data source currently being loaded, for enriched logging
source_var: ContextVar[Optional[str]] = ContextVar("source", default=None)


class LoggingContextFilter(logging.Filter):
    """
    Logging filter that injects the data source from contextvars into each
    log record so formatters can include it.

    If no source is set in the context, a placeholder is used.
    """

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401
        src = source_var.get()
        setattr(record, "source", src or "-")
        return True


# PUBLIC_INTERFACE
def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """Configure root logging with a structured format and context filter."""
    # stdout is reserved for query results
    handler = logging.StreamHandler(stream=sys.stderr)
    fmt = "%(asctime)s | %(levelname)s | %(name)s | source=%(source)s | %(message)s"
    formatter = logging.Formatter(fmt=fmt)
    handler.setFormatter(formatter)
    handler.addFilter(LoggingContextFilter())

    root = logging.getLogger()
    # Remove pre-existing default handlers configured elsewhere (e.g., basicConfig)
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)
    root.setLevel(level)
