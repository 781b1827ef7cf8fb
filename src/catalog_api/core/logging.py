"""Logging setup.

Records emitted by the create pipeline carry ``correlation_id`` and
``operation_id`` through ``extra=``; everything else gets ``-`` so a single
format string works for all loggers.
"""

import logging
import sys

LOG_FORMAT = (
    "%(asctime)s %(levelname)s %(name)s "
    "[correlation_id=%(correlation_id)s operation_id=%(operation_id)s] %(message)s"
)

CONTEXT_FIELDS = ("correlation_id", "operation_id")


class ContextDefaultsFilter(logging.Filter):
    """Fill missing context fields so the formatter never raises KeyError."""

    def filter(self, record: logging.LogRecord) -> bool:
        for field in CONTEXT_FIELDS:
            if not hasattr(record, field):
                setattr(record, field, "-")
        return True


def configure_logging(level: str = "INFO") -> None:
    """Install a single stream handler on the root logger."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(ContextDefaultsFilter())

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level.upper())
