"""Logging setup for the CLI entry point."""

from __future__ import annotations

import logging

from .env import env_or_default
from .errors import InvalidLogLevelError

DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = (
    "%(asctime)s %(levelname)s [%(name)s] tid=%(transaction_id)s uuid=%(uuid)s %(message)s"
)

# Records logged without ``extra`` still have to render with LOG_FORMAT.
_CONTEXT_DEFAULTS = {"transaction_id": "-", "uuid": "-"}


class TransactionContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        for name, default in _CONTEXT_DEFAULTS.items():
            if not hasattr(record, name):
                setattr(record, name, default)
        return True


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Configure the root logger for command line use.

    Every line carries the transaction id and concept uuid passed through
    ``extra``. Pass ``force=True`` to replace handlers installed earlier.
    """

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        force=force,
    )
    for handler in logging.getLogger().handlers:
        if not any(isinstance(f, TransactionContextFilter) for f in handler.filters):
            handler.addFilter(TransactionContextFilter())


def parse_log_level(name: str) -> int:
    level = logging.getLevelNamesMapping().get(name.strip().upper())
    if level is None:
        raise InvalidLogLevelError(f"Cannot parse log level: {name}")
    return level


def get_log_level() -> int:
    return parse_log_level(env_or_default("LOG_LEVEL", DEFAULT_LOG_LEVEL))
