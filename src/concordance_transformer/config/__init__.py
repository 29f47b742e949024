"""Application configuration helpers."""

from __future__ import annotations

from .errors import ConfigurationError, InvalidLogLevelError
from .http_client import HttpClientConfig
from .logging import (
    LOG_FORMAT,
    TransactionContextFilter,
    configure_logging,
    get_log_level,
    parse_log_level,
)
from .writer import DEFAULT_WRITER_ADDRESS, WriterConfig, get_writer_config

__all__ = [
    "DEFAULT_WRITER_ADDRESS",
    "LOG_FORMAT",
    "ConfigurationError",
    "HttpClientConfig",
    "InvalidLogLevelError",
    "TransactionContextFilter",
    "WriterConfig",
    "configure_logging",
    "get_log_level",
    "get_writer_config",
    "parse_log_level",
]
