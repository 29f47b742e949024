"""Configuration error definitions."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Raised when configuration values are invalid."""


class InvalidLogLevelError(ConfigurationError):
    """Raised when LOG_LEVEL does not name a logging level."""
