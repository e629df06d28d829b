"""Core module exports."""

from propdefs.core.errors import (
    ConfigError,
    DefinitionError,
    ErrorCode,
    PropDefsError,
    RegistryError,
)
from propdefs.core.logging import configure_logging, get_logger

__all__ = [
    # Errors
    "ConfigError",
    "DefinitionError",
    "ErrorCode",
    "PropDefsError",
    "RegistryError",
    # Logging
    "configure_logging",
    "get_logger",
]
