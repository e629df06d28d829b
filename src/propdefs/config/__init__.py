"""Config module exports."""

from propdefs.config.loader import PropDefsSettings, load_config
from propdefs.config.models import (
    LoggingConfig,
    LogOutputConfig,
    PropDefsConfig,
    RegistryConfig,
)

__all__ = [
    "load_config",
    "LoggingConfig",
    "LogOutputConfig",
    "PropDefsConfig",
    "PropDefsSettings",
    "RegistryConfig",
]
