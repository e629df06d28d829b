"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (PROPDEFS__SECTION__KEY)
3. Explicit YAML file passed to load_config()
4. Global YAML (~/.config/propdefs/config.yaml)
5. Built-in defaults (this file)

Examples:
    PROPDEFS__LOGGING__LEVEL=DEBUG
    PROPDEFS__REGISTRY__DUPLICATE_KEYS=reject
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
DuplicateKeyPolicy = Literal["keep_first", "replace", "reject"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        PROPDEFS__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class RegistryConfig(BaseModel):
    """Property registry behaviour.

    Env vars:
        PROPDEFS__REGISTRY__DUPLICATE_KEYS: keep_first, replace or reject
    """

    duplicate_keys: DuplicateKeyPolicy = Field(
        default="keep_first",
        description="What happens when a source contributes a key that is already "
        "registered: keep_first ignores the newcomer, replace swaps it in, "
        "reject raises RegistryError.",
    )


class PropDefsConfig(BaseModel):
    """Root configuration for propdefs."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    registry: RegistryConfig = Field(default_factory=RegistryConfig)
