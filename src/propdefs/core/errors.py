"""propdefs error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Definition (construction and extraction)
- 4xxx: Registry
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_FILE_NOT_FOUND = 2004

    # Definition (3xxx)
    DEFINITION_INVALID_KEY = 3001
    DEFINITION_MISSING_NAME = 3002
    DEFINITION_DUPLICATE_KEY = 3003
    DEFINITION_INVALID_DECLARATION = 3004
    DEFINITION_INVALID_FIELD = 3005

    # Registry (4xxx)
    REGISTRY_FROZEN = 4001
    REGISTRY_DUPLICATE_KEY = 4002


@dataclass(frozen=True, slots=True)
class PropDefsError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'DEFINITION_INVALID_KEY')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(PropDefsError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Config file not found: {path}",
            details={"path": path},
        )


class DefinitionError(PropDefsError):
    """A property definition or declaration could not be built."""

    @classmethod
    def invalid_key(cls, key: Any) -> "DefinitionError":
        return cls(
            code=ErrorCode.DEFINITION_INVALID_KEY,
            message=f"Property key must be a non-empty string, got {key!r}",
            details={"key": repr(key)},
        )

    @classmethod
    def missing_name(cls, key: str) -> "DefinitionError":
        return cls(
            code=ErrorCode.DEFINITION_MISSING_NAME,
            message=f"Property '{key}' has no name",
            details={"key": key},
        )

    @classmethod
    def duplicate_key(cls, key: str, source: str) -> "DefinitionError":
        return cls(
            code=ErrorCode.DEFINITION_DUPLICATE_KEY,
            message=f"Property '{key}' is declared more than once by {source}",
            details={"key": key, "source": source},
        )

    @classmethod
    def invalid_declaration(cls, source: str, reason: str) -> "DefinitionError":
        return cls(
            code=ErrorCode.DEFINITION_INVALID_DECLARATION,
            message=f"Invalid property declaration on {source}: {reason}",
            details={"source": source, "reason": reason},
        )

    @classmethod
    def invalid_field(cls, key: str, field: str, reason: str) -> "DefinitionError":
        return cls(
            code=ErrorCode.DEFINITION_INVALID_FIELD,
            message=f"Invalid '{field}' on property '{key}': {reason}",
            details={"key": key, "field": field, "reason": reason},
        )


class RegistryError(PropDefsError):
    """Registry mutation errors."""

    @classmethod
    def frozen(cls) -> "RegistryError":
        return cls(
            code=ErrorCode.REGISTRY_FROZEN,
            message="Registry is frozen; no more components can be added",
        )

    @classmethod
    def duplicate_key(cls, key: str, source: str) -> "RegistryError":
        return cls(
            code=ErrorCode.REGISTRY_DUPLICATE_KEY,
            message=f"Property '{key}' from {source} is already registered",
            details={"key": key, "source": source},
        )
