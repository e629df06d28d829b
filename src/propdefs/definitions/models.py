"""Property definition models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from propdefs.core.errors import DefinitionError


class Scope(Enum):
    """Deployment level a property applies to."""

    GLOBAL = "global"
    PROJECT = "project"
    MODULE = "module"


class PropertyType(Enum):
    """Kind of value a property holds. Informational only."""

    STRING = "string"
    TEXT = "text"
    PASSWORD = "password"
    BOOLEAN = "boolean"
    INTEGER = "integer"
    FLOAT = "float"
    SINGLE_SELECT_LIST = "single_select_list"
    REGULAR_EXPRESSION = "regular_expression"


@dataclass(frozen=True, slots=True, eq=False)
class PropertyDefinition:
    """Metadata describing one configurable setting.

    Two definitions are equal when their keys are equal. A definition with
    all three scope flags off belongs to no scope view.
    """

    key: str
    name: str
    default_value: str | None = None
    category: str | None = None  # None, "" and blank all mean "no category"
    description: str | None = None
    type: PropertyType = PropertyType.STRING
    options: tuple[str, ...] = ()  # For SINGLE_SELECT_LIST
    multi_values: bool = False

    global_scope: bool = True
    project_scope: bool = False
    module_scope: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.key, str) or not self.key.strip():
            raise DefinitionError.invalid_key(self.key)
        if not isinstance(self.name, str) or not self.name.strip():
            raise DefinitionError.missing_name(self.key)
        for name in ("default_value", "category", "description"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise DefinitionError.invalid_field(
                    self.key, name, f"expected a string, got {type(value).__name__}"
                )
        if not isinstance(self.type, PropertyType):
            raise DefinitionError.invalid_field(
                self.key, "type", f"expected PropertyType, got {self.type!r}"
            )
        for name in ("multi_values", "global_scope", "project_scope", "module_scope"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise DefinitionError.invalid_field(
                    self.key, name, f"expected a bool, got {value!r}"
                )
        if isinstance(self.options, str) or not isinstance(self.options, tuple | list):
            raise DefinitionError.invalid_field(
                self.key, "options", f"expected a tuple of strings, got {self.options!r}"
            )
        if not all(isinstance(option, str) for option in self.options):
            raise DefinitionError.invalid_field(self.key, "options", "options must be strings")
        object.__setattr__(self, "options", tuple(self.options))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PropertyDefinition):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    @property
    def has_category(self) -> bool:
        return bool(self.category and self.category.strip())

    @property
    def scopes(self) -> frozenset[Scope]:
        flags = {
            Scope.GLOBAL: self.global_scope,
            Scope.PROJECT: self.project_scope,
            Scope.MODULE: self.module_scope,
        }
        return frozenset(scope for scope, on in flags.items() if on)

    def in_scope(self, scope: Scope) -> bool:
        return scope in self.scopes

    def to_dict(self) -> dict[str, Any]:
        """Serialize for a display layer."""
        return {
            "key": self.key,
            "name": self.name,
            "default_value": self.default_value,
            "category": self.category,
            "description": self.description,
            "type": self.type.value,
            "options": list(self.options),
            "multi_values": self.multi_values,
            "scopes": sorted(scope.value for scope in self.scopes),
        }
