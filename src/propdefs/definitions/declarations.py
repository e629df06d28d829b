"""Property declarations attached to components.

A component declares the properties it reads either one at a time or as a
list. Both forms are plain values; the decorators below only store them on
the component class so that extraction can find them later:

    @declare_property(key="sonar.foo", name="Foo")
    class FooSensor: ...

    @property_category("General")
    @declare_properties(
        PropertyDefinition(key="one", name="One"),
        PropertyDefinition(key="two", name="Two", default_value="2"),
    )
    class Plugin: ...
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from propdefs.core.errors import DefinitionError
from propdefs.definitions.models import PropertyDefinition

T = TypeVar("T", bound=type)

DECLARATIONS_ATTR = "__property_declarations__"
CATEGORY_ATTR = "__property_category__"


@dataclass(frozen=True, slots=True)
class PropertyDeclaration:
    """A component declares a single property."""

    definition: PropertyDefinition

    @property
    def definitions(self) -> tuple[PropertyDefinition, ...]:
        return (self.definition,)


@dataclass(frozen=True, slots=True)
class PropertiesDeclaration:
    """A component declares a list of properties."""

    definitions: tuple[PropertyDefinition, ...]


Declaration = PropertyDeclaration | PropertiesDeclaration


def _attach(cls: T, declaration: Declaration) -> T:
    existing: tuple[Declaration, ...] = getattr(cls, DECLARATIONS_ATTR, ())
    setattr(cls, DECLARATIONS_ATTR, (*existing, declaration))
    return cls


def declare_property(key: str, name: str, **fields: Any) -> Callable[[T], T]:
    """Class decorator declaring one property.

    Extra keyword arguments are passed to PropertyDefinition. The definition
    is built immediately, so a bad key fails at import time.
    """
    try:
        definition = PropertyDefinition(key=key, name=name, **fields)
    except TypeError as e:
        raise DefinitionError.invalid_declaration(f"property '{key}'", str(e)) from e
    declaration = PropertyDeclaration(definition)

    def decorator(cls: T) -> T:
        return _attach(cls, declaration)

    return decorator


def declare_properties(*definitions: PropertyDefinition) -> Callable[[T], T]:
    """Class decorator declaring several properties at once."""
    declaration = PropertiesDeclaration(tuple(definitions))

    def decorator(cls: T) -> T:
        return _attach(cls, declaration)

    return decorator


def property_category(category: str) -> Callable[[T], T]:
    """Class decorator setting the fallback category of a component."""

    def decorator(cls: T) -> T:
        setattr(cls, CATEGORY_ATTR, category)
        return cls

    return decorator
