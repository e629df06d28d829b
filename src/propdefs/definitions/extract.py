"""Extraction of property definitions from sources.

A source is a PropertyDefinition, a declaration value, or a component
(class or instance) carrying declarations attached by the decorators in
``propdefs.definitions.declarations``. Objects without declarations extract
to nothing.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from propdefs.core.errors import DefinitionError
from propdefs.definitions.declarations import (
    CATEGORY_ATTR,
    DECLARATIONS_ATTR,
    PropertiesDeclaration,
    PropertyDeclaration,
)
from propdefs.definitions.models import PropertyDefinition


@dataclass(frozen=True, slots=True)
class Extraction:
    """Definitions found on one source, plus the source's own fallback category."""

    definitions: tuple[PropertyDefinition, ...] = ()
    default_category: str | None = None


def describe_source(source: object) -> str:
    """Human-readable label for a source, used in errors and logs."""
    if isinstance(source, PropertyDefinition):
        return f"definition '{source.key}'"
    if isinstance(source, type):
        return f"{source.__module__}.{source.__qualname__}"
    if isinstance(source, PropertyDeclaration | PropertiesDeclaration):
        return type(source).__name__
    cls = type(source)
    return f"{cls.__module__}.{cls.__qualname__} instance"


def _flatten(declarations: Iterable[object], label: str) -> tuple[PropertyDefinition, ...]:
    result: list[PropertyDefinition] = []
    seen: set[str] = set()
    for declaration in declarations:
        if not isinstance(declaration, PropertyDeclaration | PropertiesDeclaration):
            raise DefinitionError.invalid_declaration(
                label, f"expected a property declaration, got {type(declaration).__name__}"
            )
        for definition in declaration.definitions:
            if not isinstance(definition, PropertyDefinition):
                raise DefinitionError.invalid_declaration(
                    label, f"expected PropertyDefinition, got {type(definition).__name__}"
                )
            if definition.key in seen:
                raise DefinitionError.duplicate_key(definition.key, label)
            seen.add(definition.key)
            result.append(definition)
    return tuple(result)


def extract(source: object) -> Extraction:
    """Extract the property definitions a source contributes.

    Raises:
        DefinitionError: If the source's declarations are malformed or
            declare the same key twice.
    """
    if isinstance(source, PropertyDefinition):
        return Extraction(definitions=(source,))

    label = describe_source(source)
    if isinstance(source, PropertyDeclaration | PropertiesDeclaration):
        return Extraction(definitions=_flatten((source,), label))

    component = source if isinstance(source, type) else type(source)
    declarations = getattr(component, DECLARATIONS_ATTR, ())
    if not isinstance(declarations, tuple):
        raise DefinitionError.invalid_declaration(
            label, f"{DECLARATIONS_ATTR} must be a tuple, got {type(declarations).__name__}"
        )

    category = getattr(component, CATEGORY_ATTR, None)
    if category is not None and not isinstance(category, str):
        raise DefinitionError.invalid_declaration(
            label, f"{CATEGORY_ATTR} must be a string, got {type(category).__name__}"
        )

    return Extraction(definitions=_flatten(declarations, label), default_category=category)
