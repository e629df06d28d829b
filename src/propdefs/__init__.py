"""propdefs - registry of property metadata declared by components."""

from propdefs.definitions import (
    PropertiesDeclaration,
    PropertyDeclaration,
    PropertyDefinition,
    PropertyDefinitions,
    PropertyType,
    Scope,
    declare_properties,
    declare_property,
    extract,
    property_category,
)

__version__ = "0.1.0"

__all__ = [
    "PropertiesDeclaration",
    "PropertyDeclaration",
    "PropertyDefinition",
    "PropertyDefinitions",
    "PropertyType",
    "Scope",
    "declare_properties",
    "declare_property",
    "extract",
    "property_category",
]
