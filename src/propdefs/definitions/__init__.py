"""Property definitions - models, declarations, extraction and registry."""

from propdefs.definitions.declarations import (
    Declaration,
    PropertiesDeclaration,
    PropertyDeclaration,
    declare_properties,
    declare_property,
    property_category,
)
from propdefs.definitions.extract import Extraction, extract
from propdefs.definitions.models import PropertyDefinition, PropertyType, Scope
from propdefs.definitions.registry import PropertyDefinitions

__all__ = [
    "Declaration",
    "Extraction",
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
