"""Registry of property definitions.

Builds a key index over every definition contributed by its sources,
resolves display categories with a per-source fallback, and keeps three
scope views (global, project, module) grouped by category.

The registry is meant to be built during start-up, frozen, and then shared
read-only. Mutations are serialized; reads take no lock.
"""

from __future__ import annotations

import logging
import threading
from collections import defaultdict
from collections.abc import Iterable, Iterator
from pathlib import Path

import structlog

from propdefs.config.loader import load_config
from propdefs.config.models import PropDefsConfig, RegistryConfig
from propdefs.core.errors import RegistryError
from propdefs.definitions.extract import describe_source, extract
from propdefs.definitions.models import PropertyDefinition, Scope

# stdlib-backed: below WARNING stays silent until configure_logging() runs
logger = structlog.wrap_logger(
    logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger
)

CategoryIndex = dict[str, tuple[PropertyDefinition, ...]]


def _non_blank(value: str | None) -> bool:
    return bool(value and value.strip())


class PropertyDefinitions:
    """Lookup table of property definitions built from components."""

    def __init__(self, *sources: object, config: RegistryConfig | None = None) -> None:
        self._config = config or RegistryConfig()
        self._definitions: dict[str, PropertyDefinition] = {}
        # key -> default category of the source that contributed the key
        self._default_categories: dict[str, str] = {}
        self._by_scope: dict[Scope, CategoryIndex] = {scope: {} for scope in Scope}
        self._lock = threading.Lock()
        self._frozen = False

        self.add_components(sources)

    @classmethod
    def from_config(
        cls,
        *sources: object,
        config: PropDefsConfig | None = None,
        config_path: Path | None = None,
    ) -> PropertyDefinitions:
        """Build a registry whose behaviour comes from propdefs configuration.

        Args:
            sources: As for the constructor.
            config: Already-loaded configuration. When omitted, it is read
                with load_config(config_path).
            config_path: Optional YAML file passed to load_config().

        Raises:
            ConfigError: If the configuration cannot be loaded.
        """
        if config is None:
            config = load_config(config_path)
        return cls(*sources, config=config.registry)

    # =========================================================================
    # Mutation
    # =========================================================================

    def add_component(
        self,
        source: object,
        default_category: str | None = None,
    ) -> PropertyDefinitions:
        """Register every property a source declares.

        Args:
            source: A PropertyDefinition, a declaration, or a component class
                or instance carrying declarations.
            default_category: Fallback category for the source's properties
                that have none. When blank, the component's own declared
                category (if any) is used instead.

        Raises:
            DefinitionError: If the source's declarations are malformed.
            RegistryError: If the registry is frozen, or a key is already
                registered and the duplicate policy is "reject".
        """
        extraction = extract(source)
        label = describe_source(source)
        if not extraction.definitions:
            logger.debug("component_without_properties", source=label)
        if _non_blank(default_category):
            fallback = default_category or ""
        else:
            fallback = extraction.default_category or ""

        with self._lock:
            if self._frozen:
                raise RegistryError.frozen()
            if self._config.duplicate_keys == "reject":
                for definition in extraction.definitions:
                    if definition.key in self._definitions:
                        raise RegistryError.duplicate_key(definition.key, label)
            for definition in extraction.definitions:
                self._insert(definition, fallback, label)
            self._rebuild_scope_indexes()

        logger.debug(
            "component_added",
            source=label,
            properties=len(extraction.definitions),
            default_category=fallback,
        )
        return self

    def add_components(
        self,
        sources: Iterable[object],
        default_category: str | None = None,
    ) -> PropertyDefinitions:
        """Register several sources in order, sharing one default category."""
        for source in sources:
            self.add_component(source, default_category)
        return self

    def freeze(self) -> PropertyDefinitions:
        """Publish the registry. Later add_component calls raise RegistryError."""
        with self._lock:
            self._frozen = True
        logger.info("registry_frozen", properties=len(self._definitions))
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def _insert(self, definition: PropertyDefinition, default_category: str, label: str) -> None:
        key = definition.key
        if key in self._definitions:
            if self._config.duplicate_keys == "keep_first":
                logger.warning("duplicate_property_ignored", key=key, source=label)
                return
            logger.warning("duplicate_property_replaced", key=key, source=label)
        self._definitions[key] = definition
        self._default_categories[key] = default_category

    def _rebuild_scope_indexes(self) -> None:
        grouped: dict[Scope, defaultdict[str, list[PropertyDefinition]]] = {
            scope: defaultdict(list) for scope in Scope
        }
        for definition in self._definitions.values():
            category = self._resolve_category(definition)
            for scope in definition.scopes:
                grouped[scope][category].append(definition)
        # Swap in whole so lock-free readers never see a partial index
        self._by_scope = {
            scope: {category: tuple(defs) for category, defs in groups.items()}
            for scope, groups in grouped.items()
        }

    # =========================================================================
    # Lookup
    # =========================================================================

    def get(self, key: str) -> PropertyDefinition | None:
        return self._definitions.get(key)

    def get_default_value(self, key: str) -> str | None:
        """Default value of a property.

        None both for unknown keys and for properties without a default;
        use get() to tell the two apart.
        """
        definition = self._definitions.get(key)
        return definition.default_value if definition is not None else None

    def get_all(self) -> list[PropertyDefinition]:
        """All registered definitions, in registration order."""
        return list(self._definitions.values())

    def get_category(self, key: str) -> str:
        """Resolved category: own category, else the source's default, else "".

        Unknown keys resolve to "".
        """
        definition = self._definitions.get(key)
        if definition is None:
            return ""
        return self._resolve_category(definition)

    def _resolve_category(self, definition: PropertyDefinition) -> str:
        if definition.has_category:
            return definition.category or ""
        return self._default_categories.get(definition.key, "")

    def get_properties_by_category(self, scope: Scope) -> CategoryIndex:
        """Definitions applying to a scope, grouped by resolved category."""
        return dict(self._by_scope[scope])

    def get_global_properties_by_category(self) -> CategoryIndex:
        return self.get_properties_by_category(Scope.GLOBAL)

    def get_project_properties_by_category(self) -> CategoryIndex:
        return self.get_properties_by_category(Scope.PROJECT)

    def get_module_properties_by_category(self) -> CategoryIndex:
        return self.get_properties_by_category(Scope.MODULE)

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, key: object) -> bool:
        return key in self._definitions

    def __iter__(self) -> Iterator[PropertyDefinition]:
        return iter(self.get_all())

    def __repr__(self) -> str:
        return f"PropertyDefinitions(properties={len(self)}, frozen={self._frozen})"
