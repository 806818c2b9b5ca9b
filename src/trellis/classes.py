"""Registry mapping component class names to the consumers built from them."""

from __future__ import annotations

import logging
from typing import Any, Callable

from trellis.cascade.attributes import ResolvedAttributes
from trellis.errors import UnknownComponentClassError

logger = logging.getLogger(__name__)

ComponentFactory = Callable[[ResolvedAttributes], Any]


class ComponentClasses:
    """Maps component class names to factories that consume resolved attributes."""

    def __init__(self) -> None:
        self._factories: dict[str, ComponentFactory] = {}

    def register(self, class_name: str, factory: ComponentFactory) -> None:
        """Register a factory for a named class, replacing any earlier one."""
        self._factories[class_name] = factory

    def __contains__(self, class_name: str) -> bool:
        return class_name in self._factories

    @property
    def names(self) -> frozenset[str]:
        return frozenset(self._factories)

    def create(self, attributes: ResolvedAttributes) -> Any:
        """Build the consumer for a resolved component."""
        factory = self._factories.get(attributes.component_class)
        if factory is None:
            raise UnknownComponentClassError(
                attributes.component_class, line=attributes.component_line
            )
        logger.debug("Creating %s (line %d)", attributes.component_class, attributes.component_line)
        return factory(attributes)
