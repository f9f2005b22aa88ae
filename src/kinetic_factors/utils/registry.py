"""Plugin registry for kinetic factor variants.

New rate laws register themselves under a short key so that a factor can be
built from the ``kinetic`` entry of a configuration block without the caller
importing the concrete class.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from kinetic_factors.exceptions import RegistryError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Registry:
    """Registry for plugin components.

    Example:
        >>> FACTORS = Registry("factors")
        >>> @FACTORS.register("my_factor")
        ... class MyFactor(AbstractKineticFactor):
        ...     pass
        >>> factor_cls = FACTORS.get("my_factor")
    """

    def __init__(self, name: str):
        """Initialize registry.

        Args:
            name: Registry name for error messages.
        """
        self.name = name
        self._registry: dict[str, type[Any]] = {}

    def register(self, key: str) -> Callable[[type[T]], type[T]]:
        """Decorator to register a class under ``key``.

        Args:
            key: Unique identifier for this component.

        Returns:
            Decorator function.
        """

        def decorator(cls: type[T]) -> type[T]:
            if key in self._registry:
                logger.warning(f"Overwriting existing {self.name} registry entry: {key}")
            self._registry[key] = cls
            logger.debug(f"Registered {self.name}: {key} -> {cls.__name__}")
            return cls

        return decorator

    def get(self, key: str) -> type[Any]:
        """Retrieve a registered class.

        Raises:
            RegistryError: If key not found in registry.
        """
        if key not in self._registry:
            available = ", ".join(self.list_keys())
            raise RegistryError(f"'{key}' not found in {self.name} registry. Available: {available}")
        return self._registry[key]

    def list_keys(self) -> list[str]:
        """Sorted list of registered keys."""
        return sorted(self._registry.keys())

    def __contains__(self, key: str) -> bool:
        return key in self._registry

    def __repr__(self) -> str:
        keys = ", ".join(self.list_keys())
        return f"Registry('{self.name}', keys=[{keys}])"


FACTOR_REGISTRY = Registry("kinetic_factors")


__all__ = ["Registry", "FACTOR_REGISTRY"]
