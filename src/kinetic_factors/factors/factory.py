"""Build kinetic factors from configuration."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from kinetic_factors.exceptions import ConfigurationError
from kinetic_factors.factors.base import AbstractKineticFactor
from kinetic_factors.utils.config import FactorConfig, KineticsConfig, ParameterSource
from kinetic_factors.utils.registry import FACTOR_REGISTRY

logger = logging.getLogger(__name__)


def _kinetic_key(config: ParameterSource) -> str:
    if isinstance(config, FactorConfig):
        return config.kinetic
    if isinstance(config, Mapping) and isinstance(config.get("kinetic"), str):
        return config["kinetic"]
    raise ConfigurationError("Factor definition has no 'kinetic' entry")


def create_factor(config: ParameterSource, shared: bool = False) -> AbstractKineticFactor:
    """Instantiate the factor named by the ``kinetic`` entry of ``config``.

    Args:
        config: Factor definition with a ``kinetic`` key and named parameters.
        shared: If True, leave the factor without instance parameters; its
            values are then written per agent with ``init_into_array``.

    Returns:
        Kinetic factor.

    Raises:
        ConfigurationError: If the definition or its parameters are invalid.
        RegistryError: If the kinetic key is not registered.
    """
    factor_cls = FACTOR_REGISTRY.get(_kinetic_key(config))
    factor = factor_cls()
    if not shared:
        factor.init_from_config(config)
    logger.debug(f"Created {factor!r} (shared={shared})")
    return factor


def create_factors(config: KineticsConfig, shared: bool = False) -> list[AbstractKineticFactor]:
    """Instantiate every factor defined in a loaded configuration file."""
    return [create_factor(factor_config, shared=shared) for factor_config in config.factors]


__all__ = ["create_factor", "create_factors"]
