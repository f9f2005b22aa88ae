"""Configuration, logging and registry utilities."""

from __future__ import annotations

from kinetic_factors.utils.config import (
    FactorConfig,
    KineticsConfig,
    LoggingConfig,
    get_param,
    load_config,
)
from kinetic_factors.utils.logging import JSONFormatter, setup_logging
from kinetic_factors.utils.registry import FACTOR_REGISTRY, Registry

__all__ = [
    "FACTOR_REGISTRY",
    "Registry",
    "FactorConfig",
    "KineticsConfig",
    "LoggingConfig",
    "get_param",
    "load_config",
    "JSONFormatter",
    "setup_logging",
]
