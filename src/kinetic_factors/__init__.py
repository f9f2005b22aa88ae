"""kinetic-factors: closed-form rate-law terms with per-agent parameter tables."""

from __future__ import annotations

__version__ = "0.1.0"

from kinetic_factors.exceptions import (
    ConfigurationError,
    ContractViolationError,
    KineticFactorError,
    RegistryError,
)
from kinetic_factors.factors import (
    AbstractKineticFactor,
    FirstOrderFactor,
    HaldaneFactor,
    MonodFactor,
    SimpleInhibitionFactor,
    create_factor,
    create_factors,
)
from kinetic_factors.utils import (
    FACTOR_REGISTRY,
    FactorConfig,
    JSONFormatter,
    KineticsConfig,
    LoggingConfig,
    Registry,
    get_param,
    load_config,
    setup_logging,
)

__all__ = [
    "__version__",
    # Exceptions
    "KineticFactorError",
    "ConfigurationError",
    "ContractViolationError",
    "RegistryError",
    # Factors
    "AbstractKineticFactor",
    "HaldaneFactor",
    "MonodFactor",
    "SimpleInhibitionFactor",
    "FirstOrderFactor",
    "create_factor",
    "create_factors",
    # Configuration
    "FactorConfig",
    "KineticsConfig",
    "LoggingConfig",
    "get_param",
    "load_config",
    # Registry
    "Registry",
    "FACTOR_REGISTRY",
    # Logging
    "JSONFormatter",
    "setup_logging",
]
