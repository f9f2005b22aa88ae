"""kinetic-factors exception hierarchy.

All library-specific exceptions inherit from :class:`KineticFactorError`,
enabling callers to catch the broad base class or narrow subtypes.
"""

from __future__ import annotations


class KineticFactorError(Exception):
    """Base exception for all kinetic-factors errors."""


class ConfigurationError(KineticFactorError):
    """Missing or non-numeric named parameters, unreadable config files."""


class ContractViolationError(KineticFactorError):
    """Caller broke the evaluation contract (bad offset, uninitialized factor)."""


class RegistryError(KineticFactorError):
    """Registry lookup or registration failures."""


__all__ = [
    "KineticFactorError",
    "ConfigurationError",
    "ContractViolationError",
    "RegistryError",
]
