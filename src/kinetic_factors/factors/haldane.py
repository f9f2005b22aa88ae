"""Haldane substrate-inhibition kinetic factor."""

from __future__ import annotations

import numpy as np

from kinetic_factors.exceptions import ContractViolationError
from kinetic_factors.factors.base import AbstractKineticFactor
from kinetic_factors.utils.registry import FACTOR_REGISTRY


@FACTOR_REGISTRY.register("haldane")
class HaldaneFactor(AbstractKineticFactor):
    """Haldane kinetics: saturation with substrate self-inhibition.

    Rate law:

        f(S) = S / (K_s + S + S^2 / K_i)

    At low S the factor grows linearly as S / K_s, it peaks near
    S = sqrt(K_s * K_i) and then decays towards zero as the S^2 / K_i term
    dominates. The derivative follows from the quotient rule:

        f'(S) = (K_s - S^2 / K_i) / (K_s + S + S^2 / K_i)^2

    ``K_i = 0`` or a vanishing denominator is not guarded against and
    yields inf or nan.

    Parameter table layout: ``[K_s, K_i]``.

    Attributes:
        Ks: Half-saturation concentration of the solute.
        Ki: Inhibition concentration of the solute.
    """

    num_params = 2
    param_names = ("Ks", "Ki")

    def __init__(self, Ks: float | None = None, Ki: float | None = None):
        """Initialize Haldane factor.

        Args:
            Ks: Half-saturation concentration.
            Ki: Inhibition concentration.
        """
        if (Ks is None) != (Ki is None):
            raise ContractViolationError("Ks and Ki must be given together")
        super().__init__(None if Ks is None else (Ks, Ki))

    @property
    def Ks(self) -> float | None:
        return None if self._params is None else float(self._params[0])

    @property
    def Ki(self) -> float | None:
        return None if self._params is None else float(self._params[1])

    @staticmethod
    def _value(solute: np.float64, Ks: np.float64, Ki: np.float64) -> np.float64:
        return solute / (Ks + solute + solute * solute / Ki)

    @staticmethod
    def _diff(solute: np.float64, Ks: np.float64, Ki: np.float64) -> np.float64:
        denominator = Ks + solute + solute * solute / Ki
        return (Ks - solute * solute / Ki) / (denominator * denominator)

    def optimum(self) -> float:
        """Concentration sqrt(K_s * K_i) at which the factor peaks."""
        if self._params is None:
            raise ContractViolationError("HaldaneFactor has no instance parameters")
        Ks, Ki = self._params
        return float(np.sqrt(Ks * Ki))


__all__ = ["HaldaneFactor"]
