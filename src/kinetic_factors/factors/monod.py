"""Monod saturation kinetic factor."""

from __future__ import annotations

import numpy as np

from kinetic_factors.factors.base import AbstractKineticFactor
from kinetic_factors.utils.registry import FACTOR_REGISTRY


@FACTOR_REGISTRY.register("monod")
class MonodFactor(AbstractKineticFactor):
    """Monod (Michaelis-Menten) saturation: f(S) = S / (K_s + S).

    f'(S) = K_s / (K_s + S)^2

    Parameter table layout: ``[K_s]``.
    """

    num_params = 1
    param_names = ("Ks",)

    def __init__(self, Ks: float | None = None):
        super().__init__(None if Ks is None else (Ks,))

    @staticmethod
    def _value(solute: np.float64, Ks: np.float64) -> np.float64:
        return solute / (Ks + solute)

    @staticmethod
    def _diff(solute: np.float64, Ks: np.float64) -> np.float64:
        denominator = Ks + solute
        return Ks / (denominator * denominator)


__all__ = ["MonodFactor"]
