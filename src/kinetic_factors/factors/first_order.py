"""First-order kinetic factor."""

from __future__ import annotations

import numpy as np

from kinetic_factors.factors.base import AbstractKineticFactor
from kinetic_factors.utils.registry import FACTOR_REGISTRY


@FACTOR_REGISTRY.register("first_order")
class FirstOrderFactor(AbstractKineticFactor):
    """Rate proportional to the solute: f(S) = S, f'(S) = 1.

    Takes no parameters, so it occupies no slots in a parameter table.
    """

    num_params = 0
    param_names = ()

    def __init__(self) -> None:
        super().__init__(())

    @staticmethod
    def _value(solute: np.float64) -> np.float64:
        return solute

    @staticmethod
    def _diff(solute: np.float64) -> np.float64:
        return np.float64(1.0)


__all__ = ["FirstOrderFactor"]
