"""Non-competitive inhibition kinetic factor."""

from __future__ import annotations

import numpy as np

from kinetic_factors.factors.base import AbstractKineticFactor
from kinetic_factors.utils.registry import FACTOR_REGISTRY


@FACTOR_REGISTRY.register("simple_inhibition")
class SimpleInhibitionFactor(AbstractKineticFactor):
    """Simple inhibition by the solute: f(S) = K_i / (K_i + S).

    Equal to 1 without inhibitor and halved at S = K_i.

    f'(S) = -K_i / (K_i + S)^2

    Parameter table layout: ``[K_i]``.
    """

    num_params = 1
    param_names = ("Ki",)

    def __init__(self, Ki: float | None = None):
        super().__init__(None if Ki is None else (Ki,))

    @staticmethod
    def _value(solute: np.float64, Ki: np.float64) -> np.float64:
        return Ki / (Ki + solute)

    @staticmethod
    def _diff(solute: np.float64, Ki: np.float64) -> np.float64:
        denominator = Ki + solute
        return -Ki / (denominator * denominator)


__all__ = ["SimpleInhibitionFactor"]
