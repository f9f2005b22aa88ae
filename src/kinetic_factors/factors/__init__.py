"""Kinetic factor rate laws."""

from __future__ import annotations

from kinetic_factors.factors.base import AbstractKineticFactor
from kinetic_factors.factors.factory import create_factor, create_factors
from kinetic_factors.factors.first_order import FirstOrderFactor
from kinetic_factors.factors.haldane import HaldaneFactor
from kinetic_factors.factors.inhibition import SimpleInhibitionFactor
from kinetic_factors.factors.monod import MonodFactor

__all__ = [
    "AbstractKineticFactor",
    "FirstOrderFactor",
    "HaldaneFactor",
    "MonodFactor",
    "SimpleInhibitionFactor",
    "create_factor",
    "create_factors",
]
