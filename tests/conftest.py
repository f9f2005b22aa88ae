"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import logging

import numpy as np
import pytest

from kinetic_factors.factors import HaldaneFactor


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drop handlers installed by setup_logging so tests stay independent."""
    yield
    package_logger = logging.getLogger("kinetic_factors")
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def haldane_params() -> dict:
    """Haldane parameters with optimum at S = sqrt(Ks * Ki) = 10."""
    return {"Ks": 2.0, "Ki": 50.0}


@pytest.fixture
def haldane(haldane_params) -> HaldaneFactor:
    """Haldane factor holding its parameters on the instance."""
    return HaldaneFactor.from_config(haldane_params)


@pytest.fixture
def param_table() -> np.ndarray:
    """Shared per-agent table, pre-filled with a sentinel value."""
    return np.full(8, -1.0)
