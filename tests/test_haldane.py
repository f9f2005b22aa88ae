"""Tests for Haldane substrate-inhibition kinetics in both storage modes."""

from __future__ import annotations

import math

import numpy as np
import pytest

from kinetic_factors.exceptions import ConfigurationError, ContractViolationError
from kinetic_factors.factors import HaldaneFactor

# Representative concentrations, kept away from 0 for relative comparisons
CONCENTRATIONS = [0.01, 0.5, 1.0, 3.7, 25.0, 400.0]


def _central_difference(factor: HaldaneFactor, solute: float) -> float:
    h = 1e-5 * max(solute, 1.0)
    return (factor.rate(solute + h) - factor.rate(solute - h)) / (2.0 * h)


# ===========================================================================
# Parameter layout
# ===========================================================================


class TestParameterLayout:
    def test_parameter_count(self):
        assert HaldaneFactor.num_params == 2
        assert HaldaneFactor.declare_parameter_count() == 2
        assert HaldaneFactor().declare_parameter_count() == 2

    def test_param_names_in_packing_order(self):
        assert HaldaneFactor.param_names == ("Ks", "Ki")

    def test_init_into_array_writes_two_contiguous_slots(self, haldane_params, param_table):
        factor = HaldaneFactor()
        factor.init_into_array(haldane_params, param_table, 3)

        np.testing.assert_array_equal(
            param_table, [-1.0, -1.0, -1.0, 2.0, 50.0, -1.0, -1.0, -1.0]
        )

    def test_init_into_array_leaves_instance_untouched(self, haldane_params, param_table):
        factor = HaldaneFactor()
        factor.init_into_array(haldane_params, param_table, 0)
        assert factor.parameters is None

        initialized = HaldaneFactor(1.0, 10.0)
        initialized.init_into_array(haldane_params, param_table, 0)
        assert initialized.parameters == (1.0, 10.0)

    def test_init_into_last_slots(self, haldane_params, param_table):
        HaldaneFactor().init_into_array(haldane_params, param_table, 6)
        assert param_table[6] == 2.0
        assert param_table[7] == 50.0

    def test_init_into_plain_list(self, haldane_params):
        table = [0.0] * 4
        HaldaneFactor().init_into_array(haldane_params, table, 1)
        assert table == [0.0, 2.0, 50.0, 0.0]

    @pytest.mark.parametrize("index", [-1, 7, 8, 100])
    def test_init_into_array_out_of_range(self, haldane_params, param_table, index):
        with pytest.raises(ContractViolationError, match="parameter table"):
            HaldaneFactor().init_into_array(haldane_params, param_table, index)
        assert np.all(param_table == -1.0)


# ===========================================================================
# Configuration
# ===========================================================================


class TestConfiguration:
    def test_init_from_config(self, haldane):
        assert haldane.Ks == 2.0
        assert haldane.Ki == 50.0
        assert haldane.parameters == (2.0, 50.0)

    def test_constructor_values(self):
        factor = HaldaneFactor(Ks=2.0, Ki=50.0)
        assert factor.parameters == (2.0, 50.0)

    def test_constructor_requires_both_values(self):
        with pytest.raises(ContractViolationError, match="together"):
            HaldaneFactor(Ks=2.0)

    def test_missing_ki_leaves_no_parameters(self):
        factor = HaldaneFactor()
        with pytest.raises(ConfigurationError, match="Ki"):
            factor.init_from_config({"Ks": 2.0})
        assert factor.parameters is None
        assert factor.Ks is None
        assert factor.Ki is None

    def test_failed_reinit_keeps_previous_values(self):
        factor = HaldaneFactor(1.0, 10.0)
        with pytest.raises(ConfigurationError):
            factor.init_from_config({"Ks": 5.0, "Ki": "lots"})
        assert factor.parameters == (1.0, 10.0)

    def test_missing_ks_leaves_table_untouched(self, param_table):
        with pytest.raises(ConfigurationError, match="Ks"):
            HaldaneFactor().init_into_array({"Ki": 50.0}, param_table, 0)
        assert np.all(param_table == -1.0)

    def test_numeric_strings_accepted(self):
        factor = HaldaneFactor.from_config({"Ks": "2.0", "Ki": " 50 "})
        assert factor.parameters == (2.0, 50.0)

    def test_nested_params_block(self):
        factor = HaldaneFactor.from_config(
            {"kinetic": "haldane", "params": {"Ks": 2.0, "Ki": 50.0}}
        )
        assert factor.parameters == (2.0, 50.0)

    def test_reinit_replaces_values(self, haldane):
        haldane.init_from_config({"Ks": 4.0, "Ki": 8.0})
        assert haldane.parameters == (4.0, 8.0)


# ===========================================================================
# Rate law
# ===========================================================================


class TestRate:
    def test_reference_values(self, haldane):
        assert haldane.rate(5.0) == pytest.approx(5.0 / 7.5)
        assert haldane.rate(5.0) == pytest.approx(0.6667, abs=1e-4)

    def test_reference_values_from_table(self, haldane_params, param_table):
        HaldaneFactor().init_into_array(haldane_params, param_table, 2)
        assert HaldaneFactor().rate(5.0, param_table, 2) == pytest.approx(5.0 / 7.5)

    @pytest.mark.parametrize("Ks,Ki", [(2.0, 50.0), (0.01, 0.01), (100.0, 3.0)])
    def test_zero_concentration(self, Ks, Ki):
        assert HaldaneFactor(Ks, Ki).rate(0.0) == 0.0

    @pytest.mark.parametrize("Ks,Ki", [(2.0, 50.0), (0.01, 0.01), (100.0, 3.0)])
    def test_non_negative(self, Ks, Ki):
        factor = HaldaneFactor(Ks, Ki)
        for solute in np.linspace(0.0, 1000.0, 201):
            assert factor.rate(solute) >= 0.0

    @pytest.mark.parametrize("Ks", [0.1, 2.0, 30.0])
    def test_linear_regime_at_low_concentration(self, Ks):
        factor = HaldaneFactor(Ks, 50.0)
        solute = 1e-9
        assert factor.rate(solute) / solute == pytest.approx(1.0 / Ks, rel=1e-6)

    def test_inhibition_at_high_concentration(self, haldane):
        peak = haldane.rate(haldane.optimum())
        assert haldane.rate(1000.0) < peak
        assert haldane.rate(1e6) < 1e-3

    def test_optimum(self, haldane):
        assert haldane.optimum() == pytest.approx(10.0)
        assert haldane.rate(9.0) < haldane.rate(10.0)
        assert haldane.rate(11.0) < haldane.rate(10.0)

    def test_uninitialized_instance_mode_raises(self):
        with pytest.raises(ContractViolationError, match="no instance parameters"):
            HaldaneFactor().rate(1.0)

    def test_returns_python_float(self, haldane):
        assert type(haldane.rate(5.0)) is float


# ===========================================================================
# Derivative
# ===========================================================================


class TestDerivative:
    def test_reference_value(self, haldane):
        assert haldane.derivative(5.0) == pytest.approx(1.5 / 56.25)
        assert haldane.derivative(5.0) == pytest.approx(0.02667, abs=1e-5)

    def test_at_zero_is_inverse_ks(self, haldane):
        assert haldane.derivative(0.0) == pytest.approx(1.0 / 2.0)

    def test_vanishes_at_optimum(self, haldane):
        assert haldane.derivative(haldane.optimum()) == pytest.approx(0.0, abs=1e-12)

    def test_negative_past_optimum(self, haldane):
        assert haldane.derivative(20.0) < 0.0

    @pytest.mark.parametrize("solute", CONCENTRATIONS)
    def test_matches_finite_difference(self, haldane, solute):
        assert haldane.derivative(solute) == pytest.approx(
            _central_difference(haldane, solute), rel=1e-6
        )

    def test_uninitialized_instance_mode_raises(self):
        with pytest.raises(ContractViolationError):
            HaldaneFactor().derivative(1.0)


# ===========================================================================
# Storage-mode agreement
# ===========================================================================


class TestStorageModes:
    @pytest.mark.parametrize("Ks,Ki", [(2.0, 50.0), (0.3, 7.1), (1e-3, 1e4)])
    @pytest.mark.parametrize("solute", [0.0, *CONCENTRATIONS])
    def test_modes_agree_exactly(self, Ks, Ki, solute):
        config = {"Ks": Ks, "Ki": Ki}
        owned = HaldaneFactor.from_config(config)

        table = np.zeros(5)
        shared = HaldaneFactor()
        shared.init_into_array(config, table, 1)

        assert owned.rate(solute) == shared.rate(solute, table, 1)
        assert owned.derivative(solute) == shared.derivative(solute, table, 1)

    def test_table_mode_ignores_instance_parameters(self, haldane):
        table = np.array([4.0, 8.0])
        assert haldane.rate(5.0, table, 0) == pytest.approx(5.0 / (4.0 + 5.0 + 25.0 / 8.0))

    def test_offsets_select_agents(self):
        table = np.array([2.0, 50.0, 4.0, 8.0])
        factor = HaldaneFactor()
        assert factor.rate(5.0, table, 0) == HaldaneFactor(2.0, 50.0).rate(5.0)
        assert factor.rate(5.0, table, 2) == HaldaneFactor(4.0, 8.0).rate(5.0)

    def test_evaluation_does_not_mutate(self, haldane_params, param_table):
        factor = HaldaneFactor()
        factor.init_into_array(haldane_params, param_table, 4)
        before = param_table.copy()

        factor.rate(5.0, param_table, 4)
        factor.derivative(5.0, param_table, 4)

        np.testing.assert_array_equal(param_table, before)
        assert factor.parameters is None

    def test_read_out_of_range(self):
        with pytest.raises(ContractViolationError):
            HaldaneFactor().rate(1.0, np.array([2.0]), 0)
        with pytest.raises(ContractViolationError):
            HaldaneFactor().derivative(1.0, np.array([2.0, 50.0]), 1)


# ===========================================================================
# Degenerate parameters
# ===========================================================================


class TestDegenerateParameters:
    def test_zero_ki_propagates_nan(self):
        factor = HaldaneFactor(2.0, 0.0)
        with np.errstate(divide="ignore", invalid="ignore"):
            assert math.isnan(factor.rate(0.0))
            assert math.isnan(factor.derivative(5.0))

    def test_zero_ki_in_table_propagates_nan(self):
        table = np.array([2.0, 0.0])
        with np.errstate(divide="ignore", invalid="ignore"):
            assert math.isnan(HaldaneFactor().derivative(5.0, table, 0))

    def test_zero_denominator_propagates_nan(self):
        factor = HaldaneFactor(0.0, 50.0)
        with np.errstate(divide="ignore", invalid="ignore"):
            assert math.isnan(factor.rate(0.0))

    def test_validate_parameters(self, haldane):
        assert haldane.validate_parameters()
        assert not HaldaneFactor(2.0, 0.0).validate_parameters()
        assert not HaldaneFactor(-1.0, 50.0).validate_parameters()
        assert not HaldaneFactor().validate_parameters(np.array([2.0, np.inf]), 0)
