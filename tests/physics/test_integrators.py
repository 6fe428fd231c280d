"""
Tests for the semi-implicit and analytical spring integrators.

Tests for springphysics/physics/integrators.py
"""

from __future__ import annotations

import math

import numpy as np
import pytest

from springphysics.model.parameters import PhysicsParameters, IntegrationParameters
from springphysics.model.spring_value import SpringValue
from springphysics.physics.integrators import (
    IDENTITY_SOLUTION,
    AnalyticalModel,
    ModelKind,
    SemiImplicitModel,
    analytical_factors,
)


def run_steps(model, state, parameters, delta_time, steps):
    for _ in range(steps):
        model.update(delta_time, state, parameters)
        state.apply_candidate_value()


class TestSemiImplicitModel:
    @pytest.fixture
    def model(self):
        return SemiImplicitModel()

    def test_metadata(self, model):
        assert model.name() == "Semi-Implicit Euler"
        assert model.description()
        assert model.KIND == ModelKind.SEMI_IMPLICIT

    def test_single_step_from_rest(self, model, axis, parameters):
        """Pre-damping acts on the old velocity, then the spring force is added."""
        model.update(0.02, axis, parameters)

        assert axis.velocity == pytest.approx(150.0 * 1.0 * 0.02)
        assert axis.candidate_value == pytest.approx(0.0 + 3.0 * 0.02)
        assert axis.current_value == 0.0

    def test_drag_predamps_existing_velocity(self, model, parameters):
        state = SpringValue(current_value=1.0, candidate_value=1.0, velocity=6.0, target=1.0)

        model.update(0.1, state, parameters)

        assert state.velocity == pytest.approx(6.0 / (1.0 + 10.0 * 0.1))
        assert state.candidate_value == pytest.approx(1.0 + 3.0 * 0.1)

    @pytest.mark.parametrize("delta_time", [0.0, -0.02, -1e9])
    def test_non_positive_delta_is_noop(self, model, moving_axis, parameters, delta_time):
        before = SpringValue(**moving_axis.to_dict())

        model.update(delta_time, moving_axis, parameters)

        assert moving_axis == before

    def test_overflow_snaps_to_equilibrium(self, model):
        state = SpringValue(current_value=0.0, candidate_value=0.0, velocity=0.0, target=1.0)
        parameters = PhysicsParameters(force=1e200, drag=0.0)

        model.update(1e200, state, parameters)

        assert state.velocity == 0.0
        assert state.current_value == 1.0
        assert state.candidate_value == 1.0

    def test_infinite_delta_snaps_to_equilibrium(self, model, moving_axis, parameters):
        model.update(math.inf, moving_axis, parameters)

        assert (moving_axis.candidate_value, moving_axis.velocity) == (1.0, 0.0)

    def test_zero_denominator_snaps_to_equilibrium(self, model, moving_axis):
        parameters = PhysicsParameters(force=10.0, drag=-10.0)

        model.update(0.1, moving_axis, parameters)

        assert moving_axis.velocity == 0.0
        assert moving_axis.current_value == moving_axis.target

    def test_converges_to_target(self, model, axis, parameters):
        run_steps(model, axis, parameters, 0.02, 500)

        assert axis.current_value == pytest.approx(1.0, abs=1e-6)
        assert axis.velocity == pytest.approx(0.0, abs=1e-6)

    def test_suitability(self, model):
        integration = IntegrationParameters(force_threshold=100.0)
        assert model.is_suitable(PhysicsParameters(force=100.0, integration=integration))
        assert not model.is_suitable(PhysicsParameters(force=100.5, integration=integration))


class TestAnalyticalFactors:
    OMEGA = 10.0
    DT = 0.02

    @pytest.mark.parametrize("zeta", [0.0, 0.3, 1.0, 2.5])
    def test_zero_step_is_identity(self, zeta):
        factors = analytical_factors(0.0, self.OMEGA, zeta)
        np.testing.assert_allclose(factors, IDENTITY_SOLUTION, atol=1e-12)

    def test_static_spring_is_identity(self):
        assert analytical_factors(self.DT, 0.0, 0.5) == IDENTITY_SOLUTION

    @pytest.mark.parametrize("offset", [1e-3, 2e-4])
    def test_continuity_across_critical_damping(self, offset):
        below = analytical_factors(self.DT, self.OMEGA, 1.0 - offset)
        critical = analytical_factors(self.DT, self.OMEGA, 1.0)
        above = analytical_factors(self.DT, self.OMEGA, 1.0 + offset)

        np.testing.assert_allclose(below, critical, atol=1e-3)
        np.testing.assert_allclose(above, critical, atol=1e-3)

    @pytest.mark.parametrize("zeta", [0.2, 1.0, 3.0])
    def test_factors_decay_for_long_steps(self, zeta):
        factors = analytical_factors(100.0, self.OMEGA, zeta)
        np.testing.assert_allclose(factors, (0.0, 0.0, 0.0, 0.0), atol=1e-9)


class TestAnalyticalModel:
    @pytest.fixture
    def model(self):
        return AnalyticalModel()

    def test_metadata(self, model):
        assert model.name() == "Analytical Solution"
        assert model.KIND == ModelKind.ANALYTICAL

    def test_critically_damped_matches_closed_form(self, model, axis):
        """x(t) - target = -(1 + w t) exp(-w t) for a unit step from rest."""
        parameters = PhysicsParameters(force=100.0, drag=20.0)

        model.update(0.1, axis, parameters)

        expected = 1.0 - (1.0 + 10.0 * 0.1) * math.exp(-1.0)
        assert axis.candidate_value == pytest.approx(expected, rel=1e-12)
        assert axis.velocity == pytest.approx(100.0 * 0.1 * math.exp(-1.0), rel=1e-12)

    def test_under_damped_matches_closed_form(self, model, axis):
        force, drag, t = 100.0, 4.0, 0.13
        omega_zeta = drag / 2.0
        alpha = math.sqrt(force - omega_zeta ** 2)
        parameters = PhysicsParameters(force=force, drag=drag)

        model.update(t, axis, parameters)

        relative = -math.exp(-omega_zeta * t) * (math.cos(alpha * t) + omega_zeta / alpha * math.sin(alpha * t))
        velocity = math.exp(-omega_zeta * t) * (force / alpha) * math.sin(alpha * t)
        assert axis.candidate_value == pytest.approx(1.0 + relative, rel=1e-12)
        assert axis.velocity == pytest.approx(velocity, rel=1e-12)

    @pytest.mark.parametrize(
        "force, drag",
        [
            (100.0, 4.0),    # under-damped
            (100.0, 20.0),   # critically damped
            (100.0, 50.0),   # over-damped
        ],
    )
    def test_split_steps_match_single_step(self, model, moving_axis, force, drag):
        """Exact solution: ten steps of dt equal one step of 10 dt."""
        parameters = PhysicsParameters(force=force, drag=drag)
        single = SpringValue(**moving_axis.to_dict())

        run_steps(model, single, parameters, 0.1, 1)
        run_steps(model, moving_axis, parameters, 0.01, 10)

        assert moving_axis.current_value == pytest.approx(single.current_value, rel=1e-9, abs=1e-12)
        assert moving_axis.velocity == pytest.approx(single.velocity, rel=1e-9, abs=1e-12)

    def test_zero_force_passes_state_through(self, model, moving_axis):
        parameters = PhysicsParameters(force=0.0, drag=5.0)

        model.update(0.02, moving_axis, parameters)

        assert moving_axis.candidate_value == 3.0
        assert moving_axis.velocity == 2.0

    def test_stable_at_extreme_force(self, model, axis):
        parameters = PhysicsParameters(force=1e8, drag=1e3)

        run_steps(model, axis, parameters, 0.02, 50)

        assert math.isfinite(axis.current_value)
        assert axis.current_value == pytest.approx(1.0, abs=1e-6)

    def test_non_positive_delta_is_noop(self, model, moving_axis):
        before = SpringValue(**moving_axis.to_dict())
        model.update(0.0, moving_axis, PhysicsParameters())
        assert moving_axis == before

    def test_overflow_snaps_to_equilibrium(self, model):
        state = SpringValue(current_value=1e308, candidate_value=1e308, velocity=1e308, target=1.0)
        parameters = PhysicsParameters(force=1e4, drag=20.0)

        model.update(0.02, state, parameters)

        assert (state.current_value, state.candidate_value, state.velocity) == (1.0, 1.0, 0.0)

    @pytest.mark.parametrize(
        "delta_time, force, drag",
        [
            (0.02, math.inf, 10.0),
            (math.inf, 100.0, 4.0),
            (0.02, 100.0, math.inf),
            (0.02, math.nan, 4.0),
        ],
    )
    def test_non_finite_inputs_snap_to_equilibrium(self, model, moving_axis, delta_time, force, drag):
        model.update(delta_time, moving_axis, PhysicsParameters(force=force, drag=drag))

        assert moving_axis.candidate_value == moving_axis.target
        assert moving_axis.current_value == moving_axis.target
        assert moving_axis.velocity == 0.0

    def test_math_domain_error_snaps_to_equilibrium(self, moving_axis):
        class DomainErrorModel(AnalyticalModel):
            def step(self, delta_time, state, parameters):
                return math.sin(math.inf), 0.0

        DomainErrorModel().update(0.02, moving_axis, PhysicsParameters(force=100.0, drag=4.0))

        assert (moving_axis.current_value, moving_axis.velocity) == (1.0, 0.0)

    def test_suitability(self, model):
        integration = IntegrationParameters(force_threshold=100.0)
        assert not model.is_suitable(PhysicsParameters(force=100.0, integration=integration))
        assert model.is_suitable(PhysicsParameters(force=100.5, integration=integration))

        forced = IntegrationParameters(force_threshold=100.0, always_use_analytical_solution=True)
        assert model.is_suitable(PhysicsParameters(force=1.0, integration=forced))
