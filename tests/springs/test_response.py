"""
Tests for step-response sampling and damping classification.

Tests for springphysics/springs/response.py
"""

from __future__ import annotations

import math

import numpy as np
import pytest

from springphysics.physics.exceptions import PhysicsException
from springphysics.springs.response import (
    DampingRegime,
    classify_damping,
    damping_ratio,
    peak_overshoot,
    sample_response,
    settle_time,
)


class TestDamping:
    def test_damping_ratio(self):
        assert damping_ratio(100.0, 20.0) == pytest.approx(1.0)
        assert damping_ratio(100.0, 5.0) == pytest.approx(0.25)
        assert math.isinf(damping_ratio(0.0, 1.0))

    @pytest.mark.parametrize(
        "force, drag, regime",
        [
            (100.0, 5.0, DampingRegime.UNDER_DAMPED),
            (100.0, 20.0, DampingRegime.CRITICALLY_DAMPED),
            (100.0, 50.0, DampingRegime.OVER_DAMPED),
            (0.0, 1.0, DampingRegime.STATIC),
        ],
    )
    def test_classify(self, force, drag, regime):
        assert classify_damping(force, drag) == regime


class TestSampleResponse:
    def test_shape_and_start(self):
        times, values = sample_response(40.0, 4.0, duration=2.0, samples=101)

        assert times.shape == (101,)
        assert values.shape == (101,)
        assert times[0] == 0.0
        assert times[-1] == pytest.approx(2.0)
        assert values[0] == 0.0

    def test_over_damped_settles(self):
        _, values = sample_response(20.0, 10.0, duration=5.0, samples=512)

        assert values[-1] == pytest.approx(1.0, abs=1e-3)

    def test_under_damped_overshoots(self):
        _, values = sample_response(40.0, 4.0, duration=3.0, samples=512)
        assert peak_overshoot(values) > 0.1

    def test_slow_over_damped_analytical_never_overshoots(self):
        _, values = sample_response(5.0, 10.0, duration=3.0, samples=256, always_use_analytical=True)

        assert peak_overshoot(values) == 0.0
        assert np.all(np.diff(values) >= 0.0)

    def test_integrators_agree_for_small_steps(self):
        _, semi = sample_response(40.0, 4.0, duration=2.0, samples=2001)
        _, exact = sample_response(40.0, 4.0, duration=2.0, samples=2001, always_use_analytical=True)

        assert np.max(np.abs(semi - exact)) < 0.02

    def test_invalid_parameters_raise(self):
        with pytest.raises(PhysicsException, match="Force must be non-negative"):
            sample_response(-1.0, 4.0)

    @pytest.mark.parametrize("duration, samples", [(0.0, 10), (-1.0, 10), (1.0, 1)])
    def test_invalid_sampling_raises(self, duration, samples):
        with pytest.raises(ValueError):
            sample_response(40.0, 4.0, duration=duration, samples=samples)


class TestSettleTime:
    def test_settles(self):
        times = np.array([0.0, 1.0, 2.0, 3.0])
        values = np.array([0.0, 0.5, 0.999, 1.0])
        assert settle_time(times, values) == 2.0

    def test_never_settles(self):
        times = np.array([0.0, 1.0, 2.0])
        assert math.isinf(settle_time(times, np.zeros(3)))

    def test_always_settled(self):
        times = np.array([0.5, 1.0])
        assert settle_time(times, np.ones(2)) == 0.5
