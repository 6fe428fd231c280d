from __future__ import annotations

from enum import StrEnum
import math
from typing import Tuple, TYPE_CHECKING

import numpy as np

from springphysics import config
from springphysics.model.parameters import PhysicsParameters, IntegrationParameters
from springphysics.model.spring_value import SpringValue
from springphysics.physics.selector import select_model
from springphysics.physics.validator import require_valid

if TYPE_CHECKING:
    import numpy.typing as npt


class DampingRegime(StrEnum):
    STATIC = "static"
    UNDER_DAMPED = "under-damped"
    CRITICALLY_DAMPED = "critically damped"
    OVER_DAMPED = "over-damped"


def damping_ratio(force: float, drag: float) -> float:
    """z = drag / (2 sqrt(force)); infinite for a spring without stiffness."""
    angular_frequency = math.sqrt(max(force, 0.0))
    if angular_frequency < config.ANALYTICAL_EPSILON:
        return math.inf
    return max(drag, 0.0) / (2.0 * angular_frequency)


def classify_damping(force: float, drag: float, epsilon: float = config.ANALYTICAL_EPSILON) -> DampingRegime:
    if math.sqrt(max(force, 0.0)) < epsilon:
        return DampingRegime.STATIC
    zeta = damping_ratio(force, drag)
    if zeta > 1.0 + epsilon:
        return DampingRegime.OVER_DAMPED
    if zeta < 1.0 - epsilon:
        return DampingRegime.UNDER_DAMPED
    return DampingRegime.CRITICALLY_DAMPED


def sample_response(
    force: float,
    drag: float,
    duration: float = 3.0,
    samples: int = 512,
    always_use_analytical: bool = False,
    force_threshold: float = config.DEFAULT_FORCE_THRESHOLD,
) -> Tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """
    Unit step response of a single axis: starts at 0 at rest, target 1.

    Every sample is produced through the same per-axis update contract as a
    live spring (integrate, then commit).

    Args:
        force: Stiffness.
        drag: Damping.
        duration: Simulated time span in seconds.
        samples: Number of samples including t = 0.
        always_use_analytical: Force the analytical model.
        force_threshold: Semi-implicit / analytical switch.

    Returns:
        times, values arrays of length `samples`.

    Raises:
        PhysicsException: if force/drag/threshold are invalid.
        ValueError: if `duration` or `samples` is out of range.
    """
    if duration <= 0.0:
        raise ValueError("duration must be > 0")
    if samples < 2:
        raise ValueError("samples must be >= 2")

    parameters = PhysicsParameters(
        force=force,
        drag=drag,
        integration=IntegrationParameters(
            force_threshold=force_threshold,
            always_use_analytical_solution=always_use_analytical,
        ),
    )
    require_valid(parameters)

    model = select_model(parameters)
    state = SpringValue(target=1.0, force=force, drag=drag)

    times = np.linspace(0.0, duration, samples)
    values = np.empty(samples, dtype=np.float64)
    values[0] = state.current_value

    for i in range(1, samples):
        model.update(float(times[i] - times[i - 1]), state, parameters)
        state.apply_candidate_value()
        values[i] = state.current_value

    return times, values


def peak_overshoot(values: npt.NDArray[np.float64], target: float = 1.0) -> float:
    """Largest excursion past `target` (0.0 when the response never crosses it)."""
    return float(max(np.max(values) - target, 0.0))


def settle_time(
    times: npt.NDArray[np.float64],
    values: npt.NDArray[np.float64],
    target: float = 1.0,
    tolerance: float = config.TARGET_DISTANCE_THRESHOLD,
) -> float:
    """
    First time after which the response stays within `tolerance` of `target`.

    Returns:
        The settle time in seconds, or inf if the response never settles.
    """
    outside = np.nonzero(np.abs(values - target) > tolerance)[0]
    if outside.size == 0:
        return float(times[0])
    last = int(outside[-1])
    if last == len(values) - 1:
        return math.inf
    return float(times[last + 1])
