"""
Spring Integrators
==================
The two interchangeable numerical methods that advance one spring axis by one
time step.

Both models follow the same contract: `update(delta_time, state, parameters)`
only writes `state.velocity` and `state.candidate_value`. Committing the
candidate into `current_value` is the caller's job.

Physics
-------
Each axis is a unit-mass damped harmonic oscillator

    x'' + drag * x' + force * (x - target) = 0

with angular frequency w = sqrt(force) and damping ratio z = drag / (2 w).

- SemiImplicitModel: symplectic Euler (velocity first, then position with the
  new velocity). Cheap and stable for moderate stiffness.
- AnalyticalModel: the closed-form solution over `delta_time`, used for
  extreme stiffness where Euler would blow up.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from enum import StrEnum
import logging
import math
from typing import NamedTuple, Optional, Tuple, TYPE_CHECKING

from springphysics import config

if TYPE_CHECKING:
    from springphysics.model.spring_value import SpringValue
    from springphysics.model.parameters import PhysicsParameters

logger = logging.getLogger(__name__)


class ModelKind(StrEnum):
    SEMI_IMPLICIT = "semi_implicit"
    ANALYTICAL = "analytical"


class PhysicsModel(ABC):
    """
    Abstract base class for spring integrators.
    """
    NAME: str = "Physics Model"
    DESCRIPTION: str = ""
    KIND: ModelKind

    def update(self, delta_time: float, state: SpringValue, parameters: PhysicsParameters) -> None:
        """
        Advance `state` by `delta_time` seconds.

        A non-positive `delta_time` leaves the state untouched. A step that
        would produce a non-finite position or velocity snaps the axis to
        equilibrium instead, as does a non-finite time step, force or drag.

        Args:
            delta_time: Time step in seconds.
            state: The axis to advance (mutated in place).
            parameters: Force, drag and integration policy for this step.
        """
        if delta_time <= 0.0:
            return

        if not all(math.isfinite(x) for x in (delta_time, parameters.force, parameters.drag)):
            logger.debug(
                f"{self.NAME}: non-finite input (dt={delta_time}, force={parameters.force}, "
                f"drag={parameters.drag}), reaching equilibrium."
            )
            state.reach_equilibrium()
            return

        try:
            result = self.step(delta_time, state, parameters)
        except (ValueError, OverflowError) as e:
            # math domain / range errors from exp, sin, cos
            logger.debug(f"{self.NAME}: step failed ({e}), reaching equilibrium.")
            state.reach_equilibrium()
            return

        if result is None:
            logger.debug(f"{self.NAME}: degenerate step (dt={delta_time}), reaching equilibrium.")
            state.reach_equilibrium()
            return

        new_position, new_velocity = result
        if not math.isfinite(new_position) or not math.isfinite(new_velocity):
            logger.debug(f"{self.NAME}: non-finite result (dt={delta_time}), reaching equilibrium.")
            state.reach_equilibrium()
            return

        state.velocity = new_velocity
        state.candidate_value = new_position

    @abstractmethod
    def step(
        self,
        delta_time: float,
        state: SpringValue,
        parameters: PhysicsParameters,
    ) -> Optional[Tuple[float, float]]:
        """
        Compute the next (position, velocity) pair without touching `state`.

        Returns:
            The new position and velocity, or None if the step cannot be
            evaluated.
        """
        pass

    @abstractmethod
    def is_suitable(self, parameters: PhysicsParameters) -> bool:
        pass

    def name(self) -> str:
        return self.NAME

    def description(self) -> str:
        return self.DESCRIPTION

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class SemiImplicitModel(PhysicsModel):
    """
    Semi-implicit (symplectic) Euler integration.
    """
    NAME = "Semi-Implicit Euler"
    DESCRIPTION = (
        "Semi-implicit Euler integration is more stable than explicit Euler "
        "and computationally efficient for real-time applications. "
        "It's the primary method used for most spring updates."
    )
    KIND = ModelKind.SEMI_IMPLICIT

    def step(
        self,
        delta_time: float,
        state: SpringValue,
        parameters: PhysicsParameters,
    ) -> Optional[Tuple[float, float]]:
        distance_to_target = state.target - state.current_value

        # v / (1 + drag*dt) approximates v * exp(-drag*dt) and stays positive for large drag*dt
        denominator = 1.0 + parameters.drag * delta_time
        if denominator == 0.0:
            return None
        velocity = state.velocity / denominator

        spring_force = parameters.force * distance_to_target
        velocity += spring_force * delta_time

        # Position uses the updated velocity
        candidate = state.current_value + velocity * delta_time
        return candidate, velocity

    def is_suitable(self, parameters: PhysicsParameters) -> bool:
        return parameters.force <= parameters.integration.force_threshold


class AnalyticalSolution(NamedTuple):
    """Coefficients mapping (relative position, velocity) at t to t + dt."""
    position_factor: float
    velocity_factor: float
    position_to_velocity_factor: float
    velocity_decay_factor: float


IDENTITY_SOLUTION = AnalyticalSolution(1.0, 0.0, 0.0, 1.0)


def analytical_factors(
    delta_time: float,
    angular_frequency: float,
    damping_ratio: float,
    epsilon: float = config.ANALYTICAL_EPSILON,
) -> AnalyticalSolution:
    """
    Closed-form step coefficients of a damped harmonic oscillator.

    Args:
        delta_time: Time step in seconds.
        angular_frequency: w = sqrt(force).
        damping_ratio: z = drag / (2 w). Negative values are treated as 0.
        epsilon: Width of the critically damped band around z = 1, and the
                 frequency below which the spring is considered static.

    Returns:
        The four solution factors. With w < epsilon the identity factors are
        returned (position and velocity pass through unchanged).
    """
    damping_ratio = max(damping_ratio, 0.0)
    angular_frequency = max(angular_frequency, 0.0)

    if angular_frequency < epsilon:
        return IDENTITY_SOLUTION

    if damping_ratio > 1.0 + epsilon:
        # Over-damped: two real roots z1 < z2 < 0
        za = -angular_frequency * damping_ratio
        zb = angular_frequency * math.sqrt(damping_ratio * damping_ratio - 1.0)
        z1 = za - zb
        z2 = za + zb

        exp_term1 = math.exp(z1 * delta_time)
        exp_term2 = math.exp(z2 * delta_time)

        inv_twice_zb = 1.0 / (2.0 * zb)
        return AnalyticalSolution(
            position_factor=(z2 * exp_term1 - z1 * exp_term2) * inv_twice_zb,
            velocity_factor=(exp_term2 - exp_term1) * inv_twice_zb,
            position_to_velocity_factor=(z1 * z2 * (exp_term1 - exp_term2)) * inv_twice_zb,
            velocity_decay_factor=(z2 * exp_term2 - z1 * exp_term1) * inv_twice_zb,
        )

    if damping_ratio < 1.0 - epsilon:
        # Under-damped: decaying oscillation at the damped frequency alpha
        omega_zeta = angular_frequency * damping_ratio
        alpha = angular_frequency * math.sqrt(1.0 - damping_ratio * damping_ratio)

        exp_term = math.exp(-omega_zeta * delta_time)
        cos_term = math.cos(alpha * delta_time)
        sin_term = math.sin(alpha * delta_time)

        inv_alpha = 1.0 / alpha
        return AnalyticalSolution(
            position_factor=exp_term * (cos_term + omega_zeta * sin_term * inv_alpha),
            velocity_factor=exp_term * sin_term * inv_alpha,
            position_to_velocity_factor=-exp_term * (sin_term * alpha + omega_zeta * omega_zeta * sin_term * inv_alpha),
            velocity_decay_factor=exp_term * (cos_term - omega_zeta * sin_term * inv_alpha),
        )

    # Critically damped
    exp_term = math.exp(-angular_frequency * delta_time)
    time_exp = delta_time * exp_term
    return AnalyticalSolution(
        position_factor=exp_term * (1.0 + angular_frequency * delta_time),
        velocity_factor=time_exp,
        position_to_velocity_factor=-angular_frequency * angular_frequency * time_exp,
        velocity_decay_factor=exp_term * (1.0 - angular_frequency * delta_time),
    )


class AnalyticalModel(PhysicsModel):
    """
    Exact solution of the damped oscillator over one step.
    """
    NAME = "Analytical Solution"
    DESCRIPTION = (
        "The analytical solution is more stable but computationally expensive. "
        "It's used for extreme force values where semi-implicit integration might become unstable."
    )
    KIND = ModelKind.ANALYTICAL

    def step(
        self,
        delta_time: float,
        state: SpringValue,
        parameters: PhysicsParameters,
    ) -> Optional[Tuple[float, float]]:
        angular_frequency = math.sqrt(max(parameters.force, 0.0))
        if angular_frequency < config.ANALYTICAL_EPSILON:
            solution = IDENTITY_SOLUTION
        else:
            damping_ratio = parameters.drag / (2.0 * angular_frequency)
            solution = analytical_factors(delta_time, angular_frequency, damping_ratio)

        relative_position = state.current_value - state.target
        velocity = state.velocity

        new_position = (
            relative_position * solution.position_factor
            + velocity * solution.velocity_factor
            + state.target
        )
        new_velocity = (
            relative_position * solution.position_to_velocity_factor
            + velocity * solution.velocity_decay_factor
        )
        return new_position, new_velocity

    def is_suitable(self, parameters: PhysicsParameters) -> bool:
        return (
            parameters.force > parameters.integration.force_threshold
            or parameters.integration.always_use_analytical_solution
        )
