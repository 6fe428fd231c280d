"""
Composite Spring
================
Multi-axis spring driving N `SpringValue`s through the per-axis update
contract.

Why is this file needed?
------------------------
1. Orchestration: integrate every axis, then commit every axis, then run the
   clamping pass. Axes never observe each other mid-step.
2. Parameters: builds the `PhysicsParameters` snapshot of each axis from the
   common or per-axis force/drag and the axis' clamp settings.
3. Predicates & events: "on target", "close to stopping", "changed",
   "clamped" for the whole spring.
"""
from __future__ import annotations

import dataclasses
import logging
from typing import List, Optional, Sequence

import numpy as np
import numpy.typing as npt

from springphysics import config
from springphysics.model.parameters import PhysicsParameters
from springphysics.model.spring_value import SpringValue
from springphysics.physics.clamping import clamp_target, clamp_current_value
from springphysics.physics.exceptions import PhysicsException
from springphysics.physics.selector import ModelRegistry
from springphysics.physics.validator import is_valid
from springphysics.springs.events import SpringEvents

logger = logging.getLogger(__name__)


class Spring:
    """
    Base class of all composite springs. Subclasses set `SIZE` (number of axes).
    """
    SIZE: int = 1

    def __init__(self, registry: Optional[ModelRegistry] = None) -> None:
        self.values: List[SpringValue] = [SpringValue() for _ in range(self.SIZE)]
        self._parameters: List[PhysicsParameters] = [PhysicsParameters() for _ in range(self.SIZE)]

        self.common_force_and_drag: bool = True
        self.common_force: float = config.DEFAULT_FORCE
        self.common_drag: float = config.DEFAULT_DRAG

        self.spring_enabled: bool = True
        self.clamping_enabled: bool = False
        self.events_enabled: bool = False
        self.always_use_analytical_solution: bool = False

        self.registry: ModelRegistry = registry if registry is not None else ModelRegistry.with_defaults()
        self.events = SpringEvents(self)

        # Set before the commit of each step, read by the events
        self.last_step_changed: bool = False

    def __len__(self) -> int:
        return len(self.values)

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------
    def initialize(self) -> None:
        for value in self.values:
            value.initialize()
        self.events.reset()

    def update(self, delta_time: float, force_threshold: float = config.DEFAULT_FORCE_THRESHOLD) -> None:
        """
        Advance every enabled axis by `delta_time`.

        Args:
            delta_time: Step in seconds; non-positive values leave the axes as they are.
            force_threshold: Force above which the analytical model runs.
                A negative value forces the analytical model.
        """
        if not self.spring_enabled:
            return

        for index, value in enumerate(self.values):
            if not value.update_enabled:
                continue

            parameters = self.get_physics_parameters(index, force_threshold)

            if self.clamping_enabled:
                clamp_target(value)

            try:
                model = self.registry.select(parameters)
                model.update(delta_time, value, parameters)
            except PhysicsException as e:
                # Raised by caller-registered models; the built-in ones self-heal
                logger.error(f"Physics error in {type(self).__name__} axis {index}: {e}")
                value.reach_equilibrium()

        self.last_step_changed = self.has_current_value_changed()
        self.process_candidate_values()

        if self.clamping_enabled:
            for value in self.values:
                clamp_current_value(value)

        if self.events_enabled:
            self.events.check()

    def process_candidate_values(self) -> None:
        for value in self.values:
            value.apply_candidate_value()

    def reach_equilibrium(self) -> None:
        for value in self.values:
            value.reach_equilibrium()

    def nudge(self, amounts: Sequence[float]) -> None:
        """Add an instantaneous velocity kick to every axis."""
        self._check_length(amounts)
        for value, amount in zip(self.values, amounts):
            value.operation_value = float(amount)
            value.add_velocity(value.operation_value)

    # ------------------------------------------------------------------
    # Physics parameters
    # ------------------------------------------------------------------
    def get_physics_parameters(self, index: int, force_threshold: float = config.DEFAULT_FORCE_THRESHOLD) -> PhysicsParameters:
        """
        Refresh and return the parameter snapshot of one axis.

        Force is raised to `MIN_EFFECTIVE_FORCE`, drag to 0, and inverted
        bounds are swapped (also on the axis itself).
        """
        value = self.values[index]
        parameters = self._parameters[index]

        force = self.common_force if self.common_force_and_drag else value.force
        drag = self.common_drag if self.common_force_and_drag else value.drag
        parameters.force = max(config.MIN_EFFECTIVE_FORCE, force)
        parameters.drag = max(0.0, drag)

        integration = parameters.integration
        integration.force_threshold = max(force_threshold, 0.0)
        integration.always_use_analytical_solution = self.always_use_analytical_solution or force_threshold < 0.0

        if value.min_value > value.max_value:
            logger.debug(f"{type(self).__name__} axis {index}: swapping inverted bounds.")
            value.min_value, value.max_value = value.max_value, value.min_value

        clamping = parameters.clamping
        clamping.clamp_target = value.clamp_target
        clamping.clamp_current_value = value.clamp_current_value
        clamping.stop_on_clamp = value.stop_on_current_value_clamp
        clamping.min_value = value.min_value
        clamping.max_value = value.max_value

        if not is_valid(parameters):
            logger.warning(
                f"Invalid physics parameters for {type(self).__name__} at index {index}. Using default values."
            )
            parameters = PhysicsParameters(force=config.DEFAULT_FORCE, drag=config.DEFAULT_DRAG)
            self._parameters[index] = parameters

        return parameters

    def set_common_force_and_drag(self, enabled: bool) -> None:
        self.common_force_and_drag = enabled

    def set_common_force_and_drag_values(self, force: float, drag: float) -> None:
        self.common_force = force
        self.common_drag = drag

    def get_force(self, index: int) -> float:
        return self.values[index].force

    def set_force(self, index: int, force: float) -> None:
        self.values[index].force = force

    def get_drag(self, index: int) -> float:
        return self.values[index].drag

    def set_drag(self, index: int, drag: float) -> None:
        self.values[index].drag = drag

    # ------------------------------------------------------------------
    # Clamping configuration
    # ------------------------------------------------------------------
    def set_clamp_range(self, index: int, min_value: float, max_value: float) -> None:
        self.values[index].min_value = min_value
        self.values[index].max_value = max_value

    def set_clamp_target(self, index: int, enabled: bool) -> None:
        self.values[index].clamp_target = enabled
        if enabled:
            self.clamping_enabled = True

    def set_clamp_current_value(self, index: int, enabled: bool) -> None:
        self.values[index].clamp_current_value = enabled
        if enabled:
            self.clamping_enabled = True

    def set_stop_on_clamp(self, index: int, enabled: bool) -> None:
        self.values[index].stop_on_current_value_clamp = enabled

    def configure_clamping(
        self,
        clamp_target: bool,
        clamp_current_value: bool,
        stop_on_clamp: bool,
        min_value: float,
        max_value: float,
    ) -> None:
        """Apply the same clamp settings to every axis and enable clamping."""
        for value in self.values:
            value.clamp_target = clamp_target
            value.clamp_current_value = clamp_current_value
            value.stop_on_current_value_clamp = stop_on_clamp
            value.min_value = min_value
            value.max_value = max_value
        self.clamping_enabled = True

    def is_clamp_target_enabled(self) -> bool:
        return any(value.clamp_target for value in self.values)

    def is_clamp_current_value_enabled(self) -> bool:
        return any(value.clamp_current_value for value in self.values)

    # ------------------------------------------------------------------
    # Predicates (axes with updates disabled are ignored)
    # ------------------------------------------------------------------
    def _active_values(self) -> List[SpringValue]:
        return [value for value in self.values if value.update_enabled]

    def is_close_to_stopping(self) -> bool:
        return all(abs(value.velocity) <= config.VELOCITY_THRESHOLD for value in self._active_values())

    def is_on_target(self) -> bool:
        return all(
            abs(value.target - value.current_value) <= config.TARGET_DISTANCE_THRESHOLD
            for value in self._active_values()
        )

    def has_current_value_changed(self) -> bool:
        return any(
            abs(value.candidate_value - value.current_value) >= config.CHANGE_THRESHOLD
            for value in self._active_values()
        )

    def is_clamped(self) -> bool:
        return any(value.is_clamped() for value in self.values)

    # ------------------------------------------------------------------
    # Vector access
    # ------------------------------------------------------------------
    def _check_length(self, values: Sequence[float]) -> None:
        if len(values) != self.SIZE:
            raise ValueError(f"{type(self).__name__} expects {self.SIZE} components, got {len(values)}")

    def get_targets(self) -> npt.NDArray[np.float64]:
        return np.array([value.target for value in self.values], dtype=np.float64)

    def set_targets(self, targets: Sequence[float]) -> None:
        self._check_length(targets)
        for value, target in zip(self.values, targets):
            value.target = float(target)

    def get_current_values(self) -> npt.NDArray[np.float64]:
        return np.array([value.current_value for value in self.values], dtype=np.float64)

    def set_current_values(self, current: Sequence[float]) -> None:
        self._check_length(current)
        for value, x in zip(self.values, current):
            value.current_value = float(x)
            value.candidate_value = float(x)

    def get_velocities(self) -> npt.NDArray[np.float64]:
        return np.array([value.velocity for value in self.values], dtype=np.float64)

    def set_velocities(self, velocities: Sequence[float]) -> None:
        self._check_length(velocities)
        for value, v in zip(self.values, velocities):
            value.velocity = float(v)

    def set_initial_values(self, initial: Sequence[float]) -> None:
        self._check_length(initial)
        for value, x in zip(self.values, initial):
            value.initial_value = float(x)

    def clone(self) -> Spring:
        """Independent copy of configuration and state. Event subscribers are not copied."""
        other = type(self)(registry=self.registry)
        other.values = [dataclasses.replace(value) for value in self.values]
        other.common_force_and_drag = self.common_force_and_drag
        other.common_force = self.common_force
        other.common_drag = self.common_drag
        other.spring_enabled = self.spring_enabled
        other.clamping_enabled = self.clamping_enabled
        other.events_enabled = self.events_enabled
        other.always_use_analytical_solution = self.always_use_analytical_solution
        return other

    def __repr__(self) -> str:
        return f"{type(self).__name__}(current={self.get_current_values().tolist()}, target={self.get_targets().tolist()})"
