"""
Concrete spring shapes: scalar, 2/3/4-component vectors and RGBA colors.

Vector springs expose their state as numpy arrays; assigning a sequence of
the wrong length raises ValueError.
"""
from __future__ import annotations

from typing import Optional, Sequence

import numpy as np
import numpy.typing as npt

from springphysics.physics.selector import ModelRegistry
from springphysics.springs.spring import Spring


class SpringFloat(Spring):
    SIZE = 1
    X = 0

    @property
    def target(self) -> float:
        return self.values[self.X].target

    @target.setter
    def target(self, value: float) -> None:
        self.values[self.X].target = float(value)

    @property
    def current_value(self) -> float:
        return self.values[self.X].current_value

    @current_value.setter
    def current_value(self, value: float) -> None:
        self.set_current_values([value])

    @property
    def velocity(self) -> float:
        return self.values[self.X].velocity

    @velocity.setter
    def velocity(self, value: float) -> None:
        self.values[self.X].velocity = float(value)

    def add_velocity(self, velocity: float) -> None:
        self.values[self.X].add_velocity(velocity)

    def configure(self, force: float, drag: float, initial_value: float, target: float) -> None:
        """Per-axis force/drag, start value and target in one call."""
        self.common_force_and_drag = False
        self.set_force(self.X, force)
        self.set_drag(self.X, drag)
        self.current_value = initial_value
        self.target = target


class SpringVector(Spring):
    """Base for fixed-size vector springs."""

    @property
    def target(self) -> npt.NDArray[np.float64]:
        return self.get_targets()

    @target.setter
    def target(self, value: Sequence[float]) -> None:
        self.set_targets(value)

    @property
    def current_value(self) -> npt.NDArray[np.float64]:
        return self.get_current_values()

    @current_value.setter
    def current_value(self, value: Sequence[float]) -> None:
        self.set_current_values(value)

    @property
    def velocity(self) -> npt.NDArray[np.float64]:
        return self.get_velocities()

    @velocity.setter
    def velocity(self, value: Sequence[float]) -> None:
        self.set_velocities(value)

    def add_velocity(self, velocity: Sequence[float]) -> None:
        self.nudge(velocity)


class SpringVector2(SpringVector):
    SIZE = 2


class SpringVector3(SpringVector):
    SIZE = 3


class SpringVector4(SpringVector):
    SIZE = 4


class SpringColor(SpringVector):
    """
    RGBA spring. Channels are clamped to [0, 1] by default.
    """
    SIZE = 4

    def __init__(self, registry: Optional[ModelRegistry] = None) -> None:
        super().__init__(registry=registry)
        self.configure_clamping(
            clamp_target=True,
            clamp_current_value=True,
            stop_on_clamp=False,
            min_value=0.0,
            max_value=1.0,
        )
        self.set_targets([1.0, 1.0, 1.0, 1.0])
        self.set_current_values([1.0, 1.0, 1.0, 1.0])
        self.set_initial_values([1.0, 1.0, 1.0, 1.0])
