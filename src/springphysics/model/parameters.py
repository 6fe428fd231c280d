"""
Physics Parameter Bundles
=========================
Defines the configuration groups handed to the integrators once per axis per
step.

The bundles are plain dataclasses with value semantics: `clone()` returns a
deep copy so a composite spring can snapshot its configuration per axis
without aliasing another spring's settings.
"""
from __future__ import annotations

import copy
from dataclasses import dataclass, field, asdict
from typing import Dict, Any

from springphysics import config


@dataclass
class IntegrationParameters:
    """Numerical integration policy."""
    # Force above which the analytical solution replaces semi-implicit Euler
    force_threshold: float = config.DEFAULT_FORCE_THRESHOLD
    use_fixed_update_rate: bool = config.DEFAULT_USE_FIXED_UPDATE_RATE
    fixed_time_step: float = config.DEFAULT_FIXED_TIME_STEP
    always_use_analytical_solution: bool = False

    def clone(self) -> IntegrationParameters:
        return copy.deepcopy(self)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> IntegrationParameters:
        return IntegrationParameters(
            force_threshold=data.get("force_threshold", config.DEFAULT_FORCE_THRESHOLD),
            use_fixed_update_rate=data.get("use_fixed_update_rate", config.DEFAULT_USE_FIXED_UPDATE_RATE),
            fixed_time_step=data.get("fixed_time_step", config.DEFAULT_FIXED_TIME_STEP),
            always_use_analytical_solution=data.get("always_use_analytical_solution", False),
        )


@dataclass
class ClampingParameters:
    """Bounds and clamp behaviour of a spring axis."""
    clamp_target: bool = True
    clamp_current_value: bool = True
    stop_on_clamp: bool = False
    min_value: float = config.DEFAULT_MIN_VALUE
    max_value: float = config.DEFAULT_MAX_VALUE

    def clone(self) -> ClampingParameters:
        return copy.deepcopy(self)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> ClampingParameters:
        return ClampingParameters(
            clamp_target=data.get("clamp_target", True),
            clamp_current_value=data.get("clamp_current_value", True),
            stop_on_clamp=data.get("stop_on_clamp", False),
            min_value=data.get("min_value", config.DEFAULT_MIN_VALUE),
            max_value=data.get("max_value", config.DEFAULT_MAX_VALUE),
        )


@dataclass
class PhysicsParameters:
    """
    Everything an integrator needs for one step: stiffness, damping and the
    embedded integration / clamping bundles.

    `force` and `drag` are shared defaults; a composite spring may override
    them per axis when it builds the snapshot.
    """
    force: float = config.DEFAULT_FORCE
    drag: float = config.DEFAULT_DRAG
    integration: IntegrationParameters = field(default_factory=IntegrationParameters)
    clamping: ClampingParameters = field(default_factory=ClampingParameters)

    def clone(self) -> PhysicsParameters:
        return copy.deepcopy(self)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "force": self.force,
            "drag": self.drag,
            "integration": self.integration.to_dict(),
            "clamping": self.clamping.to_dict(),
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> PhysicsParameters:
        return PhysicsParameters(
            force=data.get("force", config.DEFAULT_FORCE),
            drag=data.get("drag", config.DEFAULT_DRAG),
            integration=IntegrationParameters.from_dict(data.get("integration", {})),
            clamping=ClampingParameters.from_dict(data.get("clamping", {})),
        )
