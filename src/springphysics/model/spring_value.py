"""
Spring Axis State (Data Model)
==============================
This module defines the per-axis mutable record driven by the integrators.

Why is this file needed?
------------------------
1. State: every scalar degree of freedom of a spring (a float, one component
   of a vector or color) owns exactly one `SpringValue`.
2. Two-phase update: integrators only write `candidate_value`; the owner
   commits it to `current_value` once all axes are integrated.
3. Persistence: `to_dict` / `from_dict` keep the field names stable so an
   external serialization layer can round-trip the record.

Classes:
    SpringValue: The per-axis state container.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict, fields
import logging
from typing import Dict, Any

from springphysics import config

logger = logging.getLogger(__name__)


@dataclass
class SpringValue:
    """
    One independently integrated scalar axis.

    Updates are always in place; the owning spring never reallocates its
    axes mid-life.
    """
    initial_value: float = 0.0
    current_value: float = 0.0
    candidate_value: float = 0.0
    velocity: float = 0.0
    target: float = 0.0

    force: float = config.DEFAULT_FORCE
    drag: float = config.DEFAULT_DRAG

    min_value: float = config.DEFAULT_MIN_VALUE
    max_value: float = config.DEFAULT_MAX_VALUE

    clamp_target: bool = False
    clamp_current_value: bool = False
    stop_on_current_value_clamp: bool = False

    # Off = axis frozen: commits of the candidate value are rejected
    update_enabled: bool = True

    # Scratch slot for composite operations (nudges), never touched by integrators
    operation_value: float = 0.0

    def initialize(self) -> None:
        """Reset the axis to its authoring-time value, at rest."""
        self.current_value = self.initial_value
        self.candidate_value = self.initial_value
        self.velocity = 0.0

    def reach_equilibrium(self) -> None:
        """Snap to rest on the target. Also the recovery path for numerical blow-up."""
        self.velocity = 0.0
        self.current_value = self.target
        self.candidate_value = self.target

    def apply_candidate_value(self) -> bool:
        """Commit the candidate into the current value if the axis accepts updates."""
        if not self.update_enabled:
            return False
        self.current_value = self.candidate_value
        return True

    def add_velocity(self, velocity: float) -> None:
        self.velocity += velocity

    def stop(self) -> None:
        self.velocity = 0.0
        self.candidate_value = self.current_value

    def distance_to_target(self) -> float:
        return self.target - self.current_value

    def confine_target(self) -> None:
        """Clamp the target into [min_value, max_value]."""
        self.target = min(max(self.target, self.min_value), self.max_value)

    def confine_current_value(self) -> bool:
        """
        Clamp the current value into [min_value, max_value].

        Returns:
            True if the current value was actually changed.
        """
        clamped = min(max(self.current_value, self.min_value), self.max_value)
        if clamped == self.current_value:
            return False
        self.current_value = clamped
        self.candidate_value = clamped
        return True

    def is_overshot(self) -> bool:
        return self.current_value < self.min_value or self.current_value > self.max_value

    def is_clamped(self) -> bool:
        """True if current-value clamping is active and the value sits on a bound."""
        if not self.clamp_current_value:
            return False
        return self.current_value <= self.min_value or self.current_value >= self.max_value

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> SpringValue:
        known = {f.name for f in fields(SpringValue)}
        unknown = set(data) - known
        if unknown:
            logger.debug(f"Ignoring unknown SpringValue fields: {sorted(unknown)}")
        return SpringValue(**{k: v for k, v in data.items() if k in known})
