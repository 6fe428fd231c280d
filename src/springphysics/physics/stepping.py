"""
Per-Axis Update Contract
========================
The entry points a composite spring calls once per axis per tick:

    update(dt, state, parameters)   -> selects a model and integrates (candidate only)
    commit(state)                   -> candidate -> current, gated by update_enabled
    clamp_current_value(state)      -> post-commit clamping pass
    reach_equilibrium(state)        -> snap to rest

Axes never observe each other, so several axes may be integrated before any
of them is committed.
"""
from __future__ import annotations

import logging
from typing import Optional, TYPE_CHECKING

from springphysics.physics.clamping import clamp_target
from springphysics.physics.selector import ModelRegistry, select_model

if TYPE_CHECKING:
    from springphysics.model.parameters import PhysicsParameters
    from springphysics.model.spring_value import SpringValue
    from springphysics.physics.integrators import PhysicsModel

logger = logging.getLogger(__name__)


def update(
    delta_time: float,
    state: SpringValue,
    parameters: PhysicsParameters,
    registry: Optional[ModelRegistry] = None,
) -> PhysicsModel:
    """
    Integrate one axis by one step with the model suited to `parameters`.

    The target is clamped first when the axis asks for it. `current_value`
    is not modified, see `commit`.

    Returns:
        The model that ran.
    """
    clamp_target(state)
    model = select_model(parameters, registry)
    model.update(delta_time, state, parameters)
    return model


def commit(state: SpringValue) -> bool:
    return state.apply_candidate_value()


def reach_equilibrium(state: SpringValue) -> None:
    state.reach_equilibrium()
