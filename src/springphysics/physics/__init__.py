"""
Spring Physics Core
===================
Integrators, model selection, validation and clamping for a single axis.

Note: This package should be pure Python and must not depend on the
composite spring layer.
"""
from .exceptions import PhysicsException
from .integrators import (
    PhysicsModel,
    ModelKind,
    SemiImplicitModel,
    AnalyticalModel,
    AnalyticalSolution,
    analytical_factors,
)
from .selector import ModelRegistry, select_model
from .validator import validate, validate_parameters, validate_spring_value, is_valid, require_valid
from .clamping import clamp_target, clamp_current_value
from .stepping import update, commit, reach_equilibrium

__all__ = [
    "PhysicsException",
    "PhysicsModel",
    "ModelKind",
    "SemiImplicitModel",
    "AnalyticalModel",
    "AnalyticalSolution",
    "analytical_factors",
    "ModelRegistry",
    "select_model",
    "validate",
    "validate_parameters",
    "validate_spring_value",
    "is_valid",
    "require_valid",
    "clamp_target",
    "clamp_current_value",
    "update",
    "commit",
    "reach_equilibrium",
]
