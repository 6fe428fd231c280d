"""
springphysics: per-axis damped spring simulation.

Animates scalars and multi-component values toward a moving target with a
semi-implicit Euler integrator or the closed-form oscillator solution.
"""

__version__ = "0.1.0"

from .model import SpringValue, PhysicsParameters, IntegrationParameters, ClampingParameters
from .physics import (
    PhysicsException,
    SemiImplicitModel,
    AnalyticalModel,
    ModelRegistry,
    select_model,
    validate,
    is_valid,
)
from .springs import SpringFloat, SpringVector2, SpringVector3, SpringVector4, SpringColor

__all__ = [
    "SpringValue",
    "PhysicsParameters",
    "IntegrationParameters",
    "ClampingParameters",
    "PhysicsException",
    "SemiImplicitModel",
    "AnalyticalModel",
    "ModelRegistry",
    "select_model",
    "validate",
    "is_valid",
    "SpringFloat",
    "SpringVector2",
    "SpringVector3",
    "SpringVector4",
    "SpringColor",
]
