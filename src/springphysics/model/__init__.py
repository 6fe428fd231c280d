"""
The MODEL layer contains pure data structures: the per-axis spring state,
the physics parameter bundles and the preset library.
It has no knowledge of the integrators.
"""
from .spring_value import SpringValue
from .parameters import PhysicsParameters, IntegrationParameters, ClampingParameters
from .presets import SpringPreset, PresetLibrary, StandardPreset, STANDARD_PRESETS

__all__ = [
    "SpringValue",
    "PhysicsParameters",
    "IntegrationParameters",
    "ClampingParameters",
    "SpringPreset",
    "PresetLibrary",
    "StandardPreset",
    "STANDARD_PRESETS",
]
