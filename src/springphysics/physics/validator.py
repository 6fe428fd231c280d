"""
Parameter & State Validation
============================
Pure checks that report physically invalid configurations as human-readable
diagnostics. Nothing here raises except `require_valid`, which callers use
when they prefer to refuse invalid input outright.
"""
from __future__ import annotations

from typing import List, Union

from springphysics.model.parameters import PhysicsParameters
from springphysics.model.spring_value import SpringValue
from springphysics.physics.exceptions import PhysicsException


def validate_parameters(parameters: PhysicsParameters) -> List[str]:
    errors: List[str] = []

    if parameters.force < 0.0:
        errors.append(f"Force must be non-negative. Current value: {parameters.force}")
    if parameters.drag < 0.0:
        errors.append(f"Drag must be non-negative. Current value: {parameters.drag}")

    integration = parameters.integration
    if integration.force_threshold < 0.0:
        errors.append(f"Force threshold must be non-negative. Current value: {integration.force_threshold}")
    if integration.fixed_time_step <= 0.0:
        errors.append(f"Fixed time step must be positive. Current value: {integration.fixed_time_step}")

    clamping = parameters.clamping
    if clamping.min_value > clamping.max_value:
        errors.append(
            "Min value must be less than or equal to max value. "
            f"Current values: Min={clamping.min_value}, Max={clamping.max_value}"
        )

    return errors


def validate_spring_value(state: SpringValue) -> List[str]:
    errors: List[str] = []

    if state.force < 0.0:
        errors.append(f"Force must be non-negative. Current value: {state.force}")
    if state.drag < 0.0:
        errors.append(f"Drag must be non-negative. Current value: {state.drag}")
    if state.min_value > state.max_value:
        errors.append(
            "Min value must be less than or equal to max value. "
            f"Current values: Min={state.min_value}, Max={state.max_value}"
        )

    return errors


def validate(target: Union[PhysicsParameters, SpringValue]) -> List[str]:
    """Dispatch to the parameter-bundle or live-state checks."""
    if isinstance(target, PhysicsParameters):
        return validate_parameters(target)
    if isinstance(target, SpringValue):
        return validate_spring_value(target)
    raise TypeError(f"Cannot validate object of type {type(target).__name__}")


def is_valid(target: Union[PhysicsParameters, SpringValue]) -> bool:
    return not validate(target)


def require_valid(target: Union[PhysicsParameters, SpringValue]) -> None:
    """
    Raise `PhysicsException` listing every diagnostic if `target` is invalid.
    """
    errors = validate(target)
    if errors:
        raise PhysicsException(f"Invalid {type(target).__name__}: " + "; ".join(errors))
