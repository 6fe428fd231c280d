"""
Pytest configuration and shared fixtures for the spring physics tests.
"""

from __future__ import annotations

import logging

import pytest

from springphysics.model.parameters import PhysicsParameters, IntegrationParameters, ClampingParameters
from springphysics.model.spring_value import SpringValue
from springphysics.physics.selector import ModelRegistry


# =============================================================================
# State Fixtures
# =============================================================================


@pytest.fixture
def axis() -> SpringValue:
    """Axis at rest at 0, pulled toward 1."""
    return SpringValue(current_value=0.0, candidate_value=0.0, velocity=0.0, target=1.0)


@pytest.fixture
def moving_axis() -> SpringValue:
    """Axis away from its target with some velocity."""
    return SpringValue(current_value=3.0, candidate_value=3.0, velocity=2.0, target=1.0)


# =============================================================================
# Parameter Fixtures
# =============================================================================


@pytest.fixture
def parameters() -> PhysicsParameters:
    """Default spring parameters (force 150, drag 10)."""
    return PhysicsParameters(force=150.0, drag=10.0)


@pytest.fixture
def valid_bundle() -> PhysicsParameters:
    return PhysicsParameters(
        force=10.0,
        drag=5.0,
        integration=IntegrationParameters(force_threshold=100.0, fixed_time_step=0.02),
        clamping=ClampingParameters(min_value=0.0, max_value=10.0),
    )


@pytest.fixture
def registry() -> ModelRegistry:
    return ModelRegistry.with_defaults()


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture
def clean_package_logger():
    """Restore the package logger after tests that configure it."""
    logger = logging.getLogger("springphysics")
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers = handlers
    logger.setLevel(level)
