"""
Configuration & Global Constants
================================
This module serves as the central registry for the default values and the
numerical thresholds shared by the spring core.

Why is this file needed?
------------------------
1. Single source: defaults for force, drag and the integration policy are
   referenced by the data model, the composite springs and the presets.
2. Tuning: the epsilons and predicate thresholds live in one place instead of
   being scattered as magic numbers through the integrators.

Exports:
    DEFAULT_FORCE, DEFAULT_DRAG (float): Default stiffness / damping.
    DEFAULT_FORCE_THRESHOLD (float): Force above which the analytical model runs.
    DEFAULT_FIXED_TIME_STEP (float): Fixed step (s) used when a fixed rate is requested.
    ANALYTICAL_EPSILON (float): Tolerance for the damping-ratio classification.
    VELOCITY_THRESHOLD, TARGET_DISTANCE_THRESHOLD, CHANGE_THRESHOLD (float):
        Thresholds of the "close to stopping", "on target" and "changed" predicates.
"""

# Spring physics defaults
DEFAULT_FORCE: float = 150.0
DEFAULT_DRAG: float = 10.0

# Integration policy
DEFAULT_FORCE_THRESHOLD: float = 7500.0
DEFAULT_USE_FIXED_UPDATE_RATE: bool = True
DEFAULT_FIXED_TIME_STEP: float = 0.02  # s

# Clamping bounds
DEFAULT_MIN_VALUE: float = 0.0
DEFAULT_MAX_VALUE: float = 100.0

# Numerical tolerances
ANALYTICAL_EPSILON: float = 1e-4
MIN_EFFECTIVE_FORCE: float = 1e-4  # composite springs never run with force 0

# Equilibrium-adjacent predicates
VELOCITY_THRESHOLD: float = 0.01
TARGET_DISTANCE_THRESHOLD: float = 0.005
CHANGE_THRESHOLD: float = 0.01
