from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from springphysics.model.spring_value import SpringValue


def clamp_target(state: SpringValue) -> bool:
    """Confine the target to the axis bounds if target clamping is on. Runs before integration."""
    if not state.clamp_target:
        return False
    before = state.target
    state.confine_target()
    return state.target != before


def clamp_current_value(state: SpringValue) -> bool:
    """
    Clamping pass run after the candidate commit.

    Confines the current value when current-value clamping is on, and stops
    the axis if a clamp actually moved the value and stop-on-clamp is set.

    Returns:
        True if the current value was changed.
    """
    if not state.clamp_current_value or not state.is_overshot():
        return False

    changed = state.confine_current_value()
    if changed and state.stop_on_current_value_clamp:
        state.stop()
    return changed
