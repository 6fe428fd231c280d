from __future__ import annotations

import logging
from typing import Callable, List, TYPE_CHECKING

if TYPE_CHECKING:
    from springphysics.springs.spring import Spring

logger = logging.getLogger(__name__)

Callback = Callable[[], None]


class SpringEvents:
    """
    Edge-triggered notifications for a composite spring.

    - on_target_reached: once per arrival (spring at rest on its target),
      re-armed when the spring leaves the target.
    - on_clamping_applied: once per clamp episode, re-armed when no axis is
      clamped any more.
    - on_current_value_changed: every step where an axis moved by at least
      the change threshold.
    """

    def __init__(self, spring: Spring) -> None:
        self.spring = spring
        self.on_current_value_changed: List[Callback] = []
        self.on_target_reached: List[Callback] = []
        self.on_clamping_applied: List[Callback] = []

        self._target_reached_armed = False
        self._clamping_armed = False

    def reset(self) -> None:
        self._target_reached_armed = False
        self._clamping_armed = False

    def check(self) -> None:
        is_on_target = self.spring.is_on_target()
        is_clamped = self.spring.is_clamped()

        if self._target_reached_armed and is_on_target and self.spring.is_close_to_stopping():
            self._fire(self.on_target_reached)
            self._target_reached_armed = False

        if self.spring.last_step_changed:
            self._fire(self.on_current_value_changed)

        if self._clamping_armed and is_clamped:
            self._fire(self.on_clamping_applied)
            self._clamping_armed = False

        if not is_clamped:
            self._clamping_armed = True
        if not is_on_target:
            self._target_reached_armed = True

    @staticmethod
    def _fire(callbacks: List[Callback]) -> None:
        for callback in list(callbacks):
            callback()
