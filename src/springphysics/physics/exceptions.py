from __future__ import annotations

from typing import Optional


class PhysicsException(Exception):
    """
    Error raised for physics-layer failures, e.g. when a caller refuses to
    run with invalid parameters.

    The integrators never raise it; they recover by snapping the axis to
    equilibrium instead.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message} (caused by {type(self.cause).__name__}: {self.cause})"
        return self.message
