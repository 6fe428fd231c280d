from __future__ import annotations

import logging
from typing import List, Optional, Iterable, TYPE_CHECKING

from springphysics.physics.integrators import (
    PhysicsModel,
    ModelKind,
    SemiImplicitModel,
    AnalyticalModel,
)

if TYPE_CHECKING:
    from springphysics.model.parameters import PhysicsParameters

logger = logging.getLogger(__name__)


class ModelRegistry:
    """
    Caller-owned collection of integrator instances used by the selector.

    Registration is additive and idempotent: registering the same instance
    twice keeps a single entry. Earlier registrations win when several
    models share a kind.
    """

    def __init__(self, models: Optional[Iterable[PhysicsModel]] = None) -> None:
        self._models: List[PhysicsModel] = []
        for model in models or ():
            self.register(model)

    @classmethod
    def with_defaults(cls) -> ModelRegistry:
        return cls([SemiImplicitModel(), AnalyticalModel()])

    def register(self, model: PhysicsModel) -> PhysicsModel:
        if any(existing is model for existing in self._models):
            return model
        self._models.append(model)
        logger.debug(f"Registered physics model '{model.name()}' ({model.KIND}).")
        return model

    def get_all_models(self) -> List[PhysicsModel]:
        return list(self._models)

    def find(self, kind: ModelKind) -> Optional[PhysicsModel]:
        for model in self._models:
            if model.KIND == kind:
                return model
        return None

    def select(self, parameters: PhysicsParameters) -> PhysicsModel:
        """
        Pick the integrator for one update call.

        Analytical when it is forced or when the force exceeds the threshold,
        semi-implicit otherwise. The decision is re-made on every call since
        the force may change at runtime.
        """
        integration = parameters.integration
        if integration.always_use_analytical_solution or parameters.force > integration.force_threshold:
            wanted = ModelKind.ANALYTICAL
        else:
            wanted = ModelKind.SEMI_IMPLICIT

        model = self.find(wanted)
        if model is not None:
            return model

        # Registry lacks the wanted kind: fall back to anything registered
        if self._models:
            return self._models[0]
        return AnalyticalModel() if wanted == ModelKind.ANALYTICAL else SemiImplicitModel()

    def __len__(self) -> int:
        return len(self._models)

    def __contains__(self, model: object) -> bool:
        return any(existing is model for existing in self._models)


def select_model(parameters: PhysicsParameters, registry: Optional[ModelRegistry] = None) -> PhysicsModel:
    """Select the integrator for `parameters`; uses a fresh default registry when none is given."""
    if registry is None:
        registry = ModelRegistry.with_defaults()
    return registry.select(parameters)
