"""
Spring Presets
==============
Named force/drag combinations for common motion styles (bouncy, smooth,
critically damped, ...).
"""
from __future__ import annotations

from dataclasses import dataclass, asdict
from enum import StrEnum
from typing import List, Dict, Any, Optional, TYPE_CHECKING
import logging

from springphysics.model.parameters import PhysicsParameters, IntegrationParameters

if TYPE_CHECKING:
    from springphysics.springs.spring import Spring

logger = logging.getLogger(__name__)


class StandardPreset(StrEnum):
    BOUNCY = "Bouncy"
    SMOOTH = "Smooth"
    ELASTIC = "Elastic"
    TIGHT = "Tight"
    LOOSE = "Loose"
    CRITICAL = "Critical"
    SNAPPY = "Snappy"
    SLOW = "Slow"


@dataclass(frozen=True)
class SpringPreset:
    name: str
    description: str
    force: float
    drag: float
    use_analytical_solution: bool = False

    def to_physics_parameters(self) -> PhysicsParameters:
        return PhysicsParameters(
            force=self.force,
            drag=self.drag,
            integration=IntegrationParameters(always_use_analytical_solution=self.use_analytical_solution),
        )

    def apply_to(self, spring: Spring) -> None:
        """Switch a composite spring to the common force/drag of this preset."""
        spring.set_common_force_and_drag(True)
        spring.set_common_force_and_drag_values(self.force, self.drag)
        spring.always_use_analytical_solution = self.use_analytical_solution

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> SpringPreset:
        try:
            return SpringPreset(
                name=data["name"],
                description=data.get("description", ""),
                force=float(data["force"]),
                drag=float(data["drag"]),
                use_analytical_solution=bool(data.get("use_analytical_solution", False)),
            )
        except KeyError as e:
            raise ValueError(f"Preset definition is missing required key {e}") from e


STANDARD_PRESETS: Dict[StandardPreset, SpringPreset] = {
    StandardPreset.BOUNCY: SpringPreset(StandardPreset.BOUNCY, "High force, low drag for a bouncy effect", 40.0, 4.0),
    StandardPreset.SMOOTH: SpringPreset(StandardPreset.SMOOTH, "Balanced force and drag for smooth motion", 20.0, 10.0),
    StandardPreset.ELASTIC: SpringPreset(StandardPreset.ELASTIC, "Medium force, low drag for elastic motion", 30.0, 3.0),
    StandardPreset.TIGHT: SpringPreset(StandardPreset.TIGHT, "High force, high drag for quick, controlled motion", 50.0, 20.0),
    StandardPreset.LOOSE: SpringPreset(StandardPreset.LOOSE, "Low force, low drag for slow, loose motion", 10.0, 2.0),
    StandardPreset.CRITICAL: SpringPreset(StandardPreset.CRITICAL, "Critically damped for no overshoot", 20.0, 9.0, True),
    StandardPreset.SNAPPY: SpringPreset(StandardPreset.SNAPPY, "Very high force, medium drag for snappy motion", 80.0, 12.0),
    StandardPreset.SLOW: SpringPreset(StandardPreset.SLOW, "Low force, high drag for slow, controlled motion", 5.0, 10.0),
}


class PresetLibrary:
    def __init__(self):
        self.presets: Dict[str, SpringPreset] = {}
        self._init_defaults()

    def _init_defaults(self):
        for key, preset in STANDARD_PRESETS.items():
            self.presets[str(key)] = preset

    def add(self, preset: SpringPreset):
        if preset.name in self.presets:
            logger.info(f"Replacing preset '{preset.name}'")
        self.presets[preset.name] = preset

    def get_names(self) -> List[str]:
        return list(self.presets.keys())

    def get_preset(self, name: str) -> Optional[SpringPreset]:
        return self.presets.get(name)

    def apply(self, name: str, spring: Spring) -> SpringPreset:
        preset = self.get_preset(name)
        if preset is None:
            raise ValueError(f"Unknown preset '{name}'. Available: {', '.join(self.get_names())}")
        preset.apply_to(spring)
        return preset
