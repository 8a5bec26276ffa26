"""
Actuator State Value Object
===========================
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from smartfarm.enums import ActuatorType


@dataclass(frozen=True)
class ActuatorState:
    """
    Last known on/off state of an actuator.

    For the roof, ``is_on`` means open. ``last_update`` is None until an
    action log entry for the actuator has been seen.
    """

    actuator_type: ActuatorType
    is_on: bool = False
    last_update: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.actuator_type.value,
            "is_on": self.is_on,
            "last_update": self.last_update.isoformat() if self.last_update else None,
        }


def initial_states() -> dict[ActuatorType, ActuatorState]:
    """All known actuators, off and never updated."""
    return {actuator_type: ActuatorState(actuator_type) for actuator_type in ActuatorType}
