"""
Device-related Enumerations
============================
"""

from enum import Enum


class ActuatorType(str, Enum):
    """Controllable greenhouse device classes tracked by the digital twin."""

    FAN = "fan"
    ROOF = "roof"
    LIGHT = "light"
    HUMIDIFIER = "humidifier"

    def __str__(self) -> str:
        return self.value


class ActionStatus(str, Enum):
    """Delivery status of an actuator command in the action log."""

    SENT = "sent"
    ACK = "ack"
    FAILED = "failed"

    def __str__(self) -> str:
        return self.value
