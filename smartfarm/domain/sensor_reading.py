"""
Sensor Reading Value Object
============================
Immutable value object representing the latest reading of one farm sensor.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class SensorReading:
    """
    Immutable sensor reading value object.

    ``sensor_type`` is free text as reported by the backend (``"soilMoisture"``,
    ``"temperature"``, ``"air_humidity"`` ...); it is routed to a metric family
    by substring match, not by enum.
    """

    sensor_id: str
    sensor_type: str
    value: float
    unit: str = ""
    timestamp: datetime | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary"""
        return {
            "sensor_id": self.sensor_id,
            "type": self.sensor_type,
            "value": self.value,
            "unit": self.unit,
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
        }
