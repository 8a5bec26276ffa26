"""
Digital Twin Service
====================
Keeps the last known on/off state of the greenhouse actuators (fan, roof,
light, humidifier) by replaying the device action log, and the latest
reading of the sensor that drives each actuator.

The surrounding application polls the backend every
``AdvisorConfig.twin_refresh_seconds`` and feeds each batch to
:meth:`DigitalTwin.apply_action_logs`. Calls are expected to be serialised by
the caller; the service holds no locks.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Iterable, Mapping

from smartfarm.config import AdvisorConfig
from smartfarm.domain.actuators import (
    ActionLogEntry,
    ActuatorReading,
    ActuatorState,
    DeviceSensor,
    LatestReading,
    bind_sensors,
    calculate_sensor_status,
    extract_sensor_value,
    initial_states,
    resolve_actuator_states,
)
from smartfarm.enums import ActuatorType
from smartfarm.utils.time import utc_now

logger = logging.getLogger(__name__)


class DigitalTwin:
    """Actuator state mirror for one farm."""

    def __init__(self, config: AdvisorConfig | None = None, *, clock: Callable[[], datetime] = utc_now):
        self.config = config or AdvisorConfig()
        self.clock = clock
        self._states: dict[ActuatorType, ActuatorState] = initial_states()
        self._readings: dict[ActuatorType, ActuatorReading] = {}
        self.last_refresh: datetime | None = None

    # ------------------------------------------------------------------
    # Actuator state
    # ------------------------------------------------------------------

    @property
    def states(self) -> dict[ActuatorType, ActuatorState]:
        return dict(self._states)

    def get_state(self, actuator_type: ActuatorType) -> ActuatorState:
        return self._states[actuator_type]

    def is_on(self, actuator_type: ActuatorType) -> bool:
        return self._states[actuator_type].is_on

    def apply_action_logs(self, entries: Iterable[ActionLogEntry]) -> list[ActuatorType]:
        """
        Update actuator states from a batch of action log entries.

        Only the newest ``twin_max_action_logs`` entries are considered. A
        state is replaced only when the resolved on/off value differs from
        the held one.

        Returns:
            Actuator types whose state changed
        """
        entries = list(entries)
        self.last_refresh = self.clock()
        if not entries:
            return []

        limit = self.config.twin_max_action_logs
        if len(entries) > limit:
            entries = sorted(entries, key=lambda e: e.created_at)[-limit:]
            logger.debug("Action log batch capped to the newest %d entries", limit)

        changed = []
        for actuator_type, latest in resolve_actuator_states(entries).items():
            current = self._states.get(actuator_type)
            if current is not None and current.is_on == latest.is_on:
                continue
            self._states[actuator_type] = latest
            changed.append(actuator_type)
            logger.info("Actuator %s is now %s", actuator_type, "ON" if latest.is_on else "OFF")

        return changed

    # ------------------------------------------------------------------
    # Sensor readings
    # ------------------------------------------------------------------

    @property
    def readings(self) -> dict[ActuatorType, ActuatorReading]:
        return dict(self._readings)

    def bind_sensors(self, sensors: Iterable[DeviceSensor]) -> dict[ActuatorType, DeviceSensor]:
        """Pick the sensor driving each actuator (see ``sensor_binding``)."""
        bound = bind_sensors(sensors)
        logger.debug("Bound sensors: %s", {str(k): v.sensor_id for k, v in bound.items()})
        return bound

    def update_readings(
        self,
        bound: Mapping[ActuatorType, DeviceSensor],
        latest: Mapping[str, LatestReading | None],
    ) -> dict[ActuatorType, ActuatorReading]:
        """
        Refresh actuator readings from the latest raw readings keyed by sensor id.

        Actuators whose sensor has no reading keep their previous value.
        """
        for actuator_type, sensor in bound.items():
            reading = latest.get(sensor.sensor_id)
            if reading is None:
                continue
            value = extract_sensor_value(reading, sensor)
            self._readings[actuator_type] = ActuatorReading(
                actuator_type=actuator_type,
                sensor=sensor,
                value=value,
                status=calculate_sensor_status(value, sensor),
            )
        return self.readings
