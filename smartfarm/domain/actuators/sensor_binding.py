"""
Actuator Sensor Binding
=======================
Pairs each actuator with the device sensor that drives it and evaluates that
sensor's latest value against the sensor's own limits.

A sensor drives an actuator when its type matches one of the actuator's
sensor keywords and one of its low/high trigger commands mentions the
actuator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

from smartfarm.enums import ActuatorType, SensorStatus


@dataclass(frozen=True)
class BindingRule:
    sensor_types: tuple[str, ...]
    action_keywords: tuple[str, ...]


ACTUATOR_SENSOR_RULES: dict[ActuatorType, BindingRule] = {
    ActuatorType.FAN: BindingRule(("temperature", "temp"), ("fan", "ventilator")),
    ActuatorType.ROOF: BindingRule(("temperature", "temp", "humidity", "humid"), ("roof", "open_roof", "close_roof")),
    ActuatorType.LIGHT: BindingRule(("light", "luminosity", "lux"), ("light", "lights")),
    ActuatorType.HUMIDIFIER: BindingRule(("humidity", "humid", "moisture"), ("humidifier",)),
}


@dataclass(frozen=True)
class DeviceSensor:
    """A sensor registered on a farm device, with its alert limits."""

    sensor_id: str
    sensor_type: str
    unit: str = ""
    action_low: str | None = None
    action_high: str | None = None
    min_critical: float | None = None
    max_critical: float | None = None
    min_warning: float | None = None
    max_warning: float | None = None


@dataclass(frozen=True)
class LatestReading:
    """Raw latest reading; dual-channel sensors report ``value1``/``value2``."""

    value1: float | None = None
    value2: float | None = None
    value: float | None = None


@dataclass(frozen=True)
class ActuatorReading:
    actuator_type: ActuatorType
    sensor: DeviceSensor
    value: float | None
    status: SensorStatus

    def to_dict(self) -> dict[str, Any]:
        return {
            "actuator_type": self.actuator_type.value,
            "sensor_id": self.sensor.sensor_id,
            "sensor_type": self.sensor.sensor_type,
            "value": self.value,
            "unit": self.sensor.unit,
            "status": self.status.value,
        }


def find_matching_sensor(sensors: Iterable[DeviceSensor], actuator_type: ActuatorType) -> DeviceSensor | None:
    """First sensor bound to ``actuator_type``, or None."""
    rule = ACTUATOR_SENSOR_RULES[actuator_type]
    for sensor in sensors:
        sensor_type = sensor.sensor_type.lower()
        if not any(t in sensor_type for t in rule.sensor_types):
            continue
        actions = ((sensor.action_low or "").lower(), (sensor.action_high or "").lower())
        if any(keyword in action for keyword in rule.action_keywords for action in actions):
            return sensor
    return None


def bind_sensors(sensors: Iterable[DeviceSensor]) -> dict[ActuatorType, DeviceSensor]:
    sensors = list(sensors)
    bound = {}
    for actuator_type in ActuatorType:
        sensor = find_matching_sensor(sensors, actuator_type)
        if sensor is not None:
            bound[actuator_type] = sensor
    return bound


def extract_sensor_value(reading: LatestReading, sensor: DeviceSensor) -> float | None:
    """
    Pick the channel relevant to ``sensor``.

    Temperature and light sensors report on ``value1``, humidity on
    ``value2``; the single-channel ``value`` is the last resort.
    """
    sensor_type = sensor.sensor_type.lower()
    unit = sensor.unit.lower()

    if "temp" in sensor_type or "c" in unit or "°" in unit:
        order = (reading.value1, reading.value2)
    elif "humid" in sensor_type or "%" in unit:
        order = (reading.value2, reading.value1)
    else:
        order = (reading.value1, reading.value2)

    for candidate in (*order, reading.value):
        if candidate is not None:
            return candidate
    return None


def calculate_sensor_status(value: float | None, sensor: DeviceSensor) -> SensorStatus:
    """Compare ``value`` with the sensor limits; critical limits are checked first."""
    if value is None:
        return SensorStatus.NORMAL
    if sensor.min_critical is not None and value < sensor.min_critical:
        return SensorStatus.CRITICAL_LOW
    if sensor.max_critical is not None and value > sensor.max_critical:
        return SensorStatus.CRITICAL_HIGH
    if sensor.min_warning is not None and value < sensor.min_warning:
        return SensorStatus.WARNING_LOW
    if sensor.max_warning is not None and value > sensor.max_warning:
        return SensorStatus.WARNING_HIGH
    return SensorStatus.NORMAL
