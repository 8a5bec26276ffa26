"""
Actuator Domain Models

Action log replay, actuator state and sensor binding for the digital twin.
"""

from .action_log import ActionLogEntry, ParsedAction, parse_action_uri, resolve_actuator_states
from .actuator_state import ActuatorState, initial_states
from .sensor_binding import (
    ActuatorReading,
    DeviceSensor,
    LatestReading,
    bind_sensors,
    calculate_sensor_status,
    extract_sensor_value,
    find_matching_sensor,
)

__all__ = [
    # Action log
    "ActionLogEntry",
    "ParsedAction",
    "parse_action_uri",
    "resolve_actuator_states",
    # State
    "ActuatorState",
    "initial_states",
    # Sensor binding
    "ActuatorReading",
    "DeviceSensor",
    "LatestReading",
    "bind_sensors",
    "calculate_sensor_status",
    "extract_sensor_value",
    "find_matching_sensor",
]
