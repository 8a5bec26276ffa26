"""
Digital Twin Schemas
====================

Pydantic models for action log entries, device sensors and actuator state
exchanged with the backend API.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from smartfarm.domain.actuators import ActionLogEntry, ActuatorReading, ActuatorState, DeviceSensor, LatestReading
from smartfarm.utils.time import coerce_datetime


class ActionLogPayload(BaseModel):
    """One entry of the device action log"""

    model_config = ConfigDict(populate_by_name=True)

    action_uri: str = Field(..., validation_alias=AliasChoices("action_uri", "actionUri", "action"))
    created_at: datetime = Field(..., validation_alias=AliasChoices("created_at", "createdAt", "timestamp"))
    status: str = Field(default="")

    @field_validator("created_at", mode="before")
    def _coerce_created_at(cls, v: Any):
        parsed = coerce_datetime(v)
        if parsed is None:
            raise ValueError(f"Invalid timestamp '{v}'")
        return parsed

    @field_validator("status", mode="before")
    def _coerce_status(cls, v):
        return "" if v is None else str(v)

    def to_domain(self) -> ActionLogEntry:
        return ActionLogEntry(action_uri=self.action_uri, created_at=self.created_at, status=self.status)


class DeviceSensorPayload(BaseModel):
    """Sensor registered on a device, with its alert limits"""

    model_config = ConfigDict(populate_by_name=True)

    sensor_id: str = Field(..., validation_alias=AliasChoices("sensor_id", "sensorId", "id"))
    type: str
    unit: str = Field(default="")
    action_low: Optional[str] = None
    action_high: Optional[str] = None
    min_critical: Optional[float] = None
    max_critical: Optional[float] = None
    min_warning: Optional[float] = None
    max_warning: Optional[float] = None

    @field_validator("sensor_id", mode="before")
    def _coerce_sensor_id(cls, v):
        return str(v) if v is not None else v

    def to_domain(self) -> DeviceSensor:
        return DeviceSensor(
            sensor_id=self.sensor_id,
            sensor_type=self.type,
            unit=self.unit,
            action_low=self.action_low,
            action_high=self.action_high,
            min_critical=self.min_critical,
            max_critical=self.max_critical,
            min_warning=self.min_warning,
            max_warning=self.max_warning,
        )


class LatestReadingPayload(BaseModel):
    """Raw latest reading; dual-channel sensors fill value1/value2"""

    value1: Optional[float] = None
    value2: Optional[float] = None
    value: Optional[float] = None

    def to_domain(self) -> LatestReading:
        return LatestReading(value1=self.value1, value2=self.value2, value=self.value)


class ActuatorStateResponse(BaseModel):
    type: str
    is_on: bool
    last_update: Optional[datetime] = None

    @classmethod
    def from_domain(cls, state: ActuatorState) -> "ActuatorStateResponse":
        return cls.model_validate(state.to_dict())


class ActuatorReadingResponse(BaseModel):
    actuator_type: str
    sensor_id: str
    sensor_type: str
    value: Optional[float] = None
    unit: str = ""
    status: str

    @classmethod
    def from_domain(cls, reading: ActuatorReading) -> "ActuatorReadingResponse":
        return cls.model_validate(reading.to_dict())
