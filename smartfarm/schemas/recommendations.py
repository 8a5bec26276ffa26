"""
Recommendation Schemas
======================

Pydantic models validating the payloads the backend API sends to the
recommendation engine, and the serialised recommendation returned to the UI.
"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from smartfarm.domain import CropContext, Recommendation, SensorReading, WeatherSnapshot
from smartfarm.services.recommendation_store import RecommendationSet
from smartfarm.utils.time import coerce_datetime


def _coerce_optional_datetime(value: Any) -> Optional[datetime]:
    if value is None or value == "":
        return None
    parsed = coerce_datetime(value)
    if parsed is None:
        raise ValueError(f"Invalid date value '{value}'")
    return parsed


class SensorReadingPayload(BaseModel):
    """Latest reading of one sensor as returned by the backend"""

    model_config = ConfigDict(populate_by_name=True)

    sensor_id: str = Field(..., validation_alias=AliasChoices("sensor_id", "sensorId", "id"))
    type: str = Field(..., description="Free-text sensor type, e.g. 'soilMoisture'")
    value: float = Field(..., validation_alias=AliasChoices("value", "currentValue"))
    unit: str = Field(default="")
    timestamp: Optional[datetime] = Field(default=None)

    @field_validator("sensor_id", mode="before")
    def _coerce_sensor_id(cls, v):
        return str(v) if v is not None else v

    @field_validator("timestamp", mode="before")
    def _coerce_timestamp(cls, v):
        return _coerce_optional_datetime(v)

    def to_domain(self) -> SensorReading:
        return SensorReading(
            sensor_id=self.sensor_id,
            sensor_type=self.type,
            value=self.value,
            unit=self.unit,
            timestamp=self.timestamp,
        )


class CropContextPayload(BaseModel):
    """Crop record fields used by the growth-stage rules"""

    model_config = ConfigDict(populate_by_name=True)

    crop_id: str = Field(..., validation_alias=AliasChoices("crop_id", "cropId", "id"))
    crop_name: str = Field(..., min_length=1, validation_alias=AliasChoices("crop_name", "cropName", "name"))
    variety: Optional[str] = Field(default=None)
    status: str = Field(default="growing")
    planting_date: Optional[datetime] = Field(
        default=None, validation_alias=AliasChoices("planting_date", "plantingDate")
    )
    expected_harvest_date: Optional[datetime] = Field(
        default=None, validation_alias=AliasChoices("expected_harvest_date", "expectedHarvestDate")
    )

    @field_validator("crop_id", mode="before")
    def _coerce_crop_id(cls, v):
        return str(v) if v is not None else v

    @field_validator("planting_date", "expected_harvest_date", mode="before")
    def _coerce_dates(cls, v):
        return _coerce_optional_datetime(v)

    def to_domain(self) -> CropContext:
        return CropContext(
            crop_id=self.crop_id,
            crop_name=self.crop_name,
            status=self.status,
            variety=self.variety,
            planting_date=self.planting_date,
            expected_harvest_date=self.expected_harvest_date,
        )


class WeatherPayload(BaseModel):
    """Weather snapshot; unknown provider fields are ignored"""

    temperature: Optional[float] = Field(default=None, description="Air temperature in °C")
    forecast: Optional[str] = Field(default=None)
    condition: Optional[str] = Field(default=None)

    def to_domain(self) -> WeatherSnapshot:
        return WeatherSnapshot(temperature=self.temperature, forecast=self.forecast, condition=self.condition)


class OptimalRangeResponse(BaseModel):
    min: float
    max: float


class RecommendationMetadataResponse(BaseModel):
    sensor_type: Optional[str] = None
    current_value: Optional[float] = None
    optimal_range: Optional[OptimalRangeResponse] = None
    unit: Optional[str] = None
    crop_name: Optional[str] = None
    weather_factor: bool = False


class RecommendationResponse(BaseModel):
    """Recommendation as sent to the UI"""

    id: str
    kind: str
    type: str = Field(..., description="Recommendation category")
    priority: str
    title: str
    description: str
    reason: str
    impact: str
    icon: str
    color: str
    action_label: str
    action_type: str
    device_id: Optional[str] = None
    metadata: RecommendationMetadataResponse
    created_at: datetime
    expires_at: datetime
    dismissed: bool = False
    executed: bool = False

    @classmethod
    def from_domain(cls, recommendation: Recommendation) -> "RecommendationResponse":
        return cls.model_validate(recommendation.to_dict())


class RecommendationListResponse(BaseModel):
    recommendations: List[RecommendationResponse] = Field(default_factory=list)
    count: int = Field(default=0, description="Active recommendations")
    critical_count: int = Field(default=0)
    last_update: Optional[datetime] = None

    @classmethod
    def from_store(cls, store: RecommendationSet) -> "RecommendationListResponse":
        """Active recommendations of a set, with the dashboard counters."""
        return cls(
            recommendations=[RecommendationResponse.from_domain(r) for r in store.active],
            count=store.count,
            critical_count=store.critical_count,
            last_update=store.last_update,
        )
