"""
Schemas Package
===============
Pydantic models validating backend payloads and shaping UI responses.
"""

from .digital_twin import (
    ActionLogPayload,
    ActuatorReadingResponse,
    ActuatorStateResponse,
    DeviceSensorPayload,
    LatestReadingPayload,
)
from .recommendations import (
    CropContextPayload,
    RecommendationListResponse,
    RecommendationResponse,
    SensorReadingPayload,
    WeatherPayload,
)

__all__ = [
    # Digital twin
    "ActionLogPayload",
    "ActuatorReadingResponse",
    "ActuatorStateResponse",
    "DeviceSensorPayload",
    "LatestReadingPayload",
    # Recommendations
    "CropContextPayload",
    "RecommendationListResponse",
    "RecommendationResponse",
    "SensorReadingPayload",
    "WeatherPayload",
]
