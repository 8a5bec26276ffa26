"""
Common Enumerations
====================

Enums shared by the recommendation engine, its schemas and the UI callers.
"""

from enum import Enum


class RecommendationPriority(str, Enum):
    """
    Priority levels for recommendations.
    Used for sorting (``rank``) and UI emphasis.
    """

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        return _PRIORITY_RANK[self]

    def __str__(self) -> str:
        return self.value


_PRIORITY_RANK = {
    RecommendationPriority.CRITICAL: 0,
    RecommendationPriority.HIGH: 1,
    RecommendationPriority.MEDIUM: 2,
    RecommendationPriority.LOW: 3,
}


class RecommendationCategory(str, Enum):
    """What kind of farm work a recommendation asks for."""

    IRRIGATION = "irrigation"
    FERTILIZER = "fertilizer"
    HARVEST = "harvest"
    PROTECTION = "protection"
    MONITORING = "monitoring"
    OPTIMIZATION = "optimization"

    def __str__(self) -> str:
        return self.value


class MetricFamily(str, Enum):
    """
    Sensor metric families with per-crop thresholds.
    Readings are routed to a family by substring match on their type.
    """

    MOISTURE = "moisture"
    TEMPERATURE = "temperature"
    HUMIDITY = "humidity"

    def __str__(self) -> str:
        return self.value


class ThresholdBucket(str, Enum):
    """Where a reading falls relative to a threshold range."""

    CRITICAL_LOW = "critical_low"
    WARNING_LOW = "warning_low"
    OPTIMAL = "optimal"
    WARNING_HIGH = "warning_high"
    CRITICAL_HIGH = "critical_high"

    def __str__(self) -> str:
        return self.value


class RecommendationKind(str, Enum):
    """
    The rule that produced a recommendation.

    Presentation layers key their copy (titles, descriptions, translations)
    on this value instead of on free text.
    """

    MOISTURE_CRITICAL_LOW = "moisture.critical_low"
    MOISTURE_WARNING_LOW = "moisture.warning_low"
    MOISTURE_CRITICAL_HIGH = "moisture.critical_high"
    MOISTURE_OPTIMAL = "moisture.optimal"
    TEMPERATURE_CRITICAL_LOW = "temperature.critical_low"
    TEMPERATURE_CRITICAL_HIGH = "temperature.critical_high"
    TEMPERATURE_WARNING_LOW = "temperature.warning_low"
    HUMIDITY_CRITICAL_HIGH = "humidity.critical_high"
    HUMIDITY_CRITICAL_LOW = "humidity.critical_low"
    HARVEST_SOON = "harvest.soon"
    HARVEST_READY = "harvest.ready"
    GROWTH_SEEDLING = "growth_stage.seedling"
    GROWTH_FLOWERING = "growth_stage.flowering"
    WEATHER_RAIN_EXPECTED = "weather.rain_expected"
    WEATHER_FROST_WARNING = "weather.frost_warning"
    WEATHER_HEAT_WARNING = "weather.heat_warning"

    def __str__(self) -> str:
        return self.value


class SensorStatus(str, Enum):
    """
    Status of a device sensor value against the sensor's own limits.
    Used by: digital twin reading panel
    """

    NORMAL = "normal"
    WARNING_LOW = "warning_low"
    WARNING_HIGH = "warning_high"
    CRITICAL_LOW = "critical_low"
    CRITICAL_HIGH = "critical_high"

    def __str__(self) -> str:
        return self.value
