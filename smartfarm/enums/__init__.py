"""
Enums Module
============

Enumeration types shared across the SmartFarm rules.
"""

from smartfarm.enums.common import (
    MetricFamily,
    RecommendationCategory,
    RecommendationKind,
    RecommendationPriority,
    SensorStatus,
    ThresholdBucket,
)
from smartfarm.enums.device import ActionStatus, ActuatorType
from smartfarm.enums.growth import GrowthStage

__all__ = [
    # Device enums
    "ActuatorType",
    "ActionStatus",
    # Growth enums
    "GrowthStage",
    # Common enums
    "MetricFamily",
    "RecommendationCategory",
    "RecommendationKind",
    "RecommendationPriority",
    "SensorStatus",
    "ThresholdBucket",
]
