"""
SmartFarm Advisor
=================
Rule-based crop recommendations and actuator state tracking for the smart
farm dashboards.
"""

from smartfarm.domain.actuators import resolve_actuator_states
from smartfarm.domain.crop_thresholds import get_thresholds_for_crop
from smartfarm.services import DigitalTwin, RecommendationEngine, RecommendationSet

__version__ = "1.0.0"

__all__ = [
    "DigitalTwin",
    "RecommendationEngine",
    "RecommendationSet",
    "get_thresholds_for_crop",
    "resolve_actuator_states",
]
