"""
Domain Package
==============
Immutable value objects and pure rules behind the farm advisor.
"""

from .crop_context import CropContext, GrowthProgress, compute_growth_progress, growth_stage_for_progress
from .crop_thresholds import DEFAULT_CROP_THRESHOLDS, CropThresholds, ThresholdRange, get_thresholds_for_crop
from .reading_classifier import ReadingClassification, classify_reading, classify_value, route_metric
from .recommendation import OptimalRange, Recommendation, RecommendationMetadata
from .sensor_reading import SensorReading
from .weather import WeatherSnapshot

__all__ = [
    # Crop
    "CropContext",
    "GrowthProgress",
    "compute_growth_progress",
    "growth_stage_for_progress",
    # Thresholds
    "DEFAULT_CROP_THRESHOLDS",
    "CropThresholds",
    "ThresholdRange",
    "get_thresholds_for_crop",
    # Classification
    "ReadingClassification",
    "classify_reading",
    "classify_value",
    "route_metric",
    # Recommendations
    "OptimalRange",
    "Recommendation",
    "RecommendationMetadata",
    # Inputs
    "SensorReading",
    "WeatherSnapshot",
]
