"""
Services Package
================
Stateful façades over the domain rules: the recommendation engine with its
caller-owned recommendation set, and the digital twin.
"""

from .digital_twin import DigitalTwin
from .recommendation_copy import CopyTemplate, RecommendationCopy
from .recommendation_engine import RecommendationEngine, sort_by_priority
from .recommendation_store import RecommendationSet

__all__ = [
    "CopyTemplate",
    "DigitalTwin",
    "RecommendationCopy",
    "RecommendationEngine",
    "RecommendationSet",
    "sort_by_priority",
]
