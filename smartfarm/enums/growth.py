"""
Growth-related Enumerations
============================
"""

from enum import Enum


class GrowthStage(str, Enum):
    """Crop growth stage derived from planting/harvest calendar progress."""

    SEEDLING = "seedling"
    VEGETATIVE = "vegetative"
    FLOWERING = "flowering"
    MATURATION = "maturation"
    HARVEST_READY = "harvest_ready"

    def __str__(self) -> str:
        return self.value
