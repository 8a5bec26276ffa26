"""
Crop Thresholds Value Objects
=============================
Immutable per-crop threshold tables for soil moisture, air temperature and
air humidity.

Each metric carries six strictly increasing bounds::

    critical_low < warning_low < optimal_min < optimal_max < warning_high < critical_high

Lookups are case-insensitive exact matches on the crop type name and always
fall back to the ``default`` table.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from types import MappingProxyType
from typing import Any, Mapping

from smartfarm.domain.exceptions import ValidationError
from smartfarm.enums import MetricFamily

logger = logging.getLogger(__name__)

DEFAULT_CROP_KEY = "default"


@dataclass(frozen=True)
class ThresholdRange:
    """
    Six ordered bounds for one metric.

    Attributes:
        critical_low: At or below this value the reading is critical
        warning_low: At or below this value the reading needs attention
        optimal_min: Lower edge of the optimal band (inclusive)
        optimal_max: Upper edge of the optimal band (inclusive)
        warning_high: At or above this value the reading needs attention
        critical_high: At or above this value the reading is critical
    """

    critical_low: float
    warning_low: float
    optimal_min: float
    optimal_max: float
    warning_high: float
    critical_high: float

    def __post_init__(self):
        bounds = self.as_tuple()
        if any(lower >= upper for lower, upper in zip(bounds, bounds[1:])):
            raise ValidationError(
                f"Threshold bounds must be strictly increasing, got {bounds}",
                detail=self.to_dict(),
            )

    def as_tuple(self) -> tuple[float, float, float, float, float, float]:
        return (
            self.critical_low,
            self.warning_low,
            self.optimal_min,
            self.optimal_max,
            self.warning_high,
            self.critical_high,
        )

    def contains_optimal(self, value: float) -> bool:
        """True when ``value`` lies inside the inclusive optimal band."""
        return self.optimal_min <= value <= self.optimal_max

    def to_dict(self) -> dict[str, float]:
        return asdict(self)

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> ThresholdRange:
        return ThresholdRange(
            critical_low=float(data["critical_low"]),
            warning_low=float(data["warning_low"]),
            optimal_min=float(data["optimal_min"]),
            optimal_max=float(data["optimal_max"]),
            warning_high=float(data["warning_high"]),
            critical_high=float(data["critical_high"]),
        )


@dataclass(frozen=True)
class CropThresholds:
    """Threshold ranges for every metric family of one crop type."""

    moisture: ThresholdRange
    temperature: ThresholdRange
    humidity: ThresholdRange

    def for_metric(self, metric: MetricFamily) -> ThresholdRange:
        """Return the range used to classify readings of ``metric``."""
        return getattr(self, metric.value)

    def to_dict(self) -> dict[str, dict[str, float]]:
        return {
            "moisture": self.moisture.to_dict(),
            "temperature": self.temperature.to_dict(),
            "humidity": self.humidity.to_dict(),
        }

    @staticmethod
    def from_dict(data: Mapping[str, Mapping[str, Any]]) -> CropThresholds:
        """
        Create from a nested dictionary.

        Examples:
            >>> CropThresholds.from_dict({"moisture": {...}, "temperature": {...}, "humidity": {...}})
        """
        return CropThresholds(
            moisture=ThresholdRange.from_dict(data["moisture"]),
            temperature=ThresholdRange.from_dict(data["temperature"]),
            humidity=ThresholdRange.from_dict(data["humidity"]),
        )


DEFAULT_CROP_THRESHOLDS: Mapping[str, CropThresholds] = MappingProxyType(
    {
        "tomato": CropThresholds(
            moisture=ThresholdRange(20, 30, 40, 70, 80, 90),
            temperature=ThresholdRange(5, 10, 18, 27, 32, 38),
            humidity=ThresholdRange(30, 40, 50, 70, 80, 90),
        ),
        "wheat": CropThresholds(
            moisture=ThresholdRange(15, 25, 35, 65, 75, 85),
            temperature=ThresholdRange(0, 5, 12, 25, 30, 35),
            humidity=ThresholdRange(25, 35, 45, 65, 75, 85),
        ),
        DEFAULT_CROP_KEY: CropThresholds(
            moisture=ThresholdRange(20, 30, 40, 70, 80, 90),
            temperature=ThresholdRange(5, 10, 15, 30, 35, 40),
            humidity=ThresholdRange(30, 40, 50, 75, 85, 95),
        ),
    }
)


def get_thresholds_for_crop(
    crop_name: str | None,
    table: Mapping[str, CropThresholds] = DEFAULT_CROP_THRESHOLDS,
) -> CropThresholds:
    """
    Resolve the thresholds for a crop type.

    Matching is case-insensitive and exact; no fuzzy matching. Unknown or
    empty names fall back to the ``default`` entry.

    Args:
        crop_name: Crop type name, e.g. ``"Tomato"``
        table: Threshold table to search (built-in table by default)

    Returns:
        CropThresholds for the crop or the default set
    """
    key = (crop_name or "").strip().lower()
    thresholds = table.get(key)
    if thresholds is None:
        logger.debug("No thresholds for crop %r, using default set", crop_name)
        return table[DEFAULT_CROP_KEY]
    return thresholds
