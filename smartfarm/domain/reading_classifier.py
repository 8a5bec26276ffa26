"""
Reading Classifier
==================
Routes a sensor reading to a metric family and places its value in a
threshold bucket.

Routing is a lower-cased substring match on the reading type, first family
wins (moisture, then temperature, then humidity). Classification checks the
bounds in a fixed order and the first match wins, so exactly one bucket is
produced per reading.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from smartfarm.domain.crop_thresholds import CropThresholds, ThresholdRange
from smartfarm.domain.sensor_reading import SensorReading
from smartfarm.enums import MetricFamily, ThresholdBucket

logger = logging.getLogger(__name__)

METRIC_KEYWORDS: tuple[tuple[MetricFamily, tuple[str, ...]], ...] = (
    (MetricFamily.MOISTURE, ("moisture", "soil")),
    (MetricFamily.TEMPERATURE, ("temp",)),
    (MetricFamily.HUMIDITY, ("humid",)),
)


@dataclass(frozen=True)
class ReadingClassification:
    """Outcome of classifying one reading."""

    reading: SensorReading
    metric: MetricFamily
    bucket: ThresholdBucket
    threshold_range: ThresholdRange


def route_metric(sensor_type: str | None) -> MetricFamily | None:
    """Return the metric family for a free-text sensor type, or None if unknown."""
    lowered = (sensor_type or "").lower()
    for metric, keywords in METRIC_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return metric
    return None


def classify_value(value: float, threshold_range: ThresholdRange) -> ThresholdBucket | None:
    """
    Place ``value`` in a bucket of ``threshold_range``.

    Order of checks (first match wins):
        1. ``value <= critical_low``   -> CRITICAL_LOW
        2. ``value <= warning_low``    -> WARNING_LOW
        3. ``value >= critical_high``  -> CRITICAL_HIGH
        4. optimal band (inclusive)    -> OPTIMAL
        5. ``value >= warning_high``   -> WARNING_HIGH

    Values between ``warning_low`` and ``optimal_min`` or between
    ``optimal_max`` and ``warning_high`` return None.
    """
    t = threshold_range
    if value <= t.critical_low:
        return ThresholdBucket.CRITICAL_LOW
    if value <= t.warning_low:
        return ThresholdBucket.WARNING_LOW
    if value >= t.critical_high:
        return ThresholdBucket.CRITICAL_HIGH
    if t.contains_optimal(value):
        return ThresholdBucket.OPTIMAL
    if value >= t.warning_high:
        return ThresholdBucket.WARNING_HIGH
    return None


def classify_reading(reading: SensorReading, thresholds: CropThresholds) -> ReadingClassification | None:
    """
    Classify one reading against a crop's thresholds.

    Returns:
        ReadingClassification, or None when the reading type matches no
        metric family or the value falls in an unlabelled gap
    """
    metric = route_metric(reading.sensor_type)
    if metric is None:
        logger.debug("Skipping reading %s with unrecognised type %r", reading.sensor_id, reading.sensor_type)
        return None

    threshold_range = thresholds.for_metric(metric)
    bucket = classify_value(reading.value, threshold_range)
    if bucket is None:
        return None
    return ReadingClassification(reading=reading, metric=metric, bucket=bucket, threshold_range=threshold_range)
