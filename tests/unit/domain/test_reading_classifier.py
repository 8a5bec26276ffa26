"""Tests for metric routing and threshold bucket classification."""

import pytest

from smartfarm.domain import DEFAULT_CROP_THRESHOLDS, SensorReading
from smartfarm.domain.reading_classifier import classify_reading, classify_value, route_metric
from smartfarm.enums import MetricFamily, ThresholdBucket

TOMATO = DEFAULT_CROP_THRESHOLDS["tomato"]


class TestRouting:
    @pytest.mark.parametrize(
        "sensor_type, expected",
        [
            ("soilMoisture", MetricFamily.MOISTURE),
            ("SOIL", MetricFamily.MOISTURE),
            ("moisture_level", MetricFamily.MOISTURE),
            ("temperature", MetricFamily.TEMPERATURE),
            ("airTemp", MetricFamily.TEMPERATURE),
            ("air_humidity", MetricFamily.HUMIDITY),
            ("Humid", MetricFamily.HUMIDITY),
        ],
    )
    def test_known_types(self, sensor_type, expected):
        assert route_metric(sensor_type) is expected

    def test_first_family_wins(self):
        assert route_metric("soil_temperature") is MetricFamily.MOISTURE

    @pytest.mark.parametrize("sensor_type", ["lux", "co2", "", None])
    def test_unknown_types(self, sensor_type):
        assert route_metric(sensor_type) is None


class TestClassifyValue:
    """Tomato moisture bounds: 20 / 30 / 40 / 70 / 80 / 90."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (-500, ThresholdBucket.CRITICAL_LOW),
            (20, ThresholdBucket.CRITICAL_LOW),
            (25, ThresholdBucket.WARNING_LOW),
            (30, ThresholdBucket.WARNING_LOW),
            (40, ThresholdBucket.OPTIMAL),
            (55, ThresholdBucket.OPTIMAL),
            (70, ThresholdBucket.OPTIMAL),
            (80, ThresholdBucket.WARNING_HIGH),
            (85, ThresholdBucket.WARNING_HIGH),
            (90, ThresholdBucket.CRITICAL_HIGH),
            (1_000, ThresholdBucket.CRITICAL_HIGH),
        ],
    )
    def test_buckets(self, value, expected):
        assert classify_value(value, TOMATO.moisture) is expected

    @pytest.mark.parametrize("value", [35, 30.5, 75, 79.9])
    def test_gaps_have_no_bucket(self, value):
        assert classify_value(value, TOMATO.moisture) is None

    @pytest.mark.parametrize("crop", sorted(DEFAULT_CROP_THRESHOLDS))
    @pytest.mark.parametrize("metric", list(MetricFamily))
    def test_optimal_edges_are_optimal(self, crop, metric):
        t = DEFAULT_CROP_THRESHOLDS[crop].for_metric(metric)
        assert classify_value(t.optimal_min, t) is ThresholdBucket.OPTIMAL
        assert classify_value(t.optimal_max, t) is ThresholdBucket.OPTIMAL


class TestClassifyReading:
    def test_routes_to_metric_range(self):
        result = classify_reading(SensorReading("s1", "temperature", 40), TOMATO)
        assert result.metric is MetricFamily.TEMPERATURE
        assert result.bucket is ThresholdBucket.CRITICAL_HIGH
        assert result.threshold_range is TOMATO.temperature

    def test_unknown_type_is_skipped(self):
        assert classify_reading(SensorReading("s1", "lux", 10), TOMATO) is None

    def test_gap_value_is_skipped(self):
        assert classify_reading(SensorReading("s1", "soilMoisture", 35), TOMATO) is None
