"""Tests for the per-crop threshold tables and their lookup."""

import pytest

from smartfarm.domain.crop_thresholds import (
    DEFAULT_CROP_THRESHOLDS,
    CropThresholds,
    ThresholdRange,
    get_thresholds_for_crop,
)
from smartfarm.domain.exceptions import ValidationError
from smartfarm.enums import MetricFamily


@pytest.mark.parametrize("crop", sorted(DEFAULT_CROP_THRESHOLDS))
@pytest.mark.parametrize("metric", list(MetricFamily))
def test_builtin_bounds_strictly_increasing(crop, metric):
    bounds = DEFAULT_CROP_THRESHOLDS[crop].for_metric(metric).as_tuple()
    assert all(lower < upper for lower, upper in zip(bounds, bounds[1:]))


class TestLookup:
    def test_exact_name(self):
        assert get_thresholds_for_crop("tomato") is DEFAULT_CROP_THRESHOLDS["tomato"]

    @pytest.mark.parametrize("name", ["Tomato", "TOMATO", "  tomato "])
    def test_case_insensitive(self, name):
        assert get_thresholds_for_crop(name) is DEFAULT_CROP_THRESHOLDS["tomato"]

    @pytest.mark.parametrize("name", ["cucumber", "tomatoes", "", None])
    def test_unknown_falls_back_to_default(self, name):
        assert get_thresholds_for_crop(name) is DEFAULT_CROP_THRESHOLDS["default"]

    def test_wheat_temperature(self):
        assert get_thresholds_for_crop("Wheat").temperature.critical_high == 35

    def test_custom_table(self):
        table = {"default": DEFAULT_CROP_THRESHOLDS["wheat"]}
        assert get_thresholds_for_crop("tomato", table) is DEFAULT_CROP_THRESHOLDS["wheat"]


class TestThresholdRange:
    def test_rejects_equal_bounds(self):
        with pytest.raises(ValidationError):
            ThresholdRange(10, 20, 30, 30, 40, 50)

    def test_rejects_decreasing_bounds(self):
        with pytest.raises(ValidationError) as exc_info:
            ThresholdRange(10, 5, 30, 40, 50, 60)
        assert exc_info.value.detail["warning_low"] == 5

    def test_optimal_band_is_inclusive(self):
        t = ThresholdRange(20, 30, 40, 70, 80, 90)
        assert t.contains_optimal(40)
        assert t.contains_optimal(70)
        assert not t.contains_optimal(70.01)

    def test_from_dict(self):
        data = {
            "moisture": {"critical_low": 1, "warning_low": 2, "optimal_min": 3,
                         "optimal_max": 4, "warning_high": 5, "critical_high": 6},
            "temperature": DEFAULT_CROP_THRESHOLDS["default"].temperature.to_dict(),
            "humidity": DEFAULT_CROP_THRESHOLDS["default"].humidity.to_dict(),
        }
        thresholds = CropThresholds.from_dict(data)
        assert thresholds.moisture.optimal_max == 4.0
        assert thresholds.for_metric(MetricFamily.HUMIDITY) == DEFAULT_CROP_THRESHOLDS["default"].humidity

    def test_is_immutable(self):
        t = DEFAULT_CROP_THRESHOLDS["tomato"].moisture
        with pytest.raises(AttributeError):
            t.critical_low = 0
