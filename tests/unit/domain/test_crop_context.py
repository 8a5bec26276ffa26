"""Tests for growth progress and stage derivation."""

from datetime import date, datetime, timedelta, timezone

import pytest

from smartfarm.domain import CropContext, compute_growth_progress, growth_stage_for_progress
from smartfarm.enums import GrowthStage


class TestGrowthProgress:
    def test_linear_progress(self, now):
        growth = compute_growth_progress(now - timedelta(days=10), now + timedelta(days=90), now)
        assert growth.total_days == pytest.approx(100)
        assert growth.days_since_planting == pytest.approx(10)
        assert growth.days_to_harvest == pytest.approx(90)
        assert growth.progress == pytest.approx(10)
        assert growth.stage is GrowthStage.SEEDLING

    def test_clamped_before_planting(self, now):
        growth = compute_growth_progress(now + timedelta(days=5), now + timedelta(days=50), now)
        assert growth.progress == 0
        assert growth.days_since_planting == pytest.approx(-5)

    def test_clamped_after_harvest(self, now):
        growth = compute_growth_progress(now - timedelta(days=120), now - timedelta(days=20), now)
        assert growth.progress == 100
        assert growth.days_to_harvest == pytest.approx(-20)

    def test_zero_length_season_counts_as_grown(self, now):
        growth = compute_growth_progress(now, now, now)
        assert growth.progress == 100

    def test_zero_length_season_not_started_before_planting(self, now):
        day = now + timedelta(days=3)
        growth = compute_growth_progress(day, day, now)
        assert growth.progress == 0
        assert growth.stage is GrowthStage.SEEDLING

    def test_fractional_days(self, now):
        growth = compute_growth_progress(now - timedelta(days=1), now + timedelta(hours=12), now)
        assert growth.days_to_harvest == pytest.approx(0.5)


class TestCropContext:
    def test_no_progress_without_both_dates(self, now):
        crop = CropContext("c1", "tomato", planting_date=now - timedelta(days=3))
        assert crop.growth_progress(now) is None
        assert crop.growth_stage(now) is None

    def test_stage_from_dates(self, now, crop_with_calendar):
        crop = crop_with_calendar(planted_days_ago=60, harvest_in_days=40)
        assert crop.growth_stage(now) is GrowthStage.FLOWERING


@pytest.mark.parametrize(
    "progress, expected",
    [
        (0, GrowthStage.SEEDLING),
        (24.9, GrowthStage.SEEDLING),
        (25, GrowthStage.VEGETATIVE),
        (50, GrowthStage.FLOWERING),
        (74.9, GrowthStage.FLOWERING),
        (75, GrowthStage.MATURATION),
        (100, GrowthStage.HARVEST_READY),
    ],
)
def test_growth_stage_boundaries(progress, expected):
    assert growth_stage_for_progress(progress) is expected


class TestCalendarDates:
    def test_naive_datetimes_read_as_utc(self, now):
        crop = CropContext(
            "c1", "tomato", planting_date=datetime(2026, 1, 1), expected_harvest_date=datetime(2026, 12, 1)
        )
        assert crop.planting_date == datetime(2026, 1, 1, tzinfo=timezone.utc)
        assert crop.growth_progress(now).days_since_planting == pytest.approx(151.5)

    def test_plain_dates(self, now):
        crop = CropContext("c1", "tomato", planting_date=date(2026, 5, 22), expected_harvest_date=date(2026, 6, 5))
        assert crop.expected_harvest_date == datetime(2026, 6, 5, tzinfo=timezone.utc)
        assert crop.growth_progress(now).days_to_harvest == pytest.approx(3.5)

    def test_iso_strings(self):
        crop = CropContext("c1", "tomato", planting_date="2026-03-01T00:00:00Z")
        assert crop.planting_date == datetime(2026, 3, 1, tzinfo=timezone.utc)
        assert crop.expected_harvest_date is None
