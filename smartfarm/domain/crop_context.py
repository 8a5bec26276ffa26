"""
Crop Context
============
Read-only description of the crop a recommendation run is about, plus the
calendar arithmetic used by the growth-stage rules.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from smartfarm.enums import GrowthStage
from smartfarm.utils.time import coerce_datetime, days_between


@dataclass(frozen=True)
class GrowthProgress:
    """Calendar position of a crop between planting and expected harvest."""

    days_since_planting: float
    days_to_harvest: float
    total_days: float
    progress: float  # 0-100

    @property
    def stage(self) -> GrowthStage:
        return growth_stage_for_progress(self.progress)


@dataclass(frozen=True)
class CropContext:
    """
    Crop being evaluated.

    Calendar dates may be given as ``date``, naive or aware ``datetime`` or
    ISO strings; they are stored as aware UTC datetimes (naive means UTC).
    ``growth_stage`` is never stored; it is derived from the dates.
    """

    crop_id: str
    crop_name: str
    status: str = "growing"
    variety: str | None = None
    planting_date: datetime | None = None
    expected_harvest_date: datetime | None = None

    def __post_init__(self):
        # frozen: bypass __setattr__
        object.__setattr__(self, "planting_date", coerce_datetime(self.planting_date))
        object.__setattr__(self, "expected_harvest_date", coerce_datetime(self.expected_harvest_date))

    def growth_progress(self, now: datetime) -> GrowthProgress | None:
        """Progress at ``now``, or None unless both calendar dates are known."""
        if self.planting_date is None or self.expected_harvest_date is None:
            return None
        return compute_growth_progress(self.planting_date, self.expected_harvest_date, now)

    def growth_stage(self, now: datetime) -> GrowthStage | None:
        progress = self.growth_progress(now)
        return progress.stage if progress else None


def compute_growth_progress(planting_date: datetime, harvest_date: datetime, now: datetime) -> GrowthProgress:
    """
    Linear growth progress between planting and expected harvest.

    A zero or negative season length counts as fully grown (progress 100)
    once planting has happened, and as not started (progress 0) before it.
    """
    total_days = days_between(planting_date, harvest_date)
    days_since_planting = days_between(planting_date, now)
    days_to_harvest = days_between(now, harvest_date)

    if total_days <= 0:
        progress = 0.0 if days_since_planting < 0 else 100.0
    else:
        progress = min(100.0, max(0.0, days_since_planting / total_days * 100))

    return GrowthProgress(
        days_since_planting=days_since_planting,
        days_to_harvest=days_to_harvest,
        total_days=total_days,
        progress=progress,
    )


def growth_stage_for_progress(progress: float) -> GrowthStage:
    """Map a 0-100 progress percentage to a stage label."""
    if progress < 25:
        return GrowthStage.SEEDLING
    if progress < 50:
        return GrowthStage.VEGETATIVE
    if progress < 75:
        return GrowthStage.FLOWERING
    if progress < 100:
        return GrowthStage.MATURATION
    return GrowthStage.HARVEST_READY
