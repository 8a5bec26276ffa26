"""
Shared test fixtures for the SmartFarm test suite.

Provides:
- A frozen clock so generated recommendations are reproducible
- Engine / digital twin instances wired to that clock
- Factories for readings, crop contexts, action log entries and recommendations

Usage:
    def test_example(engine, tomato, reading):
        recs = engine.generate_recommendations([reading("soilMoisture", 15)], tomato)
        assert recs[0].priority is RecommendationPriority.CRITICAL
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

import pytest

from smartfarm.config import AdvisorConfig
from smartfarm.domain import CropContext, Recommendation, SensorReading
from smartfarm.domain.actuators import ActionLogEntry
from smartfarm.enums import RecommendationCategory, RecommendationKind, RecommendationPriority
from smartfarm.services import DigitalTwin, RecommendationEngine

# ---------------------------------------------------------------------------
# Logging: keep test output quiet
# ---------------------------------------------------------------------------
logging.getLogger("smartfarm").setLevel(logging.WARNING)

NOW = datetime(2026, 6, 1, 12, 0, tzinfo=timezone.utc)
EPOCH = datetime(2026, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def config():
    return AdvisorConfig()


@pytest.fixture
def engine(config):
    return RecommendationEngine(config, clock=lambda: NOW)


@pytest.fixture
def twin(config):
    return DigitalTwin(config, clock=lambda: NOW)


@pytest.fixture
def tomato():
    return CropContext(crop_id="crop-1", crop_name="tomato")


@pytest.fixture
def reading():
    """Factory for sensor readings."""

    counter = {"n": 0}

    def _make(sensor_type: str, value: float, unit: str = "") -> SensorReading:
        counter["n"] += 1
        return SensorReading(
            sensor_id=f"sensor-{counter['n']}",
            sensor_type=sensor_type,
            value=value,
            unit=unit,
            timestamp=NOW,
        )

    return _make


@pytest.fixture
def crop_with_calendar():
    """Factory for crop contexts planted/harvested relative to NOW (in days)."""

    def _make(planted_days_ago: float, harvest_in_days: float, crop_name: str = "tomato") -> CropContext:
        return CropContext(
            crop_id="crop-cal",
            crop_name=crop_name,
            planting_date=NOW - timedelta(days=planted_days_ago),
            expected_harvest_date=NOW + timedelta(days=harvest_in_days),
        )

    return _make


@pytest.fixture
def log_entry():
    """Factory for action log entries; ``t`` is seconds after a fixed epoch."""

    def _make(t: int, action: str, status: str = "") -> ActionLogEntry:
        return ActionLogEntry(action_uri=action, created_at=EPOCH + timedelta(seconds=t), status=status)

    return _make


@pytest.fixture
def make_recommendation():
    """Factory for bare recommendations with a given id and priority."""

    def _make(rec_id: str, priority: RecommendationPriority = RecommendationPriority.LOW) -> Recommendation:
        return Recommendation(
            id=rec_id,
            kind=RecommendationKind.MOISTURE_OPTIMAL,
            category=RecommendationCategory.MONITORING,
            priority=priority,
            title="t",
            description="d",
            reason="r",
            impact="i",
            icon="check_circle",
            color="#10b981",
            action_label="View details",
            action_type="view_details",
            created_at=NOW,
            expires_at=NOW + timedelta(hours=4),
        )

    return _make
