"""
Recommendation Engine
=====================
Rule-based advisor turning sensor readings, crop calendar and weather into a
ranked list of recommendations.

Pipeline:
    1. Resolve crop thresholds (default table on unknown crops)
    2. Classify every reading and apply the sensor rule table
    3. Growth-stage checks (only when planting and harvest dates are known)
    4. Weather checks (only when a snapshot is given)
    5. Stable sort by priority (critical, high, medium, low)

Nothing here raises for unrecognised readings, unknown crops or missing
optional context; those inputs simply produce no recommendation.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Callable, Iterable, Sequence

from smartfarm.config import AdvisorConfig
from smartfarm.domain.crop_context import CropContext
from smartfarm.domain.crop_thresholds import get_thresholds_for_crop
from smartfarm.domain.reading_classifier import ReadingClassification, classify_reading, route_metric
from smartfarm.domain.recommendation import OptimalRange, Recommendation, RecommendationMetadata
from smartfarm.domain.sensor_reading import SensorReading
from smartfarm.domain.weather import WeatherSnapshot
from smartfarm.enums import (
    MetricFamily,
    RecommendationCategory,
    RecommendationKind,
    RecommendationPriority,
    ThresholdBucket,
)
from smartfarm.services.recommendation_copy import RecommendationCopy
from smartfarm.services.recommendation_store import RecommendationSet
from smartfarm.utils.time import utc_now

logger = logging.getLogger(__name__)

Category = RecommendationCategory
Priority = RecommendationPriority


@dataclass(frozen=True)
class RecommendationRule:
    """Fixed presentation and ranking of one recommendation kind."""

    kind: RecommendationKind
    category: RecommendationCategory
    priority: RecommendationPriority
    icon: str
    color: str
    action_type: str
    weather_factor: bool = False


METRIC_UNITS: dict[MetricFamily, str] = {
    MetricFamily.MOISTURE: "%",
    MetricFamily.TEMPERATURE: "°C",
    MetricFamily.HUMIDITY: "%",
}

# (metric, bucket) pairs missing from this table are not actionable.
SENSOR_RULES: dict[tuple[MetricFamily, ThresholdBucket], RecommendationRule] = {
    (MetricFamily.MOISTURE, ThresholdBucket.CRITICAL_LOW): RecommendationRule(
        RecommendationKind.MOISTURE_CRITICAL_LOW, Category.IRRIGATION, Priority.CRITICAL,
        "water_drop", "#ef4444", "irrigate",
    ),
    (MetricFamily.MOISTURE, ThresholdBucket.WARNING_LOW): RecommendationRule(
        RecommendationKind.MOISTURE_WARNING_LOW, Category.IRRIGATION, Priority.HIGH,
        "water_drop", "#f59e0b", "schedule_irrigation",
    ),
    (MetricFamily.MOISTURE, ThresholdBucket.CRITICAL_HIGH): RecommendationRule(
        RecommendationKind.MOISTURE_CRITICAL_HIGH, Category.IRRIGATION, Priority.HIGH,
        "water_damage", "#3b82f6", "check_drainage",
    ),
    (MetricFamily.MOISTURE, ThresholdBucket.OPTIMAL): RecommendationRule(
        RecommendationKind.MOISTURE_OPTIMAL, Category.MONITORING, Priority.LOW,
        "check_circle", "#10b981", "view_details",
    ),
    (MetricFamily.TEMPERATURE, ThresholdBucket.CRITICAL_LOW): RecommendationRule(
        RecommendationKind.TEMPERATURE_CRITICAL_LOW, Category.PROTECTION, Priority.CRITICAL,
        "ac_unit", "#3b82f6", "activate_heating",
    ),
    (MetricFamily.TEMPERATURE, ThresholdBucket.CRITICAL_HIGH): RecommendationRule(
        RecommendationKind.TEMPERATURE_CRITICAL_HIGH, Category.PROTECTION, Priority.CRITICAL,
        "thermostat", "#ef4444", "activate_ventilation",
    ),
    (MetricFamily.TEMPERATURE, ThresholdBucket.WARNING_LOW): RecommendationRule(
        RecommendationKind.TEMPERATURE_WARNING_LOW, Category.MONITORING, Priority.MEDIUM,
        "device_thermostat", "#6366f1", "monitor",
    ),
    (MetricFamily.HUMIDITY, ThresholdBucket.CRITICAL_HIGH): RecommendationRule(
        RecommendationKind.HUMIDITY_CRITICAL_HIGH, Category.PROTECTION, Priority.HIGH,
        "air", "#8b5cf6", "activate_ventilation", weather_factor=True,
    ),
    (MetricFamily.HUMIDITY, ThresholdBucket.CRITICAL_LOW): RecommendationRule(
        RecommendationKind.HUMIDITY_CRITICAL_LOW, Category.IRRIGATION, Priority.MEDIUM,
        "water", "#0ea5e9", "mist",
    ),
}

CONTEXT_RULES: dict[RecommendationKind, RecommendationRule] = {
    rule.kind: rule
    for rule in (
        RecommendationRule(
            RecommendationKind.HARVEST_SOON, Category.HARVEST, Priority.HIGH,
            "agriculture", "#f59e0b", "prepare_harvest",
        ),
        RecommendationRule(
            RecommendationKind.HARVEST_READY, Category.HARVEST, Priority.CRITICAL,
            "eco", "#10b981", "harvest",
        ),
        RecommendationRule(
            RecommendationKind.GROWTH_SEEDLING, Category.MONITORING, Priority.LOW,
            "spa", "#84cc16", "view_tips",
        ),
        RecommendationRule(
            RecommendationKind.GROWTH_FLOWERING, Category.FERTILIZER, Priority.MEDIUM,
            "local_florist", "#ec4899", "fertilize",
        ),
        RecommendationRule(
            RecommendationKind.WEATHER_RAIN_EXPECTED, Category.OPTIMIZATION, Priority.MEDIUM,
            "water", "#0ea5e9", "skip_irrigation", weather_factor=True,
        ),
        RecommendationRule(
            RecommendationKind.WEATHER_FROST_WARNING, Category.PROTECTION, Priority.CRITICAL,
            "severe_cold", "#60a5fa", "protect_frost", weather_factor=True,
        ),
        RecommendationRule(
            RecommendationKind.WEATHER_HEAT_WARNING, Category.PROTECTION, Priority.HIGH,
            "wb_sunny", "#f97316", "shade_crop", weather_factor=True,
        ),
    )
}


def sort_by_priority(recommendations: Iterable[Recommendation]) -> list[Recommendation]:
    """Stable sort: critical first, emission order kept within a priority."""
    return sorted(recommendations, key=lambda r: r.priority.rank)


def generate_recommendation_id(now: datetime) -> str:
    return f"rec_{int(now.timestamp() * 1000)}_{uuid.uuid4().hex[:9]}"


class RecommendationEngine:
    """
    Rule-based recommendation engine.

    Each instance owns a :class:`RecommendationSet` that the latest
    generation replaces; create one engine per dashboard or session.
    """

    def __init__(
        self,
        config: AdvisorConfig | None = None,
        *,
        copy: RecommendationCopy | None = None,
        clock: Callable[[], datetime] = utc_now,
        store: RecommendationSet | None = None,
    ):
        self.config = config or AdvisorConfig()
        self.copy = copy or RecommendationCopy()
        self.clock = clock
        self.store = store if store is not None else RecommendationSet()

    @property
    def ttl(self) -> timedelta:
        return timedelta(hours=self.config.recommendation_ttl_hours)

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def generate_recommendations(
        self,
        sensors: Sequence[SensorReading],
        crop_context: CropContext,
        devices: Sequence[Any] | None = None,
        weather: WeatherSnapshot | None = None,
    ) -> list[Recommendation]:
        """
        Generate recommendations for one crop and replace the current set.

        Args:
            sensors: Latest readings, processed in the given order
            crop_context: Crop being evaluated
            devices: Farm devices, passed through and not inspected
            weather: Optional current weather snapshot

        Returns:
            Recommendations sorted by priority
        """
        now = self.clock()
        thresholds = get_thresholds_for_crop(crop_context.crop_name)
        recommendations: list[Recommendation] = []

        for reading in sensors:
            classification = classify_reading(reading, thresholds)
            if classification is None:
                continue
            recommendation = self._from_classification(classification, crop_context, now)
            if recommendation is not None:
                recommendations.append(recommendation)

        recommendations.extend(self._analyze_growth_stage(crop_context, now))

        if weather is not None:
            recommendations.extend(self._analyze_weather(weather, crop_context, sensors, now))

        recommendations = sort_by_priority(recommendations)
        self.store.replace(recommendations, updated_at=now)

        logger.info(
            "Generated %d recommendations for crop %s (%d readings, %d devices, weather=%s)",
            len(recommendations),
            crop_context.crop_name,
            len(sensors),
            len(devices or ()),
            weather is not None,
        )
        return recommendations

    def _from_classification(
        self, classification: ReadingClassification, context: CropContext, now: datetime
    ) -> Recommendation | None:
        rule = SENSOR_RULES.get((classification.metric, classification.bucket))
        if rule is None:
            logger.debug(
                "No rule for %s %s (value=%s)",
                classification.metric,
                classification.bucket,
                classification.reading.value,
            )
            return None

        t = classification.threshold_range
        metadata = RecommendationMetadata(
            sensor_type=classification.metric.value,
            current_value=classification.reading.value,
            optimal_range=OptimalRange(min=t.optimal_min, max=t.optimal_max),
            unit=METRIC_UNITS[classification.metric],
            crop_name=context.crop_name,
            weather_factor=rule.weather_factor,
        )
        return self._create(rule, metadata, now)

    def _analyze_growth_stage(self, context: CropContext, now: datetime) -> list[Recommendation]:
        growth = context.growth_progress(now)
        if growth is None:
            return []

        cfg = self.config
        metadata = RecommendationMetadata(crop_name=context.crop_name)
        kinds = []

        if 0 < growth.days_to_harvest <= cfg.harvest_soon_days:
            kinds.append(RecommendationKind.HARVEST_SOON)
        if -cfg.harvest_overdue_days < growth.days_to_harvest <= 0:
            kinds.append(RecommendationKind.HARVEST_READY)
        if growth.progress < 25:
            kinds.append(RecommendationKind.GROWTH_SEEDLING)
        if 50 <= growth.progress < 75:
            kinds.append(RecommendationKind.GROWTH_FLOWERING)

        logger.debug(
            "Crop %s at %.1f%% progress, %.1f days to harvest",
            context.crop_name,
            growth.progress,
            growth.days_to_harvest,
        )
        return [self._create(CONTEXT_RULES[kind], metadata, now) for kind in kinds]

    def _analyze_weather(
        self,
        weather: WeatherSnapshot,
        context: CropContext,
        sensors: Sequence[SensorReading],
        now: datetime,
    ) -> list[Recommendation]:
        cfg = self.config
        metadata = RecommendationMetadata(crop_name=context.crop_name, weather_factor=True)
        kinds = []

        if weather.mentions("rain") and any(
            route_metric(s.sensor_type) is MetricFamily.MOISTURE and s.value < cfg.rain_moisture_limit
            for s in sensors
        ):
            kinds.append(RecommendationKind.WEATHER_RAIN_EXPECTED)

        temperature = weather.temperature
        if (temperature is not None and temperature < cfg.frost_temperature) or weather.mentions(
            "frost", include_condition=False
        ):
            kinds.append(RecommendationKind.WEATHER_FROST_WARNING)

        if temperature is not None and temperature > cfg.heat_temperature:
            kinds.append(RecommendationKind.WEATHER_HEAT_WARNING)

        return [self._create(CONTEXT_RULES[kind], metadata, now) for kind in kinds]

    def _create(self, rule: RecommendationRule, metadata: RecommendationMetadata, now: datetime) -> Recommendation:
        text = self.copy.render(rule.kind, metadata)
        return Recommendation(
            id=generate_recommendation_id(now),
            kind=rule.kind,
            category=rule.category,
            priority=rule.priority,
            title=text.title,
            description=text.description,
            reason=text.reason,
            impact=text.impact,
            icon=rule.icon,
            color=rule.color,
            action_label=text.action_label,
            action_type=rule.action_type,
            metadata=metadata,
            created_at=now,
            expires_at=now + self.ttl,
        )

    # ------------------------------------------------------------------
    # Current set
    # ------------------------------------------------------------------

    def dismiss_recommendation(self, recommendation_id: str) -> bool:
        return self.store.dismiss(recommendation_id)

    def mark_as_executed(self, recommendation_id: str) -> bool:
        return self.store.mark_executed(recommendation_id)

    def clear_recommendations(self) -> None:
        self.store.clear()
