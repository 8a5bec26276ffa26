"""
Recommendation Copy
===================
Human-readable text for each recommendation kind.

The engine decides *what* to recommend (kind, category, priority, metadata);
this catalog only turns a kind into words. Callers that localise their UI
pass their own catalog to :class:`RecommendationEngine`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from smartfarm.domain.recommendation import RecommendationMetadata
from smartfarm.enums import RecommendationKind


@dataclass(frozen=True)
class CopyTemplate:
    title: str
    description: str
    reason: str
    impact: str
    action_label: str


@dataclass(frozen=True)
class RenderedCopy:
    title: str
    description: str
    reason: str
    impact: str
    action_label: str


K = RecommendationKind

ENGLISH_TEMPLATES: dict[RecommendationKind, CopyTemplate] = {
    K.MOISTURE_CRITICAL_LOW: CopyTemplate(
        title="Water your {crop_name} now",
        description="Soil moisture is {value}{unit}, far below the optimal {optimal_min}-{optimal_max}{unit}.",
        reason="Critically dry soil stops root uptake within hours.",
        impact="Prevents wilting and yield loss.",
        action_label="Water now",
    ),
    K.MOISTURE_WARNING_LOW: CopyTemplate(
        title="Schedule watering for {crop_name}",
        description="Soil moisture is {value}{unit}, below the optimal {optimal_min}-{optimal_max}{unit}.",
        reason="Moisture is trending towards stress levels.",
        impact="Keeps growth steady before stress sets in.",
        action_label="Schedule watering",
    ),
    K.MOISTURE_CRITICAL_HIGH: CopyTemplate(
        title="Soil is waterlogged around your {crop_name}",
        description="Soil moisture is {value}{unit}, above the optimal {optimal_min}-{optimal_max}{unit}.",
        reason="Saturated soil starves roots of oxygen and invites rot.",
        impact="Avoids root disease and nutrient leaching.",
        action_label="Check drainage",
    ),
    K.MOISTURE_OPTIMAL: CopyTemplate(
        title="Soil moisture is optimal for {crop_name}",
        description="Soil moisture is {value}{unit}, within {optimal_min}-{optimal_max}{unit}.",
        reason="Current irrigation matches the crop's needs.",
        impact="No action needed; keep the current routine.",
        action_label="View details",
    ),
    K.TEMPERATURE_CRITICAL_LOW: CopyTemplate(
        title="Protect your {crop_name} from cold",
        description="Temperature is {value}{unit}, below the safe minimum.",
        reason="Near-freezing temperatures damage plant tissue.",
        impact="Prevents cold injury and crop loss.",
        action_label="Protect from frost",
    ),
    K.TEMPERATURE_CRITICAL_HIGH: CopyTemplate(
        title="Cool down your {crop_name}",
        description="Temperature is {value}{unit}, above the safe maximum of the optimal {optimal_min}-{optimal_max}{unit}.",
        reason="Heat stress causes flower drop and sunscald.",
        impact="Protects flowering and fruit set.",
        action_label="Activate cooling",
    ),
    K.TEMPERATURE_WARNING_LOW: CopyTemplate(
        title="Temperature is getting low for {crop_name}",
        description="Temperature is {value}{unit}, below the optimal {optimal_min}-{optimal_max}{unit}.",
        reason="Cool conditions slow growth.",
        impact="Early attention avoids cold stress.",
        action_label="Monitor temperature",
    ),
    K.HUMIDITY_CRITICAL_HIGH: CopyTemplate(
        title="Humidity is too high for {crop_name}",
        description="Humidity is {value}{unit}, above the optimal {optimal_min}-{optimal_max}{unit}.",
        reason="Damp air favours fungal disease.",
        impact="Reduces mildew and blight risk.",
        action_label="Improve ventilation",
    ),
    K.HUMIDITY_CRITICAL_LOW: CopyTemplate(
        title="Air is too dry for {crop_name}",
        description="Humidity is {value}{unit}, below the optimal {optimal_min}-{optimal_max}{unit}.",
        reason="Dry air increases transpiration stress.",
        impact="Keeps leaves turgid and pollination healthy.",
        action_label="Mist crop",
    ),
    K.HARVEST_SOON: CopyTemplate(
        title="{crop_name} harvest is coming up",
        description="Expected harvest is less than a week away.",
        reason="Preparing labour and storage early avoids losses.",
        impact="Harvest at peak quality.",
        action_label="Prepare harvest",
    ),
    K.HARVEST_READY: CopyTemplate(
        title="{crop_name} is ready to harvest",
        description="The expected harvest date has been reached.",
        reason="Delaying harvest lowers quality.",
        impact="Secures the crop at peak ripeness.",
        action_label="Harvest now",
    ),
    K.GROWTH_SEEDLING: CopyTemplate(
        title="{crop_name} is in the seedling stage",
        description="Young plants need steady moisture and gentle conditions.",
        reason="Seedlings are most sensitive to stress.",
        impact="Strong establishment for the rest of the season.",
        action_label="View growth tips",
    ),
    K.GROWTH_FLOWERING: CopyTemplate(
        title="Feed your {crop_name} during flowering",
        description="The crop is entering flowering and fruiting.",
        reason="Nutrient demand peaks at this stage.",
        impact="Better fruit set and yield.",
        action_label="Apply fertilizer",
    ),
    K.WEATHER_RAIN_EXPECTED: CopyTemplate(
        title="Rain expected, skip watering",
        description="Rain is forecast for your {crop_name} field.",
        reason="Natural rainfall will restore soil moisture.",
        impact="Saves water and avoids over-irrigation.",
        action_label="Skip watering",
    ),
    K.WEATHER_FROST_WARNING: CopyTemplate(
        title="Frost warning for {crop_name}",
        description="Freezing temperatures are expected.",
        reason="Frost kills exposed tissue overnight.",
        impact="Covering crops prevents frost damage.",
        action_label="Protect from frost",
    ),
    K.WEATHER_HEAT_WARNING: CopyTemplate(
        title="Heat warning for {crop_name}",
        description="Extreme heat is expected today.",
        reason="High temperatures cause heat stress and sunburn.",
        impact="Shade and extra watering protect yield.",
        action_label="Provide shade",
    ),
}


def _format_number(value: float | None) -> str:
    if value is None:
        return ""
    return f"{value:g}"


class RecommendationCopy:
    """Catalog of text templates keyed by recommendation kind."""

    def __init__(self, templates: Mapping[RecommendationKind, CopyTemplate] | None = None):
        self.templates = dict(ENGLISH_TEMPLATES)
        if templates:
            self.templates.update(templates)

    def render(self, kind: RecommendationKind, metadata: RecommendationMetadata) -> RenderedCopy:
        """Fill the template for ``kind`` with crop name, value, unit and optimal range."""
        template = self.templates[kind]
        optimal = metadata.optimal_range
        params = {
            "crop_name": metadata.crop_name or "",
            "value": _format_number(metadata.current_value),
            "unit": metadata.unit or "",
            "optimal_min": _format_number(optimal.min) if optimal else "",
            "optimal_max": _format_number(optimal.max) if optimal else "",
        }
        return RenderedCopy(
            title=template.title.format(**params),
            description=template.description.format(**params),
            reason=template.reason.format(**params),
            impact=template.impact.format(**params),
            action_label=template.action_label.format(**params),
        )
