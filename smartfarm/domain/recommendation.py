"""
Recommendation Entity
=====================
A single actionable piece of advice produced by the recommendation engine.

Only ``dismissed`` and ``executed`` change after creation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from smartfarm.enums import RecommendationCategory, RecommendationKind, RecommendationPriority


@dataclass(frozen=True)
class OptimalRange:
    min: float
    max: float


@dataclass(frozen=True)
class RecommendationMetadata:
    """Context the UI shows next to a recommendation."""

    sensor_type: str | None = None
    current_value: float | None = None
    optimal_range: OptimalRange | None = None
    unit: str | None = None
    crop_name: str | None = None
    weather_factor: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "sensor_type": self.sensor_type,
            "current_value": self.current_value,
            "optimal_range": (
                {"min": self.optimal_range.min, "max": self.optimal_range.max} if self.optimal_range else None
            ),
            "unit": self.unit,
            "crop_name": self.crop_name,
            "weather_factor": self.weather_factor,
        }


@dataclass
class Recommendation:
    """A single recommendation."""

    id: str
    kind: RecommendationKind
    category: RecommendationCategory
    priority: RecommendationPriority
    title: str
    description: str
    reason: str
    impact: str
    icon: str
    color: str
    action_label: str
    action_type: str
    created_at: datetime
    expires_at: datetime
    metadata: RecommendationMetadata = field(default_factory=RecommendationMetadata)
    device_id: str | None = None
    dismissed: bool = False
    executed: bool = False

    @property
    def is_active(self) -> bool:
        return not self.dismissed and not self.executed

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at <= now

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "kind": self.kind.value,
            "type": self.category.value,
            "priority": self.priority.value,
            "title": self.title,
            "description": self.description,
            "reason": self.reason,
            "impact": self.impact,
            "icon": self.icon,
            "color": self.color,
            "action_label": self.action_label,
            "action_type": self.action_type,
            "device_id": self.device_id,
            "metadata": self.metadata.to_dict(),
            "created_at": self.created_at.isoformat(),
            "expires_at": self.expires_at.isoformat(),
            "dismissed": self.dismissed,
            "executed": self.executed,
        }
