"""
Recommendation Set
==================
Caller-owned holder of the current recommendations and the read views the
dashboards use (active, critical, counts).

A fresh generation replaces the whole set. Dismiss / execute only flip flags
on existing records; unknown ids are ignored.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable

from smartfarm.domain.recommendation import Recommendation
from smartfarm.enums import RecommendationPriority

logger = logging.getLogger(__name__)


class RecommendationSet:
    """Current recommendation set for one dashboard / session."""

    def __init__(self) -> None:
        self._recommendations: list[Recommendation] = []
        self.last_update: datetime | None = None

    def replace(self, recommendations: Iterable[Recommendation], updated_at: datetime | None = None) -> None:
        self._recommendations = list(recommendations)
        self.last_update = updated_at

    @property
    def all(self) -> list[Recommendation]:
        return list(self._recommendations)

    @property
    def active(self) -> list[Recommendation]:
        """Recommendations neither dismissed nor executed."""
        return [r for r in self._recommendations if r.is_active]

    @property
    def critical(self) -> list[Recommendation]:
        return [r for r in self.active if r.priority is RecommendationPriority.CRITICAL]

    @property
    def high_priority(self) -> list[Recommendation]:
        return [r for r in self.active if r.priority is RecommendationPriority.HIGH]

    @property
    def count(self) -> int:
        return len(self.active)

    @property
    def critical_count(self) -> int:
        return len(self.critical)

    @property
    def has_recommendations(self) -> bool:
        return self.count > 0

    def get(self, recommendation_id: str) -> Recommendation | None:
        for recommendation in self._recommendations:
            if recommendation.id == recommendation_id:
                return recommendation
        return None

    def dismiss(self, recommendation_id: str) -> bool:
        """Mark a recommendation as dismissed. Returns False if the id is unknown."""
        recommendation = self.get(recommendation_id)
        if recommendation is None:
            logger.debug("Dismiss ignored, no recommendation %s", recommendation_id)
            return False
        recommendation.dismissed = True
        return True

    def mark_executed(self, recommendation_id: str) -> bool:
        """Mark a recommendation as executed. Returns False if the id is unknown."""
        recommendation = self.get(recommendation_id)
        if recommendation is None:
            logger.debug("Execute ignored, no recommendation %s", recommendation_id)
            return False
        recommendation.executed = True
        return True

    def clear(self) -> None:
        self._recommendations = []

    def expired(self, now: datetime) -> list[Recommendation]:
        """Active recommendations whose expiry time has passed."""
        return [r for r in self.active if r.is_expired(now)]

    def __len__(self) -> int:
        return len(self._recommendations)
