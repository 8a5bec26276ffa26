"""
Weather Snapshot
================
Current conditions supplied by the weather collaborator.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class WeatherSnapshot:
    """
    Current weather for the farm.

    Attributes:
        temperature: Air temperature in °C, None when unknown
        forecast: Free-text forecast (e.g. "light rain", "frost overnight")
        condition: Free-text current condition (e.g. "Rain", "Clear")
    """

    temperature: float | None = None
    forecast: str | None = None
    condition: str | None = None

    def mentions(self, keyword: str, *, include_condition: bool = True) -> bool:
        """Case-insensitive check of the forecast (and optionally condition) text."""
        keyword = keyword.lower()
        texts = [self.forecast]
        if include_condition:
            texts.append(self.condition)
        return any(keyword in text.lower() for text in texts if text)
