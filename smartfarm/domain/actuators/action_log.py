"""
Action Log Replay
=================
Infers actuator on/off state from the free-text command log.

Action URIs look like ``<scheme>/<farm>/<device>/<action>``; only the last
path segment carries the command. Known command names are looked up in a
synonym table, anything else falls back to keyword families.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable

from smartfarm.domain.actuators.actuator_state import ActuatorState
from smartfarm.enums import ActionStatus, ActuatorType

logger = logging.getLogger(__name__)

MIN_ACTION_SEGMENTS = 3

ACTION_SYNONYMS: dict[str, tuple[ActuatorType, bool]] = {
    "ventilator_off": (ActuatorType.FAN, False),
    "fan_off": (ActuatorType.FAN, False),
    "ventilator_on": (ActuatorType.FAN, True),
    "fan_on": (ActuatorType.FAN, True),
    "close_roof": (ActuatorType.ROOF, False),
    "open_roof": (ActuatorType.ROOF, True),
    "light_off": (ActuatorType.LIGHT, False),
    "lights_off": (ActuatorType.LIGHT, False),
    "light_on": (ActuatorType.LIGHT, True),
    "lights_on": (ActuatorType.LIGHT, True),
    "humidifier_off": (ActuatorType.HUMIDIFIER, False),
    "humidifier_on": (ActuatorType.HUMIDIFIER, True),
}

ACTION_KEYWORDS: tuple[tuple[ActuatorType, tuple[str, ...]], ...] = (
    (ActuatorType.FAN, ("ventilator", "fan")),
    (ActuatorType.ROOF, ("roof",)),
    (ActuatorType.LIGHT, ("light",)),
    (ActuatorType.HUMIDIFIER, ("humidifier",)),
)


@dataclass(frozen=True)
class ActionLogEntry:
    """One command sent to a device, as recorded by the backend."""

    action_uri: str
    created_at: datetime
    status: str = ""

    @property
    def acknowledged(self) -> bool:
        return self.status.strip().lower() == ActionStatus.ACK.value


@dataclass(frozen=True)
class ParsedAction:
    actuator_type: ActuatorType
    is_on: bool


def parse_action_uri(action_uri: str | None) -> ParsedAction | None:
    """
    Extract actuator type and on/off state from an action URI.

    Returns:
        ParsedAction, or None for malformed URIs and unknown commands
    """
    if not action_uri:
        return None
    parts = action_uri.split("/")
    if len(parts) < MIN_ACTION_SEGMENTS:
        return None

    action = parts[-1].strip().lower()
    mapped = ACTION_SYNONYMS.get(action)
    if mapped is not None:
        return ParsedAction(*mapped)
    return _match_action_keywords(action)


def _match_action_keywords(action: str) -> ParsedAction | None:
    for actuator_type, keywords in ACTION_KEYWORDS:
        if any(keyword in action for keyword in keywords):
            is_on = "_on" in action or "open" in action
            return ParsedAction(actuator_type, is_on)
    return None


def resolve_actuator_states(entries: Iterable[ActionLogEntry]) -> dict[ActuatorType, ActuatorState]:
    """
    Latest state per actuator from a batch of log entries.

    The newest entry wins. On equal timestamps an acknowledged entry beats an
    unacknowledged one; otherwise the entry that appears later in ``entries``
    wins. Actuators without a qualifying entry are absent from the result.
    """
    latest: dict[ActuatorType, tuple[ActionLogEntry, ParsedAction]] = {}

    # Stable ascending sort keeps source order among equal timestamps.
    for entry in sorted(entries, key=lambda e: e.created_at):
        parsed = parse_action_uri(entry.action_uri)
        if parsed is None:
            logger.debug("Ignoring action %r", entry.action_uri)
            continue

        current = latest.get(parsed.actuator_type)
        if current is None or _supersedes(entry, current[0]):
            latest[parsed.actuator_type] = (entry, parsed)

    return {
        actuator_type: ActuatorState(actuator_type, is_on=parsed.is_on, last_update=entry.created_at)
        for actuator_type, (entry, parsed) in latest.items()
    }


def _supersedes(candidate: ActionLogEntry, existing: ActionLogEntry) -> bool:
    if candidate.created_at != existing.created_at:
        return candidate.created_at > existing.created_at
    return candidate.acknowledged or not existing.acknowledged
