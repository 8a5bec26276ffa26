"""Centralized exception hierarchy for SmartFarm.

The advisory rules are permissive by nature (unknown crops fall back to the
default table, unclassifiable readings are skipped), so only construction of
invalid static data and broken configuration raise.

Hierarchy
---------
::

    SmartFarmError
    ├── ValidationError     (invalid threshold table / value object)
    └── ConfigurationError  (missing / invalid config)
"""

from __future__ import annotations


class SmartFarmError(Exception):
    """Base exception for all SmartFarm errors.

    Parameters
    ----------
    message:
        Human-readable description.
    detail:
        Optional machine-readable context dict attached to the error for
        structured logging.
    """

    def __init__(self, message: str = "", *, detail: dict | None = None) -> None:
        super().__init__(message)
        self.detail = detail or {}


class ValidationError(SmartFarmError):
    """A value object was built from invalid or inconsistent input."""


class ConfigurationError(SmartFarmError):
    """Required configuration is missing or malformed."""
