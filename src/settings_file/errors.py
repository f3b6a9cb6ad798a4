"""Error types raised by the settings store and builder."""

from __future__ import annotations


class SettingsError(Exception):
    """Base class for settings errors."""


class NotFoundError(SettingsError, LookupError):
    """Raised by strict accessors when a setting is missing."""


class TypeMismatchError(SettingsError, TypeError):
    """Raised when a stored setting can't be coerced to the requested type."""


class InvalidArgumentError(SettingsError, ValueError):
    """Raised when the builder is handed an invalid name or value."""
