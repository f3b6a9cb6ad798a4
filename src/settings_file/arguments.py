"""Render settings as command line flags."""

from __future__ import annotations

from .settings import Settings


def flag(name: str, value: str) -> str:
    prefix = "-" if len(name) == 1 else "--"
    return f"{prefix}{name}={value}"


def to_arguments(settings: Settings, sort_keys: bool = False) -> list[str]:
    """Return ``-k=value`` / ``--key=value`` strings for every setting.

    Without ``sort_keys`` the order follows the store's iteration order,
    which callers should not rely on.
    """

    names = sorted(settings) if sort_keys else list(settings)
    return [flag(name, settings.get_string(name)) for name in names]
