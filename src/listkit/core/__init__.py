"""Shared configuration for listkit."""

from listkit.core.config import Settings, settings

__all__ = [
    "Settings",
    "settings",
]
