"""Application settings."""

from .settings import EnvironmentOption, Settings, get_settings

__all__ = [
    "EnvironmentOption",
    "Settings",
    "get_settings",
]
