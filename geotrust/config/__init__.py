"""Configuration module for GeoTrust API."""

from geotrust.config.settings import (
    APISettings,
    GeoIPSettings,
    RiskSettings,
    Settings,
    get_settings,
)

__all__ = [
    "Settings",
    "get_settings",
    "APISettings",
    "GeoIPSettings",
    "RiskSettings",
]
