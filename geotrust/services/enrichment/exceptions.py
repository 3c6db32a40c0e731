"""Exceptions raised while configuring the enrichment pipeline."""
from __future__ import annotations

from pathlib import Path


class GeoTrustError(Exception):
    """Base class for enrichment errors."""


class GeoDatabaseError(GeoTrustError):
    """A configured geolocation database could not be opened."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"GeoIP database {self.path} could not be loaded: {reason}")
