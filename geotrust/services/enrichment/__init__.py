"""Enrichment module - signal fusion, no HTTP dependencies."""
from .exceptions import GeoDatabaseError, GeoTrustError
from .geolookup import GeoIPLookup, merge_geo_records
from .pipeline import EnrichmentPipeline
from .schemas import ClientSignature, DeviceType, EnrichmentResult, GeoRecord, HeaderSignals, TrustLevel

__all__ = [
    "EnrichmentPipeline",
    "GeoIPLookup",
    "merge_geo_records",
    "GeoDatabaseError",
    "GeoTrustError",
    "EnrichmentResult",
    "GeoRecord",
    "HeaderSignals",
    "ClientSignature",
    "DeviceType",
    "TrustLevel",
]
