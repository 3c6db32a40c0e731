"""Health endpoint reporting loaded GeoIP databases."""
from __future__ import annotations

from typing import Annotated, Any

from litestar import get
from litestar.params import Dependency

from geotrust.services.enrichment import EnrichmentPipeline


@get("/health")
async def health(pipeline: Annotated[EnrichmentPipeline, Dependency(skip_validation=True)]) -> dict[str, Any]:
    """Liveness check.

    Returns:
        Dictionary with the service status and the database type of every
        loaded GeoIP database keyed by slot (country, city, asn).
    """
    return {
        "status": "ok",
        "databases": pipeline.loaded_databases,
        "datacenter_blocks": len(pipeline.datacenter.blocks),
    }
