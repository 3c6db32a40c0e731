"""Application lifecycle hooks for startup and shutdown."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from geotrust.services.enrichment import EnrichmentPipeline

if TYPE_CHECKING:
    from litestar import Litestar

logger = logging.getLogger(__name__)


async def on_startup(app: "Litestar") -> None:
    """Report which GeoIP databases the enrichment pipeline serves from."""
    pipeline: EnrichmentPipeline = app.state.pipeline
    databases = pipeline.loaded_databases
    if not databases:
        logger.warning("Serving without GeoIP databases: every request will be scored 'unknown'.")
    for slot, database_type in databases.items():
        logger.info("GeoIP %s database: %s", slot, database_type)
    logger.info("Datacenter blocks loaded: %d", len(pipeline.datacenter.blocks))


async def on_shutdown(app: "Litestar") -> None:
    """Close the GeoIP readers."""
    pipeline: EnrichmentPipeline | None = getattr(app.state, "pipeline", None)
    if pipeline:
        pipeline.close()
        logger.info("Closed GeoIP databases")
