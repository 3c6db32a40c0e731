"""Shared dependency providers for API layer."""
from __future__ import annotations

from litestar import Request

from geotrust.config.settings import Settings
from geotrust.server.middleware import get_enrichment
from geotrust.services.enrichment import EnrichmentPipeline, EnrichmentResult


def provide_settings(request: Request) -> Settings:
    """Provide the Settings the application was created with."""
    return request.app.state.settings


def provide_pipeline(request: Request) -> EnrichmentPipeline:
    """Provide the EnrichmentPipeline built at application startup."""
    return request.app.state.pipeline


def provide_enrichment(request: Request) -> EnrichmentResult | None:
    """Provide the EnrichmentResult attached to the current request.

    Returns None if the enrichment middleware did not run for this request.
    """
    return get_enrichment(request)
