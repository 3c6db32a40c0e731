"""Application factory for creating Litestar app instance."""

from __future__ import annotations

import logging

from litestar import Litestar
from litestar.datastructures import State
from litestar.di import Provide
from litestar.openapi import OpenAPIConfig

from geotrust.config.settings import Settings, get_settings
from geotrust.server import plugins
from geotrust.server.lifecycle import on_startup, on_shutdown
from geotrust.server.middleware import EnrichmentMiddleware
from geotrust.server.routes import get_route_handlers
from geotrust.services.enrichment import EnrichmentPipeline, GeoDatabaseError
from geotrust.api.dependencies import (
    provide_enrichment,
    provide_pipeline,
    provide_settings,
)

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    pipeline: EnrichmentPipeline | None = None,
) -> Litestar:
    """Create and configure the Litestar application.

    This factory function loads configuration, opens the GeoIP databases
    and initializes the app with the enrichment middleware, OpenAPI,
    dependency injection, etc.

    Args:
        settings: Settings to use instead of the cached environment settings.
        pipeline: Prebuilt pipeline; built from settings when omitted.

    Returns:
        Litestar: Configured application instance

    Raises:
        GeoDatabaseError: If a configured GeoIP database cannot be opened.
    """
    settings = settings or get_settings()

    if pipeline is None:
        try:
            pipeline = EnrichmentPipeline.from_settings(settings)
        except GeoDatabaseError as e:
            logger.critical("Refusing to start: %s", e)
            raise

    # Configure OpenAPI
    openapi_config = OpenAPIConfig(
        title=settings.name,
        version=settings.version,
        description=settings.description,
        create_examples=True,
    )

    # Create app with configuration
    app = Litestar(
        debug=settings.debug,
        route_handlers=get_route_handlers(),
        on_startup=[on_startup],
        on_shutdown=[on_shutdown],
        dependencies={
            "pipeline": Provide(provide_pipeline, sync_to_thread=False),
            "enrichment": Provide(provide_enrichment, sync_to_thread=False),
            "settings": Provide(provide_settings, sync_to_thread=False),
        },
        state=State({"pipeline": pipeline, "settings": settings}),
        logging_config=plugins.build_logging_config(settings),
        openapi_config=openapi_config,
        middleware=[
            plugins.logging_middleware_config.middleware,
            EnrichmentMiddleware(pipeline),
        ],
    )

    return app
