"""Central route registration."""
from litestar.types import ControllerRouterHandler

from geotrust.api.v1.enrichment_controller import EnrichmentController
from geotrust.api.v1.health import health
from geotrust.api.v1.settings import read_settings

def get_route_handlers() -> list[ControllerRouterHandler]:
    """Get all route handlers for the application."""
    return [
        EnrichmentController,
        health,
        read_settings,
    ]
