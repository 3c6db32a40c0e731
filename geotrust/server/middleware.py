"""Middleware attaching an EnrichmentResult to every HTTP request."""
from __future__ import annotations

from typing import TYPE_CHECKING

from litestar.concurrency import sync_to_thread
from litestar.datastructures import Headers
from litestar.enums import ScopeType
from litestar.middleware import ASGIMiddleware

from geotrust.services.enrichment import EnrichmentPipeline, EnrichmentResult

if TYPE_CHECKING:
    from litestar.connection import ASGIConnection
    from litestar.types import ASGIApp, Receive, Scope, Send

ENRICHMENT_STATE_KEY = "geotrust.enrichment"


class EnrichmentMiddleware(ASGIMiddleware):
    """Runs the enrichment pipeline once per request and stores the result
    in the request scope state under ``ENRICHMENT_STATE_KEY``.

    The synchronous pipeline runs in a worker thread.
    """

    scopes = (ScopeType.HTTP,)

    def __init__(self, pipeline: EnrichmentPipeline) -> None:
        self.pipeline = pipeline

    async def handle(self, scope: "Scope", receive: "Receive", send: "Send", next_app: "ASGIApp") -> None:
        client = scope.get("client")
        peer = client[0] if client else None
        result = await sync_to_thread(self.pipeline.enrich, Headers.from_scope(scope), peer)
        scope.setdefault("state", {})[ENRICHMENT_STATE_KEY] = result
        await next_app(scope, receive, send)


def get_enrichment(connection: "ASGIConnection") -> EnrichmentResult | None:
    """Return the request's EnrichmentResult, or None if the middleware did not run."""
    return connection.scope.get("state", {}).get(ENRICHMENT_STATE_KEY)
