"""Enrichment API endpoints."""
from __future__ import annotations

from typing import Annotated

from litestar import Controller, get
from litestar.exceptions import NotFoundException
from litestar.params import Dependency

from geotrust.domain.enrichment.dtos import (
    EnrichmentResultDTO,
    IPLookupResult,
    IPLookupResultDTO,
)
from geotrust.services.enrichment import EnrichmentPipeline, EnrichmentResult


class EnrichmentController(Controller):
    """
    Request enrichment endpoints.

    Exposes the enrichment attached to the current request and ad hoc
    lookups of arbitrary addresses.
    """

    path = "/api/v1"
    tags = ["Enrichment"]

    @get("/info", return_dto=EnrichmentResultDTO)
    async def info(
        self,
        enrichment: Annotated[EnrichmentResult | None, Dependency(skip_validation=True)],
    ) -> EnrichmentResult:
        """Return the enrichment result of this request."""
        if enrichment is None:
            raise NotFoundException(detail="No enrichment result attached to this request")
        return enrichment

    @get("/lookup/{ip:str}", return_dto=IPLookupResultDTO)
    async def lookup(
        self,
        ip: str,
        pipeline: Annotated[EnrichmentPipeline, Dependency(skip_validation=True)],
    ) -> IPLookupResult:
        """Look up geo data and datacenter status for an IP address."""
        return IPLookupResult(
            geo=pipeline.geo_lookup.lookup(ip),
            is_datacenter_ip=pipeline.datacenter.is_datacenter(ip),
        )
