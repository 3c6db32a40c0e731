"""DTOs for enrichment data transfer."""

from __future__ import annotations
from dataclasses import dataclass

from litestar.dto import DataclassDTO, DTOConfig

from geotrust.services.enrichment.schemas import EnrichmentResult, GeoRecord


@dataclass(frozen=True)
class IPLookupResult:
    """Geo data and datacenter status for an arbitrary IP address."""

    geo: GeoRecord
    is_datacenter_ip: bool


class EnrichmentResultDTO(DataclassDTO[EnrichmentResult]):
    """Data transfer object for EnrichmentResult."""

    config = DTOConfig(rename_strategy="camel")


class IPLookupResultDTO(DataclassDTO[IPLookupResult]):
    """Data transfer object for IPLookupResult."""

    config = DTOConfig(rename_strategy="camel")
