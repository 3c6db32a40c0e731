from .enrichment.dtos import EnrichmentResultDTO
from .enrichment.dtos import IPLookupResult
from .enrichment.dtos import IPLookupResultDTO

__all__ = [
    "EnrichmentResultDTO",
    "IPLookupResult",
    "IPLookupResultDTO",
]
