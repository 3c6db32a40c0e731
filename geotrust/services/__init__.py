"""Services layer - request enrichment and external database integrations."""
from .enrichment import EnrichmentPipeline

__all__ = ["EnrichmentPipeline"]
