from __future__ import annotations

from typing import Annotated, Any
from litestar import get
from litestar.params import Dependency
from geotrust.config.settings import Settings


@get("/settings")
async def read_settings(settings: Annotated[Settings, Dependency(skip_validation=True)]) -> dict[str, Any]:
    """Endpoint to read current application settings."""
    return settings.model_dump(mode="json")
