"""Logging configuration for the application.

Includes:
- Litestar LoggingConfig (queue listener, standard formatter)
- request/response logging middleware
"""
from __future__ import annotations

from litestar.logging import LoggingConfig
from litestar.middleware.logging import LoggingMiddlewareConfig

from geotrust.config.settings import Settings


def build_logging_config(settings: Settings) -> LoggingConfig:
    """Root logger at the configured API log level, routed through the queue listener."""
    return LoggingConfig(
        root={"level": settings.api.log_level, "handlers": ["queue_listener"]},
        formatters={
            "standard": {"format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"}
        },
        log_exceptions="always",
    )


logging_middleware_config = LoggingMiddlewareConfig()
