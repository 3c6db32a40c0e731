from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from geotrust.services.enrichment.constants import (
    ALLOWED_GEOIP_LOCALES,
    DEFAULT_ACCURACY_RADIUS_THRESHOLD,
    DEFAULT_DATACENTER_CIDRS,
    DEFAULT_TIMEZONE_HEADER,
    DEFAULT_VPN_ORG_KEYWORDS,
)


class GeoIPSettings(BaseSettings):
    """GeoIP database configuration settings.

    Each database is optional. A configured database must open at startup,
    otherwise the application refuses to start.
    """

    model_config = SettingsConfigDict(env_prefix="GEOIP_", env_file=".env", extra="ignore")

    country_db_path: Path | None = Field(
        default=None,
        description="Path to a GeoIP2/GeoLite2 Country database file",
    )
    city_db_path: Path | None = Field(
        default=None,
        description="Path to a GeoIP2/GeoLite2 City database file",
    )
    asn_db_path: Path | None = Field(
        default=None,
        description="Path to a GeoLite2 ASN database file",
    )
    locales: list[str] = Field(
        default=["en"],
        description="List of GeoIP locales to use",
    )
    validate_db_path: bool = Field(
        default=False,
        description="Validate that the configured GeoIP database files exist (set to True for production)"
    )
    validate_locales: bool = Field(
        default=True,
        description="Validate that the specified GeoIP locales are supported"
    )

    @property
    def db_paths(self) -> dict[str, Path]:
        """Configured database paths keyed by slot."""
        paths = {
            "country": self.country_db_path,
            "city": self.city_db_path,
            "asn": self.asn_db_path,
        }
        return {slot: path for slot, path in paths.items() if path is not None}

    @model_validator(mode="after")
    def validate_geoip_db_exists(self) -> "GeoIPSettings":
        """Ensure configured GeoIP database files exist if validation is enabled."""
        if self.validate_db_path:
            missing = [str(path) for path in self.db_paths.values() if not path.exists()]
            if missing:
                raise ValueError(f"GeoIP database file not found: {', '.join(missing)}")
        return self

    @model_validator(mode="after")
    def validate_geoip_locales(self) -> "GeoIPSettings":
        """Ensure GeoIP locales are valid if validation is enabled."""
        if self.validate_locales:
            invalid_locales = [loc for loc in self.locales if loc not in ALLOWED_GEOIP_LOCALES]
            if invalid_locales:
                raise ValueError(f"Invalid GeoIP locales: {invalid_locales}. Allowed locales are: {ALLOWED_GEOIP_LOCALES}")
        return self


class RiskSettings(BaseSettings):
    """Reference tables and thresholds for the risk heuristics."""

    model_config = SettingsConfigDict(env_prefix="RISK_", env_file=".env", extra="ignore")

    datacenter_cidrs: list[str] = Field(
        default=list(DEFAULT_DATACENTER_CIDRS),
        description="Network blocks (CIDR) treated as datacenter/hosting addresses",
    )
    vpn_org_keywords: list[str] = Field(
        default=list(DEFAULT_VPN_ORG_KEYWORDS),
        description="Case-insensitive substrings of network organization names that indicate hosting or VPN providers",
    )
    accuracy_radius_threshold: int = Field(
        default=DEFAULT_ACCURACY_RADIUS_THRESHOLD,
        ge=0,
        description="Location accuracy radius (km) above which a fix is considered too coarse",
    )
    timezone_header: str = Field(
        default=DEFAULT_TIMEZONE_HEADER,
        description="Request header carrying the client-declared timezone",
    )
    fold_datacenter_into_vpn: bool = Field(
        default=False,
        description="Also flag datacenter addresses as VPN suspects",
    )


class APISettings(BaseSettings):
    """API server configuration settings."""

    model_config = SettingsConfigDict(env_prefix="API_", env_file=".env", extra="ignore")

    host: str = Field(default="0.0.0.0", description="API server host")
    port: int = Field(default=8000, description="API server port")
    workers: int = Field(default=1, description="Number of worker processes")
    reload: bool = Field(default=False, description="Enable auto-reload on code changes")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )


class Settings(BaseSettings):
    """Main application settings.

    This class aggregates all configuration sections and provides
    a single point of access for application configuration.

    Configuration precedence (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values

    Example .env file:
        APP_NAME=GeoTrust
        APP_DEBUG=true
        GEOIP_COUNTRY_DB_PATH=/data/GeoLite2-Country.mmdb
        GEOIP_CITY_DB_PATH=/data/GeoLite2-City.mmdb
        GEOIP_ASN_DB_PATH=/data/GeoLite2-ASN.mmdb
        RISK_ACCURACY_RADIUS_THRESHOLD=500
    """

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application metadata
    name: str = Field(default="GeoTrust API", description="Application name")
    version: str = Field(default="0.1.0", description="Application version")
    description: str = Field(
        default="Request enrichment with GeoIP, client signature and trust scoring",
        description="Application description",
    )
    debug: bool = Field(default=False, description="Enable debug mode")
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Application environment",
    )

    # Sub-configurations
    api: APISettings = Field(default_factory=APISettings)
    geoip: GeoIPSettings = Field(default_factory=GeoIPSettings)
    risk: RiskSettings = Field(default_factory=RiskSettings)

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    This function is cached to ensure we only parse configuration once.
    Use this function throughout the application to access settings.

    Returns:
        Settings: Application settings instance
    """
    # Set GEOIP_VALIDATE_DB_PATH=true in production to check database paths early
    return Settings()
