"""Tests for configuration management."""

from pathlib import Path

import pytest

from geotrust.config import GeoIPSettings, RiskSettings, Settings, get_settings


def test_default_settings():
    """Test default settings are loaded correctly."""
    settings = Settings()

    assert settings.name == "GeoTrust API"
    assert settings.version == "0.1.0"
    assert settings.environment == "development"
    assert settings.debug is False


def test_environment_override(monkeypatch):
    """Test that environment variables override defaults."""
    monkeypatch.setenv("APP_NAME", "Custom Name")
    monkeypatch.setenv("APP_DEBUG", "true")
    monkeypatch.setenv("APP_ENVIRONMENT", "production")

    settings = Settings()

    assert settings.name == "Custom Name"
    assert settings.debug is True
    assert settings.environment == "production"


def test_geoip_settings_default_to_no_databases():
    """No database is configured unless a path is given."""
    settings = Settings()

    assert settings.geoip.country_db_path is None
    assert settings.geoip.city_db_path is None
    assert settings.geoip.asn_db_path is None
    assert settings.geoip.db_paths == {}


def test_geoip_settings(tmp_path: Path):
    """Test GeoIP configuration."""
    test_db = tmp_path / "GeoLite2-City.mmdb"
    test_db.touch()

    settings = Settings(geoip=GeoIPSettings(city_db_path=test_db, validate_db_path=True))

    assert settings.geoip.city_db_path == test_db
    assert settings.geoip.db_paths == {"city": test_db}


def test_geoip_missing_file():
    """Test GeoIP validation fails for missing file when validation is enabled."""
    with pytest.raises(ValueError, match="GeoIP database file not found"):
        GeoIPSettings(
            asn_db_path=Path("/nonexistent/GeoLite2-ASN.mmdb"),
            validate_db_path=True  # Enable validation
        )


def test_geoip_invalid_locale():
    """Unsupported locales are rejected when validation is enabled."""
    with pytest.raises(ValueError, match="Invalid GeoIP locales"):
        GeoIPSettings(locales=["xx"])


def test_api_settings():
    """Test API server configuration."""
    settings = Settings()

    assert settings.api.host == "0.0.0.0"
    assert settings.api.port == 8000
    assert settings.api.log_level in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def test_risk_settings_defaults():
    """Default datacenter blocks and threshold."""
    settings = RiskSettings()

    assert "34.0.0.0/8" in settings.datacenter_cidrs
    assert "amazon" in settings.vpn_org_keywords
    assert settings.accuracy_radius_threshold == 500
    assert settings.timezone_header == "X-Timezone"
    assert settings.fold_datacenter_into_vpn is False


def test_risk_settings_from_env(monkeypatch):
    """List and numeric risk settings can be set via environment variables."""
    monkeypatch.setenv("RISK_DATACENTER_CIDRS", '["10.0.0.0/8"]')
    monkeypatch.setenv("RISK_ACCURACY_RADIUS_THRESHOLD", "200")
    monkeypatch.setenv("RISK_FOLD_DATACENTER_INTO_VPN", "true")

    settings = Settings()

    assert settings.risk.datacenter_cidrs == ["10.0.0.0/8"]
    assert settings.risk.accuracy_radius_threshold == 200
    assert settings.risk.fold_datacenter_into_vpn is True


def test_environment_properties():
    """Test environment helper properties."""
    dev_settings = Settings(environment="development")
    assert dev_settings.is_development is True
    assert dev_settings.is_production is False

    prod_settings = Settings(environment="production")
    assert prod_settings.is_production is True
    assert prod_settings.is_development is False


def test_settings_caching():
    """Test that get_settings returns cached instance."""
    settings1 = get_settings()
    settings2 = get_settings()

    # Should be the same instance due to @lru_cache
    assert settings1 is settings2


def test_nested_settings_override(monkeypatch):
    """Test overriding nested settings via environment variables."""
    monkeypatch.setenv("API_PORT", "9000")
    monkeypatch.setenv("GEOIP_CITY_DB_PATH", "/data/GeoLite2-City.mmdb")

    settings = Settings()

    assert settings.api.port == 9000
    assert settings.geoip.city_db_path == Path("/data/GeoLite2-City.mmdb")


def test_list_settings_from_env(monkeypatch):
    """Test list settings can be set via environment variables."""
    monkeypatch.setenv("GEOIP_LOCALES", '["de"]')

    settings = Settings()

    assert "de" in settings.geoip.locales
    assert len(settings.geoip.locales) == 1
