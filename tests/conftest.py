import os
from types import SimpleNamespace
from unittest.mock import Mock

import pytest

from geotrust.services.enrichment.schemas import GeoRecord


@pytest.fixture(scope="session", autouse=True)
def baseline_settings_env():
    """Provide baseline env vars so tests are not affected by local .env.

    Pydantic-settings precedence: init args > env vars > .env > defaults.
    Setting these ensures stable defaults regardless of any .env present.
    """
    os.environ.update({
        # App
        "APP_NAME": "GeoTrust API",
        "APP_VERSION": "0.1.0",
        "APP_DEBUG": "false",
        "APP_ENVIRONMENT": "development",
        # API
        "API_HOST": "0.0.0.0",
        "API_PORT": "8000",
        "API_WORKERS": "1",
        "API_RELOAD": "false",
        "API_LOG_LEVEL": "INFO",
        # GeoIP
        "GEOIP_LOCALES": '["en"]',
        "GEOIP_VALIDATE_DB_PATH": "false",
        # Risk
        "RISK_ACCURACY_RADIUS_THRESHOLD": "500",
        "RISK_FOLD_DATACENTER_INTO_VPN": "false",
    })
    for name in ("GEOIP_COUNTRY_DB_PATH", "GEOIP_CITY_DB_PATH", "GEOIP_ASN_DB_PATH"):
        os.environ.pop(name, None)


@pytest.fixture(autouse=True)
def refresh_settings_cache():
    """Clear settings cache so env changes take effect per test.

    Ensures tests using monkeypatch.setenv() get a fresh Settings instance.
    """
    from geotrust.config.settings import get_settings
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class FakeGeoLookup:
    """In-memory geo lookup keyed by IP."""

    def __init__(self, records: dict[str, GeoRecord] | None = None) -> None:
        self.records = records or {}
        self.calls: list[str] = []

    def lookup(self, ip: str) -> GeoRecord:
        self.calls.append(ip)
        return self.records.get(ip, GeoRecord(ip=ip))


@pytest.fixture
def fake_geo_lookup() -> FakeGeoLookup:
    return FakeGeoLookup({
        "203.0.113.5": GeoRecord(ip="203.0.113.5", country="GB", continent="EU", accuracy_radius=20),
        "198.51.100.7": GeoRecord(ip="198.51.100.7", country="US", continent="NA", accuracy_radius=10),
    })


def make_city_response(
    country: str | None = "GB",
    continent: str | None = "EU",
    city: str | None = "London",
    region: str | None = "England",
    region_code: str | None = "ENG",
    postal_code: str | None = "EC1A",
    latitude: float | None = 51.5142,
    longitude: float | None = -0.0931,
    accuracy_radius: int | None = 20,
    time_zone: str | None = "Europe/London",
) -> SimpleNamespace:
    """Build an object shaped like a geoip2 City response."""
    return SimpleNamespace(
        country=SimpleNamespace(iso_code=country),
        registered_country=SimpleNamespace(iso_code=country),
        represented_country=SimpleNamespace(iso_code=None),
        continent=SimpleNamespace(code=continent),
        city=SimpleNamespace(name=city),
        subdivisions=SimpleNamespace(most_specific=SimpleNamespace(name=region, iso_code=region_code)),
        postal=SimpleNamespace(code=postal_code),
        location=SimpleNamespace(
            latitude=latitude,
            longitude=longitude,
            accuracy_radius=accuracy_radius,
            time_zone=time_zone,
            metro_code=None,
        ),
        traits=SimpleNamespace(organization=None, is_anonymous_proxy=False, is_satellite_provider=False),
    )


def make_country_response(country: str | None = "GB", continent: str | None = "EU", anonymous: bool = False) -> SimpleNamespace:
    """Build an object shaped like a geoip2 Country response."""
    return SimpleNamespace(
        country=SimpleNamespace(iso_code=country),
        registered_country=SimpleNamespace(iso_code=country),
        represented_country=SimpleNamespace(iso_code=None),
        continent=SimpleNamespace(code=continent),
        traits=SimpleNamespace(is_anonymous_proxy=anonymous, is_satellite_provider=False),
    )


def make_asn_response(asn: int = 16509, org: str = "AMAZON-02", network: str = "52.0.0.0/11") -> SimpleNamespace:
    """Build an object shaped like a geoip2 ASN response."""
    return SimpleNamespace(
        autonomous_system_number=asn,
        autonomous_system_organization=org,
        network=network,
    )


def make_reader(database_type: str, **methods) -> Mock:
    """Build a mock geoip2 Reader with the given database type and query results."""
    reader = Mock()
    reader.metadata.return_value = SimpleNamespace(database_type=database_type)
    for name, result in methods.items():
        if isinstance(result, Exception):
            getattr(reader, name).side_effect = result
        else:
            getattr(reader, name).return_value = result
    return reader
