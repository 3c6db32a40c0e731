"""GeoIP lookups against country, city and ASN MaxMind databases."""
from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import replace
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Protocol

import geoip2.database
import geoip2.errors
from maxminddb import InvalidDatabaseError

from .exceptions import GeoDatabaseError
from .network import parse_ip
from .schemas import GeoRecord

logger = logging.getLogger(__name__)


class GeoLookup(Protocol):
    """Anything that can resolve an IP address to a GeoRecord."""

    def lookup(self, ip: str) -> GeoRecord: ...


class MergePolicy(str, Enum):
    """How a field from a more specific source combines with an existing value."""

    PREFER_UPDATE = "prefer_update"  # take the update unless it is empty
    KEEP_FIRST = "keep_first"  # take the update only while the base is empty
    ANY = "any"  # boolean OR


FIELD_POLICIES: Mapping[str, MergePolicy] = MappingProxyType({
    "country": MergePolicy.PREFER_UPDATE,
    "registered_country": MergePolicy.PREFER_UPDATE,
    "represented_country": MergePolicy.PREFER_UPDATE,
    "continent": MergePolicy.KEEP_FIRST,
    "city": MergePolicy.PREFER_UPDATE,
    "region": MergePolicy.PREFER_UPDATE,
    "region_code": MergePolicy.PREFER_UPDATE,
    "postal_code": MergePolicy.PREFER_UPDATE,
    "latitude": MergePolicy.PREFER_UPDATE,
    "longitude": MergePolicy.PREFER_UPDATE,
    "accuracy_radius": MergePolicy.PREFER_UPDATE,
    "timezone": MergePolicy.PREFER_UPDATE,
    "metro_code": MergePolicy.PREFER_UPDATE,
    "organization": MergePolicy.PREFER_UPDATE,
    "asn": MergePolicy.PREFER_UPDATE,
    "asn_org": MergePolicy.PREFER_UPDATE,
    "network": MergePolicy.PREFER_UPDATE,
    "is_anonymous_proxy": MergePolicy.ANY,
    "is_satellite_provider": MergePolicy.ANY,
})


def _is_empty(value: Any) -> bool:
    return value is None or value == ""


def merge_geo_records(base: GeoRecord, update: GeoRecord) -> GeoRecord:
    """Merge a record from a more specific source into ``base``.

    Empty values in ``update`` never blank out values already present in ``base``.
    """
    changes: dict[str, Any] = {}
    for name, policy in FIELD_POLICIES.items():
        current = getattr(base, name)
        incoming = getattr(update, name)
        if policy is MergePolicy.ANY:
            changes[name] = bool(current or incoming)
        elif _is_empty(incoming):
            continue
        elif policy is MergePolicy.KEEP_FIRST and not _is_empty(current):
            continue
        else:
            changes[name] = incoming
    return replace(base, **changes)


def _text(value: Any) -> str:
    return str(value) if value is not None else ""


def _traits_flags(traits: Any) -> dict[str, bool]:
    # Deprecated trait flags are missing from newer geoip2 releases.
    return {
        "is_anonymous_proxy": bool(getattr(traits, "is_anonymous_proxy", False)),
        "is_satellite_provider": bool(getattr(traits, "is_satellite_provider", False)),
    }


def _record_from_country(ip: str, reader: geoip2.database.Reader) -> GeoRecord:
    response = reader.country(ip)
    return GeoRecord(
        ip=ip,
        country=_text(response.country.iso_code),
        registered_country=_text(response.registered_country.iso_code),
        represented_country=_text(response.represented_country.iso_code),
        continent=_text(response.continent.code),
        **_traits_flags(response.traits),
    )


def _record_from_city(ip: str, reader: geoip2.database.Reader) -> GeoRecord:
    response = reader.city(ip)
    subdivision = response.subdivisions.most_specific
    return GeoRecord(
        ip=ip,
        country=_text(response.country.iso_code),
        registered_country=_text(response.registered_country.iso_code),
        represented_country=_text(response.represented_country.iso_code),
        continent=_text(response.continent.code),
        city=_text(response.city.name),
        region=_text(subdivision.name),
        region_code=_text(subdivision.iso_code),
        postal_code=_text(response.postal.code),
        latitude=response.location.latitude,
        longitude=response.location.longitude,
        accuracy_radius=response.location.accuracy_radius,
        timezone=_text(response.location.time_zone),
        metro_code=response.location.metro_code,
        organization=_text(getattr(response.traits, "organization", None)),
        **_traits_flags(response.traits),
    )


def _record_from_asn(ip: str, reader: geoip2.database.Reader) -> GeoRecord:
    response = reader.asn(ip)
    return GeoRecord(
        ip=ip,
        asn=response.autonomous_system_number,
        asn_org=_text(response.autonomous_system_organization),
        network=_text(response.network),
    )


# Queried in order, least specific first.
_SLOTS: tuple[tuple[str, Callable[[str, geoip2.database.Reader], GeoRecord]], ...] = (
    ("country", _record_from_country),
    ("city", _record_from_city),
    ("asn", _record_from_asn),
)

_DATABASE_TYPE_MARKERS = {
    "country": "Country",
    "city": "City",
    "asn": "ASN",
}


def open_reader(path: Path, slot: str, locales: list[str] | None = None) -> geoip2.database.Reader:
    """Open a MaxMind database and check that it fits the given slot.

    Raises:
        GeoDatabaseError: If the file is missing, unreadable or of the wrong type.
    """
    try:
        reader = geoip2.database.Reader(str(path), locales=locales)
    except (OSError, InvalidDatabaseError, ValueError) as e:
        raise GeoDatabaseError(path, str(e)) from e

    database_type = reader.metadata().database_type
    marker = _DATABASE_TYPE_MARKERS[slot]
    # City databases answer country queries as well.
    if marker not in database_type and not (slot == "country" and "City" in database_type):
        reader.close()
        raise GeoDatabaseError(path, f"expected a {marker} database, got {database_type}")

    logger.info("Loaded %s database %s (%s)", slot, path, database_type)
    return reader


class GeoIPLookup:
    """Resolves IPs against up to three MaxMind databases and merges the results.

    Databases are queried country, city, then ASN. Any of them may be absent;
    with none configured every lookup yields an IP-only record.
    """

    def __init__(
        self,
        country_reader: geoip2.database.Reader | None = None,
        city_reader: geoip2.database.Reader | None = None,
        asn_reader: geoip2.database.Reader | None = None,
    ) -> None:
        self._readers: dict[str, geoip2.database.Reader] = {
            slot: reader
            for slot, reader in (
                ("country", country_reader),
                ("city", city_reader),
                ("asn", asn_reader),
            )
            if reader is not None
        }

    @classmethod
    def open(
        cls,
        country_path: Path | None = None,
        city_path: Path | None = None,
        asn_path: Path | None = None,
        locales: list[str] | None = None,
    ) -> "GeoIPLookup":
        """Open every configured database. Fails fast if one cannot be loaded."""
        readers: dict[str, geoip2.database.Reader] = {}
        try:
            for slot, path in (("country", country_path), ("city", city_path), ("asn", asn_path)):
                if path is not None:
                    readers[slot] = open_reader(path, slot, locales)
        except GeoDatabaseError:
            for reader in readers.values():
                reader.close()
            raise
        if not readers:
            logger.warning("No GeoIP database configured, lookups will return empty records.")
        return cls(
            country_reader=readers.get("country"),
            city_reader=readers.get("city"),
            asn_reader=readers.get("asn"),
        )

    @property
    def loaded_databases(self) -> dict[str, str]:
        """Map of slot name to database type for every loaded database."""
        return {slot: reader.metadata().database_type for slot, reader in self._readers.items()}

    def lookup(self, ip: str) -> GeoRecord:
        """Look up an IP in every configured database.

        Never raises: invalid addresses and misses yield an IP-only record.
        """
        record = GeoRecord(ip=ip)
        if not self._readers or parse_ip(ip) is None:
            return record

        for slot, query in _SLOTS:
            reader = self._readers.get(slot)
            if reader is None:
                continue
            try:
                partial = query(ip, reader)
            except geoip2.errors.AddressNotFoundError:
                logger.debug("No %s data found for IP %s", slot, ip)
                continue
            except (geoip2.errors.GeoIP2Error, InvalidDatabaseError, ValueError) as e:
                logger.warning("GeoIP %s lookup failed for %s: %s", slot, ip, e)
                continue
            record = merge_geo_records(record, partial)
        return record

    def close(self) -> None:
        for reader in self._readers.values():
            reader.close()
        self._readers.clear()
