"""Schemas for enrichment data - pure data, no framework dependencies."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class TrustLevel(str, Enum):
    """Ordinal trust classification of a request's claimed identity."""

    UNKNOWN = "unknown"
    VERY_LOW = "very_low"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return _TRUST_RANKS[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TrustLevel):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, TrustLevel):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, TrustLevel):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, TrustLevel):
            return NotImplemented
        return self.rank >= other.rank


_TRUST_RANKS = {level: rank for rank, level in enumerate(TrustLevel)}


class DeviceType(str, Enum):
    """Device category parsed from the client signature."""

    MOBILE = "mobile"
    TABLET = "tablet"
    DESKTOP = "desktop"
    BOT = "bot"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class GeoRecord:
    """Location and network data for a single IP lookup.

    Every field except ``ip`` may be empty: a lookup miss yields a record
    with only the address set.
    """

    ip: str
    country: str = ""
    registered_country: str = ""
    represented_country: str = ""
    continent: str = ""
    city: str = ""
    region: str = ""
    region_code: str = ""
    postal_code: str = ""
    latitude: float | None = None
    longitude: float | None = None
    accuracy_radius: int | None = None
    timezone: str = ""
    metro_code: int | None = None
    organization: str = ""
    asn: int | None = None
    asn_org: str = ""
    network: str = ""
    is_anonymous_proxy: bool = False
    is_satellite_provider: bool = False


@dataclass(frozen=True)
class HeaderSignals:
    """Raw request headers plus the location hints derived from them."""

    accept_language: str = ""
    timezone_header: str = ""
    user_agent: str = ""
    accept: str = ""
    accept_encoding: str = ""
    accept_charset: str = ""
    dnt: str = ""
    sec_ch_ua: str = ""
    sec_ch_ua_mobile: str = ""
    sec_ch_ua_platform: str = ""
    x_requested_with: str = ""
    referer: str = ""
    origin: str = ""
    # Derived
    tz_country: str = ""
    lang_country: str = ""


@dataclass(frozen=True)
class ClientSignature:
    """Device and software attributes parsed from the user agent."""

    os: str = ""
    browser: str = ""
    browser_version: str = ""
    device_type: DeviceType = DeviceType.UNKNOWN
    is_mobile: bool = False
    is_bot: bool = False
    is_headless: bool = False
    is_automation: bool = False


@dataclass(frozen=True)
class EnrichmentResult:
    """Immutable per-request fusion of all enrichment signals."""

    ip: str
    geo: GeoRecord
    headers: HeaderSignals = field(default_factory=HeaderSignals)
    client: ClientSignature = field(default_factory=ClientSignature)
    is_datacenter_ip: bool = False
    is_vpn_suspect: bool = False
    trust_level: TrustLevel = TrustLevel.UNKNOWN
