"""Per-request enrichment pipeline.

Resolves the client IP and runs, in order: geo lookup, header extraction,
client signature parsing, datacenter classification, VPN heuristic and
trust scoring. The result is a single immutable EnrichmentResult.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from .client import ClientSignatureParser
from .datacenter import DatacenterClassifier
from .geolookup import GeoIPLookup, GeoLookup
from .headers import HeaderSignalExtractor
from .network import resolve_client_ip
from .risk import VPNHeuristic, score_trust
from .schemas import EnrichmentResult

if TYPE_CHECKING:
    from geotrust.config.settings import Settings

logger = logging.getLogger(__name__)


class EnrichmentPipeline:
    """Fuses geo, header and client signals into a trust classification.

    All components are built once at startup and only read afterwards, so a
    single pipeline is shared by every request.
    """

    def __init__(
        self,
        geo_lookup: GeoLookup,
        datacenter: DatacenterClassifier,
        header_extractor: HeaderSignalExtractor | None = None,
        client_parser: ClientSignatureParser | None = None,
        vpn_heuristic: VPNHeuristic | None = None,
        fold_datacenter_into_vpn: bool = False,
    ) -> None:
        self.geo_lookup = geo_lookup
        self.datacenter = datacenter
        self.header_extractor = header_extractor or HeaderSignalExtractor()
        self.client_parser = client_parser or ClientSignatureParser()
        self.vpn_heuristic = vpn_heuristic or VPNHeuristic()
        self.fold_datacenter_into_vpn = fold_datacenter_into_vpn

    @classmethod
    def from_settings(cls, settings: "Settings") -> "EnrichmentPipeline":
        """Build the pipeline, opening every configured GeoIP database.

        Raises:
            GeoDatabaseError: If a configured database cannot be opened.
        """
        geo_lookup = GeoIPLookup.open(
            country_path=settings.geoip.country_db_path,
            city_path=settings.geoip.city_db_path,
            asn_path=settings.geoip.asn_db_path,
            locales=settings.geoip.locales,
        )
        return cls(
            geo_lookup=geo_lookup,
            datacenter=DatacenterClassifier(settings.risk.datacenter_cidrs),
            header_extractor=HeaderSignalExtractor(timezone_header=settings.risk.timezone_header),
            vpn_heuristic=VPNHeuristic(
                org_keywords=settings.risk.vpn_org_keywords,
                accuracy_radius_threshold=settings.risk.accuracy_radius_threshold,
            ),
            fold_datacenter_into_vpn=settings.risk.fold_datacenter_into_vpn,
        )

    def enrich(self, headers: Mapping[str, str], peer: str | None) -> EnrichmentResult:
        """Enrich one request from its headers and transport peer address."""
        forwarded_for = next(
            (value for name, value in headers.items() if name.lower() == "x-forwarded-for"),
            None,
        )
        ip = resolve_client_ip(forwarded_for, peer)

        geo = self.geo_lookup.lookup(ip)
        signals = self.header_extractor.extract(headers)
        client = self.client_parser.parse(
            signals.user_agent,
            {
                "sec-ch-ua": signals.sec_ch_ua,
                "sec-ch-ua-mobile": signals.sec_ch_ua_mobile,
                "sec-ch-ua-platform": signals.sec_ch_ua_platform,
            },
        )
        is_datacenter = self.datacenter.is_datacenter(ip)

        reasons = self.vpn_heuristic.reasons(geo, signals)
        is_vpn = bool(reasons) or (self.fold_datacenter_into_vpn and is_datacenter)
        if reasons:
            logger.debug("VPN suspicion for %s: %s", ip, ", ".join(reasons))

        trust_level = score_trust(
            geo.country,
            signals.tz_country,
            signals.lang_country,
            is_datacenter,
            is_vpn,
        )
        logger.debug(
            "Enriched %s: country=%s datacenter=%s vpn=%s trust=%s",
            ip,
            geo.country or "-",
            is_datacenter,
            is_vpn,
            trust_level.value,
        )

        return EnrichmentResult(
            ip=ip,
            geo=geo,
            headers=signals,
            client=client,
            is_datacenter_ip=is_datacenter,
            is_vpn_suspect=is_vpn,
            trust_level=trust_level,
        )

    @property
    def loaded_databases(self) -> dict[str, str]:
        return getattr(self.geo_lookup, "loaded_databases", {})

    def close(self) -> None:
        """Release the GeoIP readers."""
        close = getattr(self.geo_lookup, "close", None)
        if close is not None:
            close()
