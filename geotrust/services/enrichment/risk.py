"""VPN/proxy suspicion heuristic and trust scoring."""
from __future__ import annotations

from collections.abc import Iterable

from .constants import DEFAULT_ACCURACY_RADIUS_THRESHOLD, DEFAULT_VPN_ORG_KEYWORDS
from .rules import KeywordRule, any_match, rules_for
from .schemas import GeoRecord, HeaderSignals, TrustLevel

ORG_KEYWORD = "org_keyword"
TIMEZONE_MISMATCH = "timezone_mismatch"
LANGUAGE_MISMATCH = "language_mismatch"
COARSE_LOCATION = "coarse_location"


def _mismatch(country: str, derived: str) -> bool:
    return bool(country) and bool(derived) and derived != country


class VPNHeuristic:
    """Flags requests that look like they come through a VPN, proxy or relay.

    Any one of these is enough:
    - the network or ASN organization names a known hosting/VPN provider
    - the resolved country disagrees with the timezone country
    - the resolved country disagrees with the language country
    - the location accuracy radius is above the threshold

    The datacenter flag is not considered here.
    """

    def __init__(
        self,
        org_keywords: Iterable[str] = DEFAULT_VPN_ORG_KEYWORDS,
        accuracy_radius_threshold: int = DEFAULT_ACCURACY_RADIUS_THRESHOLD,
    ) -> None:
        self.org_rules: tuple[KeywordRule[str], ...] = rules_for(org_keywords, ORG_KEYWORD)
        self.accuracy_radius_threshold = accuracy_radius_threshold

    def reasons(self, geo: GeoRecord, headers: HeaderSignals) -> tuple[str, ...]:
        """Names of every condition that fired, in evaluation order."""
        fired: list[str] = []
        if any_match(self.org_rules, geo.asn_org, geo.organization):
            fired.append(ORG_KEYWORD)
        if _mismatch(geo.country, headers.tz_country):
            fired.append(TIMEZONE_MISMATCH)
        if _mismatch(geo.country, headers.lang_country):
            fired.append(LANGUAGE_MISMATCH)
        if geo.accuracy_radius is not None and geo.accuracy_radius > self.accuracy_radius_threshold:
            fired.append(COARSE_LOCATION)
        return tuple(fired)

    def suspect(self, geo: GeoRecord, headers: HeaderSignals) -> bool:
        return bool(self.reasons(geo, headers))


def score_trust(
    country: str,
    tz_country: str,
    lang_country: str,
    is_datacenter: bool,
    is_vpn_suspect: bool,
) -> TrustLevel:
    """Reduce the fused signals to a trust level.

    Precedence: missing country, then datacenter/VPN suspicion, then
    agreement of the timezone and language countries with the resolved one.
    """
    if not country:
        return TrustLevel.UNKNOWN
    if is_datacenter or is_vpn_suspect:
        return TrustLevel.VERY_LOW

    same_tz = bool(tz_country) and tz_country == country
    same_lang = bool(lang_country) and lang_country == country

    if same_tz and same_lang:
        return TrustLevel.HIGH
    if same_tz or same_lang:
        return TrustLevel.MEDIUM
    return TrustLevel.LOW
