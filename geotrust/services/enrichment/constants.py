"""Static reference tables used by the enrichment pipeline."""
from __future__ import annotations

from types import MappingProxyType

ALLOWED_GEOIP_LOCALES = ["de", "en", "es", "fr", "ja", "pt-BR", "ru", "zh-CN"]
GEOIP_LOCALES_DEFAULT = ["en"]

# Sample ranges, tune per deployment.
DEFAULT_DATACENTER_CIDRS = (
    "34.0.0.0/8",  # Google Cloud
    "52.0.0.0/8",  # AWS
    "104.16.0.0/12",  # Cloudflare
)

DEFAULT_VPN_ORG_KEYWORDS = (
    "amazon",
    "aws",
    "google cloud",
    "microsoft",
    "azure",
    "digitalocean",
    "linode",
    "akamai",
    "ovh",
    "hetzner",
    "vultr",
    "choopa",
    "leaseweb",
    "contabo",
    "scaleway",
    "m247",
    "datacamp",
    "cloudflare",
    "oracle",
    "alibaba",
    "tencent",
    "nordvpn",
    "expressvpn",
    "mullvad",
    "private internet access",
    "surfshark",
    "protonvpn",
    "proton ag",
    "cyberghost",
    "hosting",
    "vpn",
    "proxy",
)

HEADLESS_MARKERS = ("headless", "puppeteer", "playwright")
AUTOMATION_MARKERS = ("selenium", "webdriver")

DEFAULT_TIMEZONE_HEADER = "X-Timezone"
DEFAULT_ACCURACY_RADIUS_THRESHOLD = 500

TIMEZONE_COUNTRIES = MappingProxyType({
    "Africa/Cairo": "EG",
    "Africa/Johannesburg": "ZA",
    "Africa/Lagos": "NG",
    "Africa/Nairobi": "KE",
    "Africa/Casablanca": "MA",
    "America/New_York": "US",
    "America/Chicago": "US",
    "America/Denver": "US",
    "America/Phoenix": "US",
    "America/Los_Angeles": "US",
    "America/Anchorage": "US",
    "Pacific/Honolulu": "US",
    "America/Toronto": "CA",
    "America/Vancouver": "CA",
    "America/Edmonton": "CA",
    "America/Winnipeg": "CA",
    "America/Halifax": "CA",
    "America/Mexico_City": "MX",
    "America/Bogota": "CO",
    "America/Lima": "PE",
    "America/Santiago": "CL",
    "America/Sao_Paulo": "BR",
    "America/Argentina/Buenos_Aires": "AR",
    "America/Caracas": "VE",
    "Asia/Karachi": "PK",
    "Asia/Kolkata": "IN",
    "Asia/Calcutta": "IN",
    "Asia/Dhaka": "BD",
    "Asia/Shanghai": "CN",
    "Asia/Hong_Kong": "HK",
    "Asia/Taipei": "TW",
    "Asia/Tokyo": "JP",
    "Asia/Seoul": "KR",
    "Asia/Singapore": "SG",
    "Asia/Bangkok": "TH",
    "Asia/Jakarta": "ID",
    "Asia/Manila": "PH",
    "Asia/Ho_Chi_Minh": "VN",
    "Asia/Kuala_Lumpur": "MY",
    "Asia/Dubai": "AE",
    "Asia/Riyadh": "SA",
    "Asia/Tehran": "IR",
    "Asia/Jerusalem": "IL",
    "Europe/Istanbul": "TR",
    "Europe/London": "GB",
    "Europe/Dublin": "IE",
    "Europe/Lisbon": "PT",
    "Europe/Madrid": "ES",
    "Europe/Paris": "FR",
    "Europe/Brussels": "BE",
    "Europe/Amsterdam": "NL",
    "Europe/Berlin": "DE",
    "Europe/Zurich": "CH",
    "Europe/Vienna": "AT",
    "Europe/Rome": "IT",
    "Europe/Copenhagen": "DK",
    "Europe/Oslo": "NO",
    "Europe/Stockholm": "SE",
    "Europe/Helsinki": "FI",
    "Europe/Warsaw": "PL",
    "Europe/Prague": "CZ",
    "Europe/Budapest": "HU",
    "Europe/Bucharest": "RO",
    "Europe/Athens": "GR",
    "Europe/Kiev": "UA",
    "Europe/Kyiv": "UA",
    "Europe/Moscow": "RU",
    "Australia/Sydney": "AU",
    "Australia/Melbourne": "AU",
    "Australia/Brisbane": "AU",
    "Australia/Perth": "AU",
    "Pacific/Auckland": "NZ",
})
