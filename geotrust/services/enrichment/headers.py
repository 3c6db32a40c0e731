"""Secondary location signals and client metadata from request headers."""
from __future__ import annotations

from collections.abc import Mapping

from .constants import DEFAULT_TIMEZONE_HEADER, TIMEZONE_COUNTRIES
from .schemas import HeaderSignals


def derive_tz_country(timezone: str | None, table: Mapping[str, str] = TIMEZONE_COUNTRIES) -> str:
    """Return the country implied by a timezone name, or "" if unknown."""
    if not timezone:
        return ""
    return table.get(timezone.strip(), "")


def derive_lang_country(accept_language: str | None) -> str:
    """Return the region subtag of the primary language tag.

    ``en-US,en;q=0.9`` gives ``US``; ``fr``, ``en-`` and "" give "".
    """
    if not accept_language:
        return ""
    primary = accept_language.split(",")[0].strip()
    _, hyphen, region = primary.partition("-")
    if not hyphen:
        return ""
    return region


class HeaderSignalExtractor:
    """Reads raw header values and derives timezone and language countries."""

    def __init__(
        self,
        timezone_countries: Mapping[str, str] = TIMEZONE_COUNTRIES,
        timezone_header: str = DEFAULT_TIMEZONE_HEADER,
    ) -> None:
        self.timezone_countries = timezone_countries
        self.timezone_header = timezone_header.lower()

    def extract(self, headers: Mapping[str, str]) -> HeaderSignals:
        lowered = {name.lower(): value for name, value in headers.items()}

        def get(name: str) -> str:
            return lowered.get(name, "") or ""

        accept_language = get("accept-language")
        timezone_header = get(self.timezone_header)
        return HeaderSignals(
            accept_language=accept_language,
            timezone_header=timezone_header,
            user_agent=get("user-agent"),
            accept=get("accept"),
            accept_encoding=get("accept-encoding"),
            accept_charset=get("accept-charset"),
            dnt=get("dnt"),
            sec_ch_ua=get("sec-ch-ua"),
            sec_ch_ua_mobile=get("sec-ch-ua-mobile"),
            sec_ch_ua_platform=get("sec-ch-ua-platform"),
            x_requested_with=get("x-requested-with"),
            referer=get("referer"),
            origin=get("origin"),
            tz_country=derive_tz_country(timezone_header, self.timezone_countries),
            lang_country=derive_lang_country(accept_language),
        )
