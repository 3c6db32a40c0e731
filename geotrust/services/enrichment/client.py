"""Client signature parsing from the user agent and client hints."""
from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from functools import lru_cache

from user_agents import parse as parse_user_agent
from user_agents.parsers import UserAgent

from .constants import AUTOMATION_MARKERS, HEADLESS_MARKERS
from .rules import KeywordRule, matching_verdicts, rules_for
from .schemas import ClientSignature, DeviceType

logger = logging.getLogger(__name__)


class AutomationKind(str, Enum):
    HEADLESS = "headless"
    DRIVER = "driver"


AUTOMATION_RULES: tuple[KeywordRule[AutomationKind], ...] = (
    rules_for(HEADLESS_MARKERS, AutomationKind.HEADLESS)
    + rules_for(AUTOMATION_MARKERS, AutomationKind.DRIVER)
)


@lru_cache(maxsize=1024)
def _user_agent(user_agent: str) -> UserAgent:
    return parse_user_agent(user_agent)


def _family(name: str | None) -> str:
    return "" if not name or name == "Other" else name


class ClientSignatureParser:
    """Parses a user agent string into device and software attributes.

    Device category is decided in order: bot, mobile, tablet client hint,
    desktop. Automation markers are checked independently of the category.
    """

    def __init__(self, automation_rules: tuple[KeywordRule[AutomationKind], ...] = AUTOMATION_RULES) -> None:
        self.automation_rules = automation_rules

    def parse(self, user_agent: str, client_hints: Mapping[str, str] | None = None) -> ClientSignature:
        if not user_agent:
            return ClientSignature()

        hints = {name.lower(): value or "" for name, value in (client_hints or {}).items()}
        ua = _user_agent(user_agent)
        lowered = user_agent.lower()

        os_name = _family(ua.os.family)
        if os_name and ua.os.version_string:
            os_name = f"{os_name} {ua.os.version_string}"

        is_bot = bool(ua.is_bot)
        is_mobile = bool(ua.is_mobile) or "mobile" in lowered or hints.get("sec-ch-ua-mobile") == "?1"

        if is_bot:
            device_type = DeviceType.BOT
        elif is_mobile:
            device_type = DeviceType.MOBILE
        elif any("tablet" in value.lower() for value in hints.values()):
            device_type = DeviceType.TABLET
        else:
            device_type = DeviceType.DESKTOP

        verdicts = matching_verdicts(self.automation_rules, lowered)
        is_headless = AutomationKind.HEADLESS in verdicts
        is_automation = is_headless or AutomationKind.DRIVER in verdicts
        if is_automation:
            logger.debug("Automation markers %s in user agent %r", verdicts, user_agent)

        return ClientSignature(
            os=os_name,
            browser=_family(ua.browser.family),
            browser_version=ua.browser.version_string or "",
            device_type=device_type,
            is_mobile=is_mobile,
            is_bot=is_bot,
            is_headless=is_headless,
            is_automation=is_automation,
        )
