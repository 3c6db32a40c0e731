"""IP address parsing and client address resolution."""
from __future__ import annotations

import logging

from IPy import IP

logger = logging.getLogger(__name__)


def parse_ip(value: str | None) -> IP | None:
    """Parse a single IPv4 or IPv6 host address.

    IPv4 must be in dotted-quad form; IPy also accepts abbreviated and
    zero-padded forms such as ``34.1`` which are rejected here. Networks,
    bare integers and anything IPy rejects return None.
    """
    if not value or ("." not in value and ":" not in value):
        return None
    try:
        ip = IP(value)
    except (ValueError, TypeError):
        logger.debug("Invalid IP address %s.", value)
        return None
    if ip.len() != 1:
        return None
    if ip.version() == 4 and ip.strNormal() != value:
        logger.debug("Non-canonical IPv4 address %s.", value)
        return None
    return ip


def strip_port(address: str) -> str:
    """Strip a port suffix from a transport peer address.

    Handles ``host:port`` and ``[v6]:port``; a bare IPv6 address is returned as is.
    """
    address = address.strip()
    if address.startswith("["):
        host, sep, _ = address[1:].partition("]")
        return host if sep else address
    if address.count(":") == 1:
        return address.split(":", 1)[0]
    return address


def resolve_client_ip(forwarded_for: str | None, peer: str | None) -> str:
    """Resolve the client IP for a request.

    The first entry of the forwarded-for list wins when present and non-empty,
    otherwise the peer address is used with its port stripped.
    """
    if forwarded_for:
        first = forwarded_for.split(",")[0].strip()
        if first:
            return first
    if not peer:
        return ""
    return strip_port(peer)
