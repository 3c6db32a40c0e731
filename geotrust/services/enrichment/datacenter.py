"""Datacenter IP classification against a static list of network blocks."""
from __future__ import annotations

import logging
from collections.abc import Iterable

from IPy import IP

from .network import parse_ip

logger = logging.getLogger(__name__)


class DatacenterClassifier:
    """Set membership test over hosting/cloud network blocks.

    Blocks are parsed once and kept in configuration order.
    """

    def __init__(self, cidrs: Iterable[str]) -> None:
        blocks: list[IP] = []
        for cidr in cidrs:
            try:
                blocks.append(IP(cidr, make_net=True))
            except (ValueError, TypeError):
                logger.warning("Skipping invalid datacenter CIDR %r.", cidr)
        self.blocks: tuple[IP, ...] = tuple(blocks)
        logger.debug("Loaded %d datacenter blocks", len(self.blocks))

    def is_datacenter(self, ip: str) -> bool:
        """Return True if the IP falls inside any configured block.

        Unparseable addresses are never members.
        """
        address = parse_ip(ip)
        if address is None:
            return False
        return any(
            address.version() == block.version() and address in block
            for block in self.blocks
        )
