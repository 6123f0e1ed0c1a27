"""Peer references of the form ipv4:port-ipv6 and the list of configured peers."""

from __future__ import annotations

import ipaddress
import logging
import re
from dataclasses import dataclass
from typing import Optional

_log = logging.getLogger(__name__)

_IPV4_PORT = re.compile(r"\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3}:\d{1,5}")
_LEADING_INT = re.compile(r"\s*[+-]?\d+")


@dataclass(frozen=True)
class PeerReference:
    """Where a peer is reached (ipv4 and port) and its ipv6 identity."""

    ipv4: str
    port: int
    ipv6: str

    def __str__(self) -> str:
        return f"{self.ipv4}:{self.port}-{self.ipv6}"

    @classmethod
    def parse(cls, ref: str) -> "PeerReference":
        """Parse and validate 'ipv4:port-ipv6'; raise ValueError if invalid."""
        ipv4_port, sep, ipv6 = ref.partition("-")
        if not sep:
            raise ValueError("bad format of input ref - missing '-'")
        if not _IPV4_PORT.search(ipv4_port):
            raise ValueError("bad format of input remote address and port")
        ipv4, _, port_text = ipv4_port.partition(":")
        try:
            ipaddress.IPv4Address(ipv4)
        except ValueError:
            raise ValueError("bad format of input remote IPv4 address") from None
        try:
            ipaddress.IPv6Address(ipv6)
        except ValueError:
            raise ValueError("bad format of input remote IPv6 address") from None
        match = _LEADING_INT.match(port_text)
        if match is None:
            raise ValueError("bad format of input remote port")
        return cls(ipv4, int(match.group()), ipv6)


class PeerRegistry:
    """The peers the node will be started with."""

    def __init__(self) -> None:
        self._peers: list[PeerReference] = []

    def get_peer_list(self) -> list[PeerReference]:
        """Return a copy of the peer list."""
        return list(self._peers)

    def add_peer(self, ref: PeerReference) -> None:
        """Append a peer."""
        self._peers.append(ref)

    def del_peer(self, ref: PeerReference) -> None:
        """Remove the first peer with the same ipv6 address, if any."""
        for index, peer in enumerate(self._peers):
            if peer.ipv6 == ref.ipv6:
                del self._peers[index]
                return

    def add_address(self, address: str) -> Optional[PeerReference]:
        """Parse and add a peer; return it, or None if the address is invalid."""
        _log.debug("add address [%s]", address)
        try:
            ref = PeerReference.parse(address)
        except ValueError as err:
            _log.warning("%s", err)
            return None
        self._peers.append(ref)
        return ref

    def prepare_params(self) -> list[str]:
        """Return the command-line arguments that name every peer."""
        params = [f" --peer {peer.ipv4}:{peer.port}-{peer.ipv6}" for peer in self._peers]
        _log.debug("tunserver params_list: %s", params)
        return params