"""IPv4 or IPv6 address together with a port."""

from __future__ import annotations

import enum
import functools
import ipaddress
from typing import Optional, Union

DEFAULT_PORT = 9042

_Address = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


class IpType(enum.Enum):
    """Which kind of address an Ip46Addr holds."""

    NONE = 0
    IPV4 = 1
    IPV6 = 2


def _check_port(port: int) -> int:
    if not 0 <= port <= 0xFFFF:
        raise ValueError(f"port out of range: {port}")
    return port


@functools.total_ordering
class Ip46Addr:
    """Either an IPv4 or an IPv6 address with a port, or nothing at all.

    Equality and ordering look at the address only; every IPv4 address
    sorts before every IPv6 address. Comparing an empty value raises
    ValueError.
    """

    def __init__(self, ip_addr: Optional[str] = None, port: int = DEFAULT_PORT):
        self._address: Optional[_Address] = None
        self._port = _check_port(port)
        if ip_addr is not None:
            if self.is_ipv4(ip_addr):
                self._address = ipaddress.IPv4Address(ip_addr)
            else:
                self._address = ipaddress.IPv6Address(ip_addr)

    @classmethod
    def _with_address(cls, address: _Address, port: int) -> "Ip46Addr":
        result = cls(None, port)
        result._address = address
        return result

    @classmethod
    def any_on_port(cls, port: int) -> "Ip46Addr":
        """Return the IPv4 wildcard address (e.g. for listening) on the given port."""
        return cls._with_address(ipaddress.IPv4Address("0.0.0.0"), port)

    @classmethod
    def create_ipv4(cls, ipv4_str: str, port: int) -> "Ip46Addr":
        """Build from a dotted IPv4 address; raise ValueError if it is not one."""
        return cls._with_address(ipaddress.IPv4Address(ipv4_str), port)

    @classmethod
    def create_ipv6(cls, ipv6_str: str, port: int) -> "Ip46Addr":
        """Build from a textual IPv6 address; raise ValueError if it is not one."""
        return cls._with_address(ipaddress.IPv6Address(ipv6_str), port)

    @staticmethod
    def is_ipv4(ipstr: str) -> bool:
        """Return True for an IPv4 address, False for IPv6; raise ValueError otherwise."""
        try:
            address = ipaddress.ip_address(ipstr)
        except ValueError:
            raise ValueError(f"unknown address format for ipstr {ipstr}") from None
        return address.version == 4

    @property
    def address(self) -> Optional[_Address]:
        """The address held, or None."""
        return self._address

    def get_ip_type(self) -> IpType:
        """Return the kind of address held."""
        if self._address is None:
            return IpType.NONE
        return IpType.IPV4 if self._address.version == 4 else IpType.IPV6

    def get_assign_port(self) -> int:
        """Return the port; raise ValueError when no address is held."""
        if self._address is None:
            raise ValueError("address has no ip type")
        return self._port

    def _key(self, side: str) -> tuple[int, bytes]:
        if self._address is None:
            raise ValueError(f"{side}: ip type is none")
        return self._address.version, self._address.packed

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ip46Addr):
            return NotImplemented
        return self._key("lhs") == other._key("rhs")

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Ip46Addr):
            return NotImplemented
        return self._key("lhs") < other._key("rhs")

    def __hash__(self) -> int:
        return hash((self.get_ip_type(), self._address))

    def __str__(self) -> str:
        if self._address is None:
            return "none"
        return f"{self._address}:{self._port}"

    def __repr__(self) -> str:
        return f"Ip46Addr({str(self)!r})"