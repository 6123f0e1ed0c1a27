"""Error codes and address helpers for configuring tunnel network interfaces."""

from __future__ import annotations

import enum

_HEX_DIGITS = "0123456789abcdef"


class NetPlatformErrorCode(enum.IntEnum):
    """Why configuring an interface failed."""

    GETADDRINFO = -10
    OPEN_SOCKET = -20
    OPEN_FD = -25
    IOCTL = -30
    INVALID_ADDR_FAMILY = -100
    NOT_IMPL_ADDR_FAMILY = -101
    SOCKET_FOR_IFNAME_OPEN = -220
    SOCKET_FOR_IFNAME_IOCTL = -230
    CHECK_INTERFACE_UP_OPEN = -320
    CHECK_INTERFACE_UP_IOCTL = -330


class SysError(OSError):
    """A failed interface operation, with the system errno observed at that time."""

    def __init__(self, code: NetPlatformErrorCode, errno_copy: int = 0):
        self.code = NetPlatformErrorCode(code)
        self.errno_copy = errno_copy
        super().__init__(errno_copy, f"{self.code.name} (code {int(self.code)})")


def hex_encode(data) -> str:
    """Return the lowercase hexadecimal form of data."""
    return "".join(_HEX_DIGITS[b >> 4] + _HEX_DIGITS[b & 15] for b in bytes(data))


def format_ip(bin_ip) -> str:
    """Format 16 octets as eight colon-separated groups of four hex digits."""
    raw = bytes(bin_ip)
    if len(raw) != 16:
        raise ValueError(f"IPv6 address needs 16 octets, got {len(raw)}")
    text = hex_encode(raw)
    return ":".join(text[i:i + 4] for i in range(0, 32, 4))


def ipv4_netmask(prefix_len: int) -> bytes:
    """Return the 4-octet network mask for a prefix length of 0 to 32."""
    if not 0 <= prefix_len <= 32:
        raise ValueError(f"IPv4 prefix length must be in 0..32, got {prefix_len}")
    mask = (0xFFFFFFFF << (32 - prefix_len)) & 0xFFFFFFFF
    return mask.to_bytes(4, "big")


def ipv6_prefix_mask(prefix_len: int) -> bytes:
    """Return the 16-octet prefix mask; lengths outside 1..127 give all ones."""
    if prefix_len >= 128 or prefix_len <= 0:
        return b"\xff" * 16
    full, rest = divmod(prefix_len, 8)
    mask = bytearray(16)
    mask[:full] = b"\xff" * full
    mask[full] = (0xFF << (8 - rest)) & 0xFF
    return bytes(mask)