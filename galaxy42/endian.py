"""Byte swapping and conversion between host and fixed byte orders."""

from __future__ import annotations

import sys

_WIDTHS = (8, 16, 32, 64)


def _swap(x: int, octets: int) -> int:
    value = x & ((1 << (8 * octets)) - 1)
    return int.from_bytes(value.to_bytes(octets, "big"), "little")


def byte_swap16(x: int) -> int:
    """Reverse the order of the two low octets of x."""
    return _swap(x, 2)


def byte_swap32(x: int) -> int:
    """Reverse the order of the four low octets of x."""
    return _swap(x, 4)


def byte_swap64(x: int) -> int:
    """Reverse the order of the eight low octets of x."""
    return _swap(x, 8)


def _convert(x: int, bits: int, order: str) -> int:
    if bits not in _WIDTHS:
        raise ValueError(f"width must be one of {_WIDTHS}, got {bits}")
    value = x & ((1 << bits) - 1)
    if bits == 8 or sys.byteorder == order:
        return value
    return _swap(value, bits // 8)


def host_to_big_endian(x: int, bits: int) -> int:
    """Return x with its octets in big-endian order when stored in host order."""
    return _convert(x, bits, "big")


def host_to_little_endian(x: int, bits: int) -> int:
    """Return x with its octets in little-endian order when stored in host order."""
    return _convert(x, bits, "little")