import ipaddress

import pytest

from galaxy42.ndp import (
    checksum_ipv6_packet,
    generate_neighbor_advertisement,
    is_packet_neighbor_solicitation,
)

REQUESTER_MAC = bytes([0x02, 0, 0, 0, 0, 0x01])
REQUESTER_IP = ipaddress.IPv6Address("fd42::1").packed
TARGET_IP = ipaddress.IPv6Address("fd42::2").packed


def make_solicitation(icmp_type=135):
    eth = bytes(6) + REQUESTER_MAC + b"\x86\xdd"
    ipv6 = b"\x60\x00\x00\x00" + b"\x00\x20" + bytes([58, 255]) + REQUESTER_IP + bytes(16)
    icmp = bytes([icmp_type, 0, 0, 0]) + bytes(4) + TARGET_IP + b"\x01\x01" + REQUESTER_MAC
    return eth + ipv6 + icmp


def test_detects_solicitation():
    assert is_packet_neighbor_solicitation(make_solicitation()) is True
    assert is_packet_neighbor_solicitation(make_solicitation(128)) is False


def test_short_packet_rejected():
    with pytest.raises(ValueError):
        is_packet_neighbor_solicitation(bytes(20))
    with pytest.raises(ValueError):
        generate_neighbor_advertisement(bytes(60))


def test_advertisement_checksum_verifies():
    adv = generate_neighbor_advertisement(make_solicitation())
    assert checksum_ipv6_packet(adv[22:54], adv[54:], 40, 58) == 0


def test_advertisement_is_not_a_solicitation():
    adv = generate_neighbor_advertisement(make_solicitation())
    assert is_packet_neighbor_solicitation(adv) is False


def test_checksum_of_nothing():
    assert checksum_ipv6_packet(bytes(32), b"", 0, 0) == 0xFFFF


def test_checksum_odd_length_pads_with_zero():
    addrs = REQUESTER_IP + TARGET_IP
    assert checksum_ipv6_packet(addrs, b"\x12\x34\x56", 3, 17) == checksum_ipv6_packet(
        addrs, b"\x12\x34\x56\x00", 3, 17
    )


def test_checksum_rejects_short_inputs():
    with pytest.raises(ValueError):
        checksum_ipv6_packet(bytes(10), b"", 0, 58)
    with pytest.raises(ValueError):
        checksum_ipv6_packet(bytes(32), b"\x00", 4, 58)