"""Answering IPv6 neighbor solicitations seen on an Ethernet-level tunnel."""

from __future__ import annotations

ETHERNET_HEADER_SIZE = 14
IPV6_HEADER_SIZE = 40
ICMP_OFFSET = ETHERNET_HEADER_SIZE + IPV6_HEADER_SIZE

ICMPV6_NEIGHBOR_SOLICITATION = 135
ICMPV6_NEIGHBOR_ADVERTISEMENT = 136
NEXT_HEADER_ICMPV6 = 58

ADVERTISEMENT_SIZE = 94

_OWN_MAC = bytes([0xFC, 0, 0, 0, 0, 0])
_SRC_MAC = slice(6, 12)
_SRC_IPV6 = slice(22, 38)
_TARGET = slice(ICMP_OFFSET + 8, ICMP_OFFSET + 24)
_CHECKSUM_OFFSET = ICMP_OFFSET + 2
_ICMP_PAYLOAD_LENGTH = 40


def _require_length(packet: bytes, minimum: int) -> None:
    if len(packet) < minimum:
        raise ValueError(f"packet of {len(packet)} bytes is shorter than {minimum}")


def is_packet_neighbor_solicitation(packet) -> bool:
    """Return True if the Ethernet frame carries an ICMPv6 neighbor solicitation."""
    packet = bytes(packet)
    _require_length(packet, ICMP_OFFSET + 1)
    return packet[ICMP_OFFSET] == ICMPV6_NEIGHBOR_SOLICITATION


def checksum_ipv6_packet(
    source_destination_addr, header_with_content, length: int, next_hvalue: int
) -> int:
    """Return the ones' complement checksum over the IPv6 pseudo-header and payload.

    source_destination_addr holds the 32 octets of source and destination
    address; length octets of header_with_content are summed. The result is
    the value to store big-endian in the checksum field.
    """
    addresses = bytes(source_destination_addr)[:32]
    content = bytes(header_with_content)[:length]
    if len(addresses) < 32:
        raise ValueError("source and destination addresses need 32 octets")
    if len(content) < length:
        raise ValueError(f"content is shorter than {length} octets")
    if len(content) % 2:
        content += b"\x00"
    total = sum(int.from_bytes(addresses[i:i + 2], "big") for i in range(0, 32, 2))
    total += sum(int.from_bytes(content[i:i + 2], "big") for i in range(0, len(content), 2))
    total += (length >> 16) + (length & 0xFFFF)
    total += (next_hvalue >> 16) + (next_hvalue & 0xFFFF)
    while total >> 16:
        total = (total >> 16) + (total & 0xFFFF)
    return ~total & 0xFFFF


def generate_neighbor_advertisement(packet) -> bytes:
    """Build the 94-octet neighbor advertisement answering a solicitation frame."""
    packet = bytes(packet)
    _require_length(packet, _TARGET.stop)
    requester_mac = packet[_SRC_MAC]
    target = packet[_TARGET]
    requester_ip = packet[_SRC_IPV6]

    frame = bytearray()
    # Ethernet header
    frame += requester_mac
    frame += _OWN_MAC
    frame += b"\x86\xdd"
    # IPv6 header
    frame += b"\x60\x00\x00\x00"
    frame += _ICMP_PAYLOAD_LENGTH.to_bytes(2, "big")
    frame += bytes([NEXT_HEADER_ICMPV6, 0xFF])
    frame += target
    frame += requester_ip
    # ICMPv6 neighbor advertisement
    frame += bytes([ICMPV6_NEIGHBOR_ADVERTISEMENT, 0])
    frame += b"\x00\x00"  # checksum, filled in below
    frame += b"\xe0\x00\x00\x00"  # flags R, S, O
    frame += target
    frame += b"\x02\x01" + _OWN_MAC  # target link-layer address option
    frame += b"\x01\x01" + requester_mac  # source link-layer address option

    checksum = checksum_ipv6_packet(
        frame[22:ICMP_OFFSET], frame[ICMP_OFFSET:], _ICMP_PAYLOAD_LENGTH, NEXT_HEADER_ICMPV6
    )
    frame[_CHECKSUM_OFFSET:_CHECKSUM_OFFSET + 2] = checksum.to_bytes(2, "big")
    return bytes(frame)