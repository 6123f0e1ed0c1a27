import pytest

from galaxy42.peers import PeerReference, PeerRegistry


def test_parse_valid_reference():
    ref = PeerReference.parse("127.0.0.1:4562-fd42::1")
    assert ref == PeerReference("127.0.0.1", 4562, "fd42::1")


def test_str_round_trip():
    text = "192.168.0.57:9042-fd42:aaaa:bbbb:cccc:aaaa:bbbb:cccc:dddd"
    assert str(PeerReference.parse(text)) == text


@pytest.mark.parametrize(
    "text, message",
    [
        ("127.0.0.1:4562", "bad format of input ref - missing '-'"),
        ("127.0.0.1-fd42::1", "bad format of input remote address and port"),
        ("999.0.0.1:80-fd42::1", "bad format of input remote IPv4 address"),
        ("127.0.0.1:80-nothex::zz", "bad format of input remote IPv6 address"),
    ],
)
def test_parse_errors(text, message):
    with pytest.raises(ValueError) as info:
        PeerReference.parse(text)
    assert str(info.value) == message


def test_add_address_valid_and_invalid():
    registry = PeerRegistry()
    added = registry.add_address("10.0.0.2:9042-fd42::2")
    assert registry.add_address("garbage") is None
    assert registry.get_peer_list() == [added]


def test_get_peer_list_is_a_copy():
    registry = PeerRegistry()
    registry.add_peer(PeerReference("10.0.0.1", 1, "fd42::1"))
    registry.get_peer_list().clear()
    assert len(registry.get_peer_list()) == 1


def test_del_peer_removes_matching_ipv6():
    registry = PeerRegistry()
    first = PeerReference("10.0.0.1", 1, "fd42::1")
    second = PeerReference("10.0.0.2", 2, "fd42::2")
    registry.add_peer(first)
    registry.add_peer(second)
    registry.del_peer(PeerReference("1.1.1.1", 5, "fd42::2"))
    assert registry.get_peer_list() == [first]


def test_prepare_params():
    registry = PeerRegistry()
    registry.add_peer(PeerReference("10.0.0.1", 9042, "fd42::1"))
    registry.add_peer(PeerReference("10.0.0.2", 9043, "fd42::2"))
    assert registry.prepare_params() == [
        " --peer 10.0.0.1:9042-fd42::1",
        " --peer 10.0.0.2:9043-fd42::2",
    ]