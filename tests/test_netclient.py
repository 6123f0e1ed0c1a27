import socket

import pytest

from galaxy42.netclient import NetClient, serialize_msg


@pytest.fixture
def server():
    listener = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    listener.bind(("127.0.0.1", 0))
    listener.listen(1)
    listener.settimeout(5)
    yield listener
    listener.close()


def test_serialize_msg_wire_format():
    assert serialize_msg("ping") == b"\x00\x04ping"


def test_serialize_msg_length_prefix_matches_payload():
    msg = "x" * 300
    packet = serialize_msg(msg)
    assert int.from_bytes(packet[:2], "big") == len(msg)
    assert packet[2:] == msg.encode()


def test_serialize_msg_too_big():
    with pytest.raises(ValueError):
        serialize_msg("a" * 0x10000)


def test_not_connected_initially():
    client = NetClient()
    assert client.is_connected() is False
    assert client.send_msg("ping") is False


def test_receive_without_connection_raises():
    with pytest.raises(ConnectionError):
        NetClient().receive()


def test_on_receive_calls_callback():
    received = []
    client = NetClient(on_message=received.append)
    result = client.on_receive(serialize_msg("hello"))
    assert result == "hello"
    assert received == ["hello"]


def test_on_receive_partial_does_not_call_callback():
    received = []
    client = NetClient(on_message=received.append)
    assert client.on_receive(serialize_msg("hello")[:4]) == ""
    assert received == []


def test_connect_send_and_receive(server):
    received = []
    port = server.getsockname()[1]
    with NetClient(on_message=received.append) as client:
        assert client.start_connect("127.0.0.1", port) is True
        conn, _ = server.accept()
        with conn:
            assert client.send_msg("abc") is True
            assert conn.recv(100) == serialize_msg("abc")
            conn.sendall(serialize_msg("reply"))
            assert client.receive() == "reply"
    assert received == ["reply"]


def test_peer_close_disconnects(server):
    port = server.getsockname()[1]
    client = NetClient()
    assert client.start_connect("127.0.0.1", port)
    conn, _ = server.accept()
    conn.close()
    assert client.receive() == ""
    assert client.is_connected() is False


def test_connect_refused_returns_false():
    probe = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    probe.bind(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    client = NetClient()
    assert client.start_connect("127.0.0.1", port, timeout=2) is False
    assert client.is_connected() is False