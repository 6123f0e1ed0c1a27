# galaxy42

Building blocks for a node in a galaxy42-style IPv6 mesh network, using only
the Python standard library (Python 3.10 and later).

| Module | What it gives you |
| --- | --- |
| `galaxy42.dataeater` | `DataEater`: reassembles length-prefixed frames from arbitrarily split input |
| `galaxy42.netclient` | `serialize_msg` to build a frame; `NetClient` to send and receive frames over TCP |
| `galaxy42.commands` | `Order`, `OrderType` and `CommandExecutor` for the JSON control orders `ping` and `peer_list` |
| `galaxy42.peers` | `PeerReference` (`IPv4:port-IPv6`) and `PeerRegistry` |
| `galaxy42.ip46` | `Ip46Addr`: an IPv4 or IPv6 address with a port, and `IpType` |
| `galaxy42.ndp` | recognising IPv6 Neighbor Solicitations and building the Neighbor Advertisement reply |
| `galaxy42.genconf` | writing the default node configuration files |
| `galaxy42.debuglog` | level-filtered debug messages on standard error |
| `galaxy42.endian` | byte swapping and host/big/little-endian conversion |
| `galaxy42.netplatform` | interface error codes (`NetPlatformErrorCode`, `SysError`) and address/mask helpers |

## Framed messages

On the wire every message is a two-octet big-endian length followed by the
message bytes. `serialize_msg` accepts `str` (encoded as UTF-8) or bytes and
raises `ValueError` for messages longer than 65535 octets.

```python
from galaxy42.dataeater import DataEater
from galaxy42.netclient import serialize_msg

frame = serialize_msg('{"cmd":"ping","msg":"pong"}')

eater = DataEater()
eater.eat(frame[:10])
eater.process()
eater.eat(frame[10:])
eater.process()
print(eater.get_last_command())   # {"cmd":"ping","msg":"pong"}
```

`DataEater.eat` takes bytes, a `str` or a single byte value;
`get_last_command` returns the most recently completed command, or `""`.

`NetClient(on_message)` wraps a TCP connection:

- `start_connect(host, port, timeout=5.0)` returns `True` on success, `False` on failure;
- `send_msg(msg)` frames and sends a message, returning `False` when not connected;
- `receive()` reads from the socket, feeds the data to its `DataEater` and calls
  `on_message` with the last complete command; an orderly close by the other
  side closes the client and returns `""`;
- `on_receive(data)` does the same for data you obtained yourself;
- `close()` closes the connection; the client is also a context manager.

## Commands

```python
from galaxy42.commands import Order, OrderType

ping = Order.from_type(OrderType.PING)
print(ping.to_json())             # {"cmd":"ping","msg":"ping"}

incoming = Order.from_json('{"cmd": "peer_list", "msg": ["a", "b"]}')
print(incoming.msg_array)         # ['a', 'b']
```

`Order.from_json` raises `ValueError` for malformed orders (for `peer_list`
the `msg` field must be a list of strings, otherwise a string).

`CommandExecutor(view, client=None)` takes any object with
`add_to_debug_window(message)` and `show_peers(peers)`. Its
`parse_and_exec_msg` logs every message to the view and shows the peers of a
`peer_list` order; `send_net_request`, `request_peer_list` and
`start_connect(host="", port=0)` go through the client (an empty host means
`127.0.0.1`, port 0 means `42000`).

## Peers

```python
from galaxy42.peers import PeerReference, PeerRegistry

ref = PeerReference.parse("192.0.2.10:9042-fd42:aaaa:bbbb:cccc:aaaa:bbbb:cccc:dddd")
print(ref)                        # 192.0.2.10:9042-fd42:aaaa:bbbb:cccc:aaaa:bbbb:cccc:dddd

registry = PeerRegistry()
registry.add_peer(ref)
print(registry.prepare_params())
# [' --peer 192.0.2.10:9042-fd42:aaaa:bbbb:cccc:aaaa:bbbb:cccc:dddd']
```

A reference without a `-`, with a malformed `IPv4:port` part, or with an
invalid IPv4 or IPv6 address raises `ValueError`. `PeerRegistry.add_address`
parses and adds a reference, returning `None` instead of raising;
`del_peer` removes the first peer with the same IPv6 address.

## Addresses

```python
from galaxy42.ip46 import Ip46Addr, IpType

a = Ip46Addr("192.0.2.1")          # port defaults to 9042
b = Ip46Addr("fd42::1", 4000)
print(a, a.get_ip_type() is IpType.IPV4, a < b)   # 192.0.2.1:9042 True True
```

Equality and ordering compare addresses only, with every IPv4 address before
every IPv6 address; comparing an empty `Ip46Addr()` raises `ValueError`.
`Ip46Addr.any_on_port(port)` gives `0.0.0.0` on that port.

## Neighbor Discovery

`is_packet_neighbor_solicitation(frame)` checks the ICMPv6 type of an Ethernet
frame; `generate_neighbor_advertisement(frame)` returns the 94-octet reply
with a correct ICMPv6 checksum, computed by `checksum_ipv6_packet`.

## Configuration files

```python
from galaxy42.genconf import genconf

paths = genconf("/tmp/node")   # galaxy.conf, connect_from.my.conf,
                               # connect_to.my.conf, connect_to.seed.conf
```

The files are templates with placeholder keys and passwords to be filled in.
A file that cannot be written raises `ValueError`.

## Utilities

- `galaxy42.debuglog`: `emit(level, message)` writes to standard error when
  `level` is at least the current level (default 100); `set_debug_level`,
  `debug_level`, `shorten_file` and the `DebugLevel` names.
- `galaxy42.endian`: `byte_swap16/32/64`, `host_to_big_endian(x, bits)`,
  `host_to_little_endian(x, bits)`.
- `galaxy42.netplatform`: `hex_encode`, `format_ip`, `ipv4_netmask(prefix_len)`,
  `ipv6_prefix_mask(prefix_len)`.

## What this package does not do

It has no command-line program and no graphical interface, and it does not
start or manage a node process. It does not create tunnel devices or assign
addresses to network interfaces; `galaxy42.netplatform` provides only the
error codes and mask calculations used for that. It does not read the
configuration files that `galaxy42.genconf` writes.

## Running the tests

Install the `test` extra and run `pytest` from the project directory.