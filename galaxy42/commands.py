"""JSON orders exchanged with the node and their execution."""

from __future__ import annotations

import enum
import json
import logging
from dataclasses import dataclass, field
from typing import Optional, Protocol

from .netclient import NetClient

_log = logging.getLogger(__name__)

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 42000


class OrderType(enum.Enum):
    """Orders that can be created without parsing."""

    PING = "ping"
    PEER_LIST = "peer_list"


@dataclass
class Order:
    """A command with either a text message or, for peer lists, a list of strings."""

    cmd: str
    msg: str = ""
    msg_array: list[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, json_str: str) -> "Order":
        """Parse an order; raise ValueError when it is malformed."""
        data = json.loads(json_str)
        if not isinstance(data, dict):
            raise ValueError("order must be a JSON object")
        cmd = data.get("cmd")
        if not isinstance(cmd, str):
            raise ValueError("order field 'cmd' must be a string")
        msg = data.get("msg")
        if cmd == OrderType.PEER_LIST.value:
            if not isinstance(msg, list) or not all(isinstance(m, str) for m in msg):
                raise ValueError("order field 'msg' must be a list of strings")
            return cls(cmd=cmd, msg_array=list(msg))
        if not isinstance(msg, str):
            raise ValueError("order field 'msg' must be a string")
        return cls(cmd=cmd, msg=msg)

    @classmethod
    def from_type(cls, order_type: OrderType) -> "Order":
        """Build a request order of the given type."""
        if order_type is OrderType.PING:
            return cls(cmd="ping", msg="ping")
        return cls(cmd="peer_list")

    def to_json(self) -> str:
        """Return the compact JSON form: {"cmd": ..., "msg": ...}."""
        return json.dumps(
            {"cmd": self.cmd, "msg": self.msg},
            separators=(",", ":"),
            ensure_ascii=False,
        )


class View(Protocol):
    def add_to_debug_window(self, message: str) -> None: ...

    def show_peers(self, peers: list[str]) -> None: ...


class CommandExecutor:
    """Runs orders received from the network and sends requests out."""

    def __init__(self, view: View, client: Optional[NetClient] = None):
        self._view = view
        self._client = client if client is not None else NetClient(self.parse_and_exec_msg)

    def parse_and_exec_msg(self, msg: str) -> Order:
        """Parse a network message and act on it."""
        order = Order.from_json(msg)
        _log.debug("execute cmd: %s", order.cmd)
        self._view.add_to_debug_window("get message " + msg)
        if order.cmd == OrderType.PEER_LIST.value:
            self._view.show_peers(order.msg_array)
        return order

    def send_net_request(self, order: Order) -> None:
        """Send an order over the network."""
        self._client.send_msg(order.to_json())

    def start_connect(self, host: str = "", port: int = 0):
        """Connect; an empty host and port 0 mean the local default node."""
        if not host:
            host = DEFAULT_HOST
            _log.debug("use default 'localhost (127.0.0.1)' host")
        if port == 0:
            port = DEFAULT_PORT
            _log.debug("use default '42000' port")
        return self._client.start_connect(host, port)

    def request_peer_list(self) -> None:
        """Ask the node for its peer list (done periodically by the interface)."""
        self.send_net_request(Order.from_type(OrderType.PEER_LIST))