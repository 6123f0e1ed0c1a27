"""TCP client that exchanges length-prefixed messages."""

from __future__ import annotations

import logging
import socket
from typing import Callable, Optional

from .dataeater import DataEater

_log = logging.getLogger(__name__)

MAX_MESSAGE_SIZE = 0xFFFF
_RECEIVE_BUFFER_SIZE = 65536


def serialize_msg(msg) -> bytes:
    """Frame a message: 2-octet big-endian size followed by the message bytes."""
    raw = msg.encode("utf-8") if isinstance(msg, str) else bytes(msg)
    if len(raw) > MAX_MESSAGE_SIZE:
        raise ValueError("Too big message")
    return len(raw).to_bytes(2, "big") + raw


class NetClient:
    """Sends framed messages and hands each received command to a callback."""

    def __init__(self, on_message: Optional[Callable[[str], None]] = None):
        self._on_message = on_message
        self._socket: Optional[socket.socket] = None
        self._data_eater = DataEater()

    def __enter__(self) -> "NetClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def start_connect(self, host: str, port: int, timeout: float = 5.0) -> bool:
        """Connect to host:port, waiting at most timeout seconds; return success."""
        self.close()
        try:
            self._socket = socket.create_connection((host, port), timeout=timeout)
        except OSError as err:
            _log.error("Error: %s", err)
            return False
        return True

    def is_connected(self) -> bool:
        """Return True while a connection is open."""
        if self._socket is None:
            _log.debug("Socket is not connected")
            return False
        return True

    def send_msg(self, msg) -> bool:
        """Send one framed message; return False if there is no connection."""
        if not self.is_connected():
            return False
        self._socket.sendall(serialize_msg(msg))
        return True

    def on_receive(self, data) -> str:
        """Feed received bytes in; pass the last complete command to the callback."""
        self._data_eater.eat(data)
        self._data_eater.process()
        last_cmd = self._data_eater.get_last_command()
        _log.debug("last command %s", last_cmd)
        if last_cmd and self._on_message is not None:
            self._on_message(last_cmd)
        return last_cmd

    def receive(self) -> str:
        """Read what the socket has and process it; an orderly close ends the connection."""
        if not self.is_connected():
            raise ConnectionError("not connected")
        data = self._socket.recv(_RECEIVE_BUFFER_SIZE)
        if not data:
            self.close()
            return ""
        return self.on_receive(data)

    def close(self) -> None:
        """Close the connection if one is open."""
        if self._socket is not None:
            self._socket.close()
            self._socket = None