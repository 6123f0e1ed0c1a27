"""Reassembling length-prefixed command frames from a byte stream."""

from __future__ import annotations

import logging
from collections import deque

_log = logging.getLogger(__name__)

_SIZE_FIELD_OCTETS = 2


def _as_bytes(data) -> bytes:
    if isinstance(data, int):
        return bytes([data & 0xFF])
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


class DataEater:
    """Collects incoming bytes and splits them into frames.

    Every frame is a 2-octet big-endian size followed by that many octets
    of command data.
    """

    def __init__(self) -> None:
        self._buffer: deque[int] = deque()
        self._commands: deque[bytes] = deque()
        self._current = bytearray()
        self._processing = False
        self._frame_size = 0
        self._index = 0

    def eat(self, data) -> None:
        """Queue bytes, a str (as UTF-8) or a single byte value for processing."""
        self._buffer.extend(_as_bytes(data))

    def process(self) -> None:
        """Turn the queued bytes into as many complete commands as possible."""
        self._drain(fresh_first=not self._processing)

    def get_last_command(self) -> str:
        """Return the most recently completed command, or '' if there is none."""
        if not self._commands:
            return ""
        return self._commands[-1].decode("utf-8", errors="replace")

    def _start_frame(self) -> bool:
        if len(self._buffer) < _SIZE_FIELD_OCTETS:
            return False
        high = self._buffer.popleft()
        low = self._buffer.popleft()
        self._frame_size = (high << 8) | low
        self._index = 0
        _log.debug("frame size = %d", self._frame_size)
        return True

    def _fill_frame(self) -> bool:
        while self._index < self._frame_size:
            if not self._buffer:
                return False
            self._current.append(self._buffer.popleft())
            self._index += 1
        return True

    def _drain(self, fresh_first: bool) -> None:
        started = False
        if fresh_first:
            if not self._start_frame():
                return
            started = True
        while self._fill_frame():
            self._commands.append(bytes(self._current))
            self._current.clear()
            self._processing = False
            if not self._start_frame():
                break
            started = True
        if started:
            # A frame header was consumed in this pass; stay in the reading state.
            self._processing = True