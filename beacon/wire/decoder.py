"""Decoder for the user-update broadcast format.

Layout, big-endian throughout::

    [u32 email_length][email][i64 last_seen_ns][u32 ip_length][ip][u32 port]

Bytes after the port are ignored.
"""
from __future__ import annotations

import struct
from typing import Union

from .errors import PacketTooShort, TruncatedField, TruncatedHeader
from .record import DecodedRecord

# Fast reject only. The smallest complete frame is 20 bytes, so buffers of
# 16..19 bytes still fail in the per-field checks below.
MIN_PACKET_SIZE = 16

_U32 = struct.Struct("!I")
_I64 = struct.Struct("!q")

Buffer = Union[bytes, bytearray, memoryview]


class _Reader:
    """Forward-only cursor over a packet buffer."""

    def __init__(self, data: Buffer):
        self._data = memoryview(data)
        self._offset = 0

    def remaining(self) -> int:
        return len(self._data) - self._offset

    def take(self, size: int, field: str) -> bytes:
        if size > self.remaining():
            raise TruncatedField(field)
        chunk = self._data[self._offset : self._offset + size].tobytes()
        self._offset += size
        return chunk

    def unpack(self, fmt: struct.Struct, field: str) -> int:
        return fmt.unpack(self.take(fmt.size, field))[0]

    def text(self, size: int, field: str) -> str:
        return self.take(size, field).decode("utf-8", errors="replace")


def decode(data: Buffer) -> DecodedRecord:
    """Decode one datagram payload into a :class:`DecodedRecord`.

    Raises a :class:`~beacon.wire.errors.DecodeError` subclass when the
    buffer does not hold every field.
    """

    if len(data) < MIN_PACKET_SIZE:
        raise PacketTooShort(len(data), MIN_PACKET_SIZE)

    reader = _Reader(data)
    if reader.remaining() < _U32.size:
        raise TruncatedHeader()
    # Guarded by the check above, so this never raises TruncatedField.
    email_length = reader.unpack(_U32, "emailLength")
    email = reader.text(email_length, "email")
    last_seen_ns = reader.unpack(_I64, "lastSeen")
    ip_length = reader.unpack(_U32, "ipLength")
    ip = reader.text(ip_length, "ip")
    port = reader.unpack(_U32, "port")

    return DecodedRecord(email=email, last_seen_ns=last_seen_ns, ip=ip, port=port)
