"""Encoder producing the broadcast format read by :func:`beacon.wire.decode`."""
from __future__ import annotations

import struct

from .record import DecodedRecord

_U32_MAX = 0xFFFFFFFF
_I64_MIN = -(1 << 63)
_I64_MAX = (1 << 63) - 1


def _pack_text(value: str, name: str) -> bytes:
    raw = value.encode("utf-8")
    if len(raw) > _U32_MAX:
        raise ValueError(f"{name} is too long to encode ({len(raw)} bytes)")
    return struct.pack("!I", len(raw)) + raw


def encode(email: str, last_seen_ns: int, ip: str, port: int) -> bytes:
    """Pack a user update into a single datagram payload."""

    if not _I64_MIN <= int(last_seen_ns) <= _I64_MAX:
        raise ValueError(f"last_seen_ns out of int64 range: {last_seen_ns}")
    if not 0 <= int(port) <= _U32_MAX:
        raise ValueError(f"port out of uint32 range: {port}")

    return b"".join(
        (
            _pack_text(email, "email"),
            struct.pack("!q", int(last_seen_ns)),
            _pack_text(ip, "ip"),
            struct.pack("!I", int(port)),
        )
    )


def encode_record(record: DecodedRecord) -> bytes:
    return encode(record.email, record.last_seen_ns, record.ip, record.port)
