"""Decode failures raised by :mod:`beacon.wire.decoder`."""
from __future__ import annotations


class DecodeError(ValueError):
    """Base class for packets that do not hold a complete record."""


class PacketTooShort(DecodeError):
    def __init__(self, length: int, minimum: int):
        super().__init__(f"packet too short ({length} bytes, need at least {minimum})")
        self.length = length
        self.minimum = minimum


class TruncatedHeader(DecodeError):
    def __init__(self) -> None:
        super().__init__("insufficient data for email length")


class TruncatedField(DecodeError):
    """A fixed-width or length-prefixed field runs past the end of the buffer."""

    def __init__(self, field: str):
        super().__init__(f"insufficient data for {field}")
        self.field = field
