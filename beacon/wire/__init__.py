"""Wire format helpers for user-update broadcasts."""

from .decoder import MIN_PACKET_SIZE, decode
from .encoder import encode, encode_record
from .errors import DecodeError, PacketTooShort, TruncatedField, TruncatedHeader
from .record import DecodedRecord

__all__ = [
    "DecodeError",
    "DecodedRecord",
    "MIN_PACKET_SIZE",
    "PacketTooShort",
    "TruncatedField",
    "TruncatedHeader",
    "decode",
    "encode",
    "encode_record",
]
