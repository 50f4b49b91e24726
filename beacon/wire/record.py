"""Decoded user-update record."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def ns_to_datetime(nanos: int) -> datetime:
    """Convert nanoseconds since the Unix epoch to an aware UTC datetime.

    ``datetime`` only carries microseconds, so the sub-microsecond remainder
    is dropped (floor, so pre-epoch instants round towards the past).
    """

    return _EPOCH + timedelta(microseconds=nanos // 1000)


@dataclass(frozen=True)
class DecodedRecord:
    """One user update as carried by a single datagram."""

    email: str
    last_seen_ns: int
    ip: str
    port: int

    @property
    def last_seen(self) -> datetime:
        return ns_to_datetime(self.last_seen_ns)
