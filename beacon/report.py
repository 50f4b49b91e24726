"""Human-readable reports for received packets."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from .wire.record import DecodedRecord

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S.%f %Z"


def format_timestamp(moment: datetime, tz=None) -> str:
    """Format ``moment`` in ``tz`` (local time zone by default) to microseconds."""

    return moment.astimezone(tz).strftime(TIMESTAMP_FORMAT)


def format_report(
    sender: str,
    record: Optional[DecodedRecord] = None,
    error: Optional[Exception] = None,
    tz=None,
) -> str:
    lines = ["=== Received Broadcast ===", f"From: {sender}"]
    if record is not None:
        lines += [
            f"Email: {record.email}",
            f"Last Seen: {format_timestamp(record.last_seen, tz)}",
            f"IP Address: {record.ip}",
            f"Port: {record.port}",
        ]
    else:
        lines.append(f"Error parsing message: {error}")
    return "\n".join(lines) + "\n"
