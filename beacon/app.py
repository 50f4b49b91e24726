import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Iterable, Optional

if __package__ is None or __package__ == "":
    # Ensure the project root is on sys.path so absolute imports succeed when
    # the script is executed directly.
    sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from beacon.net.udp_receiver import BindFailure, Datagram, listen
from beacon.report import format_report
from beacon.settings import ListenerSettings, load_settings, open_settings
from beacon.wire.decoder import decode
from beacon.wire.errors import DecodeError
from beacon.wire.record import DecodedRecord

logger = logging.getLogger(__name__)

Sink = Callable[[str], None]


def handle_packet(payload: bytes, sender: str, sink: Sink = print) -> Optional[DecodedRecord]:
    """Decode one datagram and pass its report to ``sink``."""
    try:
        record = decode(payload)
    except DecodeError as exc:
        logger.warning("Dropped %s-byte packet from %s: %s", len(payload), sender, exc)
        sink(format_report(sender, error=exc))
        return None
    sink(format_report(sender, record=record))
    return record


def serve(datagrams: Iterable[Datagram], sink: Sink = print) -> int:
    """Report every datagram until the source is exhausted; returns the count."""
    count = 0
    for payload, sender in datagrams:
        handle_packet(payload, sender, sink)
        count += 1
    return count


def build_parser(settings: ListenerSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="UDP broadcast listener for user updates")
    parser.add_argument(
        "--port", type=int, default=settings.port, help="UDP port to listen on"
    )
    return parser


def main(argv=None, qsettings=None, sink: Sink = print) -> int:
    settings = load_settings(qsettings if qsettings is not None else open_settings())
    args = build_parser(settings).parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if settings.debug_log else logging.INFO)

    sink("=== UDP Broadcast Listener ===")
    sink(f"Listening on port: {args.port}")
    sink("Waiting for broadcast messages...\n")

    datagrams = listen(args.port, host=settings.host, buffer_size=settings.buffer_size)
    try:
        serve(datagrams, sink)
    except BindFailure as exc:
        logger.error("Error creating UDP listener: %s", exc)
        return 1
    except KeyboardInterrupt:
        logger.info("Stopped by user.")
    finally:
        datagrams.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
