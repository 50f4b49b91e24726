#!/usr/bin/env python3
"""
Broadcast a single user-update packet for exercising the listener.

The payload uses the same layout the listener decodes:
[u32 email_len][email][i64 last_seen_ns][u32 ip_len][ip][u32 port].
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from beacon.net.udp_sender import BROADCAST_ADDRESS, DEFAULT_PORT, BroadcastSender, Endpoint


def main() -> None:
    parser = argparse.ArgumentParser(description="User-update broadcast sender")
    parser.add_argument("--ip", type=str, default=BROADCAST_ADDRESS, help="Destination address")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="Destination UDP port")
    parser.add_argument("--email", type=str, default="user@example.com")
    parser.add_argument("--user-ip", type=str, default="127.0.0.1")
    parser.add_argument("--user-port", type=int, default=8080)
    parser.add_argument(
        "--last-seen-ns",
        type=int,
        default=None,
        help="Nanoseconds since the Unix epoch (defaults to now)",
    )
    parser.add_argument("--count", type=int, default=1, help="Number of packets to send")
    parser.add_argument("--interval", type=float, default=1.0, help="Seconds between packets")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)
    with BroadcastSender(Endpoint(args.ip, args.port)) as sender:
        for i in range(max(1, args.count)):
            if i:
                time.sleep(args.interval)
            last_seen = args.last_seen_ns if args.last_seen_ns is not None else time.time_ns()
            sender.send_record(args.email, last_seen, args.user_ip, args.user_port)


if __name__ == "__main__":
    main()
