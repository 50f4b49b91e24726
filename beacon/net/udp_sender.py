"""UDP broadcast sender for user-update packets."""
from __future__ import annotations

import logging
import socket
from dataclasses import dataclass

from ..wire.encoder import encode

logger = logging.getLogger(__name__)

BROADCAST_ADDRESS = "255.255.255.255"
DEFAULT_PORT = 6667


@dataclass
class Endpoint:
    """Simple UDP endpoint descriptor."""

    ip: str = BROADCAST_ADDRESS
    port: int = DEFAULT_PORT


class BroadcastSender:
    """Sends encoded user updates to an endpoint, broadcast enabled."""

    def __init__(self, endpoint: Endpoint, source_port: int = 0):
        self.endpoint = endpoint
        self._sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        try:
            self._sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)
            self._sock.bind(("0.0.0.0", source_port))
        except OSError:
            self._sock.close()
            raise

    def __enter__(self) -> "BroadcastSender":
        return self

    def __exit__(self, *_exc) -> None:
        self.close()

    def send(self, payload: bytes) -> int:
        addr = (self.endpoint.ip, self.endpoint.port)
        try:
            return self._sock.sendto(payload, addr)
        except OSError:
            logger.error("Failed to send %s bytes to %s:%s", len(payload), *addr)
            raise

    def send_record(self, email: str, last_seen_ns: int, ip: str, port: int) -> int:
        sent = self.send(encode(email, last_seen_ns, ip, port))
        logger.info(
            "Broadcasted update for user: %s to %s:%s",
            email,
            self.endpoint.ip,
            self.endpoint.port,
        )
        return sent

    def close(self) -> None:
        try:
            self._sock.close()
        except OSError:
            pass
