"""Blocking UDP receiver for broadcast datagrams."""
from __future__ import annotations

import logging
import socket
from typing import Iterator, Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_BUFFER_SIZE = 1024

Datagram = Tuple[bytes, str]


class ReceiverError(OSError):
    """Base class for receiver socket failures."""


class BindFailure(ReceiverError):
    """The listening socket could not be created or bound."""


class ReadFailure(ReceiverError):
    """A single receive attempt failed."""


def format_address(addr) -> str:
    if isinstance(addr, tuple) and len(addr) >= 2:
        return f"{addr[0]}:{addr[1]}"
    return str(addr)


class UdpReceiver:
    """Owns one UDP socket bound to ``host:port`` and yields datagrams from it.

    Each datagram is read into a reusable buffer of ``buffer_size`` bytes;
    anything longer is cut off by the socket layer without notice.
    """

    def __init__(self, port: int, host: str = "0.0.0.0", buffer_size: int = DEFAULT_BUFFER_SIZE):
        self.port = port
        self.host = host
        self.buffer_size = buffer_size
        self._sock: Optional[socket.socket] = None

    def __enter__(self) -> "UdpReceiver":
        self.bind()
        return self

    def __exit__(self, *_exc) -> None:
        self.close()

    @property
    def is_open(self) -> bool:
        return self._sock is not None

    @property
    def address(self) -> Tuple[str, int]:
        """Bound ``(host, port)``; resolves port 0 to the port actually assigned."""

        if self._sock is None:
            return (self.host, self.port)
        return self._sock.getsockname()[:2]

    def bind(self) -> None:
        """Create and bind the socket if it is not already open."""
        if self._sock is not None:
            return
        try:
            sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        except OSError as exc:
            raise BindFailure(f"cannot create UDP socket: {exc}") from exc
        try:
            sock.bind((self.host, self.port))
        except (OSError, OverflowError) as exc:
            sock.close()
            raise BindFailure(
                f"cannot bind UDP socket to {self.host}:{self.port}: {exc}"
            ) from exc
        self._sock = sock
        logger.debug("UdpReceiver bound to %s", format_address(self.address))

    def close(self) -> None:
        """Close the socket; safe to call more than once."""
        if self._sock is None:
            return
        try:
            self._sock.close()
        except OSError:
            logger.exception("UdpReceiver failed to close socket")
        self._sock = None

    def receive(self, buffer: bytearray) -> Datagram:
        """Block until one datagram arrives and return ``(payload, sender)``."""
        if self._sock is None:
            raise ReadFailure("receiver socket is not open")
        try:
            size, addr = self._sock.recvfrom_into(buffer)
        except OSError as exc:
            raise ReadFailure(f"error reading packet: {exc}") from exc
        return bytes(memoryview(buffer)[:size]), format_address(addr)

    def listen(self) -> Iterator[Datagram]:
        """Yield datagrams forever.

        Read errors are logged and skipped. The socket is closed when the
        iterator is closed or garbage collected, or when the socket goes
        away underneath it.
        """

        self.bind()
        buffer = bytearray(self.buffer_size)
        try:
            while True:
                try:
                    yield self.receive(buffer)
                except ReadFailure as exc:
                    if self._sock is None or self._sock.fileno() == -1:
                        logger.warning("UdpReceiver socket closed, stopping: %s", exc)
                        return
                    logger.warning("UdpReceiver %s", exc)
        finally:
            self.close()


def listen(port: int, host: str = "0.0.0.0", buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator[Datagram]:
    """Bind ``host:port`` and yield ``(payload, sender)`` pairs indefinitely.

    :class:`BindFailure` is raised by the first ``next()`` call when the
    socket cannot be bound.
    """

    return UdpReceiver(port, host=host, buffer_size=buffer_size).listen()
