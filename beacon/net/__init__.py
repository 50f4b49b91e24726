"""Networking helpers for the broadcast listener."""

from .udp_receiver import BindFailure, ReadFailure, ReceiverError, UdpReceiver, listen
from .udp_sender import BroadcastSender, Endpoint

__all__ = [
    "BindFailure",
    "BroadcastSender",
    "Endpoint",
    "ReadFailure",
    "ReceiverError",
    "UdpReceiver",
    "listen",
]
