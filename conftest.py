import socket
from typing import Any, Dict

import pytest


class DummySettings:
    """In-memory stand-in for QSettings."""

    def __init__(self):
        self.data: Dict[str, Any] = {}

    def value(self, key: str, default: Any = None):
        return self.data.get(key, default)

    def setValue(self, key: str, value: Any) -> None:
        self.data[key] = value

    def remove(self, key: str) -> None:
        self.data.pop(key, None)


@pytest.fixture
def qsettings() -> DummySettings:
    return DummySettings()


@pytest.fixture
def free_udp_port() -> int:
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", 0))
    port = sock.getsockname()[1]
    sock.close()
    return port
