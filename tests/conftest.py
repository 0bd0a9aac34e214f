from __future__ import annotations
import socket
import time
from typing import Callable, List

import pytest

from udpmultisender.models import LogEntry
from udpmultisender.network.client import UdpFanoutClient


def wait_for(condition: Callable[[], bool], timeout: float = 3.0) -> bool:
    """Polls condition until it holds or the timeout expires."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if condition():
            return True
        time.sleep(0.02)
    return condition()


class UdpPeer:
    """A loopback UDP endpoint standing in for a server."""

    def __init__(self):
        self.sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        self.sock.bind(("127.0.0.1", 0))
        self.sock.settimeout(3.0)
        self.port = self.sock.getsockname()[1]

    def recv(self):
        return self.sock.recvfrom(65535)

    def send_to(self, data: bytes, port: int):
        self.sock.sendto(data, ("127.0.0.1", port))

    def close(self):
        self.sock.close()


@pytest.fixture
def peer():
    p = UdpPeer()
    yield p
    p.close()


@pytest.fixture
def make_peer():
    peers: List[UdpPeer] = []

    def _make() -> UdpPeer:
        p = UdpPeer()
        peers.append(p)
        return p

    yield _make
    for p in peers:
        p.close()


@pytest.fixture
def log_entries() -> List[LogEntry]:
    return []


@pytest.fixture
def client(log_entries):
    # Long check delays keep the timers from resetting the map mid-test.
    c = UdpFanoutClient(
        on_log=log_entries.append,
        connect_check_delay_ms=60000,
        send_check_delay_ms=60000,
        poll_interval=0.05,
    )
    yield c
    c.disconnect()


def log_texts(entries: List[LogEntry]) -> List[str]:
    return [e.text for e in list(entries)]
