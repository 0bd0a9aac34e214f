"""
Datagram payloads and the reply classification heuristic.
"""
from __future__ import annotations
import json
import random
from datetime import datetime
from typing import Iterable, Optional

PROBE_PAYLOAD = "CONNECTION_TEST"
DEFAULT_ACK_MARKERS = ("RECEIVED", "ACK", "OK")
DEFAULT_TEST_MESSAGE = "UDP test data"


def format_timestamp(moment: datetime) -> str:
    """Formats a datetime as ``yyyy-MM-dd HH:mm:ss.fff``."""
    return moment.strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]


def build_test_packet(message: str = DEFAULT_TEST_MESSAGE, now: Optional[datetime] = None) -> str:
    """Builds the JSON test packet sent by the 'Send Test Data' action."""
    packet = {
        "type": "test",
        "timestamp": format_timestamp(now or datetime.now()),
        "message": message,
        "randomValue": random.randint(1, 999),
    }
    return json.dumps(packet, ensure_ascii=False)


def is_ack(text: str, markers: Iterable[str] = DEFAULT_ACK_MARKERS) -> bool:
    """
    Returns True if the reply text looks like an acknowledgment.

    Matching is a case-sensitive substring test, so any text that merely
    contains "OK" also counts.
    """
    return any(marker in text for marker in markers)
