"""
Network-related components for UDP Multi Sender.
"""

from .ack import AckTracker
from .client import ConnectionState, UdpFanoutClient
from .discovery import get_local_ipv4_addresses
from .payloads import PROBE_PAYLOAD, build_test_packet, is_ack

__all__ = [
    "AckTracker",
    "ConnectionState",
    "UdpFanoutClient",
    "get_local_ipv4_addresses",
    "PROBE_PAYLOAD",
    "build_test_packet",
    "is_ack",
]
