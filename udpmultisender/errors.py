"""
Exception types raised by the UDP Multi Sender core.
"""
from __future__ import annotations
from typing import Optional


class UdpMultiSenderError(Exception):
    """Base class for all errors raised by the core."""


class InvalidHostError(UdpMultiSenderError, ValueError):
    """The host text is not an IPv4 or IPv6 address literal."""

    def __init__(self, host: str):
        self.host = host
        super().__init__(f"'{host}' is not a valid IPv4 or IPv6 address.")


class RangeFormatError(UdpMultiSenderError, ValueError):
    """A port range token is malformed or out of bounds."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid port range: '{token}'. Use start-end with ports between 1 and 65535.")


class InvalidPortError(UdpMultiSenderError, ValueError):
    """A single port token is not an integer in 1-65535."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Invalid port number: '{token}'. Ports must be between 1 and 65535.")


class EmptyPortListError(UdpMultiSenderError, ValueError):
    """The port text produced no ports at all."""

    def __init__(self):
        super().__init__("Enter at least one valid port.")


class EmptyMessageError(UdpMultiSenderError, ValueError):
    """An empty message was submitted for sending."""

    def __init__(self):
        super().__init__("Enter a message to send.")


class SocketInitError(UdpMultiSenderError):
    """The local UDP socket could not be created or bound."""


class NotConnectedError(UdpMultiSenderError):
    """A send was attempted while the client is not connected."""

    def __init__(self):
        super().__init__("Not connected. Connect to a server first.")


class EmptyTargetsError(UdpMultiSenderError):
    """A send was attempted with no target ports configured."""

    def __init__(self):
        super().__init__("No target ports are configured.")


class PerPortSendError(UdpMultiSenderError):
    """A single datagram of a fan-out could not be sent."""

    def __init__(self, port: int, cause: Optional[BaseException] = None):
        self.port = port
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"Send to port {port} failed{detail}")


class DecodeWarning(UserWarning):
    """A received datagram was not valid UTF-8."""
