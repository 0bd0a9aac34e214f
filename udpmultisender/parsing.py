"""
Handles parsing and validation of destination hosts and port lists.
"""
from __future__ import annotations
import ipaddress
import re
from typing import List

from .errors import EmptyPortListError, InvalidHostError, InvalidPortError, RangeFormatError

MIN_PORT = 1
MAX_PORT = 65535

# Tokens are separated by commas, semicolons, spaces, tabs and line breaks.
_SEPARATORS = re.compile(r"[,; \t\n\r]+")
_NUMBER = re.compile(r"\+?[0-9]+")


def _to_port(text: str) -> int:
    """Converts a token to a port number, raising ValueError when out of range."""
    text = text.strip()
    if not _NUMBER.fullmatch(text):
        raise ValueError(f"'{text}' is not a number")
    port = int(text)
    if not MIN_PORT <= port <= MAX_PORT:
        raise ValueError(f"{port} is outside {MIN_PORT}-{MAX_PORT}")
    return port


class PortListParser:
    """Expands free-form port text into an ordered list of ports."""

    def parse(self, text: str) -> List[int]:
        """
        Parses a string of ports and ranges into a list of integers.

        Single ports and inclusive ``start-end`` ranges may be mixed. Ranges
        may be written in either direction and are expanded in the written
        order. Duplicates are kept and nothing is sorted.
        """
        ports: List[int] = []
        tokens = [t.strip() for t in _SEPARATORS.split(text or "") if t.strip()]

        for token in tokens:
            if '-' in token:
                ports.extend(self._expand_range(token))
            else:
                try:
                    ports.append(_to_port(token))
                except ValueError:
                    raise InvalidPortError(token) from None

        if not ports:
            raise EmptyPortListError()
        return ports

    def _expand_range(self, token: str) -> List[int]:
        parts = token.split('-')
        if len(parts) != 2:
            raise RangeFormatError(token)
        try:
            start, end = _to_port(parts[0]), _to_port(parts[1])
        except ValueError:
            raise RangeFormatError(token) from None

        step = 1 if start <= end else -1
        return list(range(start, end + step, step))

    @staticmethod
    def describe(ports: List[int]) -> str:
        """Summarizes a port list for log output."""
        if len(ports) <= 10:
            return ", ".join(str(p) for p in ports)
        return f"{len(ports)} ports ({min(ports)}-{max(ports)})"


def parse_ports(text: str) -> List[int]:
    """Module-level shortcut for PortListParser().parse()."""
    return PortListParser().parse(text)


def describe_ports(ports: List[int]) -> str:
    return PortListParser.describe(ports)


def validate_host(host: str) -> str:
    """Returns the host stripped of whitespace if it is an IP address literal."""
    candidate = (host or "").strip()
    try:
        ipaddress.ip_address(candidate)
    except ValueError:
        raise InvalidHostError(candidate) from None
    return candidate


def host_family_is_ipv6(host: str) -> bool:
    """True if the (already validated) host is an IPv6 literal."""
    return ipaddress.ip_address(host).version == 6
