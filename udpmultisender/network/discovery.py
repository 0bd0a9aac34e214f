"""
Handles discovery of the local machine's addresses.
"""
import socket
import logging
from typing import List

import psutil


def get_local_ipv4_addresses() -> List[str]:
    """
    Returns the IPv4 addresses of all interfaces that are up, using psutil.

    Non-loopback addresses come first. Loopback addresses are only returned
    when nothing else is available.
    """
    primary: List[str] = []
    loopback: List[str] = []

    try:
        addrs = psutil.net_if_addrs()
        stats = psutil.net_if_stats()
        for iface, iface_addrs in addrs.items():
            if iface in stats and not stats[iface].isup:
                continue
            for addr in iface_addrs:
                if addr.family != socket.AF_INET or not addr.address:
                    continue
                bucket = loopback if addr.address.startswith("127.") else primary
                if addr.address not in bucket:
                    bucket.append(addr.address)
    except Exception as e:
        logging.error(f"An error occurred while listing local addresses with psutil: {e}")
        return []

    if not primary:
        logging.warning("No non-loopback IPv4 address found.")
    return primary or loopback
