import socket
from types import SimpleNamespace

from udpmultisender.network import discovery


def _addr(family, address):
    return SimpleNamespace(family=family, address=address, netmask=None)


def _patch(monkeypatch, addrs, stats):
    monkeypatch.setattr(discovery.psutil, "net_if_addrs", lambda: addrs)
    monkeypatch.setattr(discovery.psutil, "net_if_stats", lambda: stats)


def test_lists_ipv4_of_interfaces_that_are_up(monkeypatch):
    addrs = {
        "lo": [_addr(socket.AF_INET, "127.0.0.1")],
        "eth0": [_addr(socket.AF_INET, "192.168.1.20"), _addr(socket.AF_INET6, "fe80::1")],
        "wlan0": [_addr(socket.AF_INET, "10.0.0.7")],
        "down0": [_addr(socket.AF_INET, "172.16.0.1")],
    }
    stats = {
        "lo": SimpleNamespace(isup=True),
        "eth0": SimpleNamespace(isup=True),
        "wlan0": SimpleNamespace(isup=True),
        "down0": SimpleNamespace(isup=False),
    }
    _patch(monkeypatch, addrs, stats)
    assert discovery.get_local_ipv4_addresses() == ["192.168.1.20", "10.0.0.7"]


def test_falls_back_to_loopback(monkeypatch):
    _patch(monkeypatch, {"lo": [_addr(socket.AF_INET, "127.0.0.1")]}, {"lo": SimpleNamespace(isup=True)})
    assert discovery.get_local_ipv4_addresses() == ["127.0.0.1"]


def test_psutil_errors_yield_empty_list(monkeypatch):
    def boom():
        raise RuntimeError("no access")

    monkeypatch.setattr(discovery.psutil, "net_if_addrs", boom)
    assert discovery.get_local_ipv4_addresses() == []
