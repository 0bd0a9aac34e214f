import logging

import pytest

from conftest import wait_for
from udpmultisender import configuration
from udpmultisender.controller import UdpMultiSenderController
from udpmultisender.errors import InvalidHostError, InvalidPortError, NotConnectedError
from udpmultisender.events import AppActions
from udpmultisender.models import LogEntry
from udpmultisender.ui.types import AppState


class FakeUI:
    def __init__(self):
        self.states = []
        self.entries = []
        self.cleared = 0

    def on_state_change(self, new_state):
        self.states.append(new_state)

    def on_log_entries(self, entries):
        self.entries.extend(entries)

    def on_log_cleared(self):
        self.cleared += 1


@pytest.fixture
def controller():
    config = dict(configuration.DEFAULT_CONFIG, connect_check_delay_ms=60000,
                  send_check_delay_ms=60000, receive_poll_interval_seconds=0.05)
    actions = AppActions()
    c = UdpMultiSenderController(actions=actions, translator=lambda s: s, config=config)
    ui = FakeUI()
    c.set_ui(ui)
    yield c
    c.shutdown()


def test_actions_are_wired(controller):
    actions = controller.actions
    assert actions.parse_ports("1-3") == [1, 2, 3]
    assert actions.get_state() == AppState.DISCONNECTED
    assert actions.get_config() is controller.config


def test_client_uses_config_values(controller):
    assert controller.client.connect_check_delay_ms == 60000
    assert controller.client.poll_interval == 0.05
    assert controller.client.ack_markers == ("RECEIVED", "ACK", "OK")


def test_start_opens_socket(controller):
    controller.start()
    assert controller.actions.get_local_port() is not None


def test_connect_and_send_flow(controller, peer):
    ports = controller.actions.connect("127.0.0.1", str(peer.port))
    assert ports == [peer.port]
    assert controller.ui.states == [AppState.CONNECTING, AppState.CONNECTED]
    assert peer.recv()[0] == b"CONNECTION_TEST"

    result = controller.actions.send_message("hi")
    assert result.success_count == 1
    assert peer.recv()[0] == b"hi"

    entries = controller.process_queue()
    texts = [e.text for e in entries]
    assert any(t.startswith("Connected to 127.0.0.1") for t in texts)
    assert controller.ui.entries == entries


def test_reply_reaches_ui_through_queue(controller, peer):
    controller.connect("127.0.0.1", str(peer.port))
    _, addr = peer.recv()
    peer.send_to(b"RECEIVED", addr[1])

    seen = []

    def drained():
        seen.extend(controller.process_queue())
        return any(e.text.endswith("-> RECEIVED") for e in seen)

    assert wait_for(drained)


def test_connect_failure_is_reported_and_raised(controller):
    with pytest.raises(InvalidHostError):
        controller.connect("nope", "7777")
    assert controller.state == AppState.DISCONNECTED
    assert controller.ui.states == []
    entries = controller.process_queue()
    assert entries[-1].level == logging.ERROR
    assert "Connect failed" in entries[-1].text


def test_disconnect_then_send_fails(controller, peer):
    controller.connect("127.0.0.1", str(peer.port))
    controller.disconnect()
    assert controller.ui.states[-1] == AppState.DISCONNECTED
    with pytest.raises(NotConnectedError):
        controller.send_test_packet()


def test_ack_report_is_kept(controller, peer):
    controller.connect("127.0.0.1", str(peer.port))
    controller.client.acks.mark(peer.port)
    controller.client.acks.check_now()
    assert controller.last_ack_report.received == [peer.port]


def test_local_addresses_are_logged(controller, monkeypatch):
    monkeypatch.setattr("udpmultisender.controller.get_local_ipv4_addresses", lambda: ["10.0.0.5"])
    assert controller.get_local_addresses() == ["10.0.0.5"]
    assert "10.0.0.5" in controller.process_queue()[-1].text


def test_missing_local_address_is_a_warning(controller, monkeypatch):
    monkeypatch.setattr("udpmultisender.controller.get_local_ipv4_addresses", lambda: [])
    assert controller.get_local_addresses() == []
    assert controller.process_queue()[-1].level == logging.WARNING


def test_bad_reconnect_keeps_existing_connection(controller, peer):
    controller.connect("127.0.0.1", str(peer.port))
    peer.recv()

    with pytest.raises(InvalidHostError):
        controller.connect("bogus", str(peer.port))

    assert controller.state == AppState.CONNECTED
    assert controller.client.state == AppState.CONNECTED
    assert controller.ui.states[-1] == AppState.CONNECTED
    assert controller.send_message("still here").success_count == 1
    assert peer.recv()[0] == b"still here"


def test_bad_port_text_on_reconnect_keeps_existing_connection(controller, peer):
    controller.connect("127.0.0.1", str(peer.port))
    with pytest.raises(InvalidPortError):
        controller.connect("127.0.0.1", "70000")
    assert controller.state == controller.client.state == AppState.CONNECTED


def test_clear_log_drops_pending_entries(controller):
    controller.log_queue.put(LogEntry("pending"))
    controller.actions.clear_log()
    assert controller.process_queue() == []
    assert controller.ui.entries == []
    assert controller.ui.cleared == 1
