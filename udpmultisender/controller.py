"""
Core application controller for UDP Multi Sender.
"""
from __future__ import annotations
import logging
from queue import Queue, Empty
from typing import Any, Callable, Dict, List, Optional

from . import configuration
from .errors import SocketInitError, UdpMultiSenderError
from .events import AppActions
from .models import AckReport, LogEntry, SendResult
from .network import UdpFanoutClient, get_local_ipv4_addresses
from .parsing import PortListParser, validate_host
from .ui.types import AppState, ControllerListener


class UdpMultiSenderController:
    """Owns the fan-out client and relays its activity to the UI."""
    client: UdpFanoutClient
    state: AppState

    def __init__(
        self,
        actions: AppActions,
        translator: Callable[[str], str],
        config: Optional[Dict[str, Any]] = None,
        client: Optional[UdpFanoutClient] = None,
    ):
        self.ui: Optional[ControllerListener] = None  # Will be set by set_ui()
        self.actions = actions
        self._ = translator
        self.config = config if config is not None else configuration.load_or_create_config()
        self.parser = PortListParser()
        self.state = AppState.DISCONNECTED
        self.last_ack_report: Optional[AckReport] = None

        # Client callbacks fire on background threads, so entries are queued
        # and drained on the UI thread by process_queue().
        self.log_queue: Queue[LogEntry] = Queue()
        self.client = client or UdpFanoutClient(**configuration.client_settings(self.config))
        self.client.on_log = self.log_queue.put
        self.client.on_ack_report = self._on_ack_report

        self.actions.parse_ports = self.parse_ports
        self.actions.connect = self.connect
        self.actions.disconnect = self.disconnect
        self.actions.send_message = self.send_message
        self.actions.send_test_packet = self.send_test_packet
        self.actions.get_local_addresses = self.get_local_addresses
        self.actions.get_local_port = lambda: self.client.local_port
        self.actions.get_state = self.get_state
        self.actions.process_queue = self.process_queue
        self.actions.get_config = lambda: self.config
        self.actions.shutdown = self.shutdown
        self.actions.clear_log = self.clear_log

    def set_ui(self, ui: ControllerListener):
        """Sets the UI instance for the controller."""
        self.ui = ui

    def start(self):
        """Opens the local socket ahead of the first connect."""
        try:
            self.client.initialize()
        except SocketInitError as e:
            logging.error(f"Could not open the UDP socket at startup: {e}")

    def shutdown(self):
        """Releases the socket and background threads. The UI is not notified."""
        self.client.close()
        self.state = AppState.DISCONNECTED

    def _set_state(self, new_state: AppState):
        """Sets the application state and notifies the UI."""
        self.state = new_state
        if self.ui:
            self.ui.on_state_change(new_state)

    def _on_ack_report(self, report: AckReport):
        self.last_ack_report = report

    def get_state(self) -> AppState:
        return self.state

    def parse_ports(self, ports_text: str) -> List[int]:
        return self.parser.parse(ports_text)

    def connect(self, host: str, ports_text: str) -> List[int]:
        """
        Connects the client; errors propagate to the caller.

        Bad host or port text leaves the current connection untouched.
        """
        try:
            validate_host(host)
            self.parser.parse(ports_text)
        except UdpMultiSenderError as e:
            self._report_connect_failure(e)
            raise

        self._set_state(AppState.CONNECTING)
        try:
            ports = self.client.connect(host, ports_text)
        except Exception as e:
            self._report_connect_failure(e)
            self._set_state(self.client.state)
            raise
        self._set_state(AppState.CONNECTED)
        return ports

    def _report_connect_failure(self, error: Exception):
        logging.error(f"Connect failed: {error}")
        self.log_queue.put(LogEntry(self._("Connect failed: {error}").format(error=error), logging.ERROR))

    def disconnect(self):
        self.client.disconnect()
        self._set_state(AppState.DISCONNECTED)

    def send_message(self, text: str) -> SendResult:
        return self.client.send_message(text)

    def send_test_packet(self) -> SendResult:
        return self.client.send_test_packet()

    def get_local_addresses(self) -> List[str]:
        """Lists local IPv4 addresses and logs the outcome."""
        addresses = get_local_ipv4_addresses()
        if addresses:
            self.log_queue.put(LogEntry(self._("Local addresses: {addresses}").format(addresses=", ".join(addresses))))
        else:
            self.log_queue.put(LogEntry(self._("No local IP address found."), logging.WARNING))
        return addresses

    def process_queue(self) -> List[LogEntry]:
        """Drains queued log entries and hands them to the UI."""
        entries: List[LogEntry] = []
        try:
            while True:
                entries.append(self.log_queue.get_nowait())
        except Empty:
            pass

        if entries and self.ui:
            self.ui.on_log_entries(entries)
        return entries

    def clear_log(self):
        """Drops entries not yet shown and tells the UI to empty its log."""
        try:
            while True:
                self.log_queue.get_nowait()
        except Empty:
            pass
        if self.ui:
            self.ui.on_log_cleared()
