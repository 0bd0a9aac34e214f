"""
UDP fan-out client: one local socket, many destination ports.
"""
from __future__ import annotations
import logging
import socket
import threading
from enum import Enum, auto
from typing import Callable, List, Optional, Sequence

from ..errors import (
    DecodeWarning,
    EmptyMessageError,
    EmptyTargetsError,
    NotConnectedError,
    PerPortSendError,
    SocketInitError,
)
from ..models import AckReport, LogEntry, SendResult
from ..parsing import PortListParser, host_family_is_ipv6, validate_host
from .ack import AckTracker
from .payloads import DEFAULT_ACK_MARKERS, DEFAULT_TEST_MESSAGE, PROBE_PAYLOAD, build_test_packet, is_ack


class ConnectionState(Enum):
    """Lifecycle states of the fan-out client."""
    DISCONNECTED = auto()
    CONNECTING = auto()
    CONNECTED = auto()


class UdpFanoutClient:
    """
    Sends datagrams from a single ephemeral UDP port to every configured
    destination port and listens for replies on the same socket.

    Every user-visible event is delivered to ``on_log`` as a LogEntry. The
    callback may be invoked from the receive thread or a timer thread.
    """

    def __init__(
        self,
        on_log: Optional[Callable[[LogEntry], None]] = None,
        on_ack_report: Optional[Callable[[AckReport], None]] = None,
        probe_payload: str = PROBE_PAYLOAD,
        ack_markers: Sequence[str] = DEFAULT_ACK_MARKERS,
        connect_check_delay_ms: int = 3000,
        send_check_delay_ms: int = 2000,
        receive_buffer_size: int = 65535,
        poll_interval: float = 0.2,
        test_message: str = DEFAULT_TEST_MESSAGE,
    ):
        self.on_log = on_log
        self.on_ack_report = on_ack_report
        self.probe_payload = probe_payload
        self.ack_markers = tuple(ack_markers)
        self.connect_check_delay_ms = connect_check_delay_ms
        self.send_check_delay_ms = send_check_delay_ms
        self.receive_buffer_size = receive_buffer_size
        self.poll_interval = poll_interval
        self.test_message = test_message

        self.state = ConnectionState.DISCONNECTED
        self.host: Optional[str] = None
        self.target_ports: List[int] = []
        self.parser = PortListParser()
        self.acks = AckTracker(on_report=self._report_status)

        self._sock: Optional[socket.socket] = None
        self._receive_thread: Optional[threading.Thread] = None
        self._stop_event = threading.Event()
        self._lock = threading.RLock()

    # ------------------- Properties -------------------

    @property
    def is_connected(self) -> bool:
        return self.state == ConnectionState.CONNECTED

    @property
    def local_port(self) -> Optional[int]:
        """The OS-assigned local port, or None without an open socket."""
        with self._lock:
            if self._sock is None:
                return None
            return self._sock.getsockname()[1]

    @property
    def is_receiving(self) -> bool:
        thread = self._receive_thread
        return thread is not None and thread.is_alive()

    def port_status(self):
        """Returns a copy of the per-port acknowledgment map."""
        return self.acks.snapshot()

    # ------------------- Lifecycle -------------------

    def initialize(self, family: int = socket.AF_INET) -> None:
        """Binds a fresh UDP socket to an ephemeral port and starts receiving."""
        with self._lock:
            if self._sock is not None:
                return
            bind_host = "::" if family == socket.AF_INET6 else "0.0.0.0"
            sock = None
            try:
                sock = socket.socket(family, socket.SOCK_DGRAM)
                try:
                    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
                except OSError:
                    pass
                sock.bind((bind_host, 0))
                sock.settimeout(self.poll_interval)
            except OSError as e:
                if sock is not None:
                    sock.close()
                self.state = ConnectionState.DISCONNECTED
                self._log(f"UDP client initialization failed: {e}", logging.ERROR)
                raise SocketInitError(f"Could not open UDP socket: {e}") from e

            self._sock = sock
            self._log("UDP client initialized.")
            self._log(f"Local port: {sock.getsockname()[1]}")
            self._start_receiving()

    def connect(self, host_text: str, ports_text: str) -> List[int]:
        """
        Validates the host and ports, probes every port and enters the
        connected state. Returns the resolved target ports.
        """
        host = validate_host(host_text)
        ports = self.parser.parse(ports_text)

        with self._lock:
            self.state = ConnectionState.CONNECTING
            try:
                family = socket.AF_INET6 if host_family_is_ipv6(host) else socket.AF_INET
                if self._sock is not None and self._sock.family != family:
                    self._shutdown_socket()
                if self._sock is None:
                    self.initialize(family)

                self.host = host
                self.target_ports = list(ports)
                self.acks.reset(self.target_ports)

                probe = self.probe_payload.encode("utf-8")
                for port in self.target_ports:
                    try:
                        self._send_datagram(probe, host, port)
                    except OSError as e:
                        self._log(f"Connection test to {host}:{port} failed: {e}", logging.WARNING)
            except BaseException:
                self.state = ConnectionState.DISCONNECTED
                self.host = None
                self.target_ports = []
                self.acks.clear()
                raise

            self.state = ConnectionState.CONNECTED
            self._start_receiving()
            self.acks.schedule_check(self.connect_check_delay_ms)

        self._log(f"Connected to {host} -> ports: {self.parser.describe(self.target_ports)}")
        return list(self.target_ports)

    def disconnect(self) -> None:
        """Leaves the connected state and releases the socket. Never raises."""
        with self._lock:
            if self.state == ConnectionState.DISCONNECTED and self._sock is None:
                return
            self.state = ConnectionState.DISCONNECTED
            self.acks.clear()
            self.target_ports = []
            self.host = None
            self._shutdown_socket()
        self._log("Disconnected from server.")

    def close(self) -> None:
        """Shutdown hook for the application."""
        self.disconnect()

    # ------------------- Sending -------------------

    def send(self, payload: bytes) -> SendResult:
        """Sends payload to every target port, continuing past per-port failures."""
        with self._lock:
            if self.state != ConnectionState.CONNECTED or self._sock is None:
                raise NotConnectedError()
            if not self.target_ports:
                raise EmptyTargetsError()
            host, ports = self.host, list(self.target_ports)

        result = SendResult()
        for port in ports:
            try:
                self._send_datagram(payload, host, port)
            except OSError as e:
                error = PerPortSendError(port, e)
                result.fail_count += 1
                result.failures.append(error)
                self._log(f"Send failed -> {host}:{port}: {e}", logging.WARNING)
            else:
                result.success_count += 1
                self._log(f"Sent -> {host}:{port} ({len(payload)} bytes)")

        self._log(f"Send complete: {result.success_count} succeeded, {result.fail_count} failed")
        self.acks.schedule_check(self.send_check_delay_ms)
        return result

    def send_message(self, text: str) -> SendResult:
        """Sends user text, UTF-8 encoded, to every target port."""
        if not text:
            raise EmptyMessageError()
        result = self.send(text.encode("utf-8"))
        self._log(f"Message: {text}")
        return result

    def send_test_packet(self) -> SendResult:
        """Sends a JSON test packet to every target port."""
        packet = build_test_packet(self.test_message)
        result = self.send(packet.encode("utf-8"))
        self._log(f"Test data content: {packet}")
        return result

    def _send_datagram(self, data: bytes, host: str, port: int) -> None:
        sock = self._sock
        if sock is None:
            raise OSError("socket is closed")
        sock.sendto(data, (host, port))

    # ------------------- Receiving -------------------

    def _start_receiving(self) -> None:
        if self._sock is None or self.is_receiving:
            return
        self._stop_event = threading.Event()
        self._receive_thread = threading.Thread(
            target=self._receive_loop,
            args=(self._sock, self._stop_event),
            name="udp-receive",
            daemon=True,
        )
        self._receive_thread.start()

    def _receive_loop(self, sock: socket.socket, stop_event: threading.Event) -> None:
        """Receives datagrams until stop_event is set or the socket closes."""
        try:
            while not stop_event.is_set():
                try:
                    data, addr = sock.recvfrom(self.receive_buffer_size)
                except socket.timeout:
                    continue
                except OSError as e:
                    if stop_event.is_set() or sock.fileno() == -1:
                        break
                    # ICMP port unreachable surfaces here on some platforms.
                    self._log(f"Receive error: {e}", logging.WARNING)
                    continue
                try:
                    self._handle_datagram(data, addr)
                except Exception as e:
                    self._log(f"Could not handle datagram from {addr}: {e}", logging.ERROR)
        except Exception as e:
            self._log(f"Receive loop failed: {e}", logging.ERROR)
        finally:
            self._log("UDP receive loop stopped.")

    def _handle_datagram(self, data: bytes, addr) -> None:
        sender_ip, sender_port = addr[0], addr[1]
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as e:
            warning = DecodeWarning(f"Datagram from {sender_ip}:{sender_port} is not valid UTF-8: {e}")
            self._log(str(warning), logging.WARNING)
            text = data.decode("utf-8", errors="replace")

        self._log(f"Received {sender_ip}:{sender_port} -> {text}")

        if is_ack(text, self.ack_markers) and self.acks.mark(sender_port):
            self._log(f"Reply confirmed from port {sender_port}")

    def _shutdown_socket(self) -> None:
        """Stops the receive thread, then closes the socket exactly once."""
        self.acks.cancel_checks()
        self._stop_event.set()
        thread = self._receive_thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout=self.poll_interval * 5 + 1.0)
        self._receive_thread = None

        sock, self._sock = self._sock, None
        if sock is None:
            return
        try:
            sock.close()
        except OSError as e:
            self._log(f"Error while closing UDP client: {e}", logging.WARNING)

    # ------------------- Reporting -------------------

    def _report_status(self, report: AckReport) -> None:
        if report.received:
            self._log(f"Confirmed replies from ports: {self.parser.describe(report.received)}")
        if report.missing:
            self._log(f"No reply from ports: {self.parser.describe(report.missing)}", logging.WARNING)
        if self.on_ack_report:
            self.on_ack_report(report)

    def _log(self, text: str, level: int = logging.INFO) -> None:
        logging.log(level, text)
        if self.on_log:
            try:
                self.on_log(LogEntry(text=text, level=level))
            except Exception as e:
                logging.error(f"Log callback failed: {e}")
