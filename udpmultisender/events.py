"""
Defines the actions the UI can dispatch to the controller.

The UI only talks to the controller through this object, which keeps
the widgets free of any networking code.
"""
from __future__ import annotations
from typing import Any, Callable, Dict, List, Optional

from .models import SendResult
from .ui.types import AppState


class AppActions:
    """Defines the actions the UI can dispatch."""

    def __init__(self):
        self.parse_ports: Callable[[str], List[int]] = lambda text: []
        self.connect: Callable[[str, str], List[int]] = lambda *args: []
        self.disconnect: Callable[[], None] = lambda: None
        self.send_message: Callable[[str], SendResult] = lambda text: SendResult()
        self.send_test_packet: Callable[[], SendResult] = lambda: SendResult()
        self.get_local_addresses: Callable[[], List[str]] = lambda: []
        self.get_local_port: Callable[[], Optional[int]] = lambda: None
        self.get_state: Callable[[], AppState] = lambda: AppState.DISCONNECTED
        self.process_queue: Callable[[], None] = lambda: None
        self.get_config: Callable[[], Dict[str, Any]] = lambda: {}
        self.shutdown: Callable[[], None] = lambda: None
        self.clear_log: Callable[[], None] = lambda: None
