"""
Shared typing information for the UI layer.
"""
from __future__ import annotations
from typing import List, Protocol

from ..models import LogEntry
from ..network.client import ConnectionState

# The window mirrors the client's connection lifecycle.
AppState = ConnectionState


class ControllerListener(Protocol):
    """The callbacks the controller uses to talk to the UI."""

    def on_state_change(self, new_state: AppState) -> None:
        ...

    def on_log_entries(self, entries: List[LogEntry]) -> None:
        ...

    def on_log_cleared(self) -> None:
        ...
