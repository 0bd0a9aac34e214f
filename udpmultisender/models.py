from __future__ import annotations
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import List

from .errors import PerPortSendError


@dataclass
class LogEntry:
    """A single line of the activity log."""
    text: str
    level: int = logging.INFO
    timestamp: datetime = field(default_factory=datetime.now)

    def format(self) -> str:
        """Renders the entry as ``[HH:MM:SS.fff] text``."""
        return f"[{self.timestamp.strftime('%H:%M:%S.%f')[:-3]}] {self.text}"


@dataclass
class SendResult:
    """Outcome of one fan-out over the target ports."""
    success_count: int = 0
    fail_count: int = 0
    failures: List[PerPortSendError] = field(default_factory=list)


@dataclass
class AckReport:
    """Snapshot of one status-check cycle."""
    received: List[int] = field(default_factory=list)
    missing: List[int] = field(default_factory=list)

    @property
    def all_received(self) -> bool:
        return bool(self.received) and not self.missing
