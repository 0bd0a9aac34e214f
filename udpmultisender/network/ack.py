"""
Tracks which target ports have answered with an acknowledgment.
"""
from __future__ import annotations
import logging
import threading
from typing import Callable, Dict, List, Optional

from ..models import AckReport


class AckTracker:
    """
    Owns the per-port acknowledgment map and the one-shot status checks
    that read and reset it.

    The receive thread marks ports while timer threads snapshot the map, so
    every access goes through a single lock.
    """

    def __init__(self, on_report: Optional[Callable[[AckReport], None]] = None):
        self.on_report = on_report
        self._lock = threading.Lock()
        self._status: Dict[int, bool] = {}
        self._timers: List[threading.Timer] = []

    def reset(self, ports: List[int]) -> None:
        """Replaces the tracked ports, all unacknowledged."""
        self.cancel_checks()
        with self._lock:
            self._status = {port: False for port in ports}

    def clear(self) -> None:
        self.cancel_checks()
        with self._lock:
            self._status = {}

    def mark(self, port: int) -> bool:
        """Marks a tracked port as acknowledged. Untracked ports are ignored."""
        with self._lock:
            if port not in self._status:
                return False
            self._status[port] = True
            return True

    def snapshot(self) -> Dict[int, bool]:
        with self._lock:
            return dict(self._status)

    def collect(self) -> AckReport:
        """Reads the current cycle into a report and resets every entry."""
        report = AckReport()
        with self._lock:
            for port, received in self._status.items():
                (report.received if received else report.missing).append(port)
                self._status[port] = False
        return report

    def schedule_check(self, delay_ms: int) -> threading.Timer:
        """Runs check_now() once after delay_ms on a daemon timer thread."""
        timer = threading.Timer(delay_ms / 1000.0, self._on_timer)
        timer.daemon = True
        with self._lock:
            self._timers = [t for t in self._timers if t.is_alive()]
            self._timers.append(timer)
        timer.start()
        return timer

    def cancel_checks(self) -> None:
        with self._lock:
            timers, self._timers = self._timers, []
        for timer in timers:
            timer.cancel()

    def check_now(self) -> Optional[AckReport]:
        """Collects a report if any ports are tracked and hands it to on_report."""
        with self._lock:
            if not self._status:
                return None
        report = self.collect()
        if self.on_report:
            self.on_report(report)
        return report

    def _on_timer(self) -> None:
        try:
            self.check_now()
        except Exception as e:
            logging.error(f"Status check failed: {e}")
