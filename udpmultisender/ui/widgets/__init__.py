"""UI Widgets Package"""
from .connection_panel import ConnectionPanel
from .log_panel import LogPanel
from .message_panel import MessagePanel
from .status_bar import StatusBar

__all__ = ["ConnectionPanel", "LogPanel", "MessagePanel", "StatusBar"]
