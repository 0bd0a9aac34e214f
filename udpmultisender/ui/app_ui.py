"""
UI component for the UDP Multi Sender application.

Defines the AppUI class responsible for building and managing all Tkinter
widgets for the main application window.
"""
from __future__ import annotations
import tkinter as tk
from tkinter import ttk
from typing import Any, Callable, Dict, List

from .dialog_manager import DialogManager
from .menu_manager import MenuManager
from .types import AppState
from .widgets import ConnectionPanel, LogPanel, MessagePanel, StatusBar
from ..errors import UdpMultiSenderError
from ..events import AppActions
from ..models import LogEntry


class AppUI:
    """Manages the user interface of the UDP Multi Sender application."""

    def __init__(self, root: tk.Tk, actions: AppActions, translator: Callable[[str], str]):
        """Initializes the UI and wires it to the controller actions."""
        self.root = root
        self.actions = actions
        self._ = translator
        self.config: Dict[str, Any] = self.actions.get_config()

        self.dialog_manager = DialogManager(root, translator)
        self.menu_manager = MenuManager(
            root, self.dialog_manager, translator,
            on_exit=self.close,
            on_clear_log=self.actions.clear_log,
        )

        self._create_widgets()
        self._setup_ui_base()
        self._wire_events()
        self.menu_manager.setup()

        self.connection_panel.set_host(str(self.config.get('default_host', '')))
        self.connection_panel.set_ports_text(str(self.config.get('default_ports', '')))
        self.on_state_change(self.actions.get_state())

    def _create_widgets(self):
        """Create all the widgets for the UI."""
        self.main_frame = ttk.Frame(self.root)
        self.status_bar = StatusBar(self.root, self._)
        self.connection_panel = ConnectionPanel(self.main_frame, self._)
        self.message_panel = MessagePanel(self.main_frame, self._)
        self.log_panel = LogPanel(self.main_frame, self._)

    def _setup_ui_base(self):
        self.status_bar.pack(side=tk.BOTTOM, fill=tk.X)
        self.main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)
        self.main_frame.columnconfigure(0, weight=1)
        self.main_frame.rowconfigure(2, weight=1)
        self.connection_panel.grid(row=0, column=0, sticky="ew")
        self.message_panel.grid(row=1, column=0, sticky="ew", pady=(10, 0))
        self.log_panel.grid(row=2, column=0, sticky="nsew", pady=(10, 0))

    def _wire_events(self):
        cp = self.connection_panel
        cp.connect_button.config(command=self.toggle_connection)
        cp.local_ip_button.config(command=self._fill_local_ip)
        mp = self.message_panel
        mp.send_button.config(command=self.send_message)
        mp.test_button.config(command=self.send_test_packet)
        mp.message_entry.bind("<Return>", self._on_return_key)
        self.log_panel.clear_button.config(command=self.actions.clear_log)

    # ------------------- Callback Handlers from Controller -------------------

    def on_state_change(self, new_state: AppState):
        """Reacts to connection state changes from the controller."""
        connected = new_state == AppState.CONNECTED
        self.connection_panel.set_state("disabled" if new_state != AppState.DISCONNECTED else "normal")
        self.connection_panel.set_connected(connected)
        self.message_panel.set_enabled(connected)
        self.status_bar.set_connected(connected)
        self.status_bar.set_local_port(self.actions.get_local_port())

        if new_state == AppState.CONNECTED:
            self.update_status_bar(self._("Connected."))
        elif new_state == AppState.CONNECTING:
            self.update_status_bar(self._("Connecting..."))
        else:
            self.update_status_bar(self._("Disconnected."))

    def on_log_entries(self, entries: List[LogEntry]):
        self.log_panel.append(entries)

    def on_log_cleared(self):
        self.log_panel.clear()

    # ------------------- UI Event Handlers -------------------

    def toggle_connection(self):
        """Connects with the entered host and ports, or disconnects."""
        if self.actions.get_state() == AppState.CONNECTED:
            self.actions.disconnect()
            return

        host = self.connection_panel.get_host()
        ports_text = self.connection_panel.get_ports_text()
        if not host or not ports_text:
            self.dialog_manager.show_connect_error(self._("Enter the server IP and ports."))
            return

        try:
            ports = self.actions.parse_ports(ports_text)
            threshold = int(self.config.get('port_count_warning_threshold', 100))
            if len(ports) > threshold and not self.dialog_manager.confirm_many_ports(len(ports)):
                return
            self.actions.connect(host, ports_text)
        except UdpMultiSenderError as e:
            self.dialog_manager.show_connect_error(str(e))

    def send_message(self):
        if self.actions.get_state() != AppState.CONNECTED:
            self.dialog_manager.show_send_error(self._("Connect to a server first."))
            return
        text = self.message_panel.get_text()
        try:
            self.actions.send_message(text)
        except UdpMultiSenderError as e:
            self.dialog_manager.show_send_error(str(e))
            return
        self.message_panel.clear()

    def _on_return_key(self, event=None):
        """Enter sends while connected and is ignored otherwise."""
        if self.actions.get_state() == AppState.CONNECTED:
            self.send_message()
        return "break"

    def send_test_packet(self):
        if self.actions.get_state() != AppState.CONNECTED:
            self.dialog_manager.show_send_error(self._("Connect to a server first."))
            return
        try:
            self.actions.send_test_packet()
        except UdpMultiSenderError as e:
            self.dialog_manager.show_send_error(str(e))

    def _fill_local_ip(self):
        addresses = self.actions.get_local_addresses()
        if addresses:
            self.connection_panel.set_host(addresses[0])
        else:
            self.update_status_bar(self._("No local IP address found."))

    def close(self):
        """Disconnects before the window goes away."""
        self.actions.shutdown()
        self.root.destroy()

    def update_status_bar(self, message: str):
        self.status_bar.update_status(message)
