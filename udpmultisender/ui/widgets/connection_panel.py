"""
A widget for entering the destination host and ports.
"""
import tkinter as tk
from tkinter import ttk
from typing import Callable, Literal

from .utils import bind_mnemonic, create_button


class ConnectionPanel(ttk.Frame):
    """Host and port entries with the connect toggle."""

    def __init__(self, parent: tk.Widget, translator: Callable[[str], str]):
        super().__init__(parent)
        self._ = translator

        self.frame = ttk.LabelFrame(self, text=self._("Server"), padding="10")
        self.frame.pack(fill=tk.X, expand=True)
        self.frame.columnconfigure(1, weight=1)

        ttk.Label(self.frame, text=self._("Server IP:")).grid(row=0, column=0, sticky="w")
        self.host_entry = ttk.Entry(self.frame, width=30)
        self.host_entry.grid(row=0, column=1, sticky="ew", padx=(6, 0))
        self.local_ip_button, local_ip_mnemonic = create_button(self.frame, "Get &Local IP", self._)
        self.local_ip_button.grid(row=0, column=2, padx=(6, 0))
        bind_mnemonic(self.local_ip_button, local_ip_mnemonic)

        ttk.Label(self.frame, text=self._("Ports:")).grid(row=1, column=0, sticky="w", pady=(6, 0))
        self.ports_entry = ttk.Entry(self.frame, width=30)
        self.ports_entry.grid(row=1, column=1, sticky="ew", padx=(6, 0), pady=(6, 0))
        self.connect_button, connect_mnemonic = create_button(self.frame, "&Connect", self._)
        self.connect_button.grid(row=1, column=2, padx=(6, 0), pady=(6, 0))
        bind_mnemonic(self.connect_button, connect_mnemonic)

        self.hint_label = ttk.Label(
            self.frame,
            text=self._("Separate ports with commas or spaces. Ranges like 7777-7780 are allowed."),
            foreground="gray",
        )
        self.hint_label.grid(row=2, column=0, columnspan=3, sticky="w", pady=(4, 0))

    def get_host(self) -> str:
        return self.host_entry.get().strip()

    def get_ports_text(self) -> str:
        return self.ports_entry.get().strip()

    def set_host(self, host: str):
        self.host_entry.delete(0, tk.END)
        self.host_entry.insert(0, host)

    def set_ports_text(self, text: str):
        self.ports_entry.delete(0, tk.END)
        self.ports_entry.insert(0, text)

    def set_state(self, state: Literal['normal', 'disabled']):
        """Enables or disables the host and port entries."""
        self.host_entry.config(state=state)
        self.ports_entry.config(state=state)
        self.local_ip_button.config(state=state)

    def set_connected(self, connected: bool):
        self.connect_button.config(text=self._("Disconnect") if connected else self._("Connect"))
