"""
A widget for the application's status bar.
"""
import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from ..styling import CONNECTED_COLOR, DISCONNECTED_COLOR


class StatusBar(ttk.Frame):
    """The application's status bar."""

    def __init__(self, parent: tk.Misc, translator: Callable[[str], str]):
        super().__init__(parent)
        self._ = translator

        self.status_label = ttk.Label(self, text=self._("Ready."), relief=tk.SUNKEN, anchor=tk.W, padding=(2, 5))
        self.status_label.pack(side=tk.LEFT, fill=tk.X, expand=True)

        self.port_label = ttk.Label(self, text="", relief=tk.SUNKEN, width=18, anchor=tk.CENTER, padding=(5, 5))
        self.port_label.pack(side=tk.RIGHT)

        self.indicator = tk.Label(self, text="●", fg=DISCONNECTED_COLOR, padx=5)
        self.indicator.pack(side=tk.RIGHT)

    def update_status(self, text: str):
        """Updates the main status label."""
        self.status_label.config(text=text)

    def set_connected(self, connected: bool):
        self.indicator.config(fg=CONNECTED_COLOR if connected else DISCONNECTED_COLOR)

    def set_local_port(self, port: Optional[int]):
        text = self._("Local port: {port}").format(port=port) if port else self._("No socket")
        self.port_label.config(text=text)
