"""
A widget for composing and sending messages.
"""
import tkinter as tk
from tkinter import ttk
from typing import Callable

from .utils import bind_mnemonic, create_button


class MessagePanel(ttk.Frame):
    """Message entry with the send buttons."""

    def __init__(self, parent: tk.Widget, translator: Callable[[str], str]):
        super().__init__(parent)
        self._ = translator

        self.frame = ttk.LabelFrame(self, text=self._("Message"), padding="10")
        self.frame.pack(fill=tk.X, expand=True)
        self.frame.columnconfigure(0, weight=1)

        self.message_entry = ttk.Entry(self.frame)
        self.message_entry.grid(row=0, column=0, sticky="ew")

        self.send_button, send_mnemonic = create_button(self.frame, "&Send", self._)
        self.send_button.grid(row=0, column=1, padx=(6, 0))
        bind_mnemonic(self.send_button, send_mnemonic)

        self.test_button, test_mnemonic = create_button(self.frame, "Send &Test Data", self._)
        self.test_button.grid(row=0, column=2, padx=(6, 0))
        bind_mnemonic(self.test_button, test_mnemonic)

    def get_text(self) -> str:
        return self.message_entry.get()

    def clear(self):
        self.message_entry.delete(0, tk.END)

    def set_enabled(self, enabled: bool):
        state = tk.NORMAL if enabled else tk.DISABLED
        self.message_entry.config(state=state)
        self.send_button.config(state=state)
        self.test_button.config(state=state)
