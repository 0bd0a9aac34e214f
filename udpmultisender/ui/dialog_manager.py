"""
Dialog manager for the UDP Multi Sender UI.
"""
from __future__ import annotations
import tkinter as tk
from tkinter import messagebox
from typing import Callable


class DialogManager:
    """Handles the creation of message boxes."""

    def __init__(self, root: tk.Tk, translator: Callable[[str], str]):
        self.root = root
        self._ = translator

    def show_about_dialog(self):
        """Shows the About dialog."""
        messagebox.showinfo(
            self._("About UDP Multi Sender"),
            self._("UDP Multi Sender\n\n"
                   "Version: 1.0.0\n"
                   "Sends UDP datagrams to many ports and watches for replies."),
            parent=self.root
        )

    def confirm_many_ports(self, count: int) -> bool:
        """Asks whether to continue connecting to a large number of ports."""
        return messagebox.askyesno(
            self._("Port Count"),
            self._("That is a lot of ports ({count}). Continue?").format(count=count),
            parent=self.root
        )

    def show_connect_error(self, message: str):
        messagebox.showwarning(self._("Connection Error"), message, parent=self.root)

    def show_send_error(self, message: str):
        messagebox.showwarning(self._("Send Error"), message, parent=self.root)
